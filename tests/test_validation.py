import pytest

from streaming.validation import (
    StreamParams,
    ValidationError,
    validate_stream_params
)


SHAPE = '{"id": "{uuid}"}'


def args(**kw):
    base = {"interval_min": "1000", "interval_max": "2000", "shape": SHAPE}
    base.update(kw)
    return {k: v for k, v in base.items() if v is not None}


def test_valid_params():

    params = validate_stream_params(args())

    assert params == StreamParams(1000, 2000, SHAPE)


def test_min_below_floor_rejected():

    with pytest.raises(ValidationError) as e:
        validate_stream_params(args(interval_min="500", interval_max="5000"))

    assert e.value.errors == {"interval_min": "interval_min must be >= 1000ms"}
    assert str(e.value) == "interval_min must be >= 1000ms"


def test_max_below_floor_rejected():

    with pytest.raises(ValidationError) as e:
        validate_stream_params(args(interval_min="1000", interval_max="999"))

    assert e.value.errors == {"interval_max": "interval_max must be >= 1000ms"}


def test_inverted_range_rejected():

    with pytest.raises(ValidationError) as e:
        validate_stream_params(args(interval_min="3000", interval_max="1500"))

    assert e.value.errors == {
        "interval_max": "interval_max must be greater than interval_min"
    }


def test_empty_range_rejected():

    with pytest.raises(ValidationError) as e:
        validate_stream_params(args(interval_min="1000", interval_max="1000"))

    assert "interval_max" in e.value.errors


def test_both_fields_reported():

    with pytest.raises(ValidationError) as e:
        validate_stream_params(args(interval_min="10", interval_max="20"))

    assert set(e.value.errors) == {"interval_min", "interval_max"}


@pytest.mark.parametrize(
    "raw",
    ["abc", "1.5", "-1000", "", " 1000", "+1000", "1_000", "\u0661\u0660\u0660\u0660"]
)
def test_non_unsigned_rejected(raw):

    with pytest.raises(ValidationError) as e:
        validate_stream_params(args(interval_min=raw))

    assert "interval_min" in e.value.errors


def test_missing_fields_rejected():

    with pytest.raises(ValidationError) as e:
        validate_stream_params({})

    assert e.value.errors == {
        "interval_min": "interval_min is required",
        "interval_max": "interval_max is required",
        "shape": "shape is required"
    }


def test_shape_not_parsed_during_validation():

    params = validate_stream_params(args(shape="not json"))

    assert params.shape == "not json"


def test_custom_floors():

    with pytest.raises(ValidationError) as e:
        validate_stream_params(
            args(interval_min="1000", interval_max="1500"),
            max_floor=2000
        )

    assert e.value.errors == {"interval_max": "interval_max must be >= 2000ms"}


def test_to_dict():

    err = ValidationError({"shape": "shape is required"})

    assert err.to_dict() == {
        "error": "shape is required",
        "errors": {"shape": "shape is required"}
    }


def test_values_above_ceiling_rejected():

    with pytest.raises(ValidationError) as e:
        validate_stream_params(
            args(interval_min="10000000000000000", interval_max="10000000000000005")
        )

    assert e.value.errors == {
        "interval_min": "interval_min must be <= 86400000ms",
        "interval_max": "interval_max must be <= 86400000ms"
    }


def test_custom_ceiling():

    with pytest.raises(ValidationError) as e:
        validate_stream_params(
            args(interval_min="1000", interval_max="6000"),
            ceiling=5000
        )

    assert e.value.errors == {"interval_max": "interval_max must be <= 5000ms"}
