# Query parameter checks for the streaming endpoint

from dataclasses import dataclass

import config


class ValidationError(ValueError):

    def __init__(self, errors):
        self.errors = errors
        super().__init__(next(iter(errors.values())))

    def to_dict(self):
        return {
            "error": str(self),
            "errors": dict(self.errors)
        }


@dataclass(frozen=True)
class StreamParams:
    interval_min: int
    interval_max: int
    shape: str


def parse_millis(args, field, errors):

    raw = args.get(field)

    if raw is None or raw == "":
        errors[field] = f"{field} is required"
        return None

    # plain ASCII digits only: no sign, spaces, underscores or other scripts
    if not (raw.isascii() and raw.isdigit()):
        errors[field] = f"{field} must be an unsigned integer (ms)"
        return None

    return int(raw)


def validate_stream_params(
    args,
    min_floor=None,
    max_floor=None,
    ceiling=None
):
    """Check the raw query arguments and return a ``StreamParams``.

    Raises ``ValidationError`` carrying one message per offending field.
    The ``shape`` text is only checked for presence; it is parsed on every
    emission by the session.
    """

    if min_floor is None:
        min_floor = config.INTERVAL_MIN_FLOOR

    if max_floor is None:
        max_floor = config.INTERVAL_MAX_FLOOR

    if ceiling is None:
        ceiling = config.INTERVAL_CEILING

    errors = {}

    interval_min = parse_millis(args, "interval_min", errors)
    interval_max = parse_millis(args, "interval_max", errors)

    if interval_min is not None and interval_min < min_floor:
        errors["interval_min"] = f"interval_min must be >= {min_floor}ms"

    if interval_max is not None and interval_max < max_floor:
        errors["interval_max"] = f"interval_max must be >= {max_floor}ms"

    for field, value in (
        ("interval_min", interval_min),
        ("interval_max", interval_max)
    ):
        if value is not None and value > ceiling:
            errors[field] = f"{field} must be <= {ceiling}ms"

    # empty delay range [min, min) is rejected up front
    if (
        "interval_min" not in errors
        and "interval_max" not in errors
        and interval_max <= interval_min
    ):
        errors["interval_max"] = (
            "interval_max must be greater than interval_min"
        )

    shape = args.get("shape")

    if shape is None or shape == "":
        errors["shape"] = "shape is required"

    if errors:
        print("[VALIDATION] Rejected:", errors)
        raise ValidationError(errors)

    return StreamParams(
        interval_min=interval_min,
        interval_max=interval_max,
        shape=shape
    )
