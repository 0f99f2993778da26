# One client's streaming loop: validate, then emit filled templates forever

import enum
import json
import random
import time

from substitutions.filler import fill
from streaming.events import format_event, error_event
from streaming.validation import ValidationError, validate_stream_params


class SessionState(enum.Enum):
    VALIDATING = "validating"
    STREAMING = "streaming"
    TERMINATED = "terminated"


class TemplateError(ValueError):
    pass


NESTED_TOO_DEEPLY = "shape is nested too deeply"


def parse_shape(shape):
    """Parse the template text; the root has to be a JSON object."""

    try:
        parsed = json.loads(shape)
    except json.JSONDecodeError as e:
        raise TemplateError(f"shape is not valid JSON: {e}") from e
    except RecursionError as e:
        raise TemplateError(NESTED_TOO_DEEPLY) from e

    if not isinstance(parsed, dict):
        raise TemplateError(
            f"shape must be a JSON object, got {type(parsed).__name__}"
        )

    return parsed


class StreamingSession:
    """Private state and control loop for one connected client.

    ``sleep`` and ``rng`` default to wall-clock sleeping and a random source
    owned by this session.
    """

    def __init__(self, sleep=None, rng=None):

        self.params = None
        self.sleep = sleep or time.sleep
        self.rng = rng or random.Random()

        self.state = SessionState.VALIDATING
        self.emitted = 0
        self.reason = None

    def validate(self, args, **floors):
        """Check request arguments and move to STREAMING.

        On ``ValidationError`` the session is TERMINATED and the error is
        re-raised for the caller to report.
        """

        try:
            self.params = validate_stream_params(args, **floors)
        except ValidationError:
            self.state = SessionState.TERMINATED
            self.reason = "validation failed"
            raise

        self.state = SessionState.STREAMING

        return self.params

    def next_delay(self):
        """Delay in seconds, drawn from [interval_min, interval_max) ms."""

        millis = self.rng.randrange(
            self.params.interval_min,
            self.params.interval_max
        )

        return millis / 1000.0

    def build_event(self):
        """Parse, fill and frame one event from the raw template."""

        shape = parse_shape(self.params.shape)

        try:
            return format_event(fill(shape))
        except RecursionError as e:
            raise TemplateError(NESTED_TOO_DEEPLY) from e

    def terminate(self, reason):

        if self.state is SessionState.TERMINATED:
            return

        self.state = SessionState.TERMINATED
        self.reason = reason

        print(
            f"[STREAM] Session closed ({reason}) "
            f"after {self.emitted} events"
        )

    def events(self):
        """Yield framed events until the client goes away or a tick fails."""

        if self.state is not SessionState.STREAMING:
            raise RuntimeError(f"session is {self.state.value}, not streaming")

        print(
            "[STREAM] Session started "
            f"interval={self.params.interval_min}-{self.params.interval_max}ms"
        )

        try:

            while self.state is SessionState.STREAMING:

                self.sleep(self.next_delay())

                try:
                    frame = self.build_event()
                except TemplateError as e:
                    print("[STREAM] Template error:", e)
                    yield error_event(str(e))
                    self.terminate("template error")
                    return

                self.emitted += 1
                yield frame

        except GeneratorExit:
            self.terminate("client disconnected")
            raise

        finally:
            self.terminate("stream ended")
