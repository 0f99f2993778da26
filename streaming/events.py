# Server-sent event framing

import json


def format_event(payload, event=None):
    """Frame ``payload`` as one ``text/event-stream`` message."""

    lines = []

    if event:
        lines.append(f"event: {event}")

    for line in json.dumps(payload).splitlines():
        lines.append(f"data: {line}")

    return "\n".join(lines) + "\n\n"


def error_event(message):
    return format_event({"error": message}, event="error")
