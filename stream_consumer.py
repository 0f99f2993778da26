# Used to open the event stream
import requests

# Used to decode event payloads
import json

import argparse

import config


def read_events(response):
    """Yield (event, data) pairs from a text/event-stream response."""

    event = None
    data = []

    for line in response.iter_lines(decode_unicode=True):

        # blank line ends one event
        if not line:
            if data:
                yield event or "message", json.loads("\n".join(data))
            event = None
            data = []
            continue

        if line.startswith("event:"):
            event = line[len("event:"):].strip()

        elif line.startswith("data:"):
            data.append(line[len("data:"):].strip())


def consume(url, shape, interval_min, interval_max, count=None):

    params = {
        "shape": shape,
        "interval_min": interval_min,
        "interval_max": interval_max
    }

    received = 0

    with requests.get(url, params=params, stream=True, timeout=(10, None)) as r:

        if r.status_code != 200:
            print("[CONSUMER] Rejected:", r.status_code, r.text)
            return received

        for event, payload in read_events(r):

            if event == "error":
                print("[CONSUMER] Stream error:", payload.get("error"))
                break

            received += 1
            print("Received:", json.dumps(payload))

            if count and received >= count:
                break

    return received


def main(argv=None):

    p = argparse.ArgumentParser(description="Print events from a river stream")
    p.add_argument("--url", default=config.RIVER_URL)
    p.add_argument("--shape", default='{"id": "{uuid}", "name": "{name}"}')
    p.add_argument("--interval-min", type=int, default=1000)
    p.add_argument("--interval-max", type=int, default=2000)
    p.add_argument("--count", type=int, default=None)

    args = p.parse_args(argv)

    try:
        consume(
            args.url,
            args.shape,
            args.interval_min,
            args.interval_max,
            args.count
        )
    except KeyboardInterrupt:
        print("[CONSUMER] Stopped")


if __name__ == "__main__":
    main()
