#!/usr/bin/env python3
"""
Calculate bedtimes or wake times from a JSON request file.

Usage: python3 calculate_schedule.py <request_file.json> [--text]

Request file example:
    {"anchor_time": "07:00", "mode": "wake", "settings": {"num_options": 6}}

Settings in the request are merged over the RIMROD_* environment defaults.
Outputs the schedule as JSON to stdout, or as a text timeline with --text.
"""

import json
import sys

from sleepcycle.calculator import generate_schedule
from sleepcycle.interfaces import Renderer
from sleepcycle.rendering import TextRenderer, response_to_dict
from sleepcycle.settings import settings_from_env
from sleepcycle.validation import request_from_dict, validate_request, validate_settings

USAGE = "Usage: calculate_schedule.py <request_file.json> [--text]"


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]

    as_text = "--text" in argv
    args = [a for a in argv if a != "--text"]

    if len(args) != 1:
        print(json.dumps({"error": USAGE}))
        sys.exit(1)

    request_file = args[0]

    try:
        with open(request_file) as f:
            data = json.load(f)
    except FileNotFoundError:
        print(json.dumps({"error": f"Request file not found: {request_file}"}))
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON in request file: {e}"}))
        sys.exit(1)

    validation_error = validate_request(data)
    if validation_error:
        print(json.dumps({"error": validation_error}))
        sys.exit(1)

    # Environment defaults are only range-checked once merged with the request
    request = request_from_dict(data, base=settings_from_env())
    settings_error = validate_settings(request.settings)
    if settings_error:
        print(json.dumps({"error": settings_error}))
        sys.exit(1)

    try:
        response = generate_schedule(request)
    except OverflowError as e:
        print(json.dumps({"error": f"Schedule calculation failed: {e}"}))
        sys.exit(1)

    if as_text:
        renderer: Renderer = TextRenderer()
        print(renderer.render(response))
    else:
        print(json.dumps(response_to_dict(response)))


if __name__ == "__main__":
    main()
