"""
Vercel Python Function for sleep cycle calculation.

This endpoint handles POST requests to /api/schedule/calculate and returns
bedtime or wake-time candidates for the provided anchor time and settings.
"""

from http.server import BaseHTTPRequestHandler
import json
import logging
import sys
from pathlib import Path
from uuid import uuid4

# Add the _python directory to the Python path for importing sleepcycle module
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from sleepcycle.calculator import ScheduleCalculator
from sleepcycle.rendering import response_to_dict
from sleepcycle.validation import request_from_dict, validate_request

logger = logging.getLogger(__name__)


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_POST(self):
        """Handle POST requests for schedule calculation."""
        try:
            # Read request body
            content_length = int(self.headers.get("Content-Length", 0))
            body = self.rfile.read(content_length)
            data = json.loads(body)

            # Validate input
            validation_error = validate_request(data)
            if validation_error:
                self._send_json_response(400, {"error": validation_error})
                return

            request = request_from_dict(data)

            calculator = ScheduleCalculator()
            response = calculator.generate_schedule(request)

            result = {
                "id": str(uuid4()),
                "schedule": response_to_dict(response),
            }

            self._send_json_response(200, result)

        except json.JSONDecodeError:
            self._send_json_response(400, {"error": "Invalid JSON in request body"})
        except OverflowError:
            self._send_json_response(
                400, {"error": "Candidate times fall outside the supported date range"}
            )
        except Exception as e:
            logger.exception("Schedule calculation failed")
            self._send_json_response(
                500, {"error": f"Schedule calculation failed: {str(e)}"}
            )

    def _send_json_response(self, status_code: int, data: dict):
        """Send a JSON response with the given status code."""
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_OPTIONS(self):
        """Handle CORS preflight requests."""
        self.send_response(200)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()
