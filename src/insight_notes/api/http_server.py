import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from insight_notes.api.service import InsightService
from insight_notes.errors import ApiKeyMissingError, InsightNotesError, NoInputError

logger = logging.getLogger(__name__)

CLIENT_ERRORS = (ApiKeyMissingError, NoInputError)


def create_server(
    service: InsightService,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> ThreadingHTTPServer:
    routes = {
        "/notes/extract": service.extract_notes,
        "/moc/update": service.update_map_of_content,
        "/llm/test": lambda _body: service.test_api_key(),
    }

    class InsightHandler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            if self.path == "/health":
                self._write_json(200, service.health())
                return

            self._write_json(404, {"error": "not found"})

        def do_POST(self) -> None:  # noqa: N802
            handler = routes.get(self.path)
            if handler is None:
                self._write_json(404, {"error": "not found"})
                return

            body = self._read_json_body()
            if body is None:
                self._write_json(400, {"error": "invalid json"})
                return

            try:
                result = handler(body)
            except CLIENT_ERRORS as exc:
                self._write_json(400, {"error": str(exc)})
                return
            except InsightNotesError as exc:
                logger.error("%s failed: %s", self.path, exc)
                self._write_json(502, {"error": str(exc)})
                return
            except ValueError as exc:
                self._write_json(400, {"error": str(exc)})
                return
            except OSError as exc:
                logger.exception("%s failed", self.path)
                self._write_json(500, {"error": f"storage error: {exc}"})
                return

            self._write_json(200, result)

        def log_message(self, format: str, *args) -> None:  # noqa: A003
            logger.debug("%s - %s", self.address_string(), format % args)

        def _read_json_body(self) -> dict | None:
            try:
                content_len = int(self.headers.get("Content-Length", "0"))
            except ValueError:
                return None
            raw = self.rfile.read(content_len) if content_len else b"{}"
            try:
                parsed = json.loads(raw.decode("utf-8"))
            except (UnicodeDecodeError, json.JSONDecodeError):
                return None
            if not isinstance(parsed, dict):
                return None
            return parsed

        def _write_json(self, status_code: int, payload: dict) -> None:
            encoded = json.dumps(payload).encode("utf-8")
            self.send_response(status_code)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(encoded)))
            self.end_headers()
            self.wfile.write(encoded)

    return ThreadingHTTPServer((host, port), InsightHandler)
