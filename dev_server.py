from http.server import BaseHTTPRequestHandler, HTTPServer
import json
import logging
import os

from html_to_joomla import FirecrawlService, convert, convert_html
from html_to_joomla.config import ConfigError, load_config

logger = logging.getLogger(__name__)


class DevHandler(BaseHTTPRequestHandler):
    def _set_headers(self, status=200):
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()

    def _send_json(self, payload, status=200):
        self._set_headers(status)
        self.wfile.write(json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8"))

    def _read_body(self):
        content_length = int(self.headers.get("Content-Length", "0"))
        if content_length <= 0:
            return None
        return self.rfile.read(content_length)

    def _read_json(self):
        raw_body = self._read_body()
        if not raw_body:
            return None, "Empty request body."
        try:
            return json.loads(raw_body), None
        except json.JSONDecodeError:
            return None, "Invalid JSON payload."

    def do_OPTIONS(self):
        self._set_headers(204)

    def do_POST(self):
        if self.path == "/convert":
            return self._handle_convert()
        if self.path == "/scrape":
            return self._handle_scrape()

        self._send_json({"error": "Not found"}, status=404)

    def _handle_convert(self):
        raw_body = self._read_body()
        if not raw_body:
            self._send_json({"error": "Empty request body."}, status=400)
            return

        # JSON bodies are page records, anything else is raw HTML
        if "application/json" in self.headers.get("Content-Type", ""):
            try:
                page_record = json.loads(raw_body)
            except json.JSONDecodeError:
                self._send_json({"error": "Invalid JSON payload."}, status=400)
                return
            result = convert(page_record)
        else:
            result = convert_html(raw_body.decode("utf-8", errors="replace"))

        self._send_json(result, status=200)

    def _handle_scrape(self):
        payload, error = self._read_json()
        if error:
            self._send_json({"error": error}, status=400)
            return

        url = payload.get("url") if isinstance(payload, dict) else None
        if not isinstance(url, str) or not url.strip():
            self._send_json({"error": "url must be a non-empty string."}, status=400)
            return

        try:
            config = load_config(os.environ.get("CONVERTER_CONFIG") or None)
        except ConfigError as exc:
            self._send_json({"error": str(exc)}, status=500)
            return

        service = FirecrawlService(config)
        scrape_result = service.scrape_website(url)
        if not scrape_result.success:
            self._send_json(
                {"success": False, "error": scrape_result.error or "Failed to scrape website"},
                status=502
            )
            return

        self._send_json({"success": True, "result": convert(scrape_result.data)}, status=200)

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)


def run():
    logging.basicConfig(level=logging.INFO)
    port = int(os.environ.get("DEV_CONVERT_PORT", "5005"))
    server = HTTPServer(("0.0.0.0", port), DevHandler)
    print(f"Dev API running on http://localhost:{port}")
    print(f"- POST http://localhost:{port}/convert")
    print(f"- POST http://localhost:{port}/scrape")
    server.serve_forever()


if __name__ == "__main__":
    run()
