import json
import logging
import os
from http.server import BaseHTTPRequestHandler, HTTPServer

from slack_sigverify import SignatureVerifier, VerifierConfig, WebhookReceiver


def _on_event(event):
    inner = event.inner_event
    if inner is None:
        print(f"[{event.type}]", event.team_id)
        return
    print(f"[{inner.type}]", event.team_id, inner.data)


receiver = WebhookReceiver(
    SignatureVerifier(VerifierConfig(signing_secret=os.environ["SLACK_SIGNING_SECRET"])),
    handler=_on_event,
)


class _Handler(BaseHTTPRequestHandler):
    def do_POST(self) -> None:  # noqa: N802
        if self.path != "/slack/events":
            self.send_response(404)
            self.end_headers()
            return
        content_length = int(self.headers.get("Content-Length", "0"))
        body = self.rfile.read(content_length)
        headers = {str(k): str(v) for k, v in self.headers.items()}

        response = receiver.handle(headers, body)
        response_body = json.dumps(response.body).encode("utf-8")
        self.send_response(response.status_code)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(response_body)))
        self.end_headers()
        self.wfile.write(response_body)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    server = HTTPServer(("127.0.0.1", 3000), _Handler)
    print("events endpoint: POST http://127.0.0.1:3000/slack/events")
    server.serve_forever()


if __name__ == "__main__":
    main()
