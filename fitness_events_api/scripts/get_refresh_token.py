"""
Obtain a Google OAuth refresh token for the calendar integration.

Prints a consent URL, waits for Google to redirect the browser back to
a local HTTP server, exchanges the code and prints the refresh token.
The client id and secret are read from ``GOOGLE_CLIENT_ID`` and
``GOOGLE_CLIENT_SECRET``; the redirect URI from ``GOOGLE_REDIRECT_URI``
(default ``http://localhost:3000/oauth2callback``) and must be
registered for the OAuth client.

Usage:
    fitness-get-refresh-token
"""

import sys
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Optional
from urllib.parse import parse_qs, urlparse

from dotenv import load_dotenv


class _CallbackHandler(BaseHTTPRequestHandler):
    """Captures the ``code`` query parameter of the OAuth redirect."""

    code: Optional[str] = None
    error: Optional[str] = None

    def do_GET(self) -> None:  # noqa: N802
        query = parse_qs(urlparse(self.path).query)
        type(self).code = (query.get("code") or [None])[0]
        type(self).error = (query.get("error") or [None])[0]
        if type(self).code:
            body = b"<h1>Success!</h1><p>You can close this window and check your terminal for the refresh token.</p>"
            self.send_response(200)
        else:
            body = b"<h1>Error</h1><p>No authorization code received.</p>"
            self.send_response(400)
        self.send_header("Content-Type", "text/html")
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args) -> None:
        pass


def wait_for_code(redirect_uri: str) -> str:
    """Serve on the redirect URI's host and port until a code arrives."""
    parsed = urlparse(redirect_uri)
    server = HTTPServer((parsed.hostname or "localhost", parsed.port or 80), _CallbackHandler)
    print(f"Server running at http://{parsed.hostname}:{parsed.port}")
    print("Waiting for authorization...")
    try:
        while not _CallbackHandler.code:
            server.handle_request()
            if _CallbackHandler.error:
                raise RuntimeError(f"Authorization failed: {_CallbackHandler.error}")
    finally:
        server.server_close()
    return _CallbackHandler.code


def main() -> int:
    load_dotenv()
    from fitness_events_api.app.core.config import settings
    from fitness_events_api.app.services.google_oauth import build_authorize_url, exchange_code

    client_id = settings.google_client_id
    client_secret = settings.google_client_secret
    redirect_uri = settings.google_redirect_uri
    if not client_id or not client_secret:
        print("[!] GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET must be set", file=sys.stderr)
        return 1

    print("\n" + "-" * 52)
    print("Copy and open this URL in your browser:")
    print(build_authorize_url(client_id, redirect_uri))
    print("-" * 52 + "\n")

    code = wait_for_code(redirect_uri)
    tokens = exchange_code(code, client_id, client_secret, redirect_uri)

    print("\n" + "-" * 52)
    print("Your NEW refresh token:")
    print(tokens.get("refresh_token"))
    print("-" * 52 + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
