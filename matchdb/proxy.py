"""
Edge proxy: alles onder /api wordt 1-op-1 doorgestuurd naar de upstream API.

Per inkomende request precies een upstream request. Geen pooling, retry,
timeout of backpressure: faalt de verbinding, dan faalt de client request.
"""
from flask import Blueprint, Response, current_app, jsonify, request, stream_with_context
from urllib.parse import quote
from urllib3.exceptions import HTTPError as Urllib3Error
import logging
import requests

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__)

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]
BODY_METHODS = {"POST", "PUT", "PATCH"}
STREAM_CHUNK_SIZE = 8192
PATH_SAFE_CHARS = "/:@!$&'()*+,;=-._~"

# WSGI staat hop-by-hop headers in een applicatie-response niet toe
HOP_BY_HOP_HEADERS = {
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailers",
    "transfer-encoding",
    "upgrade",
}


def upstream_base_url():
    return f"http://{current_app.config['UPSTREAM_HOST']}:{current_app.config['UPSTREAM_PORT']}"


def original_path():
    """
    Volledig origineel pad inclusief /api prefix en ruwe query string.
    - Liefst de ruwe request URI, zodat %2F en co. niet gedecodeerd worden
    - Zonder ruwe URI: pad opnieuw opbouwen uit request.path
    """
    raw_uri = request.environ.get("RAW_URI") or request.environ.get("REQUEST_URI")
    if raw_uri and raw_uri.startswith("/"):
        return raw_uri

    path = quote(request.path, safe=PATH_SAFE_CHARS)
    if request.query_string:
        return f"{path}?{request.query_string.decode('latin-1')}"
    return path


def forwarded_headers():
    headers = {key: value for key, value in request.headers.items() if key.lower() != "host"}
    headers["Host"] = f"{current_app.config['UPSTREAM_HOST']}:{current_app.config['UPSTREAM_PORT']}"
    return headers


def response_headers(upstream):
    """Kopieer upstream headers, behalve de hop-by-hop headers."""
    raw_headers = getattr(upstream.raw, "headers", None) or upstream.headers
    return [
        (key, value)
        for key, value in raw_headers.items()
        if key.lower() not in HOP_BY_HOP_HEADERS
    ]


def stream_body(upstream):
    try:
        for chunk in upstream.raw.stream(STREAM_CHUNK_SIZE, decode_content=False):
            yield chunk
    except (Urllib3Error, OSError) as e:
        # status is al verstuurd; enkel loggen en de response afsluiten
        logger.error("Proxy error while streaming %s: %s", request.path, e)
    finally:
        upstream.close()


@api.route("/api", methods=PROXY_METHODS, provide_automatic_options=False)
@api.route("/api/<path:subpath>", methods=PROXY_METHODS, provide_automatic_options=False)
def forward(subpath=None):
    url = upstream_base_url() + original_path()
    data = request.get_data() if request.method in BODY_METHODS else None

    try:
        upstream = requests.request(
            request.method,
            url,
            headers=forwarded_headers(),
            data=data or None,
            stream=True,
            allow_redirects=False,
        )
    except requests.RequestException as e:
        logger.error("Proxy error: %s", e)
        return jsonify({"message": "Backend API unavailable", "error": str(e)}), 500

    headers = response_headers(upstream)
    response = Response(
        stream_with_context(stream_body(upstream)),
        status=upstream.status_code,
        headers=headers,
        direct_passthrough=True,
    )
    # werkzeug vult anders zijn eigen default content-type in
    if not any(key.lower() == "content-type" for key, _ in headers):
        response.headers.pop("Content-Type", None)
    return response
