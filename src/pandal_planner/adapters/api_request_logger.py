"""Opt-in tracing of backend traffic, enabled with PANDAL_LOG_REQUESTS=true.

Credentials never reach the log: bearer headers, cookies, passwords and
issued tokens are replaced before formatting.
"""

import json
import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie"})
SENSITIVE_FIELDS = frozenset({"password", "jwt"})
# Route requests can carry every pandal of a zone
MAX_LOGGED_ITEMS = 5


def should_log_requests() -> bool:
    return os.getenv("PANDAL_LOG_REQUESTS", "").lower() == "true"


def request_url(url: str, params: dict[str, Any] | None) -> str:
    """URL with its query string, parameters in sorted order."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    return {k: REDACTED if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def summarize_payload(payload: Any) -> Any:
    """Redact credential fields and shorten long lists, at any depth."""
    if isinstance(payload, dict):
        return {
            k: REDACTED if k in SENSITIVE_FIELDS else summarize_payload(v)
            for k, v in payload.items()
        }
    if isinstance(payload, list):
        items = [summarize_payload(item) for item in payload[:MAX_LOGGED_ITEMS]]
        if len(payload) > MAX_LOGGED_ITEMS:
            items.append(f"... {len(payload) - MAX_LOGGED_ITEMS} more")
        return items
    return payload


def _format_body(payload: Any) -> str:
    try:
        return json.dumps(summarize_payload(payload), ensure_ascii=False, sort_keys=True)
    except (TypeError, ValueError):
        return repr(payload)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log an outgoing backend request on one line."""
    if not should_log_requests():
        return

    parts = [f"{method} {request_url(url, params)}"]
    if headers:
        parts.append(f"headers={json.dumps(redact_headers(headers), sort_keys=True)}")
    if payload is not None:
        parts.append(f"body={_format_body(payload)}")
    logger.info("Backend request: " + " | ".join(parts))


def log_api_response(method: str, url: str, status: int, elapsed_seconds: float, body: Any) -> None:
    """Log the status of a backend response, with its body when it is an error."""
    if not should_log_requests():
        return

    message = f"Backend response: {method} {url} -> {status} in {elapsed_seconds * 1000:.0f} ms"
    if not 200 <= status < 300 and body is not None:
        message += f" | body={_format_body(body)}"
    logger.info(message)
