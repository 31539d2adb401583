import os
import logging
from typing import Optional

import requests

# ----------------------
# Configuration
# ----------------------
NOTION_API_URL = os.getenv("NOTION_API_URL", "https://api.notion.com/v1")
NOTION_VERSION = os.getenv("NOTION_VERSION", "2022-06-28")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))

logger = logging.getLogger("notion-proxy.notion")


class NotionAPIError(Exception):
    """Raised for any failed call to the Notion API.

    ``status`` is the HTTP status when Notion answered, ``None`` for
    transport failures. ``code`` is Notion's error code (e.g.
    ``unauthorized``, ``object_not_found``) when one was returned.
    """

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.code = code

    def __str__(self):
        parts = [self.args[0]]
        if self.status is not None:
            parts.append(f"status={self.status}")
        if self.code:
            parts.append(f"code={self.code}")
        return " ".join(parts)


def _request(token: str, method: str, path: str, payload: Optional[dict] = None) -> dict:
    """Send one request to Notion and return the decoded JSON body."""
    url = f"{NOTION_API_URL.rstrip('/')}/{path.lstrip('/')}"
    try:
        resp = requests.request(
            method,
            url,
            json=payload,
            headers={
                "Authorization": f"Bearer {token}",
                "Notion-Version": NOTION_VERSION,
                "Content-Type": "application/json"
            },
            timeout=REQUEST_TIMEOUT
        )
    except (requests.RequestException, ValueError) as e:
        # Header errors quote the token, so the cause is not chained
        raise NotionAPIError(f"Notion request failed: {e.__class__.__name__}") from None

    try:
        body = resp.json()
    except ValueError as e:
        raise NotionAPIError("Notion returned a non-JSON body", status=resp.status_code) from e

    if not resp.ok:
        message = body.get("message", "") if isinstance(body, dict) else ""
        code = body.get("code") if isinstance(body, dict) else None
        raise NotionAPIError(message or resp.reason or "Notion error", status=resp.status_code, code=code)

    logger.debug("%s %s -> %s", method, path, resp.status_code)
    return body


def search_databases(token: str) -> dict:
    """Search everything the integration can see, restricted to databases."""
    return _request(token, "POST", "/search", {
        "filter": {"value": "database", "property": "object"}
    })


def query_database(token: str, database_id: str, sorts: Optional[list] = None) -> dict:
    payload = {}
    if sorts:
        payload["sorts"] = sorts
    return _request(token, "POST", f"/databases/{database_id}/query", payload)


def update_page(token: str, page_id: str, properties: dict) -> dict:
    return _request(token, "PATCH", f"/pages/{page_id}", {"properties": properties})
