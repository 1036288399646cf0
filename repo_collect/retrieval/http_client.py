"""HTTP helpers shared by the repository sources and the git object store."""

from __future__ import annotations

import sys
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, urlparse

import requests

from .config import GITHUB_TOKEN, REQUEST_TIMEOUT, USER_AGENT

SESSION = requests.Session()
SESSION.headers.update(
    {
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": USER_AGENT,
    }
)


class GitHubAPIError(RuntimeError):
    """Raised when GitHub answers with a non-2xx status."""

    def __init__(self, status_code: int, url: str, message: str = "") -> None:
        self.status_code = status_code
        self.url = url
        self.message = message
        super().__init__(f"HTTP {status_code} for {url}: {message}" if message else f"HTTP {status_code} for {url}")


def error_message(resp: requests.Response) -> str:
    """Extract GitHub's error message from a response body."""
    try:
        body = resp.json()
    except ValueError:
        body = {"text": (resp.text or "")[:300]}
    if not isinstance(body, dict):
        return ""
    return str(body.get("message") or body.get("error") or body.get("text") or "")


def log_http_error(resp: requests.Response, url: str) -> None:
    """Print a short, human-readable message when GitHub returns an error."""
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {error_message(resp)}", file=sys.stderr)


def set_auth_token(token: Optional[str]) -> None:
    """Set or clear the SESSION Authorization header."""
    if token:
        SESSION.headers["Authorization"] = f"token {token}"
    else:
        SESSION.headers.pop("Authorization", None)


def api_request(method: str, url: str, **kwargs) -> requests.Response:
    """Perform a single REST call; non-2xx responses raise GitHubAPIError.

    Failed calls are reported and surfaced to the caller, never retried.
    """
    timeout = kwargs.pop("timeout", REQUEST_TIMEOUT)
    resp = SESSION.request(method, url, timeout=timeout, **kwargs)
    if 200 <= resp.status_code < 300:
        return resp
    log_http_error(resp, url)
    raise GitHubAPIError(resp.status_code, url, error_message(resp))


def api_json(method: str, url: str, **kwargs) -> Any:
    """Perform a REST call and decode the JSON body."""
    return api_request(method, url, **kwargs).json()


def next_page_from_response(resp: requests.Response) -> Optional[int]:
    """Return the page number advertised by the Link rel="next" header, if any."""
    links = getattr(resp, "links", None) or {}
    next_link = links.get("next") or {}
    url = next_link.get("url")
    if not url:
        return None
    values = parse_qs(urlparse(url).query).get("page") or []
    try:
        return int(values[0])
    except (IndexError, ValueError):
        return None


def paged_params(page: int, per_page: int, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    params: Dict[str, Any] = {"per_page": per_page, "page": page}
    if extra:
        params.update(extra)
    return params


set_auth_token(GITHUB_TOKEN)


__all__ = [
    "SESSION",
    "GitHubAPIError",
    "error_message",
    "log_http_error",
    "set_auth_token",
    "api_request",
    "api_json",
    "next_page_from_response",
    "paged_params",
]
