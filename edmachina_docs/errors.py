"""Error kinds raised while talking to the documentation repository.

Failures are coarse on purpose: many upstream causes collapse into a
handful of kinds, each carrying whatever diagnostic detail was available.
"""

import json
from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True)
class ErrorDetail:
    """Diagnostic payload attached to an error (all fields optional)."""

    message: str | None = None
    status: int | None = None
    data: Any = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorDetail":
        """Extract message, HTTP status and response body from an exception."""
        if isinstance(exc, DocsError) and exc.detail is not None:
            return exc.detail
        status = None
        data = None
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            data = _response_body(exc.response)
        return cls(message=str(exc) or type(exc).__name__, status=status, data=data)

    def data_json(self) -> str:
        """Response body as compact JSON."""
        return json.dumps(self.data, ensure_ascii=False, separators=(",", ":"))


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


class DocsError(Exception):
    """Base class for documentation lookup failures."""

    def __init__(self, message: str = "", detail: ErrorDetail | None = None):
        super().__init__(message)
        self.detail = detail


class MissingCredential(DocsError):
    """No GitHub token configured."""


class RepoOrBranchNotFound(DocsError):
    """Branch lookup failed (network, auth, or nonexistent repo/branch)."""


class ListingUnavailable(DocsError):
    """Tree listing response did not contain an array of entries."""


class ContentUnavailable(DocsError):
    """File contents response had no content field."""

    def __init__(self, path: str, detail: ErrorDetail | None = None):
        super().__init__(f"No content for {path}", detail)
        self.path = path


class NoMatch(DocsError):
    """No documentation file matched the requested name."""

    def __init__(self, name: str):
        super().__init__(f"No documentation matches {name!r}")
        self.name = name
