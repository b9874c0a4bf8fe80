"""Domain errors — each one knows the HTTP status it surfaces as."""

from __future__ import annotations


class LikeProxyError(Exception):
    """Base error for the like counter proxy."""

    status_code = 500

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class InvalidRequest(LikeProxyError):
    """Caller input is missing or malformed."""

    status_code = 400


class MethodNotSupported(LikeProxyError):
    status_code = 405

    def __init__(self, method: str):
        super().__init__("Method not allowed")
        self.method = method


class UpstreamError(LikeProxyError):
    """The CMS answered with a non-success status, or could not be reached."""

    status_code = 502

    def __init__(self, upstream_status: int | None, details: str):
        super().__init__("Upstream store error", details)
        self.upstream_status = upstream_status


class InternalError(LikeProxyError):
    status_code = 500

    def __init__(self, details: str | None = None):
        super().__init__("Internal server error", details)
