"""Thread-local request context shared by middleware and log processors."""

import threading

_request_context = threading.local()


def set_request_id(request_id: str) -> None:
    """Bind the request ID to the current thread."""
    _request_context.request_id = request_id


def get_request_id() -> str | None:
    """Return the request ID bound to the current thread, if any."""
    return getattr(_request_context, "request_id", None)


def clear_request_id() -> None:
    """Unbind the request ID so it cannot leak into the next request."""
    if hasattr(_request_context, "request_id"):
        delattr(_request_context, "request_id")
