class RequestFailedError(Exception):
    """Raised when a call to the todo service fails (network error or non-2xx status)."""
