"""Shared HTTP client for the todo service."""

import requests

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Return a shared requests.Session sending and accepting JSON.

    No retry adapter is mounted: a failed call is reported once and never repeated.
    """
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers.update({"Accept": "application/json"})
    return _session
