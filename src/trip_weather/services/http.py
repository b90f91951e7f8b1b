"""
Shared HTTP client for upstream weather calls.

Weather lookups are single attempt: a slow or failing OpenWeatherMap call
degrades the result instead of being retried, so the mounted adapter carries
a zero-retry urllib3 policy and a default timeout. Status errors surface
through ``resp.raise_for_status()`` in the datasource modules.

Usage::

    from trip_weather.services.http import session

    resp = session.get(f"{BASE_URL}/weather", params=params, timeout=WEATHER_TIMEOUT)
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Single attempt per call, no backoff.
DEFAULT_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 10  # seconds

USER_AGENT = "trip-weather/0.1"


class TimeoutHTTPAdapter(HTTPAdapter):
    """``HTTPAdapter`` that fills in a timeout when the caller gave none."""

    def __init__(self, *args: Any, timeout: float = DEFAULT_TIMEOUT, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:  # type: ignore[override]
        # requests passes timeout=None explicitly when the caller omits it
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = USER_AGENT,
) -> requests.Session:
    """
    Build a ``requests.Session`` for OpenWeatherMap.

    Args:
        retry: urllib3 retry policy (defaults to ``DEFAULT_RETRY``, no retries).
        timeout: Timeout in seconds for requests that do not pass one.
        user_agent: ``User-Agent`` header sent with every request.
    """
    adapter = TimeoutHTTPAdapter(max_retries=retry or DEFAULT_RETRY, timeout=timeout)
    s = requests.Session()
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers["User-Agent"] = user_agent
    return s


#: Process-wide session shared by every datasource module.
session: requests.Session = create_session()
