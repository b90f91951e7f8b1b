"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, timeouts, payload defaults
    ├── models.py         # Dataclasses for parsed samples
    └── {feature}.py      # Fetch + parse functions (one per endpoint)

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``openweather/`` for the reference layout.

2. Write fetch functions that return raw payloads and let transport errors
   propagate; the service layer decides how failures degrade::

       from trip_weather.services.http import session

       def fetch_something(lat, lon, api_key) -> dict[str, Any]:
           resp = session.get(API_URL, params={...}, timeout=TIMEOUT)
           resp.raise_for_status()
           return resp.json()

3. Write ``parse_*`` functions that never raise on missing fields.

4. Re-export public API in ``__init__.py`` with ``__all__`` and add tests in
   ``tests/test_{name}.py``.
"""
