"""Pure rendering functions: summaries -> display text.

All renderers follow the same pattern:
  - Input: pydantic models from ``schemas`` (DailyWeatherSummary, LocationForecast)
  - Output: str
  - No side effects, no I/O, no Prefect decorators

Used by ``cli.py`` and ``flows/forecast.py``.

Public API:
  - text: render_forecast_text, render_trip_text
  - weather_utils: c_to_f, icon_to_emoji, uv_level, format_temperature

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a render function that prepares plain
   rows and calls ``render_template("{name}.txt.j2", ...)``.
2. Create the Jinja2 template in ``templates/``.
3. Add tests asserting the returned text contains the expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,  # plain-text templates
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=False,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
