"""Pure rendering functions: WeatherReport -> text or HTML strings.

All renderers follow the same pattern:
  - Input: ``WeatherReport`` (from ``WeatherController``)
  - Output: str (terminal text, or an HTML fragment - no <html>/<body>)
  - No side effects, no I/O

Public API:
  - report: build_report_text, build_report_html
  - weather_utils: format_temperature, format_wind_speed, format_pressure
  - date_utils: format_long_date

Adding an output format
-----------------------
1. Add a ``build_report_{format}(report)`` function to ``renderers/report.py``
   (or a new module for something larger).  HTML formats use a Jinja2
   template from ``templates/`` via ``render_template``.

2. Expose it from the CLI (``cli.py``) as an output option.

3. Add tests: call the build function with a sample report and assert
   the output contains the expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
