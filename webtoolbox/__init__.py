"""Helper extensions for FastAPI applications rendering HTML with Jinja2.

- :mod:`webtoolbox.forms`: the listed form builder
- :mod:`webtoolbox.helpers`: currency, login gating, placeholders, extensions
- :mod:`webtoolbox.models`: bound records and validation shortcuts
- :mod:`webtoolbox.locale`: error message tables and date formats
- :mod:`webtoolbox.testing`: matchers for tests
"""

__version__ = "1.0.0"
