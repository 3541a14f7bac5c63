"""Allow running cronexp with ``python -m cronexp``."""

from cronexp.cli import app

app(prog_name="cronexp")
