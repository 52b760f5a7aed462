"""Allow running envguard with ``python -m envguard``."""

from envguard.cli.main import app

app(prog_name="envguard")
