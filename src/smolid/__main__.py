"""Entry point for ``python -m smolid``."""
from smolid.cli.main import app

app()
