"""Allow running as `python -m neuro_ai_boost`."""

from .cli import app

app(prog_name="nab")
