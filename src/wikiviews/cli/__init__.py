"""CLI for wikiviews."""

# Import commands to register them with the app
# These imports have side effects (registering commands with @app.command())
from wikiviews.cli.commands import dates as _dates_module  # noqa: F401
from wikiviews.cli.commands import export as _export_module  # noqa: F401
from wikiviews.cli.commands import show as _show_module  # noqa: F401
from wikiviews.cli.main import app, main


__all__ = ["app", "main"]
