"""Root logger configuration for the CLI.

Library modules only create loggers (``logging.getLogger(__name__)``);
handlers are attached here, once, by the console-script entry point.
"""

from __future__ import annotations

import logging

_CONFIGURED_ATTR = "_dotstow_configured"


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the ``dotstow`` logger.

    Uses :class:`rich.logging.RichHandler` when Rich is installed and a
    plain :class:`logging.StreamHandler` otherwise.  Calling it again
    only adjusts the level.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("dotstow")
    logger.setLevel(level)

    if getattr(logger, _CONFIGURED_ATTR, False):
        return

    handler: logging.Handler
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        from dotstow.cli.console import get_rich_console

        handler = RichHandler(console=get_rich_console(), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger.addHandler(handler)
    logger.propagate = False
    setattr(logger, _CONFIGURED_ATTR, True)
