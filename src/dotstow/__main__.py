"""Allow ``python -m dotstow`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m dotstow`` behaves identically to the ``dotstow`` console
script.
"""

from __future__ import annotations

from dotstow.cli.app import cli

if __name__ == "__main__":
    cli()
