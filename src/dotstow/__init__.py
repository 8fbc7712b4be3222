"""dotstow — install a dotfiles package into ``$HOME`` with GNU Stow.

A thin, layered wrapper around the ``stow`` binary.
"""

from dotstow.version import __version__

__all__: list[str] = ["__version__"]
