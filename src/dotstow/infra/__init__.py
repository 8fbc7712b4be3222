"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system: locating
the ``stow`` binary and running it.  Every raw OS exception must be
caught here and re-raised as a :class:`~dotstow.exceptions.DotstowError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from dotstow.infra.stow_detector import detect_stow
from dotstow.infra.subprocess_runner import SubprocessRunner

__all__: list[str] = [
    "SubprocessRunner",
    "detect_stow",
]
