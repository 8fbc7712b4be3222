"""Core / service layer — argument construction and orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem or process I/O.
* No imports from ``cli`` or ``infra``.
"""

from dotstow.core.commands import build_install_args, build_uninstall_args
from dotstow.core.models import StowAction, StowConfig, StowStatus
from dotstow.core.protocols import CommandRunner, StowLocator
from dotstow.core.stow_service import StowService

__all__: list[str] = [
    "CommandRunner",
    "StowAction",
    "StowConfig",
    "StowLocator",
    "StowService",
    "StowStatus",
    "build_install_args",
    "build_uninstall_args",
]
