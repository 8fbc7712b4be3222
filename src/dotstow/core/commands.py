"""Pure construction of Stow argument vectors.

No I/O happens here; the functions only translate a
:class:`~dotstow.core.models.StowConfig` into the ``argv`` list handed to
the process runner.
"""

from __future__ import annotations

from dotstow.core.models import StowAction, StowConfig


def _common_prefix(config: StowConfig) -> list[str]:
    argv = [config.executable, "--verbose"]
    if config.simulate:
        argv.append("--simulate")
    return argv


def build_install_args(config: StowConfig) -> list[str]:
    """Return the argv that links *config.package* into the target.

    Existing files in the target are adopted into the package and
    directories are never folded into a single link.
    """
    return [
        *_common_prefix(config),
        "--adopt",
        "--no-folding",
        "--target",
        str(config.target),
        config.package,
    ]


def build_uninstall_args(config: StowConfig) -> list[str]:
    """Return the argv that removes the links created for *config.package*."""
    return [
        *_common_prefix(config),
        "--target",
        str(config.target),
        "--delete",
        config.package,
    ]


def build_args(action: StowAction, config: StowConfig) -> list[str]:
    if action is StowAction.INSTALL:
        return build_install_args(config)
    return build_uninstall_args(config)
