"""Location of the alias tree and of the generated fontconfig file."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

ALIAS_DIR_NAME = "aliases"
CONFIG_FILENAME = "69-language-selector-ja-jp.conf"
SYSTEM_FONTCONFIG_DIR = Path("/etc/fonts")


def get_alias_dir(executable: str | os.PathLike[str] | None = None) -> Path:
    """Return the ``aliases`` directory that sits next to the running program.

    Args:
        executable: Path of the running program. Defaults to ``sys.argv[0]``.

    Raises:
        RuntimeError: If the program's own location cannot be determined.
    """
    if executable is None:
        executable = sys.argv[0] if sys.argv else ""
    if not str(executable):
        raise RuntimeError("Failed to get current executable's path.")

    alias_dir = Path(executable).resolve().with_name(ALIAS_DIR_NAME)
    logger.debug("alias directory: %s", alias_dir)
    return alias_dir


def user_config_root(environ: Mapping[str, str] | None = None) -> Path | None:
    """Return ``$XDG_CONFIG_HOME``, else ``$HOME/.config``, else None.

    Empty variables are treated as unset.
    """
    env = os.environ if environ is None else environ

    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)

    home = env.get("HOME")
    if home:
        return Path(home) / ".config"

    return None


def resolve_output_dir(
    system_wide: bool, environ: Mapping[str, str] | None = None
) -> Path:
    """Return the fontconfig directory the generated file belongs in.

    Falls back to the system-wide directory when no user config root exists.
    """
    if system_wide:
        return SYSTEM_FONTCONFIG_DIR

    root = user_config_root(environ)
    if root is None:
        logger.debug("no XDG_CONFIG_HOME or HOME, using %s", SYSTEM_FONTCONFIG_DIR)
        return SYSTEM_FONTCONFIG_DIR

    return root / "fontconfig"


def output_path(output_dir: Path) -> Path:
    """Full path of the generated fontconfig file inside ``output_dir``."""
    return output_dir / "conf.d" / CONFIG_FILENAME
