"""Alias lookup.

An alias tree looks like::

    aliases/
        sans/<alias>
        serif/<alias>
        monospace/<alias>

where each file holds one font family name.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from cjk_fontsel.exceptions import ErrorKind, InvalidAliasError, ReadFontNameError

logger = logging.getLogger(__name__)


class Category(str, Enum):
    """Alias category, in lookup order."""

    SANS = "sans"
    SERIF = "serif"
    MONOSPACE = "monospace"

    @property
    def generic_family(self) -> str:
        """The fontconfig generic family this category overrides."""
        return "sans-serif" if self is Category.SANS else self.value


@dataclass(frozen=True)
class FontSelection:
    """Resolved family names, one per category."""

    sans: str
    serif: str
    monospace: str


def _check_alias(path: Path, category: str, alias: str) -> None:
    if (
        not alias
        or alias in (".", "..")
        or "/" in alias
        or "\\" in alias
        or "\x00" in alias
    ):
        raise InvalidAliasError(path, alias, category=category)


def read_font_name(alias_root: Path, category: str | Category, alias: str) -> str:
    """Read the font family name stored for ``alias`` in ``category``.

    Args:
        alias_root: Directory holding the category subdirectories.
        category: One of ``sans``, ``serif``, ``monospace``.
        alias: File name of the alias inside the category directory.

    Returns:
        The file content with surrounding whitespace stripped.

    Raises:
        InvalidAliasError: If ``alias`` is not a plain file name.
        ReadFontNameError: If the file cannot be opened (kind OPEN) or its
            content cannot be read as UTF-8 text (kind READ).
    """
    category = Category(category).value
    path = Path(alias_root) / category / alias
    _check_alias(path, category, alias)

    logger.debug("reading %s", path)
    try:
        f = open(path, encoding="utf-8")
    except OSError as e:
        raise ReadFontNameError(path, ErrorKind.OPEN, category=category) from e

    with f:
        try:
            contents = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadFontNameError(path, ErrorKind.READ, category=category) from e

    return contents.strip()


def read_font_names(
    alias_root: Path,
    sans: str,
    serif: str,
    monospace: str,
    on_resolved: Callable[[Category, str], None] | None = None,
) -> FontSelection:
    """Resolve all three aliases in order, stopping at the first failure.

    Args:
        alias_root: Directory holding the category subdirectories.
        sans: Alias in the sans category.
        serif: Alias in the serif category.
        monospace: Alias in the monospace category.
        on_resolved: Called with each category and its family name as soon
            as it is read, before the next category is tried.

    Raises:
        ReadFontNameError: For the first alias that cannot be read.
    """
    names: dict[Category, str] = {}
    for category, alias in zip(Category, (sans, serif, monospace)):
        name = read_font_name(alias_root, category, alias)
        if on_resolved is not None:
            on_resolved(category, name)
        names[category] = name

    return FontSelection(
        sans=names[Category.SANS],
        serif=names[Category.SERIF],
        monospace=names[Category.MONOSPACE],
    )


def list_aliases(alias_root: Path, category: str | Category) -> list[str]:
    """Return the sorted alias names available in ``category``."""
    category_dir = Path(alias_root) / Category(category).value
    if not category_dir.is_dir():
        return []
    return sorted(p.name for p in category_dir.iterdir() if p.is_file())
