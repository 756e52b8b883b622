"""cjk-fontsel: choose the fonts behind the CJK generic font families.

Reads font family names from alias files and writes a fontconfig file that
prefers them for ``sans-serif``, ``serif`` and ``monospace``.

Example:
    >>> from cjk_fontsel import generate_xml, read_font_names, write_config
    >>> names = read_font_names(alias_root, "noto", "noto", "sarasa")
    >>> write_config(output_dir, generate_xml(names.sans, names.serif, names.monospace))
"""

__version__ = "0.1.0"

from cjk_fontsel.aliases import (  # noqa: E402
    Category,
    FontSelection,
    list_aliases,
    read_font_name,
    read_font_names,
)
from cjk_fontsel.config import Config  # noqa: E402
from cjk_fontsel.exceptions import (  # noqa: E402
    ConfigError,
    ErrorKind,
    FontSelectorError,
    InvalidAliasError,
    ReadFontNameError,
    WriteConfigError,
)
from cjk_fontsel.paths import get_alias_dir, output_path, resolve_output_dir  # noqa: E402
from cjk_fontsel.template import generate_xml  # noqa: E402
from cjk_fontsel.writer import write_config  # noqa: E402

__all__ = [
    # Operations
    "get_alias_dir",
    "resolve_output_dir",
    "output_path",
    "read_font_name",
    "read_font_names",
    "list_aliases",
    "generate_xml",
    "write_config",
    # Types
    "Category",
    "FontSelection",
    "Config",
    # Exceptions
    "FontSelectorError",
    "ReadFontNameError",
    "InvalidAliasError",
    "WriteConfigError",
    "ConfigError",
    "ErrorKind",
    # Metadata
    "__version__",
]
