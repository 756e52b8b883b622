"""Writing the generated fontconfig file."""

from __future__ import annotations

import logging
from pathlib import Path

from cjk_fontsel.exceptions import WriteConfigError
from cjk_fontsel.paths import output_path

logger = logging.getLogger(__name__)


def write_config(output_dir: Path, document: str) -> Path:
    """Write ``document`` to the fixed config file under ``output_dir``.

    Missing directories are created. An existing file is overwritten.

    Returns:
        Path of the written file.

    Raises:
        WriteConfigError: If the directory or the file cannot be written.
    """
    path = output_path(Path(output_dir))

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(document)
    except OSError as e:
        raise WriteConfigError(path, details={"error": str(e)}) from e

    logger.debug("wrote %d bytes to %s", len(document.encode("utf-8")), path)
    return path
