"""Export generated artifacts to disk.

Artifacts are saved under fixed file names; the Java file takes the
extension of the generator that produced it.
"""

from pathlib import Path
from typing import Dict, List

from .logging_config import get_logger

logger = get_logger(__name__)

MERMAID_FILENAME = "diagram.mmd"
ASCII_FILENAME = "diagram.txt"
JAVA_FILENAME = "Generated.java"
C_HEADER_FILENAME = "generated.h"
C_SOURCE_FILENAME = "generated.c"


class ExportError(Exception):
    """Raised when an artifact cannot be written."""

    pass


def write_text(path: Path, text: str) -> Path:
    """Write one artifact as UTF-8 text.

    Raises:
        ExportError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Failed to write {path}: {e}") from e
    logger.info("Wrote %s (%d chars)", path, len(text))
    return path


def write_artifacts(files: Dict[str, str], output_dir: str | Path) -> List[Path]:
    """Write generated files into a directory.

    Args:
        files: File name mapped to text, as returned by a generator.
        output_dir: Target directory, created when missing.

    Returns:
        Paths written, in input order.
    """
    output_dir = Path(output_dir)
    return [write_text(output_dir / name, text) for name, text in files.items()]
