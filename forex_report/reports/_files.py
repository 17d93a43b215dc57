"""Shared artifact file handling."""

import logging
import os
from pathlib import Path

from forex_report.errors import ReportWriteError


logger = logging.getLogger(__name__)


def replace_file(destination: Path | str, content: str) -> Path:
    """
    Write content to destination, replacing any existing file.

    The content lands in a sibling temp file first and is moved into place,
    so a failed write never leaves a partial artifact and never removes the
    previous one.

    Raises:
        ReportWriteError: Directory or file could not be written
    """
    path = Path(destination)
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(content, encoding="utf-8", newline="")
        os.replace(tmp_path, path)
    except OSError as e:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            logger.warning(f"Could not remove temp file {tmp_path}")
        raise ReportWriteError(f"Could not write {path}: {e}") from e

    logger.info(f"Report generated at: {path}")
    return path
