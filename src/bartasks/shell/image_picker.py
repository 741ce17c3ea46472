# src/bartasks/shell/image_picker.py

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def pick_image(path: str | Path | None) -> bytes | None:
    """
    Read an attachment as raw bytes.

    Returns None for an empty path, a missing/unreadable file or an empty
    file. Bytes are not validated or converted.
    """
    if path is None or str(path).strip() == "":
        return None

    p = Path(str(path).strip()).expanduser()
    try:
        data = p.read_bytes()
    except OSError:
        logger.info("Image not readable: %s", p)
        return None

    return data or None
