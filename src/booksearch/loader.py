from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .validation import MalformedInputError

logger = logging.getLogger(__name__)


def load_scanned_books(path: Path) -> Any:
    """Read scanned book records from a JSON file.

    The parsed value is returned as-is; its shape is checked when it is
    searched.
    """
    if not path.exists():
        raise FileNotFoundError(f"Scanned text file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Invalid Argument: {path} is not valid JSON ({exc})") from exc
    logger.debug("Loaded scanned text from %s", path)
    return data
