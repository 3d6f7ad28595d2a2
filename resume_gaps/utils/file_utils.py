"""
File utility functions.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from .logger import get_logger

logger = get_logger(__name__)


def load_json(filepath: Union[Path, str]) -> Dict[str, Any]:
    """
    Load data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Loaded data

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON
    """
    path = Path(filepath)

    if not path.exists():
        logger.error(f"JSON file not found: {path}")
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}")

    logger.debug(f"Loaded JSON from {path}")
    return data
