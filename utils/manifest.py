"""Loading of the emoji manifest (a flat JSON object of name -> source)."""

import json
import logging
from pathlib import Path
from typing import Dict, Union

logger = logging.getLogger(__name__)


class ManifestError(Exception):
    """Raised when the manifest file cannot be used."""


def load_manifest(path: Union[str, Path]) -> Dict[str, str]:
    """
    Read the emoji manifest from disk.

    Args:
        path: Path to a JSON file such as {"party": "https://...", "yay": "alias:party"}

    Returns:
        Mapping of original emoji name to image URL or alias reference,
        in file order

    Raises:
        ManifestError: If the file is unreadable, not valid JSON, or not
            a flat string-to-string object
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Error reading file: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Error parsing JSON: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(
            f"Error parsing JSON: expected an object, got {type(data).__name__}"
        )

    for name, source in data.items():
        if not isinstance(source, str):
            raise ManifestError(
                f"Error parsing JSON: value for {name!r} must be a string"
            )

    logger.debug(f"[MANIFEST] Loaded {len(data)} entries from {path}")
    return data
