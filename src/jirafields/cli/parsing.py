"""Input parsing utilities for CLI commands."""

import json
from pathlib import Path
from typing import Any

# Envelope keys used by the search and agile list endpoints
_LIST_KEYS = ("issues", "values", "projects", "users")


def read_samples_file(path: str) -> list[dict[str, Any]]:
    """Read sampled entity records from a JSON file.

    Accepts a JSON array of records, or a REST response envelope holding the
    records under ``issues``, ``values``, ``projects`` or ``users``.

    Args:
        path: Path to JSON file

    Returns:
        List of record objects

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file contains invalid JSON
        ValueError: If no list of records is found
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with file_path.open("r") as f:
        data = json.load(f)

    if isinstance(data, dict):
        for key in _LIST_KEYS:
            if isinstance(data.get(key), list):
                data = data[key]
                break

    if not isinstance(data, list):
        raise ValueError(
            f"Expected a JSON array of records (or an object with one of: "
            f"{', '.join(_LIST_KEYS)}) in {path}"
        )
    return [record for record in data if isinstance(record, dict)]
