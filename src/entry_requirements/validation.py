"""
Dataset loading and validation.

Validates an entry-requirements document against the bundled JSON schema and
checks the invariants the schema cannot express: unique ``cca3`` codes and
``total`` matching the number of records.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "entry_dataset.schema.json"


class DatasetValidationError(Exception):
    """Raised when an entry-requirements document is malformed."""
    pass


def load_dataset(path: Path) -> Dict[str, Any]:
    """
    Load an entry-requirements document from JSON.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_dataset(document: Dict[str, Any], path: Path, indent: int = 2) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=indent, ensure_ascii=False)
        f.write("\n")


def load_schema(schema_path: Path = SCHEMA_PATH) -> Dict[str, Any]:
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_dataset(
    document: Any,
    strict: bool = True,
    schema_path: Optional[Path] = SCHEMA_PATH,
) -> bool:
    """
    Validate a document against the schema and dataset invariants.

    Args:
        document: Parsed JSON document
        strict: If False, a stale ``total`` is only logged
        schema_path: JSON schema to validate against (None skips the schema)

    Returns:
        True if valid

    Raises:
        DatasetValidationError: If validation fails
    """
    if not isinstance(document, dict):
        raise DatasetValidationError("Document must be a JSON object")

    if schema_path is not None:
        try:
            jsonschema.validate(document, load_schema(schema_path))
        except jsonschema.ValidationError as e:
            path = ".".join(str(p) for p in e.absolute_path)
            where = f" at {path}" if path else ""
            raise DatasetValidationError(f"Schema validation failed{where}: {e.message}")

    results = document.get("results")
    if not isinstance(results, list):
        raise DatasetValidationError("'results' must be a list")

    seen = set()
    for i, entry in enumerate(results):
        if not isinstance(entry, dict):
            raise DatasetValidationError(f"Entry {i} must be an object")
        code = entry.get("cca3")
        if not code:
            raise DatasetValidationError(f"Entry {i} missing required field: cca3")
        if code in seen:
            raise DatasetValidationError(f"Duplicate cca3: {code}")
        seen.add(code)

    total = document.get("total")
    if total is not None and total != len(results):
        message = f"total is {total} but document has {len(results)} record(s)"
        if strict:
            raise DatasetValidationError(message)
        logger.warning(message)

    return True
