"""
JSON-file persistence for the board document.

The whole document is read on every load and rewritten on every save. A
missing or unparseable file is recovered by serving an empty document. A file
that parses but has the wrong shape is never overwritten. Write failures are
reported to the caller through the return value.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
import os
import tempfile

from pydantic import ValidationError as SchemaError

from schoolboard.core.config import get_settings
from schoolboard.core.errors import DocumentSchemaError, PersistenceReadError
from schoolboard.domain.posts import SchoolData

logger = logging.getLogger(__name__)


def data_file() -> Path:
    return get_settings().data_file


def default_document() -> SchoolData:
    return SchoolData()


def ensure_initialized() -> bool:
    """Create the data file with empty collections if it does not exist yet."""
    path = data_file()
    if path.exists():
        logger.info("Data file exists: %s", path)
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    _write(path, default_document())
    logger.info("Created initial data file: %s", path)
    return True


def _read(path: Path):
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as exc:
        raise PersistenceReadError(f"Could not read {path}: {exc}") from exc


def load_raw():
    """
    Return the parsed file as stored, or the empty document (as a dict) if the
    file is missing or is not valid JSON.
    """
    path = data_file()
    try:
        return _read(path)
    except PersistenceReadError as exc:
        logger.error("Error reading data: %s", exc.message)
        return default_document().to_json_dict()


def load() -> SchoolData:
    """
    Return the stored document, or an empty one if the file is missing or not
    valid JSON. A file that parses but does not have the board's shape raises
    DocumentSchemaError so that no write replaces it.
    """
    raw = load_raw()
    try:
        return SchoolData.model_validate(raw)
    except SchemaError as exc:
        logger.error("Data file %s has an unexpected shape: %s", data_file(), exc)
        raise DocumentSchemaError("Data file has an unexpected shape") from exc


def _write(path: Path, document: SchoolData) -> None:
    payload = json.dumps(document.to_json_dict(), ensure_ascii=False, indent=2)
    # Write next to the target and swap it in so a crash never leaves half a file.
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def save(document: SchoolData) -> bool:
    path = data_file()
    try:
        _write(path, document)
        return True
    except OSError as exc:
        logger.error("Error writing data to %s: %s", path, exc)
        return False
