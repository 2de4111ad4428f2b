"""JSON file helpers shared by the repositories."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def read_json(path: Path, default):
    """Read a JSON document, returning `default` when the file is missing or corrupt."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning("Data file not found: %s", path)
        return default
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", path, e)
        return default


def atomic_write(path: Path, data) -> None:
    """Write JSON to a temp file in the same directory, then move it over `path`."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, str(path))
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
