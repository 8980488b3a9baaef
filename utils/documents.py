import copy
import json
import os
import re
import tempfile
from pathlib import Path
from typing import Any, List
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("DOCUMENTS")

# "menu", "translations/es", ...
DOCUMENT_NAME_RE = re.compile(r"^[a-z0-9_-]+(/[a-z0-9_-]+)?$")

DOCUMENT_DEFAULTS = {
    "menu": {"categories": [], "items": []},
    "beverages": {"categories": [], "items": []},
    "pages": [],
    "gallery": [],
}

def document_path(name: str) -> Path:
    if not DOCUMENT_NAME_RE.match(name or ""):
        raise ValueError(f"Invalid document name: {name!r}")
    return Path(settings.DATA_DIR) / f"{name}.json"

def default_for(name: str) -> Any:
    base = name.split("/", 1)[0]
    return copy.deepcopy(DOCUMENT_DEFAULTS.get(base, {}))

def document_exists(name: str) -> bool:
    return document_path(name).is_file()

def get_data(name: str, default: Any = None) -> Any:
    """
    Read a named JSON document.
    Returns the parsed content, or `default` (the document's empty shape when
    not given) if the file is missing or unreadable. Never raises on I/O.
    """
    fallback = default_for(name) if default is None else default
    path = document_path(name)
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError:
        logger.info(f"Document '{name}' not found at {path}, using default")
        return fallback
    except (OSError, ValueError):
        logger.exception(f"Error reading document '{name}'")
        return fallback

def save_data(name: str, value: Any) -> bool:
    """
    Serialize `value` and overwrite the named document.
    The new content is written to a temp file and moved into place, so a reader
    sees either the old or the new document. No locking: last write wins.
    """
    path = document_path(name)
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}-", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(value, fh, indent=2, ensure_ascii=False)
        os.replace(tmp_name, path)
        logger.info(f"Document '{name}' saved")
        return True
    except (OSError, TypeError, ValueError):
        logger.exception(f"Error saving document '{name}'")
        if tmp_name and os.path.exists(tmp_name):
            os.remove(tmp_name)
        return False

def list_documents(prefix: str) -> List[str]:
    """Names of the documents stored under `prefix`, e.g. ["translations/en", ...]."""
    folder = Path(settings.DATA_DIR) / prefix
    if not folder.is_dir():
        return []
    return sorted(f"{prefix}/{p.stem}" for p in folder.glob("*.json"))
