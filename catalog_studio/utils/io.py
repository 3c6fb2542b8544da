from __future__ import annotations
import json, os, tempfile
from pathlib import Path
from typing import Any

import yaml

def atomic_write_text(path: Path, data: str, mode: int = 0o600) -> None:
    """Write via a sibling temp file so readers never see a partial file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data)
        try:
            os.chmod(tmp, mode)
        except OSError:
            pass  # no POSIX perms on Windows
        tmp.replace(path)
    finally:
        if tmp.exists():
            tmp.unlink()

def _read_text(path: Path) -> str | None:
    path = Path(path)
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")

def read_json(path: Path, default: Any) -> Any:
    text = _read_text(path)
    return default if text is None else json.loads(text)

def write_json(path: Path, obj: Any, mode: int = 0o600) -> None:
    atomic_write_text(path, json.dumps(obj, ensure_ascii=False, indent=2), mode=mode)

def read_yaml(path: Path, default: Any) -> Any:
    text = _read_text(path)
    if text is None:
        return default
    data = yaml.safe_load(text)
    return default if data is None else data
