from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


def _load_jsonl(path: Path) -> List[Dict[str, Any]]:
    out = []
    with open(path, 'r', encoding='utf-8') as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                out.append(json.loads(line))
            except json.JSONDecodeError as exc:
                logger.warning("%s:%d skipped malformed line (%s)", path, lineno, exc.msg)
    return out


def _load_records(path: str, key: str) -> List[Dict[str, Any]]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"{path} not found")
    if p.suffix == '.jsonl':
        return _load_jsonl(p)
    data = json.loads(p.read_text(encoding='utf-8'))
    if isinstance(data, dict):
        data = data.get(key)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of records or an object with a '{key}' list")
    return data


def load_items(path: str) -> List[Dict[str, Any]]:
    """Items from a .json list (or {"items": [...]}) or a .jsonl file."""
    return _load_records(path, 'items')


def load_regions(path: str) -> List[Dict[str, Any]]:
    """Regions from a .json list (or {"regions": [...]}) or a .jsonl file."""
    return _load_records(path, 'regions')
