from __future__ import annotations
from typing import Any, List
from ..common.schemas import as_item
from .utils import unique_ordered


def extract_types(item: Any) -> List[str]:
    """Category labels of a record: `type` entries then `tags` entries,
    first occurrence kept, empty labels dropped. No normalization."""
    it = as_item(item)
    return unique_ordered([*it.type, *it.tags], keep=bool)


def has_type(item: Any, label: str) -> bool:
    return label in extract_types(item)
