from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple
from ..common.config import CONFIG, SearchConfig
from ..common.schemas import Region, as_item, as_region
from .he_norm import normalize_hebrew
from .item_types import extract_types
from .region_expand import settlement_matches, should_expand_region
from .utils import OrderedSet, unique_ordered

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    record: Any  # caller's object, returned untouched
    name: str
    description: str
    location: str
    types: Tuple[str, ...]


@dataclass(frozen=True)
class _RegionView:
    name: str
    settlements: Tuple[str, ...]


@dataclass(frozen=True)
class _Snapshot:
    records: Tuple[Any, ...]
    entries: Tuple[_Entry, ...]


def _build_snapshot(data: Optional[Iterable[Any]]) -> _Snapshot:
    records = tuple(data or ())
    entries = []
    for rec in records:
        it = as_item(rec)
        entries.append(_Entry(
            record=rec,
            name=normalize_hebrew(it.name),
            description=normalize_hebrew(it.description),
            location=normalize_hebrew(it.location),
            types=tuple(extract_types(it)),
        ))
    return _Snapshot(records=records, entries=tuple(entries))


class SearchEngine:
    """Ranks an in-memory dataset against a Hebrew free-text query.

    The dataset lives in an immutable snapshot; `set_data` swaps the whole
    snapshot so a running `search` always sees one consistent dataset.
    The region set is fixed at construction.
    """

    def __init__(self, data: Optional[Iterable[Any]] = None, regions: Optional[Iterable[Any]] = None,
                 config: SearchConfig = CONFIG):
        self.config = config
        self._snapshot = _build_snapshot(data)
        self._regions: Tuple[Region, ...] = tuple(as_region(r) for r in (regions or ()))
        self._region_views: Tuple[_RegionView, ...] = tuple(
            _RegionView(
                name=normalize_hebrew(r.name),
                settlements=tuple(normalize_hebrew(s) for s in r.settlements),
            )
            for r in self._regions
        )
        self._stop_keywords = frozenset(normalize_hebrew(k) for k in config.STOP_KEYWORDS)

    @property
    def data(self) -> Tuple[Any, ...]:
        return self._snapshot.records

    @property
    def regions(self) -> Tuple[Region, ...]:
        return self._regions

    def set_data(self, data: Optional[Iterable[Any]]) -> None:
        """Replace the dataset wholesale."""
        self._snapshot = _build_snapshot(data)

    def available_types(self) -> List[str]:
        labels = OrderedSet()
        for e in self._snapshot.entries:
            for t in e.types:
                labels.add(t)
        return labels.to_list()

    # ---- context ----

    def _matching_regions(self, query: str) -> List[_RegionView]:
        return [
            rv for rv in self._region_views
            if query in rv.name or any(settlement_matches(s, query) for s in rv.settlements)
        ]

    def _sibling_keywords(self, matching: Sequence[_RegionView]) -> List[str]:
        min_len = self.config.MIN_KEYWORD_LEN
        flat = [s for rv in matching for s in rv.settlements]
        return unique_ordered(
            flat,
            keep=lambda k: bool(k) and len(k) >= min_len and k not in self._stop_keywords,
        )

    def _direct_settlement_hits(self, query: str) -> List[str]:
        if len(query) <= 1:
            return []
        return [s for rv in self._region_views for s in rv.settlements if query in s]

    # ---- scoring ----

    def _score(self, e: _Entry, query: str, matching: Sequence[_RegionView],
               keywords: Sequence[str], direct_hits: Sequence[str]) -> int:
        cfg = self.config
        loc = e.location
        score = 0
        if query in e.name:
            score += cfg.W_NAME
        if query in e.description:
            score += cfg.W_DESCRIPTION
        if query in loc:
            score += cfg.W_LOCATION
        if matching and loc and any(rv.name in loc for rv in matching):
            score += cfg.W_REGION
        # either side may contain the other
        if keywords and loc and any(k in loc or loc in k for k in keywords):
            score += cfg.W_SIBLING
        if direct_hits and loc and any(s in loc for s in direct_hits):
            score += cfg.W_SETTLEMENT
        return score

    def search(self, raw_query: Optional[str] = None, filter_type: Optional[str] = None) -> List[Any]:
        """Return dataset records matching `raw_query`, best first.

        Args:
            raw_query: free text, may be empty or None
            filter_type: exact type/tag label, or the "all" sentinel (default)

        Returns:
            Records ordered by descending score; ties keep dataset order.
            An empty query returns the (filtered) dataset as is.
        """
        snap = self._snapshot
        if filter_type is None:
            filter_type = self.config.FILTER_ALL
        query = normalize_hebrew(raw_query)

        entries: Sequence[_Entry] = snap.entries
        if filter_type != self.config.FILTER_ALL:
            entries = [e for e in entries if filter_type in e.types]

        if not query:
            return [e.record for e in entries]

        expand = should_expand_region(query, self._regions)
        matching = self._matching_regions(query) if expand else []
        keywords = self._sibling_keywords(matching)
        direct_hits = self._direct_settlement_hits(query)

        scored = []
        for e in entries:
            s = self._score(e, query, matching, keywords, direct_hits)
            if s > 0:
                scored.append((s, e.record))
        # sorted() is stable, equal scores keep dataset order
        scored = sorted(scored, key=lambda x: x[0], reverse=True)
        logger.debug(
            "search %r filter=%r: %d candidates, expand=%s, %d regions, %d results",
            query, filter_type, len(entries), expand, len(matching), len(scored),
        )
        return [rec for _, rec in scored]
