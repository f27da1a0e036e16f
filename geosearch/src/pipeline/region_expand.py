from __future__ import annotations
import logging
import re
from typing import Iterable, Sequence
from ..common.schemas import Region
from .he_norm import normalize_hebrew, split_tokens

logger = logging.getLogger(__name__)

LOCALITY_PREFIXES = ("קריית", "קרית", "קיבוץ", "מושב", "כפר", "בית", "מעלה")

# prefix word followed by end of text or a non-word char
_PREFIX_RE = re.compile(r"^(?:%s)(?!\w)" % "|".join(LOCALITY_PREFIXES), re.IGNORECASE)


def has_locality_prefix(norm_query: str) -> bool:
    return bool(_PREFIX_RE.match(norm_query or ""))


def settlement_matches(norm_settlement: str, norm_query: str) -> bool:
    """Substring match for queries of 3+ chars, prefix match for shorter ones."""
    if not norm_settlement:
        return False
    if len(norm_query) >= 3:
        return norm_query in norm_settlement
    return norm_settlement.startswith(norm_query)


def _normalized_settlements(regions: Iterable[Region]):
    for r in regions:
        for s in r.settlements:
            yield normalize_hebrew(s)


def should_expand_region(norm_query: str, regions: Sequence[Region]) -> bool:
    """Whether region/settlement bonuses are worth computing for this query.

    Short, single-token queries only expand when they look like the start
    of a known settlement name; locality prefixes and multi-word queries
    always expand.
    """
    if not norm_query:
        return False
    if has_locality_prefix(norm_query):
        logger.debug("expand %r: locality prefix", norm_query)
        return True
    if len(split_tokens(norm_query)) >= 2:
        logger.debug("expand %r: multi-token", norm_query)
        return True
    if len(norm_query) < 2:
        return False
    hit = any(settlement_matches(s, norm_query) for s in _normalized_settlements(regions))
    logger.debug("expand %r: settlement lookup -> %s", norm_query, hit)
    return hit
