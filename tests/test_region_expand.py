import pytest

from geosearch.src.common.schemas import Region
from geosearch.src.pipeline.region_expand import (
    has_locality_prefix,
    settlement_matches,
    should_expand_region,
)

REGIONS = [
    Region(name="מרכז", settlements=["תל אביב", "רמת גן"]),
    Region(name="דרום", settlements=["אשדוד", 'ת"א יפו']),
]


def test_empty_query_never_expands():
    assert should_expand_region("", REGIONS) is False


@pytest.mark.parametrize("query", ["קריית גת", "קרית", "קיבוץ", "מושב", "כפר", "בית שמש", "מעלה אדומים"])
def test_locality_prefix_expands_without_regions(query):
    assert should_expand_region(query, []) is True


def test_prefix_must_be_whole_word():
    assert has_locality_prefix("ביתר") is False
    assert has_locality_prefix("כפרי") is False
    assert should_expand_region("כפרי", []) is False
    assert has_locality_prefix("כפר") is True


def test_multi_token_expands():
    assert should_expand_region("רמת גן", []) is True


def test_single_char_never_expands():
    assert should_expand_region("א", REGIONS) is False
    assert should_expand_region("ת", REGIONS) is False


def test_two_chars_use_prefix_match():
    assert should_expand_region("רמ", REGIONS) is True
    assert should_expand_region("מת", REGIONS) is False
    # settlements are normalized before comparison
    assert should_expand_region("תא", REGIONS) is True


def test_three_chars_use_substring_match():
    assert should_expand_region("שדו", REGIONS) is True
    assert should_expand_region("חיפ", REGIONS) is False


def test_settlement_matches():
    assert settlement_matches("", "תל") is False
    assert settlement_matches("תל אביב", "תל") is True
    assert settlement_matches("תל אביב", "אב") is False
    assert settlement_matches("תל אביב", "אביב") is True
