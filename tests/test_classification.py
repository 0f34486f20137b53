# tests/test_classification.py
import pytest

from hangul_typing.domain.classifier import JamoCategory, classify, is_cho, is_jong, is_jung
from hangul_typing.domain.jamo_tables import CHOSEONG, JONGSEONG, JUNGSEONG

CHO = JamoCategory.CHO
JUNG = JamoCategory.JUNG
JONG = JamoCategory.JONG
OTHER = JamoCategory.OTHER


@pytest.mark.classification
def test_table_sizes():
    assert len(CHOSEONG) == 19
    assert len(JUNGSEONG) == 21
    assert len(JONGSEONG) == 28
    assert JONGSEONG[0] == ""


@pytest.mark.classification
@pytest.mark.parametrize("char,expected", [
    ("ㄱ", {CHO, JONG}), ("ㅎ", {CHO, JONG}), ("ㅆ", {CHO, JONG}),
    ("ㄸ", {CHO}), ("ㅃ", {CHO}), ("ㅉ", {CHO}),
    ("ㅏ", {JUNG}), ("ㅢ", {JUNG}),
    ("ㄳ", {JONG}), ("ㄺ", {JONG}), ("ㅄ", {JONG}),
    ("a", {OTHER}), ("가", {OTHER}), (" ", {OTHER}), ("", {OTHER}), ("ㄱㄴ", {OTHER}),
])
def test_classify_reports_every_category(char, expected):
    assert classify(char) == frozenset(expected)


@pytest.mark.classification
def test_cho_and_jong_overlap():
    both = [c for c in CHOSEONG if is_jong(c)]
    # 14 simple consonants plus the doubled ㄲ and ㅆ
    assert len(both) == 16
    assert set(both) >= {"ㄱ", "ㄴ", "ㄷ", "ㄹ", "ㅁ", "ㅂ", "ㅅ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ"}


@pytest.mark.classification
def test_empty_final_is_not_a_glyph():
    assert not is_jong("")
    assert not is_cho("")
    assert not is_jung("")


@pytest.mark.classification
def test_vowels_are_never_consonants():
    for v in JUNGSEONG:
        assert is_jung(v)
        assert not is_cho(v)
        assert not is_jong(v)
