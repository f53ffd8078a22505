"""Tests for wcag_contrast.core.wcag: levels, required ratios and grading."""

import pytest
from wcag_contrast.core.color import BLACK, WHITE, Color
from wcag_contrast.core.types import ContrastResult, Thresholds
from wcag_contrast.core.wcag import grade, meets, required_ratio


def _opaque(ratio: float) -> ContrastResult:
    return ContrastResult(ratio=ratio, error=0.0, min=ratio, max=ratio)


class TestRequiredRatio:
    def test_defaults(self):
        assert required_ratio('AA') == 4.5
        assert required_ratio('AA', large_text=True) == 3.0
        assert required_ratio('AAA') == 7.0
        assert required_ratio('AAA', large_text=True) == 4.5

    def test_custom_thresholds(self):
        assert required_ratio('AA', thresholds=Thresholds(aa=5.0)) == 5.0

    def test_unknown_level(self):
        with pytest.raises(ValueError, match='Unknown WCAG level'):
            required_ratio('A')


class TestMeets:
    def test_boundary_is_inclusive(self):
        assert meets(_opaque(4.5), 'AA')
        assert not meets(_opaque(4.49), 'AA')

    def test_large_text(self):
        assert meets(_opaque(3.0), 'AA', large_text=True)
        assert not meets(_opaque(3.0), 'AA')

    def test_black_on_white_meets_aaa(self):
        assert meets(BLACK.contrast(WHITE), 'AAA')

    def test_translucent_uses_worst_case(self):
        result = Color('rgba(0, 0, 0, 0.5)').contrast(WHITE)
        assert result.ratio > 4.5
        assert result.min < 4.5
        assert not meets(result, 'AA')
        assert meets(result, 'AA', large_text=True)


class TestGrade:
    def test_aaa(self):
        assert grade(_opaque(21)) == 'AAA'

    def test_aa(self):
        assert grade(_opaque(5)) == 'AA'

    def test_fail(self):
        assert grade(_opaque(2)) == 'fail'

    def test_large_text_grades_higher(self):
        assert grade(_opaque(4.5)) == 'AA'
        assert grade(_opaque(4.5), large_text=True) == 'AAA'
