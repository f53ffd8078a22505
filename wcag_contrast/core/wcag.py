"""WCAG conformance checks on contrast results.

WCAG 2.x minimum ratios (defaults, overridable via Thresholds):
  AA:  4.5:1 normal text, 3:1 large text
  AAA: 7:1 normal text, 4.5:1 large text

A translucent foreground yields a range of ratios. A pair passes only when the
worst case (result.min) reaches the required ratio.
"""

from wcag_contrast.core.types import ContrastResult, Level, Thresholds

DEFAULT_THRESHOLDS = Thresholds()


def required_ratio(level: Level = 'AA', large_text: bool = False, thresholds: Thresholds | None = None) -> float:
    """Minimum contrast ratio for a level. Raises ValueError for unknown levels."""
    return (thresholds or DEFAULT_THRESHOLDS).required(level, large_text)


def meets(
    result: ContrastResult,
    level: Level = 'AA',
    large_text: bool = False,
    thresholds: Thresholds | None = None,
) -> bool:
    return result.min >= required_ratio(level, large_text, thresholds)


def grade(result: ContrastResult, large_text: bool = False, thresholds: Thresholds | None = None) -> str:
    """Highest level met: 'AAA', 'AA' or 'fail'."""
    if meets(result, 'AAA', large_text, thresholds):
        return 'AAA'
    if meets(result, 'AA', large_text, thresholds):
        return 'AA'
    return 'fail'
