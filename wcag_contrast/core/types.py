"""Shared types for wcag-contrast: ContrastResult, Thresholds, PairCheck, AuditReport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from wcag_contrast.core.color import Color

Level = Literal['AA', 'AAA']


@dataclass(frozen=True)
class ContrastResult:
    """Contrast between two colours, as a range when the foreground is translucent.

    For opaque pairs min == max == ratio and error is 0. Otherwise ratio is the
    midpoint of [min, max] and error its half-width.
    """

    ratio: float
    error: float
    min: float
    max: float
    closest: Color | None = None  # approximate, kept for compatibility
    farthest: Color | None = None  # backdrop (BLACK or WHITE) giving max

    def as_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; colours are rendered as rgb()/rgba() strings."""
        data: dict[str, Any] = {
            'ratio': self.ratio,
            'error': self.error,
            'min': self.min,
            'max': self.max,
        }
        if self.closest is not None:
            data['closest'] = str(self.closest)
        if self.farthest is not None:
            data['farthest'] = str(self.farthest)
        return data


@dataclass(frozen=True)
class Thresholds:
    """Minimum contrast ratios per WCAG conformance level."""

    aa: float = 4.5
    aa_large: float = 3.0
    aaa: float = 7.0
    aaa_large: float = 4.5

    def required(self, level: Level, large_text: bool = False) -> float:
        if level == 'AA':
            return self.aa_large if large_text else self.aa
        if level == 'AAA':
            return self.aaa_large if large_text else self.aaa
        raise ValueError(f'Unknown WCAG level: {level!r}. Expected AA or AAA')


@dataclass
class PairCheck:
    """One foreground/background pair evaluated against a threshold."""

    name: str
    foreground: Color
    background: Color
    result: ContrastResult
    required: float
    passed: bool


@dataclass
class AuditReport:
    """Accumulates pair checks for JSON output."""

    level: Level = 'AA'
    large_text: bool = False
    thresholds: Thresholds = field(default_factory=Thresholds)
    checks: list[PairCheck] = field(default_factory=list)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, check: PairCheck) -> None:
        """Add a check and count it as a pass or a fail."""
        self.checks.append(check)
        if check.passed:
            self.record_pass(check.name)
        else:
            self.record_fail(check.name)

    def record_pass(self, name: str) -> None:
        self.pass_count += 1

    def record_fail(self, name: str) -> None:
        self.fail_count += 1

    @property
    def failing(self) -> list[PairCheck]:
        return [c for c in self.checks if not c.passed]
