"""Batch contrast evaluation for foreground/background pairs and palettes.

audit() checks named (name, fg, bg) pairs against a WCAG level and collects
them into an AuditReport. contrast_matrix() computes every pairwise ratio of
a palette with numpy; opaque pairs are vectorised, pairs involving a
translucent colour go through Color.contrast.

Example:
    report = audit([('body', '#333333', '#ffffff'), ('hint', 'rgba(0, 0, 0, 0.3)', '#ffffff')])
    report.fail_count
"""

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from wcag_contrast.core.color import Color, ColorInput
from wcag_contrast.core.types import AuditReport, Level, PairCheck, Thresholds
from wcag_contrast.core.wcag import DEFAULT_THRESHOLDS, meets, required_ratio

logger = logging.getLogger(__name__)

_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def luminance_array(rgb: np.ndarray | Sequence[Sequence[float]]) -> np.ndarray:
    """Relative luminance for an (N, 3) array of 0-255 channels."""
    c = np.asarray(rgb, dtype=float) / 255.0
    # both branches are evaluated; out-of-range channels would warn in the unused one
    with np.errstate(invalid='ignore'):
        linear = np.where(c <= 0.03928, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    return linear @ _WEIGHTS


def contrast_matrix(colors: Sequence[ColorInput]) -> np.ndarray:
    """M[i, j] = Color(colors[i]).contrast(Color(colors[j])).ratio."""
    palette = [Color(c) for c in colors]
    if not palette:
        return np.zeros((0, 0))

    lum = luminance_array([c.rgb for c in palette]) + 0.05
    lighter = np.maximum(lum[:, None], lum[None, :])
    darker = np.minimum(lum[:, None], lum[None, :])
    matrix = lighter / darker

    translucent = [i for i, c in enumerate(palette) if c.alpha < 1]
    for i in translucent:
        for j in range(len(palette)):
            matrix[i, j] = palette[i].contrast(palette[j]).ratio
            matrix[j, i] = palette[j].contrast(palette[i]).ratio
    return matrix


def check_pair(
    name: str,
    foreground: ColorInput,
    background: ColorInput,
    level: Level = 'AA',
    large_text: bool = False,
    thresholds: Thresholds | None = None,
) -> PairCheck:
    """Evaluate one pair. InvalidColorFormat propagates for bad inputs."""
    fg = Color(foreground)
    bg = Color(background)
    required = required_ratio(level, large_text, thresholds)
    result = fg.contrast(bg)
    return PairCheck(
        name=name,
        foreground=fg,
        background=bg,
        result=result,
        required=required,
        passed=meets(result, level, large_text, thresholds),
    )


def audit(
    pairs: Iterable[tuple[str, ColorInput, ColorInput]],
    level: Level = 'AA',
    large_text: bool = False,
    thresholds: Thresholds | None = None,
) -> AuditReport:
    """Check every (name, fg, bg) pair and collect the results."""
    thresholds = thresholds or DEFAULT_THRESHOLDS
    report = AuditReport(level=level, large_text=large_text, thresholds=thresholds)
    for name, fg, bg in pairs:
        check = check_pair(name, fg, bg, level, large_text, thresholds)
        if not check.passed:
            logger.debug('%s fails %s: %.2f < %s (%s on %s)', name, level, check.result.min, check.required, fg, bg)
        report.add(check)

    total = report.pass_count + report.fail_count
    logger.info('audit %s: %d/%d pairs pass', level, report.pass_count, total)
    return report
