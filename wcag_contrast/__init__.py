"""wcag-contrast: WCAG contrast ratios for opaque and translucent colours."""

from wcag_contrast.core.audit import audit, check_pair, contrast_matrix
from wcag_contrast.core.color import BLACK, GRAY, WHITE, Color, InvalidColorFormat
from wcag_contrast.core.config import load_thresholds
from wcag_contrast.core.report import format_json
from wcag_contrast.core.types import AuditReport, ContrastResult, PairCheck, Thresholds
from wcag_contrast.core.wcag import grade, meets, required_ratio

__all__ = [
    'BLACK',
    'GRAY',
    'WHITE',
    'AuditReport',
    'Color',
    'ContrastResult',
    'InvalidColorFormat',
    'PairCheck',
    'Thresholds',
    'audit',
    'check_pair',
    'contrast_matrix',
    'format_json',
    'grade',
    'load_thresholds',
    'meets',
    'required_ratio',
]
