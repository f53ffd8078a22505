"""JSON export for contrast results and audit reports."""

import json
from typing import Any

from wcag_contrast.core.types import AuditReport, ContrastResult, PairCheck


def _check_to_dict(check: PairCheck) -> dict[str, Any]:
    return {
        'name': check.name,
        'foreground': str(check.foreground),
        'background': str(check.background),
        'required': check.required,
        'pass': check.passed,
        'contrast': check.result.as_dict(),
    }


def format_json(report: AuditReport | ContrastResult) -> str:
    """Format an audit report, or a single contrast result, as JSON."""
    if isinstance(report, ContrastResult):
        return json.dumps(report.as_dict(), indent=2)

    obj: dict[str, Any] = {
        'level': report.level,
        'large_text': report.large_text,
        'required': report.thresholds.required(report.level, report.large_text),
        'pairs': [_check_to_dict(c) for c in report.checks],
        'summary': {
            'total': report.pass_count + report.fail_count,
            'pass': report.pass_count,
            'fail': report.fail_count,
        },
    }
    return json.dumps(obj, indent=2)
