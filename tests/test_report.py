"""Tests for wcag_contrast.core.report: JSON export."""

import json

import pytest
from wcag_contrast.core.audit import audit
from wcag_contrast.core.color import BLACK, WHITE, Color
from wcag_contrast.core.report import format_json


class TestFormatJson:
    def test_audit_report(self):
        report = audit([('body', '#000000', '#ffffff'), ('faint', '#777777', '#6f6f6f')])
        obj = json.loads(format_json(report))
        assert obj['level'] == 'AA'
        assert obj['required'] == 4.5
        assert obj['summary'] == {'total': 2, 'pass': 1, 'fail': 1}
        body = obj['pairs'][0]
        assert body['name'] == 'body'
        assert body['foreground'] == 'rgb(0, 0, 0)'
        assert body['background'] == 'rgb(255, 255, 255)'
        assert body['pass'] is True
        assert body['contrast']['ratio'] == pytest.approx(21)

    def test_opaque_result_has_no_range_colours(self):
        obj = json.loads(format_json(BLACK.contrast(WHITE)))
        assert set(obj) == {'ratio', 'error', 'min', 'max'}
        assert obj['error'] == 0

    def test_translucent_result(self):
        obj = json.loads(format_json(Color('rgba(0, 0, 0, 0.5)').contrast(WHITE)))
        assert obj['farthest'] == 'rgb(0, 0, 0)'
        assert obj['closest'] == 'rgb(255, 255, 255)'
        assert obj['min'] <= obj['ratio'] <= obj['max']
