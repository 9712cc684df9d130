"""
Tests for model response parsing.
"""

import json

import pytest

from notifyops.exceptions import ResponseParseError
from notifyops.models.summary import DEFAULT_CODE_CONTEXT, DEFAULT_SUGGESTED_FIX
from notifyops.summarization.response_parser import ResponseParser, strip_code_fence

from conftest import SUMMARY_JSON


@pytest.fixture
def parser():
    return ResponseParser()


class TestStripCodeFence:

    def test_json_fence(self):
        assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self):
        assert strip_code_fence('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_no_fence(self):
        assert strip_code_fence('  {"a": 1}  ') == '{"a": 1}'


class TestResponseParser:
    """Tests for ResponseParser.parse."""

    def test_full_document(self, parser):
        summary = parser.parse(json.dumps(SUMMARY_JSON))

        assert summary.title == "Login fails with SSO"
        assert summary.priority == "high"
        assert summary.category == "bug"
        assert summary.action_items == ("Reproduce with the staging IdP", "Add a regression test")
        assert summary.confidence == pytest.approx(0.85)
        assert summary.confidence_percent == 85

    def test_fenced_document(self, parser):
        summary = parser.parse("```json\n" + json.dumps(SUMMARY_JSON) + "\n```")
        assert summary.title == "Login fails with SSO"

    def test_defaults(self, parser):
        summary = parser.parse(json.dumps({"title": "T", "summary": "S"}))

        assert summary.priority == "medium"
        assert summary.category == "other"
        assert summary.action_items == ()
        assert summary.code_context == DEFAULT_CODE_CONTEXT
        assert summary.suggested_fix == DEFAULT_SUGGESTED_FIX
        assert summary.confidence == 0.5

    def test_zero_confidence_defaults(self, parser):
        summary = parser.parse(json.dumps({"title": "T", "summary": "S", "confidence": 0}))
        assert summary.confidence == 0.5

    @pytest.mark.parametrize("raw,expected", [(1.7, 1.0), (-0.2, 0.0), (0.3, 0.3)])
    def test_confidence_is_clamped(self, parser, raw, expected):
        summary = parser.parse(json.dumps({"title": "T", "summary": "S", "confidence": raw}))
        assert summary.confidence == pytest.approx(expected)

    def test_values_are_lowercased(self, parser):
        summary = parser.parse(json.dumps(
            {"title": "T", "summary": "S", "priority": "HIGH", "category": "Security"}
        ))
        assert summary.priority == "high"
        assert summary.category == "security"

    def test_unknown_category_is_kept(self, parser):
        summary = parser.parse(json.dumps({"title": "T", "summary": "S", "category": "question"}))
        assert summary.category == "question"

    def test_blank_action_items_dropped(self, parser):
        summary = parser.parse(json.dumps(
            {"title": "T", "summary": "S", "action_items": ["  do it ", "", "   "]}
        ))
        assert summary.action_items == ("do it",)

    @pytest.mark.parametrize("payload", [
        {"summary": "S"},
        {"title": "T"},
        {"title": "   ", "summary": "S"},
    ])
    def test_missing_required_fields(self, parser, payload):
        with pytest.raises(ResponseParseError):
            parser.parse(json.dumps(payload))

    @pytest.mark.parametrize("content", ["", "   ", "I could not analyze this issue.", "[1, 2]"])
    def test_not_a_summary(self, parser, content):
        with pytest.raises(ResponseParseError):
            parser.parse(content)
