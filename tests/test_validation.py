# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the justhtml based validator."""

from types import SimpleNamespace

import pytest

from genro_html import InvalidHtmlError, JustHtmlValidator, Problem, validate
from genro_html import validation
from genro_html.validation import MISSING_DOCTYPE_CODES


def _error(code, message=None, line=1, column=1):
    return SimpleNamespace(code=code, message=message, line=line, column=column)


@pytest.fixture
def fake_parser(monkeypatch):
    """Replace JustHTML with a stub returning preset errors."""
    state = SimpleNamespace(errors=[], calls=[])

    def fake_justhtml(html, collect_errors=False):
        state.calls.append((html, collect_errors))
        return SimpleNamespace(errors=state.errors)

    monkeypatch.setattr(validation, 'JustHTML', fake_justhtml)
    return state


class TestJustHtmlValidator:
    """Tests for JustHtmlValidator with a stubbed parser."""

    def test_no_errors(self, fake_parser):
        """Test clean HTML passes and errors are collected."""
        JustHtmlValidator().validate('<p>x</p>')
        assert fake_parser.calls == [('<p>x</p>', True)]

    def test_missing_doctype_ignored(self, fake_parser):
        """Test the missing doctype problem never fails validation."""
        fake_parser.errors = [_error('expected-doctype-but-got-start-tag')]
        JustHtmlValidator().validate('<p>x</p>')

    def test_first_problem_reported(self, fake_parser):
        """Test the error carries the first problem and the count."""
        fake_parser.errors = [
            _error('expected-doctype-but-got-start-tag'),
            _error('unexpected-end-tag', 'Unexpected </img> end tag', line=1, column=20),
            _error('eof-in-tag'),
        ]
        with pytest.raises(InvalidHtmlError) as exc_info:
            JustHtmlValidator().validate('<img></img>')

        error = exc_info.value
        assert error.count == 2
        assert error.code == 'unexpected-end-tag'
        assert error.severity == 'error'
        assert error.first == Problem(
            'error', 'unexpected-end-tag', 'Unexpected </img> end tag', 1, 20
        )
        assert 'Found 2 problem(s)' in str(error)
        assert '[severity:error/code:unexpected-end-tag]' in str(error)

    def test_message_defaults_to_code(self, fake_parser):
        """Test problems without a message use their code."""
        fake_parser.errors = [_error('eof-in-tag')]
        with pytest.raises(InvalidHtmlError) as exc_info:
            JustHtmlValidator().validate('<p')
        assert exc_info.value.first.message == 'eof-in-tag'

    def test_custom_ignored_codes(self, fake_parser):
        """Test nothing is ignored with an empty ignore list."""
        fake_parser.errors = [_error('expected-doctype-but-got-chars')]
        with pytest.raises(InvalidHtmlError) as exc_info:
            JustHtmlValidator(ignored_codes=()).validate('text')
        assert exc_info.value.severity == 'warning'

    def test_empty_html_parsed_as_break(self, fake_parser):
        """Test an empty document is still parsed."""
        JustHtmlValidator().validate('')
        assert fake_parser.calls[0][0] == '<br>'

    def test_problems(self, fake_parser):
        """Test problems() returns the filtered list without raising."""
        fake_parser.errors = [
            _error('expected-doctype-but-got-eof'),
            _error('unexpected-null-character'),
        ]
        problems = JustHtmlValidator().problems('\x00')
        assert [p.code for p in problems] == ['unexpected-null-character']

    def test_default_ignored_codes(self):
        """Test the default policy ignores the missing doctype codes."""
        assert JustHtmlValidator().ignored_codes == MISSING_DOCTYPE_CODES
        assert 'expected-doctype-but-got-start-tag' in MISSING_DOCTYPE_CODES


class TestValidateWithParser:
    """Tests running the real justhtml parser."""

    def test_fragment_without_doctype(self):
        """Test a well formed fragment passes."""
        validate('<div>\n    <p>Hello</p>\n</div>')

    def test_document(self):
        """Test a complete document passes."""
        validate(
            '<!DOCTYPE html>\n<html>\n<head>\n    <title>T</title>\n</head>\n'
            '<body>\n    <p>Hello</p>\n</body>\n</html>'
        )

    def test_stray_end_tag(self):
        """Test an end tag for a void element is rejected."""
        with pytest.raises(InvalidHtmlError, match="HTML is invalid"):
            validate('<img src="https://example.com/a.png"></img>')
