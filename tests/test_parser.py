"""Tests for ResourceDocumentParser.

Covers the line scanner, comment attachment rules (including the
same-line quirk), value decoding and tolerance of malformed documents.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hypothesis import given

from droidstrings.android.parser import ResourceDocumentParser
from droidstrings.android.values import build_decoder, encode_value
from droidstrings.model import ParsedEntry, StringsCatalog
from tests.strategies import plain_values, resource_keys

if TYPE_CHECKING:
    import pytest

    from tests.conftest import RecordingSink


def _document(*body_lines: str) -> str:
    body = "\n".join(f"\t{line}" for line in body_lines)
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<!-- Android Strings File -->\n"
        f"<resources>\n{body}\n</resources>\n"
    )


def _parse(text: str, language: str = "en") -> tuple[tuple[ParsedEntry, ...], StringsCatalog]:
    catalog = StringsCatalog()
    entries = ResourceDocumentParser().parse(text, language, catalog)
    return entries, catalog


# ============================================================================
# ENTRY EXTRACTION
# ============================================================================


class TestEntries:
    """Key/value extraction."""

    def test_single_entry(self) -> None:
        entries, catalog = _parse(_document('<string name="save">Save</string>'))

        assert entries == (ParsedEntry("save", "Save"),)
        assert catalog.translation_for("save", "en") == "Save"

    def test_language_passed_through(self) -> None:
        _, catalog = _parse(_document('<string name="save">Enregistrer</string>'), "fr")

        assert catalog.translation_for("save", "fr") == "Enregistrer"
        assert catalog.translation_for("save", "en") is None

    def test_document_order(self) -> None:
        entries, _ = _parse(_document(
            '<string name="b">B</string>',
            '<string name="a">A</string>',
            '<string name="c_3">C</string>',
        ))

        assert [entry.key for entry in entries] == ["b", "a", "c_3"]

    def test_value_decoded(self) -> None:
        entries, _ = _parse(_document(
            '<string name="title">Tom &amp; Jerry\\\'s \\"show\\" %1$s \\@home</string>'
        ))

        assert entries[0].value == 'Tom & Jerry\'s "show" %1$@ @home'

    def test_escaped_spaces_decoded(self) -> None:
        entries, _ = _parse(_document('<string name="pad">\\u0020\\u0020x</string>'))

        assert entries[0].value == "  x"

    def test_empty_value(self) -> None:
        entries, _ = _parse(_document('<string name="empty"></string>'))

        assert entries == (ParsedEntry("empty", ""),)

    def test_multi_line_value_yields_empty_string(self) -> None:
        entries, catalog = _parse(_document(
            '<string name="long">First line',
            "second line</string>",
            '<string name="next">Next</string>',
        ))

        assert entries[0] == ParsedEntry("long", "")
        assert catalog.translation_for("long", "en") == ""
        assert catalog.translation_for("next", "en") == "Next"

    def test_duplicate_keys_overwrite(self) -> None:
        entries, catalog = _parse(_document(
            '<string name="dup">First</string>',
            '<string name="dup">Second</string>',
        ))

        assert len(entries) == 2
        assert catalog.translation_for("dup", "en") == "Second"
        assert catalog.keys == ("dup",)

    def test_non_identifier_key_ignored(self) -> None:
        entries, _ = _parse(_document('<string name="not-valid">Nope</string>'))

        assert entries == ()

    def test_non_ascii_key_ignored(self) -> None:
        entries, catalog = _parse(_document(
            '<string name="café">Coffee</string>',
            '<string name="cafe">Coffee</string>',
        ))

        assert [entry.key for entry in entries] == ["cafe"]
        assert catalog.keys == ("cafe",)

    def test_other_elements_ignored(self) -> None:
        entries, _ = _parse(_document(
            '<plurals name="items"><item quantity="one">One</item></plurals>',
            '<string-array name="colors"><item>Red</item></string-array>',
            '<string name="ok">OK</string>',
        ))

        assert [entry.key for entry in entries] == ["ok"]

    def test_crlf_line_endings(self) -> None:
        text = (
            "<resources>\r\n"
            "\t<!-- Greeting -->\r\n"
            '\t<string name="hello">Hello</string>\r\n'
            "</resources>\r\n"
        )
        entries, _ = _parse(text)

        assert entries == (ParsedEntry("hello", "Hello", "Greeting"),)

    def test_resources_attributes_accepted(self) -> None:
        text = (
            '<resources xmlns:tools="http://schemas.android.com/tools">\n'
            '\t<string name="a">A</string>\n'
            "</resources>"
        )
        entries, _ = _parse(text)

        assert entries == (ParsedEntry("a", "A"),)

    def test_content_after_closing_tag_on_key_line(self) -> None:
        """Value regex is greedy up to the last </string> on the line."""
        entries, _ = _parse(_document('<string name="a">A</string> trailing'))

        assert entries[0].value == "A"


# ============================================================================
# COMMENTS
# ============================================================================


class TestComments:
    """Pending comment handling."""

    def test_section_header_not_attached(self) -> None:
        entries, catalog = _parse(_document(
            "<!-- SECTION: Buttons -->",
            "<!-- Save button label -->",
            '<string name="save">Save</string>',
        ))

        assert entries == (ParsedEntry("save", "Save", "Save button label"),)
        assert catalog.comment_for("save") == "Save button label"

    def test_section_header_alone_is_discarded(self) -> None:
        entries, catalog = _parse(_document(
            "<!-- SECTION: Buttons -->",
            '<string name="save">Save</string>',
        ))

        assert entries[0].comment is None
        assert catalog.comment_for("save") is None

    def test_comment_consumed_by_first_key_only(self) -> None:
        _, catalog = _parse(_document(
            "<!-- Only for a -->",
            '<string name="a">A</string>',
            '<string name="b">B</string>',
        ))

        assert catalog.comment_for("a") == "Only for a"
        assert catalog.comment_for("b") is None

    def test_later_comment_overwrites_pending(self) -> None:
        _, catalog = _parse(_document(
            "<!-- stale -->",
            "<!-- fresh -->",
            '<string name="a">A</string>',
        ))

        assert catalog.comment_for("a") == "fresh"

    def test_same_line_comment_attaches_to_next_key(self) -> None:
        _, catalog = _parse(_document(
            '<string name="a">A</string> <!-- about b -->',
            '<string name="b">B</string>',
        ))

        assert catalog.comment_for("a") is None
        assert catalog.comment_for("b") == "about b"

    def test_empty_comment_not_attached(self) -> None:
        entries, _ = _parse(_document("<!--  -->", '<string name="a">A</string>'))

        assert entries[0].comment is None

    def test_trailing_comment_dropped(self, recording_sink: RecordingSink) -> None:
        ResourceDocumentParser().parse(
            _document('<string name="a">A</string>', "<!-- dangling -->"), "en", recording_sink
        )

        assert recording_sink.calls == [("value", "a", "en", "A")]

    def test_sink_call_order(self, recording_sink: RecordingSink) -> None:
        ResourceDocumentParser().parse(
            _document("<!-- note -->", '<string name="a">A</string>'), "de", recording_sink
        )

        assert recording_sink.calls == [
            ("value", "a", "de", "A"),
            ("comment", "a", "note"),
        ]


# ============================================================================
# MALFORMED INPUT
# ============================================================================


class TestMalformedInput:
    """Nothing found is not an error."""

    def test_no_resources_element(
        self, recording_sink: RecordingSink, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="droidstrings.android.parser"):
            entries = ResourceDocumentParser().parse(
                '<string name="a">A</string>', "en", recording_sink
            )

        assert entries == ()
        assert recording_sink.calls == []
        assert "No <resources> element" in caplog.text

    def test_unclosed_resources_element(self, recording_sink: RecordingSink) -> None:
        entries = ResourceDocumentParser().parse(
            '<resources>\n<string name="a">A</string>\n', "en", recording_sink
        )

        assert entries == ()

    def test_empty_text(self, recording_sink: RecordingSink) -> None:
        assert ResourceDocumentParser().parse("", "en", recording_sink) == ()

    def test_empty_resources(self) -> None:
        entries, _ = _parse("<resources></resources>")

        assert entries == ()

    def test_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="droidstrings.android.parser"):
            _parse(_document('<string name="a">A</string>'), "fr")

        assert "Parsed 1 fr strings" in caplog.text


# ============================================================================
# CONFIGURATION
# ============================================================================


class TestCustomDecoder:
    """The decoder chain is injectable."""

    def test_custom_placeholder_converter(self) -> None:
        class Braces:
            def to_canonical(self, value: str) -> str:
                return value.replace("%s", "{}")

            def to_platform(self, value: str) -> str:
                return value.replace("{}", "%s")

        parser = ResourceDocumentParser(build_decoder(Braces()))
        catalog = StringsCatalog()
        parser.parse(_document('<string name="a">Hi %s</string>'), "en", catalog)

        assert catalog.translation_for("a", "en") == "Hi {}"


class TestProperties:
    """Generated single-entry documents."""

    @given(resource_keys(), plain_values())
    def test_encoded_value_extracted(self, key: str, value: str) -> None:
        """A value written with encode_value is read back unchanged."""
        entries, _ = _parse(_document(f'<string name="{key}">{encode_value(value)}</string>'))

        assert entries == (ParsedEntry(key, value),)
