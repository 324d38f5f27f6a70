"""Tests for reading and writing Android strings.xml files."""

import tempfile
from pathlib import Path

import pytest

from resbridge.config import FormatterConfig
from resbridge.errors import ResourceParseError
from resbridge.formatters import AndroidFormatter
from resbridge.store import Row, StringsStore

SAMPLE = '''<?xml version="1.0" encoding="utf-8"?>
<resources>
    <!-- General -->
    <string name="app_name">Test App</string>
    <string name="greeting">Hello %1$s, you have %2$d messages</string>
    <string name="quote">Don\\'t say \\"no\\"</string>
    <string name="symbols">R&amp;D &lt;3</string>
    <string name="empty"></string>
    <string name="swapped">%2$s by %1$s</string>
</resources>
'''


def make_store():
    """Create a store with two sections for writer tests."""
    store = StringsStore(language_codes=["en", "de"])
    general = store.add_section("General")
    store.add_row(general, Row(
        "app_name",
        comment="Application name",
        translations={"en": "Test App", "de": "Test-App"},
        tags={"android"},
    ))
    store.add_row(general, Row(
        "greeting",
        translations={"en": "Hello %@, you have %d messages"},
        tags={"android"},
    ))
    errors = store.add_section("Errors")
    store.add_row(errors, Row(
        "error_generic",
        comment="Shown when something -- anything -- fails",
        translations={"en": "It didn't work & that's <bad>"},
        tags={"ios"},
    ))
    return store


class TestReader:
    """Tests for reading strings.xml."""

    @pytest.fixture
    def formatter(self):
        return AndroidFormatter(StringsStore(language_codes=["en"], consume_all=True))

    def test_parse_entries(self, formatter):
        """Test entries are decoded in document order."""
        entries = formatter.parse(SAMPLE)
        assert [e.key for e in entries] == [
            "app_name", "greeting", "quote", "symbols", "empty", "swapped",
        ]
        values = {e.key: e.text for e in entries}
        assert values["app_name"] == "Test App"
        assert values["greeting"] == "Hello %@, you have %d messages"
        assert values["quote"] == 'Don\'t say "no"'
        assert values["symbols"] == "R&D <3"
        assert values["empty"] == ""
        assert values["swapped"] == "%2$@ by %1$@"

    def test_multiline_text(self, formatter):
        """Test newlines inside element text are removed."""
        entries = formatter.parse('<resources><string name="a">one\ntwo</string></resources>')
        assert entries[0].text == "onetwo"

    def test_other_elements_ignored(self, formatter):
        """Test non-string resources are skipped."""
        content = '''<resources>
            <plurals name="p"><item quantity="one">x</item></plurals>
            <string name="s">y</string>
        </resources>'''
        assert [e.key for e in formatter.parse(content)] == ["s"]

    def test_unnamed_string_ignored(self, formatter):
        """Test strings without a name are skipped."""
        content = '<resources><string>x</string><string name="b">y</string></resources>'
        assert [e.key for e in formatter.parse(content)] == ["b"]

    def test_wrong_root(self, formatter):
        """Test documents without a resources root have no entries."""
        assert formatter.parse('<other><string name="a">b</string></other>') == []

    def test_malformed(self, formatter):
        """Test malformed documents raise."""
        with pytest.raises(ResourceParseError):
            formatter.parse('<resources><string name="a">b</resources>')

    def test_read_into_store(self, formatter):
        """Test entries are stored for the given language."""
        count = formatter.read(SAMPLE, "de")
        assert count == 6
        assert formatter.store.get_translation("greeting", "de") == "Hello %@, you have %d messages"
        assert "de" in formatter.store.language_codes

    def test_read_counts_stored_entries(self):
        """Test only entries accepted by the store are counted."""
        store = StringsStore(language_codes=["en"])
        store.add_row(store.add_section("Main"), Row("app_name"))
        assert AndroidFormatter(store).read(SAMPLE, "de") == 1

    def test_read_file(self, formatter):
        """Test reading from disk."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "strings.xml"
            path.write_text(SAMPLE, encoding="utf-8")
            assert formatter.read_file(path, "en") == 6
        assert formatter.store.get_translation("symbols", "en") == "R&D <3"

    def test_malformed_file_stores_nothing(self, formatter):
        """Test a broken file does not partially update the store."""
        broken = '<resources><string name="a">first</string><string name="b">'
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "strings.xml"
            path.write_text(broken, encoding="utf-8")
            with pytest.raises(ResourceParseError) as excinfo:
                formatter.read_file(path, "en")
            assert excinfo.value.path == path
        assert formatter.store.get_translation("a", "en") is None

    def test_determine_language(self, formatter):
        """Test the base language comes from the store."""
        assert formatter.determine_language_given_path("res/values/strings.xml") == "en"
        assert formatter.determine_language_given_path("res/values-zh-rCN/strings.xml") == "zh-Hans"
        assert formatter.determine_language_given_path("res/raw/strings.xml") is None


class TestWriter:
    """Tests for writing strings.xml."""

    def test_header(self):
        """Test the fixed header."""
        output = AndroidFormatter(make_store()).format("en")
        lines = output.split("\n")
        assert lines[0] == '<?xml version="1.0" encoding="utf-8"?>'
        assert lines[1] == "<!-- Android Strings File -->"
        assert lines[2] == "<!-- Generated by resbridge -->"
        assert lines[3] == "<!-- Language: en -->"
        assert lines[4] == "<resources>"
        assert lines[5] == ""
        assert output.endswith("</resources>\n")

    def test_full_document(self):
        """Test sections, comments and escaping."""
        output = AndroidFormatter(make_store()).format("en")
        expected_body = (
            "<resources>\n"
            "\n"
            "\t<!-- General -->\n"
            "\t<!-- Application name -->\n"
            '\t<string name="app_name">Test App</string>\n'
            '\t<string name="greeting">Hello %1$s, you have %2$d messages</string>\n'
            "\n"
            "\t<!-- Errors -->\n"
            "\t<!-- Shown when something — anything — fails -->\n"
            '\t<string name="error_generic">It didn\\\'t work &amp; that\\\'s &lt;bad></string>\n'
            "</resources>\n"
        )
        assert output.endswith(expected_body)

    def test_untranslated_rows_omitted(self):
        """Test rows without a translation are left out."""
        output = AndroidFormatter(make_store()).format("de")
        assert '<string name="app_name">Test-App</string>' in output
        assert "greeting" not in output
        assert "error_generic" not in output

    def test_empty_section_has_no_header(self):
        """Test sections with nothing to write get no header."""
        output = AndroidFormatter(make_store()).format("de")
        assert "<!-- General -->" in output
        assert "<!-- Errors -->" not in output

    def test_include_untranslated(self):
        """Test base language fallback."""
        config = FormatterConfig(languages=["en", "de"], include_untranslated=True)
        output = AndroidFormatter(make_store(), config).format("de")
        assert '<string name="app_name">Test-App</string>' in output
        assert '<string name="greeting">Hello %1$s, you have %2$d messages</string>' in output

    def test_default_language_fallback(self):
        """Test zh-TW falls back to zh-Hant."""
        store = StringsStore(language_codes=["en"])
        section = store.add_section("")
        store.add_row(section, Row("hello", translations={"en": "Hello", "zh-Hant": "你好"}))
        store.add_row(section, Row("bye", translations={"en": "Bye"}))

        output = AndroidFormatter(store).format("zh-TW")
        assert '<string name="hello">你好</string>' in output
        assert "bye" not in output

    def test_unnamed_section(self):
        """Test sections without a name get only a blank line."""
        store = StringsStore(language_codes=["en"])
        store.add_row(store.add_section(""), Row("a", translations={"en": "A"}))
        output = AndroidFormatter(store).format("en")
        assert output.endswith('<resources>\n\n\t<string name="a">A</string>\n</resources>\n')

    def test_tag_filter(self):
        """Test only rows with requested tags are written."""
        config = FormatterConfig(languages=["en"], tags=["ios"])
        output = AndroidFormatter(make_store(), config).format("en")
        assert "error_generic" in output
        assert "app_name" not in output
        assert "<!-- General -->" not in output

    def test_tag_filter_untagged(self):
        """Test untagged rows are included on request."""
        store = make_store()
        store.add_row(store.sections[0], Row("plain", translations={"en": "Plain"}))
        config = FormatterConfig(languages=["en"], tags=["ios"], include_untagged=True)
        output = AndroidFormatter(store, config).format("en")
        assert "plain" in output
        assert "error_generic" in output
        assert "app_name" not in output

    def test_no_rows(self):
        """Test an empty store writes an empty resources element."""
        output = AndroidFormatter(StringsStore(language_codes=["en"])).format("en")
        assert output.endswith("<!-- Language: en -->\n<resources>\n</resources>\n")

    def test_key_is_escaped(self):
        """Test keys with XML special characters are written as valid XML."""
        store = StringsStore(language_codes=["en"])
        section = store.add_section("")
        store.add_row(section, Row("tom&jerry", translations={"en": "x"}))
        store.add_row(section, Row('say "<hi>"', translations={"en": "y"}))

        output = AndroidFormatter(store).format("en")
        assert '<string name="tom&amp;jerry">x</string>' in output

        reader = AndroidFormatter(StringsStore(language_codes=["en"], consume_all=True))
        entries = {e.key: e.text for e in reader.parse(output)}
        assert entries == {"tom&jerry": "x", 'say "<hi>"': "y"}

    def test_write_and_read_back(self):
        """Test a written file reads back to the same canonical text."""
        store = make_store()
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "strings.xml"
            AndroidFormatter(store).write_file(path, "en")

            reader = AndroidFormatter(StringsStore(language_codes=["en"], consume_all=True))
            entries = {e.key: e.text for e in reader.parse_file(path)}

        assert entries == {
            "app_name": "Test App",
            "greeting": "Hello %@, you have %d messages",
            "error_generic": "It didn't work & that's <bad>",
        }
