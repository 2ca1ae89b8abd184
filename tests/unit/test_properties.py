"""Unit tests for the .properties reader."""

import pytest

from releasesign.core.exceptions import PropertiesFormatError
from releasesign.properties import parse_properties, read_properties


class TestParseProperties:
    """Tests for the line grammar."""

    def test_key_properties_file(self):
        """Test a typical Flutter key.properties file."""
        text = (
            "storePassword=pw2\n"
            "keyPassword=pw1\n"
            "keyAlias=upload\n"
            "storeFile=/home/dev/upload-keystore.jks\n"
        )
        assert parse_properties(text) == {
            "storePassword": "pw2",
            "keyPassword": "pw1",
            "keyAlias": "upload",
            "storeFile": "/home/dev/upload-keystore.jks",
        }

    def test_separators(self):
        """Test '=', ':' and whitespace separators with surrounding blanks."""
        text = "a=1\nb:2\nc 3\nd = 4\ne\t:\t5\n"
        assert parse_properties(text) == {"a": "1", "b": "2", "c": "3", "d": "4", "e": "5"}

    def test_only_first_separator_splits(self):
        """Test that later separators belong to the value."""
        assert parse_properties("url=http://x:80/a=b") == {"url": "http://x:80/a=b"}
        assert parse_properties("key = =value") == {"key": "=value"}

    def test_comments_and_blank_lines(self):
        """Test that '#' and '!' comments and blank lines are skipped."""
        text = "# comment\n\n   ! also a comment\n  key=value\n"
        assert parse_properties(text) == {"key": "value"}

    def test_empty_value(self):
        """Test keys without values map to the empty string."""
        assert parse_properties("keyPassword=\nflag\n") == {"keyPassword": "", "flag": ""}

    def test_trailing_whitespace_kept(self):
        """Test that whitespace at the end of a value is significant."""
        assert parse_properties("keyPassword=pw  ") == {"keyPassword": "pw  "}

    def test_line_continuation(self):
        """Test backslash continuation drops leading whitespace of the next line."""
        text = "storeFile=/very/long/\\\n    path/upload.jks\n"
        assert parse_properties(text) == {"storeFile": "/very/long/path/upload.jks"}

    def test_even_backslashes_do_not_continue(self):
        """Test that an escaped backslash at line end is literal."""
        text = "dir=C:\\\\keys\\\\\nother=1\n"
        assert parse_properties(text) == {"dir": "C:\\keys\\", "other": "1"}

    def test_comment_lines_do_not_continue(self):
        """Test that a comment ending in a backslash does not swallow the next line."""
        assert parse_properties("# note \\\nkey=value") == {"key": "value"}

    def test_escapes(self):
        """Test character and unicode escapes."""
        text = "tab=a\\tb\nunicode=\\u00e9t\\u00e9\nplain=\\q\nkey\\=with\\:seps=v\n"
        assert parse_properties(text) == {
            "tab": "a\tb",
            "unicode": "été",
            "plain": "q",
            "key=with:seps": "v",
        }

    def test_escaped_space_in_key(self):
        """Test that an escaped space does not terminate the key."""
        assert parse_properties("my\\ key=v") == {"my key": "v"}

    def test_surrogate_pair_escape(self):
        """Test that UTF-16 surrogate escapes combine into one character."""
        assert parse_properties("emoji=\\ud83d\\ude00") == {"emoji": "\U0001F600"}

    def test_malformed_unicode_escape(self):
        """Test a truncated \\u escape reports its line number."""
        with pytest.raises(PropertiesFormatError) as exc_info:
            parse_properties("ok=1\nbad=\\u12", source="key.properties")
        assert exc_info.value.line_number == 2
        assert "key.properties:2" in str(exc_info.value)

    def test_duplicate_keys_last_wins(self):
        """Test that later definitions override earlier ones."""
        assert parse_properties("keyAlias=a\nkeyAlias=b\n") == {"keyAlias": "b"}

    def test_crlf_line_endings(self):
        """Test Windows line endings."""
        assert parse_properties("a=1\r\nb=2\r\n") == {"a": "1", "b": "2"}


class TestReadProperties:
    """Tests for reading files from disk."""

    def test_utf8_file(self, temp_dir):
        """Test reading a UTF-8 file with a byte order mark."""
        path = temp_dir / "key.properties"
        path.write_bytes("\ufeffkeyAlias=clé\n".encode("utf-8"))
        assert read_properties(path) == {"keyAlias": "clé"}

    def test_latin1_file(self, temp_dir):
        """Test falling back to ISO-8859-1 for non UTF-8 content."""
        path = temp_dir / "key.properties"
        path.write_bytes("keyAlias=clé\n".encode("iso-8859-1"))
        assert read_properties(path) == {"keyAlias": "clé"}

    def test_missing_file(self, temp_dir):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_properties(temp_dir / "absent.properties")
