"""Tests for version-stamp normalization and change detection."""

import pytest

from apibuilder_sync.codegen.detect import differs
from apibuilder_sync.codegen.normalize import is_ignored_line, normalize

SCALA_CLIENT = """\
/**
 * Generated by API Builder - https://www.apibuilder.io
 * Service version: 1.2.3
 * apibuilder 0.15.11 app.apibuilder.io/acme/api/1.2.3/play_2_8_client
 */
package acme.api.v0

object Constants {
  val Namespace = "acme.api.v0"
  val UserAgent = "apibuilder 0.15.11 app.apibuilder.io/acme/api/1.2.3/play_2_8_client"
  val Version = "1.2.3"
  val VersionMajor = 1
}
"""


class TestIgnoredLines:
    @pytest.mark.parametrize("line", [
        "# Service version: 1.0.0",
        "// Service version: 0.1.0",
        " * Service version: 2.3.4",
        "-- service version: 1.0.0",
        "# apibuilder 0.14.96 app.apibuilder.io/acme/api/latest/play_2_x_routes",
        "// apibuilder:0.15.0 app.apibuilder.io/acme/api/1.0.0/go_1_5_client",
        'val UserAgent = "apibuilder 0.15.11"',
        "  USER_AGENT = 'apibuilder 0.15.11'",
        'const UserAgent = "apibuilder 0.15.11"',
        'export const USER_AGENT: string = "apibuilder";',
        'private[this] val DefaultUserAgent = "apibuilder"',
        'VERSION = "1.2.3"',
        'val Version = "1.2.3"',
        'API_VERSION = "1.2.3"',
        'public static final String VERSION = "1.2.3";',
    ])
    def test_version_metadata_is_ignored(self, line):
        assert is_ignored_line(line)

    @pytest.mark.parametrize("line", [
        "object Models",
        "# Generated by API Builder - https://www.apibuilder.io",
        'val version = "1.2.3"',
        "val VersionMajor = 1",
        "def userAgent(): String",
        "GET /users controllers.Users.get()",
        "",
    ])
    def test_code_lines_are_kept(self, line):
        assert not is_ignored_line(line)


class TestNormalize:
    def test_blanks_version_lines(self):
        text = "# Service version: 1.0.0\ncode\nmore code"
        assert normalize(text) == "code\nmore code"

    def test_trims_result(self):
        assert normalize("\n\n  code  \n\n") == "code"

    def test_keeps_blank_line_positions_inside(self):
        text = "a\n// Service version: 1.0.0\nb"
        assert normalize(text) == "a\n\nb"

    def test_scala_client_keeps_only_code(self):
        result = normalize(SCALA_CLIENT)
        assert "Service version" not in result
        assert "UserAgent" not in result
        assert 'val Version = "1.2.3"' not in result
        assert "val VersionMajor = 1" in result
        assert "package acme.api.v0" in result

    def test_handles_crlf(self):
        assert normalize("# Service version: 1.0.0\r\ncode\r\n") == "code"

    @pytest.mark.parametrize("text", [
        "",
        "code",
        "# Service version: 1.0.0\ncode",
        "   leading\n\n# apibuilder 0.1.0 x\ntrailing   \n",
        SCALA_CLIENT,
    ])
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once


class TestDiffers:
    def test_identical_is_not_different(self):
        assert differs("object Models", "object Models") is False
        assert differs(SCALA_CLIENT, SCALA_CLIENT) is False

    def test_whitespace_at_edges_is_not_different(self):
        assert differs("object Models\n", "\n  object Models") is False

    def test_version_stamp_only_change(self):
        a = "# service version: 1.0.0\ncode"
        b = "# service version: 1.0.1\ncode"
        assert differs(a, b) is False

    def test_user_agent_only_change(self):
        a = SCALA_CLIENT
        b = SCALA_CLIENT.replace("0.15.11", "0.16.0").replace("1.2.3", "1.2.4")
        assert differs(a, b) is False

    def test_both_empty(self):
        assert differs("", "") is False

    def test_new_file_is_changed(self):
        assert differs("code", "") is True

    def test_new_empty_file_is_unchanged(self):
        assert differs("  \n", "") is False

    def test_code_change_is_detected(self):
        a = "# service version: 1.0.0\nobject Models { val a = 1 }"
        b = "# service version: 1.0.0\nobject Models { val a = 2 }"
        assert differs(a, b) is True

    def test_code_and_version_change_is_detected(self):
        assert differs("# Service version: 2.0.0\nnew", "# Service version: 1.0.0\nold") is True
