import io
from importlib import metadata
from unittest.mock import patch

from cargo_rpl.help_text import color_enabled, help_message, show_help, version_info


class TestHelpMessage:
    def test_plain(self):
        text = help_message(color=False)
        assert text.startswith("Checks a package to catch common mistakes")
        assert "\x1b[" not in text
        assert "cargo rpl [OPTIONS] [--] [<ARGS>...]" in text
        assert "--explain [LINT]" in text

    def test_lint_level_table(self):
        lines = help_message(color=False).splitlines()
        assert "    -W / --warn [LINT]       Set lint warnings" in lines
        assert "    -A / --allow [LINT]      Set lint allowed" in lines
        assert "    -D / --deny [LINT]       Set lint denied" in lines
        assert "    -F / --forbid [LINT]     Set lint forbidden" in lines

    def test_colored(self):
        text = help_message(color=True)
        assert "\x1b[1;32mUsage\x1b[0m:" in text
        assert "\x1b[1;36m--no-deps\x1b[0m" in text

    def test_show_help_prints(self, capsys, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        show_help()
        out = capsys.readouterr().out
        assert "Manifest Options:" in out


class TestColorEnabled:
    def test_not_a_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert color_enabled(io.StringIO()) is False

    def test_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        stream = io.StringIO()
        stream.isatty = lambda: True
        assert color_enabled(stream) is True

    def test_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        stream = io.StringIO()
        stream.isatty = lambda: True
        assert color_enabled(stream) is False


class TestVersionInfo:
    @patch("importlib.metadata.version")
    def test_without_git_info(self, mock_version, monkeypatch):
        mock_version.return_value = "0.1.0"
        monkeypatch.delenv("GIT_HASH", raising=False)
        monkeypatch.delenv("COMMIT_DATE", raising=False)
        assert version_info() == "rpl 0.1.0"

    @patch("importlib.metadata.version")
    def test_with_git_info(self, mock_version, monkeypatch):
        mock_version.return_value = "0.1.0"
        monkeypatch.setenv("GIT_HASH", "abc1234")
        monkeypatch.setenv("COMMIT_DATE", "2024-05-01")
        assert version_info() == "rpl 0.1.0 (abc1234 2024-05-01)"

    @patch("importlib.metadata.version")
    def test_not_installed(self, mock_version, monkeypatch):
        mock_version.side_effect = metadata.PackageNotFoundError("cargo-rpl")
        monkeypatch.delenv("GIT_HASH", raising=False)
        assert version_info() == "rpl 0.0.0"
