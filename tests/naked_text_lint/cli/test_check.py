"""Tests for the check command."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from naked_text_lint.__main__ import app
from naked_text_lint.cli import CLIError, iter_source_files

runner = CliRunner()

_NAKED = "export const App = () => <View>Hello</View>;\n"
_CLEAN = "export const App = () => <View><Text>Hello</Text></View>;\n"


class TestIterSourceFiles:
    """Test expansion of command line paths."""

    def test_directories_are_searched_recursively(self, tmp_path: Path) -> None:
        """Test that supported files are found, skipping dependency and hidden dirs."""
        (tmp_path / "src" / "screens").mkdir(parents=True)
        (tmp_path / "node_modules" / "lib").mkdir(parents=True)
        (tmp_path / ".cache").mkdir()
        (tmp_path / "src" / "App.tsx").write_text(_CLEAN)
        (tmp_path / "src" / "screens" / "Home.jsx").write_text(_CLEAN)
        (tmp_path / "src" / "notes.md").write_text("# notes")
        (tmp_path / "node_modules" / "lib" / "index.js").write_text(_NAKED)
        (tmp_path / ".cache" / "Cached.tsx").write_text(_NAKED)

        files = list(iter_source_files([tmp_path]))

        assert files == [
            tmp_path / "src" / "App.tsx",
            tmp_path / "src" / "screens" / "Home.jsx",
        ]

    def test_explicit_files_are_always_included(self, tmp_path: Path) -> None:
        """Test that files named directly are yielded whatever their extension."""
        file_path = tmp_path / "component.txt"
        file_path.write_text(_NAKED)

        assert list(iter_source_files([file_path])) == [file_path]

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        """Test that a path that does not exist is an error."""
        with pytest.raises(CLIError, match="Path does not exist"):
            list(iter_source_files([tmp_path / "missing"]))


class TestCheckCommand:
    """Test running the check command."""

    def test_clean_files_exit_zero(self, tmp_path: Path) -> None:
        """Test that files without naked text pass."""
        (tmp_path / "App.tsx").write_text(_CLEAN)

        result = runner.invoke(app, ["check", str(tmp_path)])

        assert result.exit_code == 0
        assert "No naked text found in 1 file(s)" in result.stdout

    def test_naked_text_exits_one(self, tmp_path: Path) -> None:
        """Test that naked text fails the check and is summarised."""
        (tmp_path / "App.tsx").write_text(_NAKED)
        (tmp_path / "Other.tsx").write_text(_CLEAN)

        result = runner.invoke(app, ["check", str(tmp_path)])

        assert result.exit_code == 1
        assert "1 naked text(s) found in 2 file(s)" in result.stdout

    def test_script_kind_option_overrides_detection(self, tmp_path: Path) -> None:
        """Test that --script-kind parses files with unknown extensions."""
        file_path = tmp_path / "component.txt"
        file_path.write_text(_NAKED)

        result = runner.invoke(app, ["check", str(file_path), "--script-kind", "jsx"])

        assert result.exit_code == 1
        assert "1 naked text(s) found" in result.stdout

    def test_undetectable_extension_fails(self, tmp_path: Path) -> None:
        """Test that files without a detectable script kind fail the command."""
        file_path = tmp_path / "component.txt"
        file_path.write_text(_NAKED)

        result = runner.invoke(app, ["check", str(file_path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_missing_path_is_reported(self, tmp_path: Path) -> None:
        """Test that a missing path is shown in the error output."""
        result = runner.invoke(app, ["check", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Path does not exist" in result.output

    def test_parser_errors_name_their_type(self, tmp_path: Path) -> None:
        """Test that unexpected errors are shown with their exception type."""
        file_path = tmp_path / "component.txt"
        file_path.write_text(_NAKED)

        result = runner.invoke(app, ["check", str(file_path)])

        assert result.exit_code == 1
        assert "UnsupportedScriptKindError" in result.output

    def test_config_file_changes_exempt_tags(self, tmp_path: Path) -> None:
        """Test that a configuration file can exempt additional components."""
        (tmp_path / "App.tsx").write_text(_NAKED)
        config_path = tmp_path / "naked-text.yaml"
        config_path.write_text("text_components: [Text, View]\n")

        result = runner.invoke(
            app, ["check", str(tmp_path / "App.tsx"), "--config", str(config_path)]
        )

        assert result.exit_code == 0

    def test_invalid_config_file_fails(self, tmp_path: Path) -> None:
        """Test that an invalid configuration file fails the command."""
        (tmp_path / "App.tsx").write_text(_CLEAN)
        config_path = tmp_path / "naked-text.yaml"
        config_path.write_text("text_components: []\n")

        result = runner.invoke(
            app, ["check", str(tmp_path / "App.tsx"), "--config", str(config_path)]
        )

        assert result.exit_code == 1
