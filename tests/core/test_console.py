"""Tests for operator console output."""

from playorder.core.console import get_console, print_error, safe_print


class TestConsole:
    """Tests for the shared consoles."""

    def test_consoles_are_shared(self) -> None:
        assert get_console() is get_console()
        assert get_console(stderr=True) is get_console(stderr=True)
        assert get_console() is not get_console(stderr=True)

    def test_safe_print_to_stdout(self, capsys) -> None:
        safe_print("Playing: /m/[live] a.mp3")
        captured = capsys.readouterr()
        assert "Playing: /m/[live] a.mp3" in captured.out
        assert captured.err == ""

    def test_print_error_to_stderr(self, capsys) -> None:
        print_error("Error: no files")
        captured = capsys.readouterr()
        assert "Error: no files" in captured.err
        assert captured.out == ""
