"""
Tests for the session loop and entry point.
"""

import os

import pytest

from file_manager.cli import main, parse_username, run_session
from file_manager.container import DependencyContainer


def scripted_input(lines):
    """read_line replacement: returns each line, then signals end of input."""
    pending = list(lines)
    prompts = []

    def _read_line(prompt: str) -> str:
        prompts.append(prompt)
        if not pending:
            raise EOFError
        return pending.pop(0)

    _read_line.prompts = prompts  # type: ignore[attr-defined]
    return _read_line


class TestParseUsername:
    @pytest.mark.parametrize(
        "argv, expected",
        [
            (["--username=alice"], "alice"),
            (["--username", "bob"], "Anonymous"),
            (["--username=a=b"], "a=b"),
            ([], "Anonymous"),
            (["--username="], "Anonymous"),
            (["--username"], "Anonymous"),
            (["--verbose", "extra", "--username=carol"], "carol"),
            (["--user=dave"], "Anonymous"),
            (["-h", "--username=bob"], "bob"),
            (["--help"], "Anonymous"),
            (["--username=first", "--username=second"], "first"),
        ],
    )
    def test_parse_username(self, argv, expected):
        assert parse_username(argv) == expected


class TestRunSession:
    """Test cases for the REPL loop."""

    def test_greeting_location_and_farewell_on_eof(
        self, dependency_container, session, read_output, temp_directory
    ):
        status = run_session(
            session,
            dependency_container.get_command_dispatcher(),
            dependency_container.get_console_view(),
            read_line=scripted_input([]),
        )

        lines = read_output().splitlines()
        assert status == 0
        assert lines[0] == "Welcome to the File Manager, tester!"
        assert lines[1] == f"You are currently in {temp_directory}"
        assert lines[-1] == "Thank you for using File Manager, tester, goodbye!"
        assert not session.running

    def test_location_echo_after_every_line(
        self, dependency_container, session, read_output, temp_directory
    ):
        reader = scripted_input(["foobar", "", "cd subdir", "cd missing", "up"])

        run_session(
            session,
            dependency_container.get_command_dispatcher(),
            dependency_container.get_console_view(),
            read_line=reader,
        )

        lines = read_output().splitlines()
        subdir = os.path.join(temp_directory, "subdir")
        assert lines[2:10] == [
            "Invalid input",
            f"You are currently in {temp_directory}",
            f"You are currently in {temp_directory}",
            f"You are currently in {subdir}",
            "Operation failed",
            f"You are currently in {subdir}",
            f"You are currently in {temp_directory}",
            "",
        ]
        assert reader.prompts[0] == "> "

    def test_exit_command_stops_reading(self, dependency_container, session, read_output):
        reader = scripted_input([".exit", "ls"])

        status = run_session(
            session,
            dependency_container.get_command_dispatcher(),
            dependency_container.get_console_view(),
            read_line=reader,
        )

        lines = read_output().splitlines()
        assert status == 0
        assert len(reader.prompts) == 1
        # greeting, initial location, farewell: no echo after .exit
        assert len(lines) == 3
        assert lines[-1] == "Thank you for using File Manager, tester, goodbye!"
        assert "Name" not in read_output()

    def test_keyboard_interrupt_at_prompt_exits(self, dependency_container, session):
        def interrupted(prompt: str) -> str:
            raise KeyboardInterrupt

        status = run_session(
            session,
            dependency_container.get_command_dispatcher(),
            dependency_container.get_console_view(),
            read_line=interrupted,
        )

        assert status == 0

    def test_cat_without_trailing_newline_keeps_echo_on_own_line(
        self, dependency_container, session, read_output, temp_directory
    ):
        run_session(
            session,
            dependency_container.get_command_dispatcher(),
            dependency_container.get_console_view(),
            read_line=scripted_input(["cat test1.txt"]),
        )

        assert "This is a test file.\nYou are currently in" in read_output()


class TestMain:
    def test_main_starts_in_home_directory(
        self, monkeypatch, settings, recording_console, read_output, temp_directory
    ):
        monkeypatch.setenv("HOME", temp_directory)
        deps = DependencyContainer(settings=settings, console=recording_console)

        status = main(
            ["--username=zoe"], deps=deps, read_line=scripted_input(["ls", ".exit"])
        )

        output = read_output()
        assert status == 0
        assert "Welcome to the File Manager, zoe!" in output
        assert f"You are currently in {temp_directory}" in output
        assert "test1.txt" in output
        assert output.rstrip().endswith("Thank you for using File Manager, zoe, goodbye!")

    def test_main_reports_configuration_error(self, monkeypatch, capsys):
        monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", "lots")

        status = main([], deps=DependencyContainer(), read_line=scripted_input([]))

        assert status == 2
        assert "FILE_MANAGER_CHUNK_SIZE" in capsys.readouterr().err

    def test_main_ignores_help_flag(
        self, monkeypatch, settings, recording_console, read_output, temp_directory
    ):
        monkeypatch.setenv("HOME", temp_directory)
        deps = DependencyContainer(settings=settings, console=recording_console)

        status = main(["-h", "--username=bob"], deps=deps, read_line=scripted_input([]))

        assert status == 0
        assert read_output().startswith("Welcome to the File Manager, bob!")
