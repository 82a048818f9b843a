#!/usr/bin/env python3
"""
install-llvm CI Toolkit
Talks to the CI runner: log lines, PATH and environment exports, failure signal

Follows the GitHub Actions runner protocol. When the runner provides file
commands (GITHUB_PATH / GITHUB_ENV) they are used. Otherwise the legacy
workflow command is printed with a warning: GitHub runners have ignored
::add-path:: and ::set-env:: since 2020, so it only reaches older or
non-GitHub runners that still parse it.
"""

import os
import uuid
from typing import MutableMapping, Optional
from rich.console import Console


def escape_data(value: str) -> str:
    """Escape a workflow command message"""
    return value.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


def escape_property(value: str) -> str:
    """Escape a workflow command property value"""
    return escape_data(value).replace(':', '%3A').replace(',', '%2C')


class ActionsToolkit:
    """
    Side effects visible to the CI system and to later build steps
    """

    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self.environ = os.environ if environ is None else environ
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(stderr=True)
        self.failed = False
        self.failure_message: Optional[str] = None

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    # Logging

    def issue_command(self, command: str, message: str = '', **properties: str) -> None:
        """Print a `::command key=value::message` line"""
        line = f"::{command}"
        if properties:
            line += ' ' + ','.join(
                f"{key}={escape_property(str(value))}" for key, value in properties.items()
            )
        line += f"::{escape_data(message)}"
        self.console.out(line, highlight=False)

    def info(self, message: str) -> None:
        self.console.out(message, highlight=False)

    def debug(self, message: str) -> None:
        self.issue_command('debug', message)

    def warning(self, message: str) -> None:
        self.issue_command('warning', message)

    def error(self, message: str) -> None:
        self.issue_command('error', message)

    def print_exception(self) -> None:
        """Dump the active exception's traceback to stderr"""
        self.err_console.print_exception()

    # Environment for later steps

    def _append_file_command(self, variable: str, text: str) -> bool:
        path = self.environ.get(variable)
        if not path:
            return False
        with open(path, 'a', encoding='utf-8') as f:
            f.write(text)
        return True

    def _warn_legacy(self, variable: str, command: str) -> None:
        self.warning(
            f"{variable} is not set; falling back to the ::{command}:: workflow command, "
            "which current GitHub runners ignore"
        )

    def add_path(self, directory: str) -> None:
        """Put a directory in front of PATH for this process and later steps"""
        directory = str(directory)
        if not self._append_file_command('GITHUB_PATH', f"{directory}\n"):
            self._warn_legacy('GITHUB_PATH', 'add-path')
            self.issue_command('add-path', directory)

        current = self.environ.get('PATH', '')
        self.environ['PATH'] = f"{directory}{os.pathsep}{current}" if current else directory

    def export_variable(self, name: str, value: str) -> None:
        """Set an environment variable for this process and later steps"""
        value = str(value)
        self.environ[name] = value

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name or delimiter in value:
            raise ValueError(f"Unexpected input: value of '{name}' contains the delimiter")
        if not self._append_file_command(
            'GITHUB_ENV', f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
        ):
            self._warn_legacy('GITHUB_ENV', 'set-env')
            self.issue_command('set-env', value, name=name)

    # Outcome

    def set_failed(self, message: str) -> None:
        """Mark the CI step as failed"""
        self.failed = True
        self.failure_message = message
        self.error(message)
