"""
Tests for the CI toolkit: file commands, workflow commands, failure state
"""
import io
import os
from pathlib import Path

import pytest
from rich.console import Console

from install_llvm.core.actions import ActionsToolkit, escape_data, escape_property


@pytest.fixture
def bare_toolkit():
    """Toolkit on a runner without file commands"""
    return ActionsToolkit(
        environ={'PATH': '/usr/bin'},
        console=Console(file=io.StringIO(), highlight=False, soft_wrap=True),
        err_console=Console(file=io.StringIO()),
    )


class TestEscaping:

    def test_data(self):
        assert escape_data('50% done\r\nnext') == '50%25 done%0D%0Anext'

    def test_property(self):
        assert escape_property('a:b,c') == 'a%3Ab%2Cc'


class TestAddPath:

    def test_prepends_to_process_path(self, toolkit, environ):
        toolkit.add_path('/opt/llvm/bin')

        assert environ['PATH'] == f'/opt/llvm/bin{os.pathsep}/usr/bin'

    def test_appends_to_github_path(self, toolkit, environ):
        toolkit.add_path('/opt/llvm/bin')
        toolkit.add_path('/opt/other/bin')

        assert Path(environ['GITHUB_PATH']).read_text() == '/opt/llvm/bin\n/opt/other/bin\n'

    def test_workflow_command_without_file(self, bare_toolkit, stdout_of):
        bare_toolkit.add_path('/opt/llvm/bin')

        assert '::add-path::/opt/llvm/bin' in stdout_of(bare_toolkit)

    def test_missing_file_command_warns(self, bare_toolkit, stdout_of, toolkit):
        bare_toolkit.add_path('/opt/llvm/bin')
        toolkit.add_path('/opt/llvm/bin')

        assert stdout_of(bare_toolkit).startswith('::warning::GITHUB_PATH is not set')
        assert '::warning::' not in stdout_of(toolkit)

    def test_empty_path(self, bare_toolkit):
        bare_toolkit.environ.pop('PATH')
        bare_toolkit.add_path('/opt/llvm/bin')

        assert bare_toolkit.environ['PATH'] == '/opt/llvm/bin'


class TestExportVariable:

    def test_sets_process_variable(self, toolkit, environ):
        toolkit.export_variable('LIBCLANG_PATH', 'C:\\llvm\\bin')

        assert environ['LIBCLANG_PATH'] == 'C:\\llvm\\bin'

    def test_heredoc_in_github_env(self, toolkit, environ):
        toolkit.export_variable('LIBCLANG_PATH', 'C:\\llvm\\bin')

        name_line, value_line, end_line = Path(environ['GITHUB_ENV']).read_text().splitlines()
        name, delimiter = name_line.split('<<')
        assert name == 'LIBCLANG_PATH'
        assert delimiter.startswith('ghadelimiter_')
        assert value_line == 'C:\\llvm\\bin'
        assert end_line == delimiter

    def test_workflow_command_without_file(self, bare_toolkit, stdout_of):
        bare_toolkit.export_variable('LIBCLANG_PATH', '/opt/llvm/bin')

        assert '::set-env name=LIBCLANG_PATH::/opt/llvm/bin' in stdout_of(bare_toolkit)

    def test_missing_file_command_warns(self, bare_toolkit, stdout_of):
        bare_toolkit.export_variable('LIBCLANG_PATH', '/opt/llvm/bin')

        assert '::warning::GITHUB_ENV is not set' in stdout_of(bare_toolkit)


class TestLogging:

    def test_info_is_plain(self, toolkit, stdout_of):
        toolkit.info('[bold]not markup[/bold]')

        assert stdout_of(toolkit) == '[bold]not markup[/bold]\n'

    def test_warning_and_debug(self, toolkit, stdout_of):
        toolkit.warning('careful')
        toolkit.debug('details')

        assert stdout_of(toolkit).splitlines() == ['::warning::careful', '::debug::details']

    def test_multiline_error_escaped(self, toolkit, stdout_of):
        toolkit.error('first\nsecond')

        assert stdout_of(toolkit) == '::error::first%0Asecond\n'


class TestSetFailed:

    def test_records_failure(self, toolkit, stdout_of):
        assert toolkit.exit_code == 0

        toolkit.set_failed('Could not extract LLVM and Clang binaries.')

        assert toolkit.failed
        assert toolkit.exit_code == 1
        assert toolkit.failure_message == 'Could not extract LLVM and Clang binaries.'
        assert stdout_of(toolkit) == '::error::Could not extract LLVM and Clang binaries.\n'
