"""
Shared fixtures for install-llvm tests
"""
import io
from pathlib import Path
from typing import Callable, List, Optional

import pytest
from rich.console import Console

from install_llvm.config import InstallerConfig
from install_llvm.core.actions import ActionsToolkit
from install_llvm.core.process import CommandResult, CommandRunner
from install_llvm.errors import InstallError


class ScriptedRunner(CommandRunner):
    """Records commands instead of spawning them"""

    def __init__(self, toolkit: ActionsToolkit, respond: Optional[Callable[[List[str]], CommandResult]] = None):
        super().__init__(toolkit, echo=False)
        self.calls: List[List[str]] = []
        self.respond = respond or (lambda argv: CommandResult(argv, 0))

    async def run(self, argv, check=True):
        argv = [str(arg) for arg in argv]
        self.calls.append(argv)
        result = self.respond(argv)
        if check and not result.ok:
            raise InstallError.command_failed(
                f"The process '{argv[0]}' failed with exit code {result.returncode}"
            )
        return result


class FakeDownloader:
    """Pretends to download into a fixed file"""

    def __init__(self, archive: Path, error: Optional[Exception] = None):
        self.archive = archive
        self.error = error
        self.urls: List[str] = []

    async def download(self, url, dest=None):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        self.archive.parent.mkdir(parents=True, exist_ok=True)
        self.archive.write_bytes(b'7z')
        return self.archive


@pytest.fixture
def environ(tmp_path):
    """Runner environment with GitHub file commands"""
    github_path = tmp_path / 'github_path'
    github_env = tmp_path / 'github_env'
    github_path.touch()
    github_env.touch()
    return {
        'PATH': '/usr/bin',
        'GITHUB_PATH': str(github_path),
        'GITHUB_ENV': str(github_env),
    }


@pytest.fixture
def toolkit(environ):
    """Toolkit writing to in-memory consoles"""
    return ActionsToolkit(
        environ=environ,
        console=Console(file=io.StringIO(), highlight=False, soft_wrap=True),
        err_console=Console(file=io.StringIO(), width=120),
    )


@pytest.fixture
def stdout_of():
    """Text a toolkit has printed to stdout"""
    def _read(kit: ActionsToolkit) -> str:
        return kit.console.file.getvalue()
    return _read


@pytest.fixture
def config(tmp_path):
    """Default config extracting into tmp_path/llvm with a fixed extractor"""
    return InstallerConfig(install_dir=str(tmp_path / 'llvm'), extractor='7zr.exe')


@pytest.fixture
def scripted_runner(toolkit):
    def _create(respond=None) -> ScriptedRunner:
        return ScriptedRunner(toolkit, respond)
    return _create


@pytest.fixture
def fake_downloader(tmp_path):
    def _create(error=None) -> FakeDownloader:
        return FakeDownloader(tmp_path / 'download' / 'archive', error)
    return _create
