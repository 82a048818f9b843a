#!/usr/bin/env python3
"""
install-llvm Command Execution
Runs external commands one at a time, streaming their output to the CI log
"""

from __future__ import annotations

import asyncio
import contextlib
import re
from asyncio.subprocess import PIPE
from dataclasses import dataclass
from typing import AsyncIterator, Iterable, List, Optional, Sequence, Tuple, Union

from install_llvm.core.actions import ActionsToolkit
from install_llvm.errors import InstallError


@dataclass
class CommandResult:
    """Exit status and captured output of one command"""
    argv: List[str]
    returncode: int
    stdout: str = ''
    stderr: str = ''

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def collect_output(chunks: Iterable[Union[bytes, str]]) -> str:
    """Join captured stream chunks and trim the result once"""
    chunks = list(chunks)
    if all(isinstance(chunk, bytes) for chunk in chunks):
        # decode once so multi-byte characters split across chunks survive
        return b''.join(chunks).decode(errors='replace').strip()
    return ''.join(
        chunk.decode(errors='replace') if isinstance(chunk, bytes) else chunk
        for chunk in chunks
    ).strip()


READ_SIZE = 65536


async def _read_chunks(stream: asyncio.StreamReader) -> AsyncIterator[bytes]:
    while True:
        chunk = await stream.read(READ_SIZE)
        if not chunk:
            break
        yield chunk


def split_lines(buffer: bytes) -> Tuple[List[bytes], bytes]:
    """
    Split complete lines off a buffer

    A carriage return ends a line as well as a newline, since progress
    meters redraw with it. A trailing CR stays in the remainder in case
    its LF arrives with the next read.

    Returns:
        (complete lines without terminators, unterminated remainder)
    """
    tail = b""
    if buffer.endswith(b"\r"):
        buffer, tail = buffer[:-1], b"\r"
    parts = re.split(rb"\r\n|\r|\n", buffer)
    return parts[:-1], parts[-1] + tail


class CommandRunner:
    """
    Spawns commands with asyncio and waits for each to finish
    """

    def __init__(self, toolkit: Optional[ActionsToolkit] = None, echo: bool = True):
        self.toolkit = toolkit or ActionsToolkit()
        self.echo = echo

    async def run(self, argv: Sequence[str], check: bool = True) -> CommandResult:
        """
        Run a command to completion

        Args:
            argv: Command and arguments (no shell)
            check: Raise if the command exits non-zero

        Returns:
            CommandResult with trimmed stdout/stderr
        """
        argv = [str(arg) for arg in argv]
        if self.echo:
            self.toolkit.info(f"[command]{' '.join(argv)}")

        try:
            proc = await asyncio.create_subprocess_exec(*argv, stdout=PIPE, stderr=PIPE)
        except (FileNotFoundError, PermissionError) as e:
            raise InstallError.command_failed(
                f"Unable to locate executable file: {argv[0]} ({e})"
            ) from e

        stdout_chunks: List[bytes] = []
        stderr_chunks: List[bytes] = []

        async def pump(reader: asyncio.StreamReader, chunks: List[bytes]) -> None:
            pending = b''
            async for chunk in _read_chunks(reader):
                chunks.append(chunk)
                if self.echo:
                    lines, pending = split_lines(pending + chunk)
                    if len(pending) > READ_SIZE:
                        lines.append(pending)
                        pending = b''
                    for line in lines:
                        self.toolkit.info(line.decode(errors='replace'))
            pending = pending.rstrip(b'\r')
            if self.echo and pending:
                self.toolkit.info(pending.decode(errors='replace'))

        try:
            await asyncio.gather(pump(proc.stdout, stdout_chunks), pump(proc.stderr, stderr_chunks))  # type: ignore
        except BaseException:
            if proc.returncode is None:
                with contextlib.suppress(ProcessLookupError):
                    proc.kill()
            await proc.wait()
            raise
        returncode = await proc.wait()

        result = CommandResult(
            argv=argv,
            returncode=returncode,
            stdout=collect_output(stdout_chunks),
            stderr=collect_output(stderr_chunks),
        )

        if check and not result.ok:
            raise InstallError.command_failed(
                f"The process '{argv[0]}' failed with exit code {returncode}"
            )
        return result

    async def execute(self, argv: Sequence[str]) -> str:
        """
        Run a command and return its stdout

        Any stderr output counts as failure and becomes the error message,
        even when the command exited 0.
        """
        result = await self.run(argv, check=False)
        if result.stderr:
            raise InstallError.command_failed(result.stderr)
        if not result.ok:
            raise InstallError.command_failed(
                f"The process '{result.argv[0]}' failed with exit code {result.returncode}"
            )
        return result.stdout
