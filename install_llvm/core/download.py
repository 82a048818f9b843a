#!/usr/bin/env python3
"""
install-llvm Downloads
Fetches a release archive to a temporary file
"""

from __future__ import annotations

import os
import tempfile
import uuid
from pathlib import Path
from typing import Mapping, Optional

import httpx

from install_llvm.errors import InstallError

CHUNK_SIZE = 1024 * 1024


def temp_download_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Fresh file name under RUNNER_TEMP, or the system temp dir outside CI"""
    environ = os.environ if environ is None else environ
    temp_dir = environ.get('RUNNER_TEMP') or tempfile.gettempdir()
    return Path(temp_dir) / str(uuid.uuid4())


class Downloader:
    """Streams a URL to disk with httpx"""

    def __init__(
        self,
        timeout: float = 300.0,
        environ: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.environ = environ
        self.transport = transport

    async def download(self, url: str, dest: Optional[Path] = None) -> Path:
        """
        Download url to dest (default: a new temporary file)

        The file is not removed afterwards.

        Returns:
            Path of the downloaded file
        """
        dest = Path(dest) if dest is not None else temp_download_path(self.environ)
        dest.parent.mkdir(parents=True, exist_ok=True)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, transport=self.transport
            ) as client:
                async with client.stream("GET", url) as response:
                    if response.status_code != 200:
                        raise InstallError.command_failed(
                            f"Unexpected HTTP response: {response.status_code}"
                        )
                    with open(dest, "wb") as f:
                        async for chunk in response.aiter_bytes(chunk_size=CHUNK_SIZE):
                            f.write(chunk)
        except httpx.HTTPError as e:
            raise InstallError.command_failed(f"Failed to download {url}: {e}") from e

        return dest
