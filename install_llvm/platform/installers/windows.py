#!/usr/bin/env python3
"""
install-llvm Windows Installer
Downloads the prebuilt LLVM archive and unpacks it with 7-Zip
"""

import shutil
from pathlib import Path
from typing import List, Optional

import install_llvm
from install_llvm.core.download import Downloader
from install_llvm.errors import InstallError
from install_llvm.platform.installers.base import BaseInstaller, ToolchainLocation

# 7zr.exe shipped next to the package when installed as a CI action
BUNDLED_EXTRACTOR = Path(install_llvm.__file__).parent / 'externals' / '7zr.exe'

EXTRACT_FAILED_MESSAGE = "Could not extract LLVM and Clang binaries."


class PrebuiltArchiveInstaller(BaseInstaller):
    """Windows toolchain installer using a prebuilt .7z release"""

    def __init__(self, *args, downloader: Optional[Downloader] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.downloader = downloader or Downloader(timeout=self.config.download_timeout)

    def resolve_extractor(self) -> str:
        """
        Pick the 7-Zip executable

        Order: configured path, bundled 7zr.exe, 7z/7zr on PATH.
        """
        if self.config.extractor:
            return self.config.extractor
        if BUNDLED_EXTRACTOR.exists():
            return str(BUNDLED_EXTRACTOR)
        for name in ('7z', '7zr'):
            found = shutil.which(name)
            if found:
                return found
        return str(BUNDLED_EXTRACTOR)

    def build_extract_cmd(self, archive: Path, target: Path) -> List[str]:
        return [
            self.resolve_extractor(),
            '-bsp1',            # progress to stdout
            'x',                # extract with full paths
            str(archive),
            f'-o{target}',
        ]

    async def install(self) -> ToolchainLocation:
        url = self.pin.windows_download_url
        self.toolkit.info(f"Downloading LLVM from '{url}'")
        archive = await self.downloader.download(url)

        self.toolkit.info("Successfully downloaded LLVM release, extracting...")
        target = self.config.resolve_install_dir()
        result = await self.runner.run(self.build_extract_cmd(archive, target), check=False)
        if result.returncode != 0:
            raise InstallError.extraction_failed(EXTRACT_FAILED_MESSAGE)

        self.toolkit.info("Successfully extracted LLVM release")
        bin_dir = str(target / 'bin')
        return ToolchainLocation(
            bin_dir=bin_dir,
            variables={self.pin.library_path_variable: bin_dir},
        )

    def get_install_steps(self) -> List[str]:
        target = self.config.resolve_install_dir()
        bin_dir = target / 'bin'
        return [
            f"download {self.pin.windows_download_url}",
            self.format_command(self.build_extract_cmd(Path('<archive>'), target)),
            f"add {bin_dir} to PATH",
            f"export {self.pin.library_path_variable}={bin_dir}",
        ]
