#!/usr/bin/env python3
"""
install-llvm Installer
Installs the pinned LLVM/Clang toolchain for the runner's platform and tells
later CI steps where to find it
"""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass
from typing import Optional

from install_llvm.config import ConfigManager, InstallerConfig
from install_llvm.core.actions import ActionsToolkit
from install_llvm.core.download import Downloader
from install_llvm.core.process import CommandRunner
from install_llvm.errors import ErrorKind, InstallError
from install_llvm.platform.detector import OSType, os_type_for
from install_llvm.platform.installers import get_installer


@dataclass
class InstallOutcome:
    """Result of one install attempt"""
    success: bool
    platform_id: str
    bin_dir: Optional[str] = None
    message: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1


async def install(
    platform_id: Optional[str] = None,
    *,
    toolkit: Optional[ActionsToolkit] = None,
    config: Optional[InstallerConfig] = None,
    runner: Optional[CommandRunner] = None,
    downloader: Optional[Downloader] = None,
) -> InstallOutcome:
    """
    Install the toolchain and export its location

    Every error is logged with its traceback and turned into a single
    failure signal on the toolkit; nothing is raised to the caller.

    Args:
        platform_id: sys.platform style identifier (default: this host)
        toolkit: CI side effects (default: real runner environment)
        config: Installer settings (default: .install-llvm.yml or defaults)
        runner: Command runner (default: asyncio subprocesses)
        downloader: Archive downloader (default: httpx)

    Returns:
        InstallOutcome
    """
    platform_id = platform_id or sys.platform
    toolkit = toolkit or ActionsToolkit()

    try:
        config = config or ConfigManager.load_config()
        os_type = os_type_for(platform_id)

        kwargs = {
            'runner': runner or CommandRunner(toolkit),
            'toolkit': toolkit,
            'config': config,
        }
        if os_type == OSType.WINDOWS:
            kwargs['downloader'] = downloader or Downloader(timeout=config.download_timeout)

        installer = get_installer(os_type, platform_id, **kwargs)
        location = await installer.install()

        if location.bin_dir:
            toolkit.add_path(location.bin_dir)
        for name, value in location.variables.items():
            toolkit.export_variable(name, value)

        return InstallOutcome(success=True, platform_id=platform_id, bin_dir=location.bin_dir)

    except Exception as e:
        toolkit.print_exception()
        message = str(e)
        toolkit.set_failed(message)
        kind = e.kind if isinstance(e, InstallError) else None
        return InstallOutcome(
            success=False,
            platform_id=platform_id,
            message=message,
            error_kind=kind,
        )


def main(platform_id: Optional[str] = None, config: Optional[InstallerConfig] = None) -> int:
    """Run the install and return the process exit code"""
    outcome = asyncio.run(install(platform_id, config=config))
    return outcome.exit_code
