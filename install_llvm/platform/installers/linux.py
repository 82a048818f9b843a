#!/usr/bin/env python3
"""
install-llvm Linux Installer
Installs the toolchain on Debian/Ubuntu runners using apt
"""

from typing import List

from install_llvm.platform.installers.base import BaseInstaller, ToolchainLocation


class AptInstaller(BaseInstaller):
    """Debian/Ubuntu toolchain installer using apt"""

    def build_install_cmd(self) -> List[str]:
        """apt command for the pinned package set"""
        cmd = []
        if self.config.use_sudo:
            cmd.append('sudo')
        cmd.extend(['apt', 'install'])
        if self.config.auto_approve:
            cmd.append('-y')
        cmd.extend(self.pin.apt_packages)
        return cmd

    async def install(self) -> ToolchainLocation:
        """
        Install llvm-N, its sub-packages and lld

        apt puts the binaries in system paths, so nothing is exported.
        """
        await self.runner.run(self.build_install_cmd())
        return ToolchainLocation()

    def get_install_steps(self) -> List[str]:
        return [self.format_command(self.build_install_cmd())]
