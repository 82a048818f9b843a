#!/usr/bin/env python3
"""
install-llvm macOS Installer
Installs the toolchain using Homebrew and resolves its keg prefix
"""

from typing import List

from install_llvm.platform.installers.base import BaseInstaller, ToolchainLocation


class HomebrewInstaller(BaseInstaller):
    """macOS toolchain installer using Homebrew"""

    def build_install_cmd(self) -> List[str]:
        return ['brew', 'install', self.pin.brew_formula]

    def build_prefix_cmd(self) -> List[str]:
        return ['brew', '--prefix', self.pin.brew_formula]

    async def install(self) -> ToolchainLocation:
        """Install the versioned formula; its keg is not linked, so export bin"""
        await self.runner.run(self.build_install_cmd())
        prefix = await self.runner.execute(self.build_prefix_cmd())
        return ToolchainLocation(bin_dir=f"{prefix}/bin")

    def get_install_steps(self) -> List[str]:
        return [
            self.format_command(self.build_install_cmd()),
            self.format_command(self.build_prefix_cmd()),
            "add <prefix>/bin to PATH",
        ]
