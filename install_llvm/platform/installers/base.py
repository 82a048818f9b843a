#!/usr/bin/env python3
"""
install-llvm Base Installer Class
Base class for platform-specific toolchain installers
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import shlex

from install_llvm.config import InstallerConfig
from install_llvm.core.actions import ActionsToolkit
from install_llvm.core.process import CommandRunner
from install_llvm.toolchain import LLVM, ToolchainPin


@dataclass
class ToolchainLocation:
    """Where an installer put the toolchain, for later build steps"""
    bin_dir: Optional[str] = None                            # None = already on PATH
    variables: Dict[str, str] = field(default_factory=dict)  # extra exports


class BaseInstaller(ABC):
    """
    Abstract base class for platform-specific installers
    """

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        toolkit: Optional[ActionsToolkit] = None,
        config: Optional[InstallerConfig] = None,
        pin: ToolchainPin = LLVM,
    ):
        self.toolkit = toolkit or ActionsToolkit()
        self.runner = runner or CommandRunner(self.toolkit)
        self.config = config or InstallerConfig()
        self.pin = pin

    @abstractmethod
    async def install(self) -> ToolchainLocation:
        """
        Install the pinned toolchain

        Returns:
            ToolchainLocation describing what later steps need

        Raises:
            InstallError: on any failure
        """

    @abstractmethod
    def get_install_steps(self) -> List[str]:
        """
        Describe what install() will do, one line per step

        Returns:
            Command strings (and download notes) in execution order
        """

    @staticmethod
    def format_command(cmd: List[str]) -> str:
        return ' '.join(shlex.quote(arg) for arg in cmd)
