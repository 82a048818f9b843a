"""
install-llvm Platform-Specific Installers
Toolchain installation for Linux, macOS, and Windows
"""

from typing import Dict, Type

from install_llvm.errors import InstallError
from install_llvm.platform.detector import OSType
from install_llvm.platform.installers.base import BaseInstaller, ToolchainLocation
from install_llvm.platform.installers.linux import AptInstaller
from install_llvm.platform.installers.macos import HomebrewInstaller
from install_llvm.platform.installers.windows import PrebuiltArchiveInstaller

INSTALLERS: Dict[OSType, Type[BaseInstaller]] = {
    OSType.LINUX: AptInstaller,
    OSType.MACOS: HomebrewInstaller,
    OSType.WINDOWS: PrebuiltArchiveInstaller,
}


def get_installer(os_type: OSType, platform_id: str, **kwargs) -> BaseInstaller:
    """
    Installer for an OS type

    Raises:
        InstallError: UNSUPPORTED_PLATFORM naming platform_id
    """
    installer_cls = INSTALLERS.get(os_type)
    if installer_cls is None:
        raise InstallError.unsupported_platform(platform_id)
    return installer_cls(**kwargs)


__all__ = [
    'BaseInstaller',
    'ToolchainLocation',
    'AptInstaller',
    'HomebrewInstaller',
    'PrebuiltArchiveInstaller',
    'INSTALLERS',
    'get_installer',
]
