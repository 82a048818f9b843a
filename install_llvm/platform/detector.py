#!/usr/bin/env python3
"""
install-llvm Platform Detection
Maps the runner's platform identifier onto an install strategy
"""

import os
import platform
import shutil
import sys
from enum import Enum
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional


class OSType(Enum):
    """Operating system types"""
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    UNKNOWN = "unknown"


class PackageManager(Enum):
    """Package managers the installers know how to drive"""
    APT = "apt"              # Debian/Ubuntu
    BREW = "brew"            # macOS Homebrew
    SEVEN_ZIP = "7z"         # Windows prebuilt archives
    UNKNOWN = "unknown"


# sys.platform values -> OS type
PLATFORM_IDS: Dict[str, OSType] = {
    'linux': OSType.LINUX,
    'darwin': OSType.MACOS,
    'win32': OSType.WINDOWS,
}

PRIMARY_PACKAGE_MANAGERS: Dict[OSType, PackageManager] = {
    OSType.LINUX: PackageManager.APT,
    OSType.MACOS: PackageManager.BREW,
    OSType.WINDOWS: PackageManager.SEVEN_ZIP,
}


def os_type_for(platform_id: str) -> OSType:
    """OS type for a sys.platform style identifier"""
    return PLATFORM_IDS.get(platform_id, OSType.UNKNOWN)


@dataclass
class PlatformInfo:
    """Complete platform information"""
    platform_id: str
    os_type: OSType
    os_name: str
    os_version: str
    architecture: str
    package_managers: List[PackageManager]
    primary_package_manager: Optional[PackageManager]
    is_ci: bool
    python_version: str

    @property
    def is_supported(self) -> bool:
        return self.os_type != OSType.UNKNOWN

    def to_dict(self) -> Dict:
        """Convert to dictionary for display"""
        return {
            'platform_id': self.platform_id,
            'os_type': self.os_type.value,
            'os_name': self.os_name,
            'os_version': self.os_version,
            'architecture': self.architecture,
            'package_managers': [pm.value for pm in self.package_managers],
            'primary_package_manager': self.primary_package_manager.value if self.primary_package_manager else None,
            'is_ci': self.is_ci,
            'python_version': self.python_version,
        }


class PlatformDetector:
    """
    Detect platform details: OS, package managers, CI environment

    The platform identifier defaults to sys.platform but can be given
    explicitly, which is how a strategy is chosen for another OS in a dry run.
    """

    def __init__(self, platform_id: Optional[str] = None, environ: Optional[Mapping[str, str]] = None):
        self.platform_id = platform_id or sys.platform
        self.environ = os.environ if environ is None else environ
        self.info: Optional[PlatformInfo] = None

    def detect(self) -> PlatformInfo:
        """
        Perform full platform detection

        Returns:
            PlatformInfo with all detected details
        """
        os_type = os_type_for(self.platform_id)

        self.info = PlatformInfo(
            platform_id=self.platform_id,
            os_type=os_type,
            os_name=platform.system(),
            os_version=platform.release(),
            architecture=platform.machine(),
            package_managers=self._detect_package_managers(),
            primary_package_manager=PRIMARY_PACKAGE_MANAGERS.get(os_type),
            is_ci=self._is_ci(),
            python_version=platform.python_version(),
        )

        return self.info

    def _is_ci(self) -> bool:
        """Check if running on a CI runner"""
        return bool(self.environ.get('GITHUB_ACTIONS') or self.environ.get('CI'))

    def _detect_package_managers(self) -> List[PackageManager]:
        """Detect available package managers on this host"""
        package_manager_commands = {
            PackageManager.APT: ['apt'],
            PackageManager.BREW: ['brew'],
            PackageManager.SEVEN_ZIP: ['7z', '7zr'],
        }

        managers = [
            pm for pm, commands in package_manager_commands.items()
            if any(shutil.which(cmd) for cmd in commands)
        ]
        return managers if managers else [PackageManager.UNKNOWN]


def detect_platform(platform_id: Optional[str] = None) -> PlatformInfo:
    """Detect the platform, optionally for an explicit identifier"""
    return PlatformDetector(platform_id).detect()
