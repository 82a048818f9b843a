"""
install-llvm Platform Detection & Installation
Platform identity and the per-OS toolchain installers
"""

from install_llvm.platform.detector import (
    PlatformDetector,
    PlatformInfo,
    OSType,
    PackageManager,
    os_type_for,
    detect_platform,
)

__all__ = [
    'PlatformDetector',
    'PlatformInfo',
    'OSType',
    'PackageManager',
    'os_type_for',
    'detect_platform',
]
