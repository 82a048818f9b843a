#!/usr/bin/env python3
"""
install-llvm Toolchain Pin
The LLVM/Clang release every platform strategy installs
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class ToolchainPin:
    """Pinned LLVM/Clang release"""
    major_version: int = 8
    windows_version: str = "8.0.1"
    windows_toolset: str = "msvc16"
    library_path_variable: str = "LIBCLANG_PATH"
    apt_packages: List[str] = field(default_factory=lambda: [
        "llvm-8",
        "llvm-8-*",    # every llvm-8 sub-package
        "liblld-8*",   # linker
    ])

    @property
    def brew_formula(self) -> str:
        return f"llvm@{self.major_version}"

    @property
    def windows_archive(self) -> str:
        return f"llvm-{self.windows_version}-windows-x64-{self.windows_toolset}.7z"

    @property
    def windows_download_url(self) -> str:
        return (
            "https://github.com/mun-lang/llvm-package-windows/releases/download/"
            f"v{self.windows_version}/{self.windows_archive}"
        )

    def to_dict(self) -> Dict[str, object]:
        """Flatten for display"""
        return {
            'major_version': self.major_version,
            'apt_packages': list(self.apt_packages),
            'brew_formula': self.brew_formula,
            'windows_version': self.windows_version,
            'windows_download_url': self.windows_download_url,
            'library_path_variable': self.library_path_variable,
        }


LLVM = ToolchainPin()
