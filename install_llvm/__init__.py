"""
install-llvm - LLVM/Clang toolchain installer for CI runners
Installs a pinned LLVM release on Linux, macOS or Windows and exports its location.
"""

__version__ = "0.1.0"
__license__ = "MIT OR Apache-2.0"

__all__ = ["__version__"]
