"""
install-llvm Core
CI toolkit, command execution and downloads shared by every installer
"""

from install_llvm.core.actions import ActionsToolkit
from install_llvm.core.process import CommandResult, CommandRunner, collect_output
from install_llvm.core.download import Downloader

__all__ = [
    'ActionsToolkit',
    'CommandResult',
    'CommandRunner',
    'Downloader',
    'collect_output',
]
