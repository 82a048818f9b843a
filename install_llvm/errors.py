#!/usr/bin/env python3
"""
install-llvm Errors
Failure kinds raised by the platform strategies
"""

from enum import Enum


class ErrorKind(Enum):
    """Why an install attempt failed"""
    COMMAND_FAILED = "command-failed"              # external command or download
    EXTRACTION_FAILED = "extraction-failed"        # extractor exited non-zero
    UNSUPPORTED_PLATFORM = "unsupported-platform"


class InstallError(Exception):
    """
    Raised by installers when the toolchain cannot be installed.

    The message is what the CI system shows the user.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message

    @classmethod
    def command_failed(cls, message: str) -> 'InstallError':
        return cls(ErrorKind.COMMAND_FAILED, message)

    @classmethod
    def extraction_failed(cls, message: str) -> 'InstallError':
        return cls(ErrorKind.EXTRACTION_FAILED, message)

    @classmethod
    def unsupported_platform(cls, platform_id: str) -> 'InstallError':
        return cls(ErrorKind.UNSUPPORTED_PLATFORM, f"unsupported platform '{platform_id}'")
