#!/usr/bin/env python3
"""
install-llvm module entry point
Allows running: python3 -m install_llvm
"""

from install_llvm.cli import main

if __name__ == '__main__':
    main()
