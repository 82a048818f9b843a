#!/usr/bin/env python3
"""
install-llvm Configuration Management
Handles .install-llvm.yml configuration files
"""

import yaml
from pathlib import Path
from typing import Dict, Optional, Any
from dataclasses import dataclass
from rich.console import Console
from rich.markup import escape

_console = Console(stderr=True)


def _flag(section: Dict[str, Any], key: str, default: bool) -> bool:
    """Read a yes/no setting; anything but a YAML boolean keeps the default"""
    value = section.get(key, default)
    if isinstance(value, bool):
        return value
    _console.print(
        f"[yellow]Warning: install.{key} must be true or false, got {escape(repr(value))}; using {str(default).lower()}[/yellow]"
    )
    return default


@dataclass
class InstallerConfig:
    """install-llvm configuration structure"""

    # Package manager settings (Linux)
    use_sudo: bool = True
    auto_approve: bool = True

    # Prebuilt archive settings (Windows)
    install_dir: str = "llvm"
    extractor: Optional[str] = None  # None = bundled 7zr.exe, then 7z on PATH

    # Download settings
    download_timeout: float = 300.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InstallerConfig':
        """Create config from dictionary"""
        config = cls()

        install = data.get('install') or {}
        config.use_sudo = _flag(install, 'use_sudo', config.use_sudo)
        config.auto_approve = _flag(install, 'auto_approve', config.auto_approve)
        config.install_dir = str(install.get('install_dir') or config.install_dir)
        extractor = install.get('extractor')
        config.extractor = str(extractor) if extractor else None

        download = data.get('download') or {}
        timeout = download.get('timeout', config.download_timeout)
        try:
            config.download_timeout = max(1.0, float(timeout))
        except (TypeError, ValueError):
            config.download_timeout = 300.0

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for YAML export"""
        return {
            'install': {
                'use_sudo': self.use_sudo,
                'auto_approve': self.auto_approve,
                'install_dir': self.install_dir,
                'extractor': self.extractor,
            },
            'download': {
                'timeout': self.download_timeout,
            },
        }

    def resolve_install_dir(self) -> Path:
        """Absolute extraction directory for the prebuilt archive"""
        return Path(self.install_dir).resolve()


class ConfigManager:
    """Manage install-llvm configuration files"""

    DEFAULT_CONFIG_NAME = ".install-llvm.yml"

    @staticmethod
    def find_config(start_path: Path = None) -> Optional[Path]:
        """
        Find .install-llvm.yml by walking up directory tree

        Args:
            start_path: Starting directory (default: current directory)

        Returns:
            Path to .install-llvm.yml or None if not found
        """
        current = (start_path or Path.cwd()).resolve()

        while True:
            config_file = current / ConfigManager.DEFAULT_CONFIG_NAME
            if config_file.is_file():
                return config_file
            if current == current.parent:
                return None
            current = current.parent

    @staticmethod
    def load_config(config_path: Path = None) -> InstallerConfig:
        """
        Load configuration from .install-llvm.yml

        Args:
            config_path: Path to config file (default: search from current dir)

        Returns:
            InstallerConfig object
        """
        if config_path is None:
            config_path = ConfigManager.find_config()

        # Defaults reproduce the stock CI behaviour
        if config_path is None or not config_path.exists():
            return InstallerConfig()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            _console.print(f"[yellow]Warning: Failed to load config from {config_path}: {e}[/yellow]")
            return InstallerConfig()

        if not isinstance(data, dict):
            return InstallerConfig()

        return InstallerConfig.from_dict(data)

    @staticmethod
    def save_config(config: InstallerConfig, config_path: Path) -> bool:
        """
        Save configuration to .install-llvm.yml

        Returns:
            True if successful
        """
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(config_path, 'w', encoding='utf-8') as f:
                yaml.dump(
                    config.to_dict(),
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    indent=2
                )

            return True

        except OSError as e:
            _console.print(f"[red]Error: Failed to save config to {config_path}: {e}[/red]")
            return False

    @staticmethod
    def create_default_config(project_root: Path) -> Path:
        """
        Create default .install-llvm.yml in project root

        Returns:
            Path to created config file
        """
        config_path = project_root / ConfigManager.DEFAULT_CONFIG_NAME
        ConfigManager.save_config(InstallerConfig(), config_path)
        return config_path
