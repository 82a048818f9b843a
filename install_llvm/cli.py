#!/usr/bin/env python3
"""
install-llvm CLI - Command-line interface
Click-based entry point used by the CI step
"""

import sys
import click
import yaml
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.table import Table

from install_llvm import __version__
from install_llvm.config import ConfigManager, InstallerConfig

# Force UTF-8 encoding for stdout/stderr on Windows runners
if sys.platform == 'win32':
    import io
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    if isinstance(sys.stderr, io.TextIOWrapper):
        sys.stderr.reconfigure(encoding='utf-8', errors='replace')

console = Console()

platform_option = click.option(
    '--platform', 'platform_id', default=None, metavar='ID',
    help='Platform identifier: linux, darwin or win32 (default: this host)',
)
config_option = click.option(
    '--config', 'config_path', type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None, help='Path to .install-llvm.yml (default: search upwards from cwd)',
)


def _load_config(config_path: Optional[Path]) -> InstallerConfig:
    return ConfigManager.load_config(config_path)


def _run_install(ctx: click.Context, platform_id: Optional[str], config_path: Optional[Path]):
    from install_llvm.installer import main as install_main

    ctx.exit(install_main(platform_id, config=_load_config(config_path)))


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version and exit')
@platform_option
@config_option
@click.pass_context
def main(ctx, version, platform_id, config_path):
    """
    install-llvm - install the pinned LLVM/Clang toolchain on a CI runner

    Without a subcommand the toolchain is installed, as in `install-llvm run`.

    Examples:
        install-llvm                     # Install for this runner
        install-llvm plan --platform win32
        install-llvm versions            # Show the pinned toolchain
    """
    if version:
        click.echo(f"install-llvm v{__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        _run_install(ctx, platform_id, config_path)


@main.command()
@platform_option
@config_option
@click.pass_context
def run(ctx, platform_id, config_path):
    """Install the toolchain and export its location to later steps."""
    _run_install(ctx, platform_id, config_path)


@main.command()
@platform_option
@config_option
def plan(platform_id, config_path):
    """Show the commands an install would run, without running them."""
    from install_llvm.errors import InstallError
    from install_llvm.platform.detector import os_type_for
    from install_llvm.platform.installers import get_installer

    platform_id = platform_id or sys.platform
    config = _load_config(config_path)

    try:
        installer = get_installer(os_type_for(platform_id), platform_id, config=config)
    except InstallError as e:
        console.print(f"[red]❌ {e}[/red]")
        sys.exit(1)

    console.print(f"\n[bold cyan]Install plan for '{platform_id}':[/bold cyan]")
    for number, step in enumerate(installer.get_install_steps(), start=1):
        console.print(f"  {number}. {step}", markup=False, highlight=False, soft_wrap=True)


@main.command('platform')
def platform_info():
    """Show the detected platform."""
    from install_llvm.platform import detect_platform

    info = detect_platform()

    console.print("\n[bold cyan]Platform Information:[/bold cyan]")
    console.print(f"  Identifier: {info.platform_id} ({info.os_type.value})")
    console.print(f"  OS: {info.os_name} {info.os_version} ({info.architecture})")
    console.print(f"  Python: {info.python_version}")
    console.print(f"  CI runner: {'yes' if info.is_ci else 'no'}")
    managers = ', '.join(pm.value for pm in info.package_managers)
    console.print(f"  Package managers: {managers}")
    if info.is_supported:
        console.print(f"  Install strategy: {info.primary_package_manager.value}")
    else:
        console.print("[yellow]  ⚠ No install strategy for this platform[/yellow]")


@main.command()
def versions():
    """Show the pinned toolchain."""
    from install_llvm.toolchain import LLVM

    table = Table(title="Pinned Toolchain", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for key, value in LLVM.to_dict().items():
        if isinstance(value, list):
            value = ' '.join(value)
        table.add_row(key, str(value))

    console.print(table)


@main.command()
@click.option('--init', 'create', is_flag=True, help='Write a default .install-llvm.yml in the current directory')
@click.option('--force', is_flag=True, help='Overwrite an existing configuration file')
@config_option
def config(create, force, config_path):
    """Show the effective configuration, or create a default one."""
    if create:
        target = Path.cwd() / ConfigManager.DEFAULT_CONFIG_NAME
        if target.exists() and not force:
            console.print(f"[yellow]⚠ {target} already exists (use --force to overwrite)[/yellow]")
            sys.exit(1)
        path = ConfigManager.create_default_config(Path.cwd())
        console.print(f"[green]✅ Created {path}[/green]")
        return

    source = config_path or ConfigManager.find_config()
    cfg = _load_config(config_path)

    console.print(f"\n[bold cyan]Configuration[/bold cyan] [dim]({source or 'defaults'})[/dim]")
    console.print(
        yaml.dump(cfg.to_dict(), default_flow_style=False, sort_keys=False, indent=2),
        markup=False, highlight=False,
    )


if __name__ == '__main__':
    main()
