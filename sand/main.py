import os
import signal
import sys
import traceback

import click
from rich import print
from rich.markup import escape

from sand import __version__
from sand.commands.build import build, list_worlds
from sand.commands.watch import watch
from sand.config import get_config_path, load_config, save_config
from sand.errors import SandError
from sand.logs import setup_logging


@click.group()
@click.version_option(__version__, prog_name='sand')
def cli():
    """Command line interface for Sandstone datapack projects."""
    setup_logging()


@cli.command()
@click.option(
    '-c',
    '--client-path',
    type=click.Path(file_okay=False),
    help='Path of the .minecraft folder.',
)
def worlds(client_path: str | None):
    """List the worlds of the Minecraft client."""
    client_path = client_path or load_config().client_path or None
    names = list_worlds(client_path)
    if not names:
        print('[blue]No worlds found[/blue]')
        return
    for name in names:
        click.echo(name)


@cli.command('config')
@click.option(
    '-c',
    '--client-path',
    type=click.Path(file_okay=False),
    help='Default path of the .minecraft folder, empty to reset.',
)
@click.option(
    '--package-manager',
    type=click.Choice(['', 'npm', 'yarn', 'pnpm', 'bun']),
    help='Default package manager, empty to reset.',
)
def config_cmd(client_path: str | None, package_manager: str | None):
    """Show or change the defaults used by build, watch and worlds."""
    config = load_config()
    if client_path is not None:
        config.client_path = os.path.abspath(client_path) if client_path else ''
    if package_manager is not None:
        config.package_manager = package_manager
    if client_path is not None or package_manager is not None:
        save_config(config)

    print(f'[blue]{escape(str(get_config_path()))}[/blue]')
    click.echo(f'client_path = {config.client_path}')
    click.echo(f'package_manager = {config.package_manager}')


cli.add_command(build)
cli.add_command(watch)


def sigint_handler(signum, frame):
    print('\n[blue]Exiting...[/blue]')
    sys.exit(0)


def main():
    signal.signal(signal.SIGINT, sigint_handler)

    try:
        cli()
    except SandError as e:
        print(f'[red]{escape(e.message)}[/red]')
        sys.exit(1)
    except Exception:
        traceback.print_exc()
        print('[red]An unknown error occurred[/red]')
        sys.exit(1)


if __name__ == '__main__':
    main()
