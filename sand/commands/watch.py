import functools
import sys

import click

from sand.build import BuildOptions

# shared by `build` and `watch`
WATCH_PARAMS = [
    click.argument('path', default='.', type=click.Path(file_okay=False)),
    click.option('-v', '--verbose', is_flag=True, help='Log everything.'),
    click.option(
        '-d', '--dry', is_flag=True, help='Do not save the datapack, only build it.'
    ),
    click.option(
        '-r',
        '--root',
        is_flag=True,
        help='Save the datapack & resource pack in the .minecraft datapacks & resource_packs folders.',
    ),
    click.option(
        '--full-trace', is_flag=True, help='Show the full stack trace on errors.'
    ),
    click.option(
        '--strict-errors', is_flag=True, help='Stop the build on the first error.'
    ),
    click.option(
        '-p', '--production', is_flag=True, help='Build for production.'
    ),
    click.option(
        '-a',
        '--auto-reload',
        type=int,
        help='Port of the server to reload after each build.',
    ),
    click.option('-w', '--world', help='Name of the world to save the datapack in.'),
    click.option(
        '-c',
        '--client-path',
        type=click.Path(file_okay=False),
        help='Path of the .minecraft folder.',
    ),
    click.option(
        '-s',
        '--server-path',
        type=click.Path(file_okay=False),
        help='Path of the server folder.',
    ),
    click.option('-n', '--name', help='Name of the datapack.'),
    click.option('--namespace', help='Default namespace of the datapack.'),
    click.option('--description', help='Description of the datapack.'),
    click.option('--format-version', type=int, help='Pack format of the datapack.'),
    click.option(
        '--package-manager',
        type=click.Choice(['npm', 'yarn', 'pnpm', 'bun']),
        help='Package manager used to run the build script.',
    ),
]


def watch_options(func):
    """Add the shared argument & flags, and pass them to `func` as (path, BuildOptions)."""

    @functools.wraps(func)
    def wrapper(path: str, **kwargs):
        return func(path, BuildOptions(**kwargs))

    for decorator in reversed(WATCH_PARAMS):
        wrapper = decorator(wrapper)
    return wrapper


@click.command(short_help='Build the datapack on every change.')
@watch_options
def watch(path: str, options: BuildOptions):
    """
    Build the datapack, then rebuild it each time a file changes.

    \b
    Examples:
      $ sand watch
      $ sand watch --verbose
      $ sand watch --verbose --dry
    """
    from sand.commands.build import run_build

    sys.exit(run_build(path, options, watch=True))


__all__ = ['watch', 'watch_options', 'WATCH_PARAMS']
