import dataclasses
import logging
import sys

import click

from sand import tui
from sand.build import BuildOptions, build_project
from sand.commands.watch import watch_options
from sand.config import load_config
from sand.errors import SandError
from sand.logs import setup_logging
from sand.transpiler import register_for_project
from sand.utils.minecraft import get_minecraft_path, get_saves_path, get_worlds_list
from sand.utils.project import get_project_folders

logger = logging.getLogger(__name__)


def list_worlds(client_path: str | None) -> list[str]:
    mc_path = get_minecraft_path(client_path)
    try:
        return get_worlds_list(mc_path)
    except FileNotFoundError:
        raise SandError(
            f'The saves folder "{get_saves_path(mc_path)}" does not exist.'
        )


def resolve_world(world: str, client_path: str | None) -> str:
    worlds = list_worlds(client_path)
    if world in worlds:
        return world
    if not worlds:
        raise SandError(f'World "{world}" not found, the saves folder is empty.')
    if not tui.isatty():
        raise SandError(
            f'World "{world}" not found. Available worlds: {", ".join(worlds)}'
        )
    return tui.choice(
        f'World "{world}" not found, pick one', [(x, x) for x in worlds]
    )


def apply_config(options: BuildOptions) -> BuildOptions:
    config = load_config()
    return dataclasses.replace(
        options,
        client_path=options.client_path or config.client_path or None,
        package_manager=options.package_manager or config.package_manager or None,
    )


def run_build(path: str, options: BuildOptions, watch: bool = False) -> int:
    setup_logging(options.verbose)
    options = apply_config(options)

    folders = get_project_folders(path)
    logger.debug(f'Project folders: {folders}')

    if options.world:
        options = dataclasses.replace(
            options, world=resolve_world(options.world, options.client_path)
        )

    register_for_project(folders.root_folder)

    return build_project(options, folders, watch=watch)


@click.command(short_help='Build the datapack. ⛏')
@watch_options
def build(path: str, options: BuildOptions):
    """
    Build the datapack. ⛏

    \b
    Examples:
      $ sand build
      $ sand build --verbose
      $ sand build --verbose --dry
    """
    sys.exit(run_build(path, options))


__all__ = ['build', 'run_build', 'list_worlds']
