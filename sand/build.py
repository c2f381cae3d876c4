import logging
import os
import subprocess
from dataclasses import dataclass, fields
from pathlib import Path

from rich import print

from sand.compat import iswin, get_package_manager
from sand.errors import SandError
from sand.utils.project import ProjectFolders

logger = logging.getLogger(__name__)

BUILD_SCRIPT = 'sandstone-build'

# package manager -> command prefix running a locally installed bin
RUNNERS = {
    'npm': ['npx', '--no-install'],
    'yarn': ['yarn', 'run'],
    'pnpm': ['pnpm', 'exec'],
    'bun': ['bun', 'x'],
}


@dataclass(frozen=True)
class BuildOptions:
    verbose: bool = False
    dry: bool = False
    root: bool = False
    full_trace: bool = False
    strict_errors: bool = False
    production: bool = False
    auto_reload: int | None = None
    world: str | None = None
    client_path: str | None = None
    server_path: str | None = None
    name: str | None = None
    namespace: str | None = None
    description: str | None = None
    format_version: int | None = None
    package_manager: str | None = None

    def to_args(self) -> list[str]:
        """Render the flags the build script understands, in its camelCase spelling."""
        args = []
        for field in fields(self):
            if field.name == 'package_manager':
                continue
            value = getattr(self, field.name)
            if value is None or value is False:
                continue
            head, *rest = field.name.split('_')
            flag = '--' + head + ''.join(x.capitalize() for x in rest)
            if value is True:
                args.append(flag)
            else:
                args.extend([flag, str(value)])
        return args


def folders_env(folders: ProjectFolders) -> dict[str, str]:
    return {
        'SAND_ABS_PROJECT_FOLDER': folders.abs_project_folder,
        'SAND_PROJECT_FOLDER': folders.project_folder,
        'SAND_ROOT_FOLDER': folders.root_folder,
        'SAND_SANDSTONE_CONFIG_FOLDER': folders.sandstone_config_folder,
    }


def get_build_script(root_folder: str | Path) -> Path:
    name = BUILD_SCRIPT + '.cmd' if iswin() else BUILD_SCRIPT
    return Path(root_folder) / 'node_modules' / '.bin' / name


def get_build_command(
    options: BuildOptions, folders: ProjectFolders, watch: bool = False
) -> list[str]:
    package_manager = get_package_manager(
        folders.root_folder, options.package_manager or ''
    )
    if package_manager not in RUNNERS:
        raise SandError(
            f'Unsupported package manager "{package_manager}", '
            f'expected one of: {", ".join(RUNNERS)}'
        )
    command = [*RUNNERS[package_manager], BUILD_SCRIPT, *options.to_args()]
    if watch:
        command.append('--watch')
    return command


def build_project(
    options: BuildOptions, folders: ProjectFolders, watch: bool = False
) -> int:
    if not get_build_script(folders.root_folder).exists():
        raise SandError(
            f'Sandstone is not installed in "{folders.root_folder}". '
            'Install the project dependencies first.'
        )

    command = get_build_command(options, folders, watch)
    logger.info(f'Running {" ".join(command)}')
    logger.debug(f'Sandstone config: {folders.sandstone_config_path}')

    if options.dry:
        print('[blue]Dry run, nothing will be saved[/blue]')

    env = {**os.environ, **folders_env(folders)}
    # shell=True on windows so that npx.cmd & co resolve
    process = subprocess.run(
        command,
        cwd=folders.sandstone_config_folder,
        env=env,
        shell=iswin(),
    )
    if process.returncode != 0:
        logger.warning(f'Build exited with code {process.returncode}')
    return process.returncode


__all__ = ['BuildOptions', 'build_project', 'get_build_command']
