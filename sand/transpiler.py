"""
ts-node registration for the build process.

The build script is TypeScript executed by node, so ts-node has to be
registered before it runs. ts-node reads its options from the environment,
which the build subprocess inherits from us.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from sand.errors import SandError

logger = logging.getLogger(__name__)

TSCONFIG = 'tsconfig.json'
TS_NODE_REGISTER = '--require ts-node/register'


@dataclass(frozen=True)
class TranspilerOptions:
    # no type checking
    transpile_only: bool = True
    project: str | None = None

    def to_env(self) -> dict[str, str]:
        env = {'TS_NODE_TRANSPILE_ONLY': 'true' if self.transpile_only else 'false'}
        if self.project:
            env['TS_NODE_PROJECT'] = self.project
        return env


def register(
    options: TranspilerOptions, environ: dict[str, str] | None = None
) -> dict[str, str]:
    """
    Apply `options` to `environ` (the process environment by default).

    Registering twice does not duplicate the --require in NODE_OPTIONS.
    Returns the environment that was modified.
    """
    if environ is None:
        environ = os.environ

    environ.update(options.to_env())

    node_options = environ.get('NODE_OPTIONS', '')
    if TS_NODE_REGISTER not in node_options:
        environ['NODE_OPTIONS'] = f'{node_options} {TS_NODE_REGISTER}'.strip()

    logger.debug(
        f'Registered ts-node (transpile_only={options.transpile_only}, '
        f'project={options.project})'
    )
    return environ


def register_for_project(
    root_folder: str | Path, environ: dict[str, str] | None = None
) -> TranspilerOptions:
    # NODE_OPTIONS also applies to the package manager's own node process
    if not (Path(root_folder) / 'node_modules' / 'ts-node').is_dir():
        raise SandError(
            f'ts-node is not installed in "{root_folder}". '
            'Install the project dependencies first.'
        )

    tsconfig = Path(root_folder) / TSCONFIG
    options = TranspilerOptions(
        transpile_only=True,
        project=str(tsconfig) if tsconfig.is_file() else None,
    )
    register(options, environ)
    return options


__all__ = ['TranspilerOptions', 'register', 'register_for_project']
