import logging
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

# lockfile -> package manager that wrote it
LOCKFILES = {
    'yarn.lock': 'yarn',
    'pnpm-lock.yaml': 'pnpm',
    'bun.lockb': 'bun',
    'bun.lock': 'bun',
}


def iswin():
    return sys.platform == 'win32'


def has_tool(name: str) -> bool:
    # shell=True on windows so that .cmd shims (yarn.cmd, pnpm.cmd) resolve
    try:
        subprocess.run(
            f'{name} --version' if iswin() else [name, '--version'],
            shell=iswin(),
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        logger.debug(f"'{name} --version' failed: {e!r}")
        return False
    return True


def has_yarn() -> bool:
    return has_tool('yarn')


def has_pnpm() -> bool:
    return has_tool('pnpm')


def has_bun() -> bool:
    return has_tool('bun')


def get_package_manager(root_folder: str | Path, preferred: str = '') -> str:
    """
    Pick the package manager used to run the project's scripts.

    An explicit preference always wins. Otherwise the lockfile found in the
    root folder decides, as long as its tool is installed. npm is the fallback.
    """
    if preferred:
        return preferred
    root_folder = Path(root_folder)
    for lockfile, name in LOCKFILES.items():
        if not (root_folder / lockfile).is_file():
            continue
        if has_tool(name):
            return name
        logger.warning(f"Found {lockfile} but '{name}' is not installed, falling back")
    return 'npm'


__all__ = [
    'iswin',
    'has_yarn',
    'has_pnpm',
    'has_bun',
    'get_package_manager',
]
