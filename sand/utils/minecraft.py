import logging
import sys
from pathlib import Path

from sand.errors import SandError

logger = logging.getLogger(__name__)

# sys.platform -> .minecraft location relative to the home directory
MINECRAFT_DIRS = {
    'win32': Path('AppData', 'Roaming', '.minecraft'),
    'darwin': Path('Library', 'Application Support', 'minecraft'),
    'linux': Path('.minecraft'),
}
DEFAULT_MINECRAFT_DIR = MINECRAFT_DIRS['linux']


def get_default_minecraft_path(platform: str | None = None) -> Path:
    platform = platform or sys.platform
    return Path.home() / MINECRAFT_DIRS.get(platform, DEFAULT_MINECRAFT_DIR)


def get_minecraft_path(client_path: str | Path | None = None) -> str:
    """Get the .minecraft path, `client_path` overrides the per-platform default."""
    mc_path = Path(client_path) if client_path else get_default_minecraft_path()
    logger.debug(f'Using .minecraft folder {mc_path}')

    if not mc_path.exists():
        raise SandError(
            'Unable to locate the .minecraft folder. Please specify it manually with --client-path.'
        )

    return str(mc_path)


def get_saves_path(client_path: str | Path | None = None) -> Path:
    return Path(client_path or get_minecraft_path()) / 'saves'


def get_worlds_list(client_path: str | Path | None = None) -> list[str]:
    saves_path = get_saves_path(client_path)
    return sorted(x.name for x in saves_path.iterdir() if x.is_dir())


__all__ = [
    'get_minecraft_path',
    'get_default_minecraft_path',
    'get_saves_path',
    'get_worlds_list',
]
