import dataclasses
import json
import logging
from dataclasses import dataclass
from json import JSONDecodeError

from platformdirs import PlatformDirs

logger = logging.getLogger(__name__)

APP_NAME = 'sand'


@dataclass
class Config:
    client_path: str = ''
    package_manager: str = ''


def get_dirs():
    return PlatformDirs(APP_NAME, appauthor=False, roaming=True)


def get_config_path():
    return get_dirs().user_config_path / 'config.json'


def load_config() -> Config:
    config_path = get_config_path()
    if not config_path.is_file():
        return Config()

    try:
        with open(config_path) as f:
            data = json.load(f)
    except JSONDecodeError:
        logger.warning(f'Ignoring corrupt config file {config_path}')
        return Config()

    if not isinstance(data, dict):
        return Config()
    known = {f.name for f in dataclasses.fields(Config)}
    res = Config(**{k: v for k, v in data.items() if k in known})

    if not (isinstance(res.client_path, str) and isinstance(res.package_manager, str)):
        logger.warning(f'Ignoring invalid config file {config_path}')
        return Config()

    return res


def save_config(config: Config) -> None:
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w') as f:
        json.dump(dataclasses.asdict(config), f, indent=2)


__all__ = [
    'Config',
    'load_config',
    'save_config',
]
