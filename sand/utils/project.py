import os
from dataclasses import dataclass
from pathlib import Path

from sand.errors import SandError

PACKAGE_JSON = 'package.json'
SANDSTONE_CONFIG = 'sandstone.config.ts'


def get_file_folder(filename: str, from_: str | Path = '.') -> str | None:
    """
    Search for a file in a folder and in each of its parents.

    Args:
        filename: Name of the file to look for
        from_: Folder the search starts at (defaults to cwd)

    Returns:
        The nearest folder containing the file, or None if no parent has it
    """
    file_folder = os.path.abspath(from_)

    while not os.path.exists(os.path.join(file_folder, filename)):
        parent = os.path.dirname(file_folder)
        if parent == file_folder:
            # reached the root
            return None
        file_folder = parent

    return file_folder


@dataclass(frozen=True)
class ProjectFolders:
    abs_project_folder: str
    project_folder: str
    root_folder: str
    sandstone_config_folder: str

    @property
    def sandstone_config_path(self) -> Path:
        return Path(self.sandstone_config_folder) / SANDSTONE_CONFIG


def _missing_file_error(filename: str, abs_project_folder: str) -> SandError:
    return SandError(
        f'Failed to find {filename} in the "{abs_project_folder}" folder, '
        'or in any parent folder.'
    )


def get_project_folders(project_folder: str) -> ProjectFolders:
    abs_project_folder = os.path.abspath(project_folder)

    # package.json marks the folder holding node_modules
    root_folder = get_file_folder(PACKAGE_JSON, project_folder)
    if not root_folder:
        raise _missing_file_error(PACKAGE_JSON, abs_project_folder)

    sandstone_config_folder = get_file_folder(SANDSTONE_CONFIG, project_folder)
    if not sandstone_config_folder:
        raise _missing_file_error(SANDSTONE_CONFIG, abs_project_folder)

    return ProjectFolders(
        abs_project_folder=abs_project_folder,
        project_folder=project_folder,
        root_folder=root_folder,
        sandstone_config_folder=sandstone_config_folder,
    )


__all__ = ['get_file_folder', 'get_project_folders', 'ProjectFolders']
