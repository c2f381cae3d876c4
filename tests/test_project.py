"""
Unit tests for marker file lookup and project folder resolution.
"""

import os

import pytest

from sand.errors import SandError
from sand.utils.project import (
    ProjectFolders,
    get_file_folder,
    get_project_folders,
)


class TestGetFileFolder:
    """Test the upward marker file search."""

    def test_marker_in_start_folder(self, tmp_path):
        """The start folder itself is a candidate."""
        (tmp_path / "config.json").write_text("{}")
        assert get_file_folder("config.json", tmp_path) == str(tmp_path)

    def test_marker_in_ancestor(self, tmp_path):
        """start=a/b/c with a/b/config.json returns a/b."""
        nested = tmp_path / "a" / "b" / "c"
        nested.mkdir(parents=True)
        (tmp_path / "a" / "b" / "config.json").write_text("{}")

        assert get_file_folder("config.json", nested) == str(tmp_path / "a" / "b")

    def test_nearest_ancestor_wins(self, tmp_path):
        """A closer marker shadows a more distant one."""
        nested = tmp_path / "a" / "b" / "c"
        nested.mkdir(parents=True)
        (tmp_path / "config.json").write_text("{}")
        (tmp_path / "a" / "b" / "config.json").write_text("{}")

        assert get_file_folder("config.json", nested) == str(tmp_path / "a" / "b")

    def test_same_result_from_all_descendants(self, tmp_path):
        """Every descendant of the marker folder resolves to it."""
        (tmp_path / "config.json").write_text("{}")
        deep = tmp_path / "x" / "y" / "z"
        deep.mkdir(parents=True)

        results = {
            get_file_folder("config.json", folder)
            for folder in [tmp_path, tmp_path / "x", tmp_path / "x" / "y", deep]
        }
        assert results == {str(tmp_path)}

    def test_not_found_returns_none(self, tmp_path):
        """No marker up to the root gives None instead of raising."""
        start = tmp_path / "a"
        start.mkdir()
        assert get_file_folder("no-such-marker-e3b0c442.json", start) is None

    def test_relative_start(self, tmp_path, monkeypatch):
        """Relative start folders are resolved against the cwd."""
        (tmp_path / "sub").mkdir()
        (tmp_path / "config.json").write_text("{}")
        monkeypatch.chdir(tmp_path)

        assert get_file_folder("config.json", "sub") == str(tmp_path)

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        """Without a start folder the search begins at the cwd."""
        (tmp_path / "config.json").write_text("{}")
        monkeypatch.chdir(tmp_path)

        assert get_file_folder("config.json") == os.path.abspath(".")


class TestGetProjectFolders:
    """Test project folder resolution."""

    def test_both_markers_in_project(self, sandstone_project):
        """All resolved folders point at the project itself."""
        folders = get_project_folders(str(sandstone_project))

        assert folders == ProjectFolders(
            abs_project_folder=str(sandstone_project),
            project_folder=str(sandstone_project),
            root_folder=str(sandstone_project),
            sandstone_config_folder=str(sandstone_project),
        )

    def test_relative_input_is_echoed(self, sandstone_project, monkeypatch):
        """project_folder keeps the input verbatim, the others are absolute."""
        monkeypatch.chdir(sandstone_project.parent)

        folders = get_project_folders("project")

        assert folders.project_folder == "project"
        assert folders.abs_project_folder == str(sandstone_project)
        assert folders.root_folder == str(sandstone_project)
        assert folders.sandstone_config_folder == str(sandstone_project)

    def test_markers_in_different_folders(self, tmp_path):
        """package.json and sandstone.config.ts may live at different levels."""
        project = tmp_path / "packs" / "main"
        project.mkdir(parents=True)
        (tmp_path / "package.json").write_text("{}")
        (project / "sandstone.config.ts").write_text("export default {}\n")

        folders = get_project_folders(str(project))

        assert folders.root_folder == str(tmp_path)
        assert folders.sandstone_config_folder == str(project)
        assert folders.sandstone_config_path == project / "sandstone.config.ts"

    def test_missing_sandstone_config(self, tmp_path):
        """The error names the missing file and the absolute input path."""
        (tmp_path / "package.json").write_text("{}")

        with pytest.raises(SandError) as exc_info:
            get_project_folders(str(tmp_path))

        assert "sandstone.config.ts" in exc_info.value.message
        assert str(tmp_path) in exc_info.value.message

    def test_missing_package_json(self, tmp_path):
        """package.json is looked up first."""
        (tmp_path / "sandstone.config.ts").write_text("export default {}\n")

        with pytest.raises(SandError, match="package.json"):
            get_project_folders(str(tmp_path))

    def test_folders_are_immutable(self, sandstone_project):
        """ProjectFolders can not be modified after resolution."""
        folders = get_project_folders(str(sandstone_project))

        with pytest.raises(AttributeError):
            folders.root_folder = "/elsewhere"
