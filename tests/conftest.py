"""
Shared pytest fixtures for sand tests.
"""

import pytest

from sand.utils.project import PACKAGE_JSON, SANDSTONE_CONFIG


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Point the user config at an empty temporary folder."""
    config_path = tmp_path_factory.mktemp("config") / "config.json"
    monkeypatch.setattr("sand.config.get_config_path", lambda: config_path)
    return config_path


@pytest.fixture
def sandstone_project(tmp_path):
    """A project folder holding both package.json and sandstone.config.ts."""
    project = tmp_path / "project"
    project.mkdir()
    (project / PACKAGE_JSON).write_text('{"name": "my-datapack"}')
    (project / SANDSTONE_CONFIG).write_text("export default {}\n")
    return project


@pytest.fixture
def minecraft_dir(tmp_path):
    """A fake .minecraft folder with two worlds and a stray file in saves."""
    mc_dir = tmp_path / ".minecraft"
    saves = mc_dir / "saves"
    saves.mkdir(parents=True)
    (saves / "Survival").mkdir()
    (saves / "Creative Test").mkdir()
    (saves / "notes.txt").write_text("not a world")
    return mc_dir
