import json

import pytest

from loaderfetch import load_config
from loaderfetch.exceptions import ConfigParseError, ConfigValidationError
from loaderfetch.models import LaunchConfig, LoaderFetchConfig, LaunchVersion, MCLCLaunchConfig


def test_defaults():
    config = LoaderFetchConfig()
    assert config.timeout == 30.0
    assert config.chunk_size == 8192
    assert config.cleanup_partial is True


@pytest.mark.parametrize(
    "data",
    [
        {"timeout": 0},
        {"timeout": "fast"},
        {"read_timeout": True},
        {"chunk_size": -1},
        {"chunk_size": 1.5},
        {"cleanup_partial": "yes"},
        {"user_agent": ""},
        {"retries": 3},
    ],
)
def test_invalid_settings(data):
    with pytest.raises(ConfigValidationError):
        LoaderFetchConfig.from_dict(data)


def test_load_toml_section(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text(
        '[loaderfetch]\ntimeout = 5\nuser_agent = "launcher/2.0"\n', encoding="utf-8"
    )
    config = load_config(path)
    assert config.timeout == 5
    assert config.user_agent == "launcher/2.0"


def test_load_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"chunk_size": 1024}), encoding="utf-8")
    assert load_config(str(path)).chunk_size == 1024


def test_load_yaml(tmp_path):
    path = tmp_path / "settings.yml"
    path.write_text("loaderfetch:\n  cleanup_partial: false\n", encoding="utf-8")
    assert load_config(path).cleanup_partial is False


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == LoaderFetchConfig()


@pytest.mark.parametrize(
    "name, content",
    [
        ("settings.ini", "timeout=5"),
        ("settings.toml", "timeout = = 5"),
        ("settings.json", "{"),
        ("settings.yaml", "- 1\n- 2\n"),
    ],
)
def test_load_invalid_files(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigParseError):
        load_config(tmp_path / "missing.toml")


def test_launch_config_requires_game_version():
    with pytest.raises(ConfigValidationError):
        LaunchConfig(root_path="/x", game_version="")


def test_launch_config_from_dict():
    config = LaunchConfig.from_dict(
        {"rootPath": "/x", "gameVersion": "1.20.1", "loaderVersion": "HD_U_J2"}
    )
    assert config == LaunchConfig("/x", "1.20.1", "HD_U_J2")
    assert LaunchConfig.from_dict({"root_path": "/x", "game_version": "1.20.1"}) == (
        LaunchConfig("/x", "1.20.1")
    )


def test_launch_config_is_immutable():
    config = LaunchConfig(root_path="/x", game_version="1.20.1")
    with pytest.raises(AttributeError):
        config.loader_version = "HD_U_J2"


def test_launch_output_merges_extra_fields():
    output = MCLCLaunchConfig(
        root="/x",
        version=LaunchVersion(number="1.20.1", custom="forge-1.20.1-47.2.0"),
        extra={"forge": "/x/versions/forge-1.20.1-47.2.0/forge-installer.jar"},
    )
    assert output.to_dict() == {
        "root": "/x",
        "version": {
            "number": "1.20.1",
            "type": "release",
            "custom": "forge-1.20.1-47.2.0",
        },
        "forge": "/x/versions/forge-1.20.1-47.2.0/forge-installer.jar",
    }
