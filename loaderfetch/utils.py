import json
from pathlib import Path
from typing import Union

import toml
import yaml

from loaderfetch.exceptions import ConfigParseError
from loaderfetch.models import LoaderFetchConfig


def read_config_file(config_path: Union[str, Path]) -> dict:
    """读取配置文件（toml/json/yaml）"""
    path = Path(config_path)

    if not path.exists():
        raise ConfigParseError(
            f"配置文件不存在: {config_path}", context={"path": str(path)}
        )

    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            data = toml.load(str(path))
        elif suffix == ".json":
            data = json.loads(path.read_text(encoding="utf-8"))
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        else:
            raise ConfigParseError(
                f"不支持的配置文件格式: {suffix}", context={"path": str(path)}
            )
    except (toml.TomlDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigParseError(
            f"配置文件解析失败: {e}", context={"path": str(path)}
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            "配置文件顶层必须是表/对象", context={"path": str(path)}
        )
    return data


def load_config(config_path: Union[str, Path]) -> LoaderFetchConfig:
    """
    加载运行设置

    如果文件中存在 [loaderfetch] 段，则只使用该段。
    """
    data = read_config_file(config_path)
    section = data.get("loaderfetch", data)
    if not isinstance(section, dict):
        raise ConfigParseError("[loaderfetch] 段必须是表/对象")
    return LoaderFetchConfig.from_dict(section)
