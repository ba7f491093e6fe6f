import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

from tomdoc.spec import ConfigError, OutputFormat


@dataclass
class TomdocConfig:
    format: OutputFormat = OutputFormat.TEXT
    access: Optional[str] = None
    comment_marker: str = "#"
    skip_prefixes: List[str] = field(default_factory=lambda: ["# shellcheck"])


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while current_dir.parent != current_dir:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def _parse_format(value: Any) -> OutputFormat:
    try:
        return OutputFormat(value)
    except ValueError:
        choices = ", ".join(f.value for f in OutputFormat)
        raise ConfigError("format", f"expected one of {choices}, got {value!r}")


def _expect_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(key, f"expected a string, got {type(value).__name__}")
    return value


def config_from_dict(data: Dict[str, Any]) -> TomdocConfig:
    config = TomdocConfig()

    if "format" in data:
        config.format = _parse_format(data["format"])

    access = _expect_str(data, "access")
    if access:
        config.access = access

    marker = _expect_str(data, "comment_marker")
    if marker is not None:
        if not marker.strip():
            raise ConfigError("comment_marker", "must not be empty")
        config.comment_marker = marker

    if "skip_prefixes" in data:
        prefixes = data["skip_prefixes"]
        if not isinstance(prefixes, list) or not all(
            isinstance(p, str) for p in prefixes
        ):
            raise ConfigError("skip_prefixes", "expected a list of strings")
        if not all(p.strip() for p in prefixes):
            # An empty prefix would match, and hide, every line.
            raise ConfigError("skip_prefixes", "prefixes must not be empty")
        config.skip_prefixes = list(prefixes)

    return config


def load_config_from_path(search_path: Path) -> TomdocConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return TomdocConfig()

    with open(config_path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError("pyproject.toml", str(e)) from e

    tomdoc_data: Dict[str, Any] = data.get("tool", {}).get("tomdoc", {})
    return config_from_dict(tomdoc_data)
