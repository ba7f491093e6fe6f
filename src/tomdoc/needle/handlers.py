import json
from pathlib import Path
from typing import Any, Dict, Protocol

import yaml


class FileHandler(Protocol):
    def match(self, path: Path) -> bool: ...

    def load(self, path: Path) -> Dict[str, Any]: ...


class JsonHandler:
    def match(self, path: Path) -> bool:
        return path.suffix.lower() == ".json"

    def load(self, path: Path) -> Dict[str, Any]:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)


class YamlHandler:
    def match(self, path: Path) -> bool:
        return path.suffix.lower() in (".yaml", ".yml")

    def load(self, path: Path) -> Dict[str, Any]:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
        return content if isinstance(content, dict) else {}
