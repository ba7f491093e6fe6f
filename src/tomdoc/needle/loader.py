import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from .handlers import FileHandler, JsonHandler, YamlHandler

log = logging.getLogger(__name__)


class Loader:
    def __init__(self, handlers: Optional[List[FileHandler]] = None):
        self.handlers = handlers or [JsonHandler(), YamlHandler()]

    def _load_and_merge_file(self, path: Path, registry: Dict[str, str]) -> None:
        for handler in self.handlers:
            if handler.match(path):
                try:
                    content = handler.load(path)
                except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
                    log.warning("Ignoring message catalog %s: %s", path, e)
                    return
                # Keys are full message ids at the top level.
                for key, value in content.items():
                    registry[str(key)] = str(value)
                return

    def load_directory(self, root_path: Path) -> Dict[str, str]:
        registry: Dict[str, str] = {}
        if not root_path.is_dir():
            return registry

        for file_path in sorted(p for p in root_path.rglob("*") if p.is_file()):
            self._load_and_merge_file(file_path, registry)
        return registry
