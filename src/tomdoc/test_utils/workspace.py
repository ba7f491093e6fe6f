from pathlib import Path
from textwrap import dedent
from typing import Any, Dict, List

import tomli_w
import yaml


class WorkspaceFactory:
    def __init__(self, root_path: Path):
        self.root_path = root_path
        self._files_to_create: List[Dict[str, Any]] = []
        self._pyproject_data: Dict[str, Any] = {}

    def with_config(self, tomdoc_config: Dict[str, Any]) -> "WorkspaceFactory":
        tool = self._pyproject_data.setdefault("tool", {})
        tool["tomdoc"] = tomdoc_config
        return self

    def with_source(self, path: str, content: str) -> "WorkspaceFactory":
        self._files_to_create.append(
            {"path": path, "content": dedent(content), "format": "raw"}
        )
        return self

    def with_messages(
        self, lang: str, name: str, data: Dict[str, str]
    ) -> "WorkspaceFactory":
        self._files_to_create.append(
            {
                "path": f".tomdoc/needle/{lang}/{name}.yaml",
                "content": data,
                "format": "yaml",
            }
        )
        return self

    def build(self) -> Path:
        if self._pyproject_data:
            self._files_to_create.append(
                {
                    "path": "pyproject.toml",
                    "content": self._pyproject_data,
                    "format": "toml",
                }
            )

        for file_spec in self._files_to_create:
            output_path = self.root_path / file_spec["path"]
            output_path.parent.mkdir(parents=True, exist_ok=True)

            fmt = file_spec["format"]
            content = file_spec["content"]

            if fmt == "toml":
                with output_path.open("wb") as f:
                    tomli_w.dump(content, f)
            elif fmt == "yaml":
                output_path.write_text(
                    yaml.dump(content, indent=2, allow_unicode=True), encoding="utf-8"
                )
            else:  # raw
                output_path.write_text(content, encoding="utf-8")

        return self.root_path
