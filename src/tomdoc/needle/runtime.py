import os
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from .loader import Loader
from .pointer import SemanticPointer

ASSETS_ROOT = Path(__file__).resolve().parent.parent / "assets"


class Needle:
    """
    Resolves message ids to user-facing templates.

    Roots are searched in order; later roots override earlier ones. Each root
    may hold `needle/<lang>/` (packaged catalogs) and `.tomdoc/needle/<lang>/`
    (project overrides).
    """

    def __init__(self, roots: Optional[List[Path]] = None):
        self.default_lang = "en"
        self.roots: List[Path] = roots if roots is not None else [ASSETS_ROOT]
        self._registry: Dict[str, Dict[str, str]] = {}
        self._loaded_langs: Set[str] = set()
        self.project_root: Optional[Path] = None
        self._loader = Loader()

    def set_project_root(self, path: Optional[Path]) -> None:
        """The project root is searched last, so its overrides always win."""
        if path != self.project_root:
            self.project_root = path
            self.reset()

    def reset(self) -> None:
        self._registry.clear()
        self._loaded_langs.clear()

    def _ensure_lang_loaded(self, lang: str) -> None:
        if lang in self._loaded_langs:
            return

        merged: Dict[str, str] = {}
        roots = list(self.roots)
        if self.project_root is not None:
            roots.append(self.project_root)

        for root in roots:
            merged.update(self._loader.load_directory(root / "needle" / lang))
            merged.update(
                self._loader.load_directory(root / ".tomdoc" / "needle" / lang)
            )

        self._registry[lang] = merged
        self._loaded_langs.add(lang)

    def get(
        self, pointer: Union[SemanticPointer, str], lang: Optional[str] = None
    ) -> str:
        """
        Lookup order: target language, default language, then the id itself.
        """
        key = str(pointer)
        target_lang = lang or os.getenv("TOMDOC_LANG", self.default_lang)

        self._ensure_lang_loaded(target_lang)
        value = self._registry[target_lang].get(key)
        if value is not None:
            return value

        if target_lang != self.default_lang:
            self._ensure_lang_loaded(self.default_lang)
            value = self._registry[self.default_lang].get(key)
            if value is not None:
                return value

        return key


needle = Needle()
