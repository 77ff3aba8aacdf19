"""
Platform definition registry.

Resolution order:
  1) Built-in definitions (always present)
  2) Optional override files (*.yaml, *.yml, *.json) in a definitions directory

Directory:
    argument to PlatformDefinitionRegistry, else the
    NETCFG_PLATFORM_DEFINITIONS_DIR environment variable (optional).

An override file holds one definition mapping, or a list of them. Invalid files
are skipped with a warning; built-ins remain in place.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from netcfg.core.cfg.errors import UnknownPlatform

from .builtins import builtin_definitions
from .models import PlatformDefinition

_log = logging.getLogger("netcfg.definitions")

_SUFFIXES = (".yaml", ".yml", ".json")


def _read_file(path: Path) -> Any:
    raw_text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(raw_text)
    return yaml.safe_load(raw_text)


class PlatformDefinitionRegistry:
    def __init__(self, definitions_dir: Optional[Path] = None):
        self.definitions_dir = self._resolve_dir(definitions_dir)
        self._definitions: Dict[str, PlatformDefinition] = {}
        self._load_all()

    @staticmethod
    def _resolve_dir(definitions_dir: Optional[Path]) -> Optional[Path]:
        if definitions_dir is not None:
            return Path(definitions_dir)
        env_dir = os.getenv("NETCFG_PLATFORM_DEFINITIONS_DIR", "").strip()
        if env_dir:
            return Path(env_dir)
        return None

    def _load_all(self) -> None:
        self._definitions = {d.name: d for d in builtin_definitions()}

        if self.definitions_dir is None:
            return
        if not self.definitions_dir.is_dir():
            _log.warning("Platform definitions path %s is not a directory, using built-ins only", self.definitions_dir)
            return

        for p in sorted(self.definitions_dir.iterdir()):
            if p.suffix not in _SUFFIXES:
                continue
            for d in self._load_file(p):
                if d.name in self._definitions:
                    _log.info("Overriding platform definition %s from %s", d.name, p)
                self._definitions[d.name] = d

    def _load_file(self, path: Path) -> List[PlatformDefinition]:
        try:
            data = _read_file(path)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            _log.warning("Cannot read platform definition file %s: %s", path, exc)
            return []

        entries = data if isinstance(data, list) else [data]
        out: List[PlatformDefinition] = []
        for entry in entries:
            if not isinstance(entry, dict):
                _log.warning("Skipping non-mapping entry in %s", path)
                continue
            try:
                out.append(PlatformDefinition.model_validate(entry))
            except ValidationError as exc:
                _log.warning("Skipping invalid platform definition in %s: %s", path, exc)
        return out

    def list_names(self) -> list[str]:
        return sorted(self._definitions.keys())

    def get(self, name: str) -> Optional[PlatformDefinition]:
        return self._definitions.get(name)

    def require(self, name: str) -> PlatformDefinition:
        d = self.get(name)
        if d is None:
            raise UnknownPlatform(name=name, available=self.list_names())
        return d
