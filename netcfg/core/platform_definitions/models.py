from __future__ import annotations

import re
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class PlatformDefinition(BaseModel):
    name: str
    description: Optional[str] = None

    version_command: str = "show version"
    version_pattern: str
    version_pattern_flags: List[str] = Field(default_factory=lambda: ["IGNORECASE"])

    # datastore name -> command used to retrieve it
    config_command_map: Dict[str, str] = Field(default_factory=dict)
    default_config_sources: List[str] = Field(default_factory=list)

    @field_validator("version_pattern")
    @classmethod
    def _pattern_compiles(cls, v: str) -> str:
        re.compile(v)
        return v

    @field_validator("version_pattern_flags")
    @classmethod
    def _known_flags(cls, v: List[str]) -> List[str]:
        out = [f.upper() for f in v]
        unknown = [f for f in out if not isinstance(getattr(re, f, None), re.RegexFlag)]
        if unknown:
            raise ValueError(f"unknown regex flags: {', '.join(unknown)}")
        return out

    @model_validator(mode="after")
    def _sources_have_commands(self) -> "PlatformDefinition":
        missing = [s for s in self.default_config_sources if s not in self.config_command_map]
        if missing:
            raise ValueError(f"default_config_sources without a command: {', '.join(missing)}")
        return self

    def compiled_version_pattern(self) -> re.Pattern:
        flags = 0
        for f in self.version_pattern_flags:
            flags |= getattr(re, f)
        return re.compile(self.version_pattern, flags)
