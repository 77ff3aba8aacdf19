from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import NetworkPlatform, strip_leading_lines


@dataclass
class JunosPlatform(NetworkPlatform):
    name: ClassVar[str] = "juniper_junos"

    def _clean_config(self, raw: str) -> str:
        return strip_leading_lines(raw, "## Last commit:")
