from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import NetworkPlatform, strip_leading_lines


@dataclass
class IosxePlatform(NetworkPlatform):
    name: ClassVar[str] = "cisco_iosxe"

    filesystem: str = "flash:"

    def _clean_config(self, raw: str) -> str:
        return strip_leading_lines(raw, "Building configuration...", "Current configuration :")
