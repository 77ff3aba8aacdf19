from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import NetworkPlatform, strip_leading_lines


@dataclass
class NxosPlatform(NetworkPlatform):
    name: ClassVar[str] = "cisco_nxos"

    filesystem: str = "bootflash:"

    def _clean_config(self, raw: str) -> str:
        # "!Command: ...", "!Running configuration last done at: ...", "!Time: ..."
        return strip_leading_lines(raw, "!Command:", "!Running configuration", "!Time:", "!Startup config saved")
