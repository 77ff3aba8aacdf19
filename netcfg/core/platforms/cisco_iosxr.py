from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from .base import NetworkPlatform, strip_leading_lines

# e.g. "Thu Mar  3 10:15:42.123 UTC"
_TIMESTAMP = re.compile(r"^[A-Z][a-z]{2}\s+[A-Z][a-z]{2}\s+\d+\s+\d{2}:\d{2}:\d{2}(\.\d+)?\s+\w+\s*$")


@dataclass
class IosxrPlatform(NetworkPlatform):
    name: ClassVar[str] = "cisco_iosxr"

    def _clean_config(self, raw: str) -> str:
        lines = raw.strip().splitlines()
        if lines and _TIMESTAMP.match(lines[0].strip()):
            lines = lines[1:]
        return strip_leading_lines("\n".join(lines), "Building configuration...", "!! IOS XR Configuration")
