from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar

from netcfg.core.cfg.errors import InvalidPlatformAttributeValue
from netcfg.core.cfg.injector import register_attr_setter

from .base import NetworkPlatform, strip_leading_lines

_SESSION_PREFIX = re.compile(r"^[A-Za-z0-9_\-]{1,32}$")


@dataclass
class EosPlatform(NetworkPlatform):
    name: ClassVar[str] = "arista_eos"

    # config sessions are named "<prefix><timestamp>"
    config_session_prefix: str = "netcfg_"

    def _clean_config(self, raw: str) -> str:
        return strip_leading_lines(raw, "! Command:", "! device:", "! boot system")


def _set_config_session_prefix(p: Any, value: Any) -> None:
    if not isinstance(value, str) or not _SESSION_PREFIX.match(value):
        raise InvalidPlatformAttributeValue(
            attr_name="config_session_prefix",
            target_type=type(p).__name__,
            expected="1-32 chars of [A-Za-z0-9_-]",
            actual=repr(value),
        )
    p.config_session_prefix = value


register_attr_setter(EosPlatform, "config_session_prefix", _set_config_session_prefix)
