from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Union

from .injector import set_platform_attr
from .models import Driver, OptionResult

if TYPE_CHECKING:
    from .facade import Cfg
    from netcfg.core.platforms.base import Platform

Option = Callable[[Any], OptionResult]


def _cfg_option(name: str, mutate: Callable[["Cfg"], None]) -> Option:
    def option(target: Any) -> OptionResult:
        from .facade import Cfg

        if not isinstance(target, Cfg):
            return OptionResult.not_applicable(name)
        mutate(target)
        return OptionResult.applied(name)

    option.__name__ = name
    return option


def _platform_option(name: str, attr_name: str, value: Any) -> Option:
    def option(target: Any) -> OptionResult:
        return set_platform_attr(attr_name, value, target, option=name)

    option.__name__ = name
    return option


# base Cfg options


def with_config_sources(sources: List[str]) -> Option:
    """Replace the config sources (datastores) the cfg may act against."""
    sources = list(sources)

    def mutate(c: "Cfg") -> None:
        c.config_sources = list(sources)

    return _cfg_option("with_config_sources", mutate)


def with_on_prepare(on_prepare: Optional[Callable[[Driver], None]]) -> Option:
    def mutate(c: "Cfg") -> None:
        c.on_prepare = on_prepare

    return _cfg_option("with_on_prepare", mutate)


def with_dedicated_connection(dedicated_connection: bool) -> Option:
    def mutate(c: "Cfg") -> None:
        c.dedicated_connection = bool(dedicated_connection)

    return _cfg_option("with_dedicated_connection", mutate)


def with_ignore_version(ignore_version: bool) -> Option:
    def mutate(c: "Cfg") -> None:
        c.ignore_version = bool(ignore_version)

    return _cfg_option("with_ignore_version", mutate)


def with_platform(platform: "Platform") -> Option:
    def mutate(c: "Cfg") -> None:
        c.platform = platform

    return _cfg_option("with_platform", mutate)


# platform specific options


def with_version_pattern(version_pattern: Union[re.Pattern[str], str]) -> Option:
    if isinstance(version_pattern, str):
        version_pattern = re.compile(version_pattern)
    return _platform_option("with_version_pattern", "version_pattern", version_pattern)


def with_config_command_map(config_command_map: Dict[str, str]) -> Option:
    return _platform_option("with_config_command_map", "config_command_map", dict(config_command_map))


def with_filesystem(filesystem: str) -> Option:
    return _platform_option("with_filesystem", "filesystem", filesystem)


def with_config_session_prefix(prefix: str) -> Option:
    return _platform_option("with_config_session_prefix", "config_session_prefix", prefix)
