from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .facade import Cfg
from .models import Driver
from .options import Option, with_config_sources, with_platform

if TYPE_CHECKING:
    from netcfg.core.platform_definitions.registry import PlatformDefinitionRegistry

log = logging.getLogger("netcfg.cfg")


def new_cfg(
    conn: Driver,
    platform: str,
    *options: Option,
    definitions: Optional["PlatformDefinitionRegistry"] = None,
) -> Cfg:
    """Build a Cfg bound to the named vendor platform.

    The same options are applied to the platform and then to the Cfg; each
    option only acts on the target type it configures. Platforms with a
    definition but no dedicated class get the generic command driven platform.
    """
    from netcfg.core.platform_definitions.registry import PlatformDefinitionRegistry
    from netcfg.core.platforms import PLATFORMS, NetworkPlatform

    registry = definitions or PlatformDefinitionRegistry()
    definition = registry.require(platform)

    platform_cls = PLATFORMS.get(platform, NetworkPlatform)
    if platform_cls is NetworkPlatform:
        log.info("No dedicated platform class for %s, using generic platform", platform)

    p = platform_cls.create(conn, *options, definition=definition)

    return Cfg(
        conn,
        with_config_sources(definition.default_config_sources),
        with_platform(p),
        *options,
    )
