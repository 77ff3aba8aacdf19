from .base import NetworkPlatform, Platform
from .cisco_iosxe import IosxePlatform
from .cisco_nxos import NxosPlatform
from .cisco_iosxr import IosxrPlatform
from .arista_eos import EosPlatform
from .juniper_junos import JunosPlatform

PLATFORMS = {
    "cisco_iosxe": IosxePlatform,
    "cisco_nxos": NxosPlatform,
    "cisco_iosxr": IosxrPlatform,
    "arista_eos": EosPlatform,
    "juniper_junos": JunosPlatform,
}

__all__ = [
    "PLATFORMS",
    "Platform",
    "NetworkPlatform",
    "IosxePlatform",
    "NxosPlatform",
    "IosxrPlatform",
    "EosPlatform",
    "JunosPlatform",
]
