from __future__ import annotations

from .models import PlatformDefinition


def builtin_definitions() -> list[PlatformDefinition]:
    # Defaults for the vendors shipped with netcfg. Override files may replace any of them.
    return [
        PlatformDefinition(
            name="cisco_iosxe",
            description="Cisco IOS-XE",
            version_command="show version | i Version",
            version_pattern=r"\d+\.[a-z0-9\(\).]+",
            config_command_map={
                "running": "show running-config",
                "startup": "show startup-config",
            },
            default_config_sources=["running", "startup"],
        ),
        PlatformDefinition(
            name="cisco_nxos",
            description="Cisco NX-OS",
            version_command="show version | i \"NXOS: version\"",
            version_pattern=r"\d+\.\d+\(\d+\)[a-z]*\d*(\(\d+[a-z]*\))?",
            config_command_map={
                "running": "show running-config",
                "startup": "show startup-config",
            },
            default_config_sources=["running", "startup"],
        ),
        PlatformDefinition(
            name="cisco_iosxr",
            description="Cisco IOS-XR",
            version_command="show version | i Version",
            version_pattern=r"\d+\.\d+\.\d+",
            config_command_map={
                "running": "show running-config",
            },
            default_config_sources=["running"],
        ),
        PlatformDefinition(
            name="arista_eos",
            description="Arista EOS",
            version_command="show version | i Software image version",
            version_pattern=r"\d+\.\d+\.[a-z0-9\-]+(\.\d+[a-z]?)?",
            config_command_map={
                "running": "show running-config",
                "startup": "show startup-config",
            },
            default_config_sources=["running", "startup"],
        ),
        PlatformDefinition(
            name="juniper_junos",
            description="Juniper Junos",
            version_command="show version | grep \"Junos:\"",
            version_pattern=r"\d+\.\d+[a-z]\d+(\-\w+)?(\.\d+)?",
            config_command_map={
                "running": "show configuration",
            },
            default_config_sources=["running"],
        ),
    ]
