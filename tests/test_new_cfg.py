from __future__ import annotations

import logging

import pytest

from netcfg.core.cfg import (
    InvalidPlatformAttribute,
    NoConfigSourcesProvided,
    UnknownPlatform,
    new_cfg,
    with_config_sources,
    with_dedicated_connection,
    with_filesystem,
    with_version_pattern,
)
from netcfg.core.platform_definitions.registry import PlatformDefinitionRegistry
from netcfg.core.platforms import EosPlatform, IosxePlatform, NetworkPlatform


def test_new_cfg_binds_vendor_platform_with_defaults(driver):
    c = new_cfg(driver, "cisco_iosxe")

    assert isinstance(c.platform, IosxePlatform)
    assert c.platform.conn is driver
    assert c.config_sources == ["running", "startup"]
    assert c.platform.config_command_map["startup"] == "show startup-config"


def test_options_reach_both_targets(driver):
    c = new_cfg(
        driver,
        "cisco_iosxe",
        with_config_sources(["running"]),
        with_dedicated_connection(True),
        with_version_pattern(r"\d+"),
        with_filesystem("bootflash:"),
    )

    assert c.config_sources == ["running"]
    assert c.dedicated_connection is True
    assert c.platform.version_pattern.pattern == r"\d+"
    assert c.platform.filesystem == "bootflash:"


def test_vendor_option_on_wrong_vendor_fails(driver):
    with pytest.raises(InvalidPlatformAttribute):
        new_cfg(driver, "arista_eos", with_filesystem("flash:"))


def test_empty_sources_override_fails(driver):
    with pytest.raises(NoConfigSourcesProvided):
        new_cfg(driver, "cisco_nxos", with_config_sources([]))


def test_unknown_platform(driver):
    with pytest.raises(UnknownPlatform):
        new_cfg(driver, "nokia_srl")


def test_definition_only_platform_uses_generic(fake_driver_cls, driver_response_cls, tmp_path, caplog):
    (tmp_path / "srl.yaml").write_text(
        "\n".join(
            [
                "name: nokia_srl",
                "version_command: show version",
                "version_pattern: 'v\\d+\\.\\d+\\.\\d+'",
                "config_command_map: {running: info flat}",
                "default_config_sources: [running]",
            ]
        ),
        encoding="utf-8",
    )
    drv = fake_driver_cls(
        {
            "show version": driver_response_cls(result="Software Version : v23.10.1"),
            "info flat": driver_response_cls(result="set / system name host-name srl1\n"),
        }
    )

    with caplog.at_level(logging.INFO, logger="netcfg.cfg"):
        c = new_cfg(drv, "nokia_srl", definitions=PlatformDefinitionRegistry(tmp_path))

    assert type(c.platform) is NetworkPlatform
    assert any("generic platform" in r.getMessage() for r in caplog.records)

    with c:
        assert c.version_string == "v23.10.1"
        assert c.get_config("running").result == "set / system name host-name srl1"


def test_end_to_end_eos_session(fake_driver_cls, driver_response_cls):
    drv = fake_driver_cls(
        {
            "show version | i Software image version": driver_response_cls(
                result="Software image version: 4.28.3M"
            ),
            "show running-config": driver_response_cls(result="! Command: show running-config\nhostname e1"),
        }
    )

    with new_cfg(drv, "arista_eos") as c:
        assert isinstance(c.platform, EosPlatform)
        assert c.version_string == "4.28.3M"
        assert c.get_config("running").result == "hostname e1"
        rendered = c.render_substituted_config("hostname {{ name }}", {"name": "e2"})

    assert rendered == "hostname e2"
    assert c.candidate_config == ""
    assert drv.close_calls == 0
