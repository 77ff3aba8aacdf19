from __future__ import annotations

import pytest

from netcfg.core.cfg import (
    Cfg,
    CfgState,
    NoConfigSourcesProvided,
    with_config_sources,
    with_dedicated_connection,
    with_ignore_version,
    with_on_prepare,
    with_platform,
    with_version_pattern,
)
from netcfg.core.cfg.models import OptionResult


def test_defaults(driver):
    c = Cfg(driver, with_config_sources(["running"]))

    assert c.config_sources == ["running"]
    assert c.on_prepare is None
    assert c.dedicated_connection is False
    assert c.ignore_version is False
    assert c.candidate_config == ""
    assert c.version_string == ""
    assert c.platform is None
    assert c.conn is driver
    assert c.state is CfgState.UNPREPARED
    assert c.prepared is False


def test_zero_options_raises_no_config_sources(driver):
    with pytest.raises(NoConfigSourcesProvided):
        Cfg(driver)


def test_all_declining_options_still_raise_no_config_sources(driver):
    def decline(_):
        return OptionResult.not_applicable("decline")

    with pytest.raises(NoConfigSourcesProvided):
        Cfg(driver, decline, decline, with_version_pattern(r"\d+"))


def test_explicit_empty_sources_raise(driver):
    with pytest.raises(NoConfigSourcesProvided):
        Cfg(driver, with_config_sources([]))


@pytest.mark.parametrize(
    "sources",
    [["running"], ["running", "startup"], ["startup", "running", "candidate"]],
)
def test_config_sources_kept_in_order(driver, sources):
    c = Cfg(driver, with_config_sources(sources))
    assert c.config_sources == sources


def test_config_sources_are_copied(driver):
    sources = ["running"]
    c = Cfg(driver, with_config_sources(sources))
    sources.append("startup")
    assert c.config_sources == ["running"]


def test_dedicated_connection_last_write_wins(driver):
    c = Cfg(
        driver,
        with_config_sources(["running"]),
        with_dedicated_connection(True),
        with_dedicated_connection(False),
    )
    assert c.dedicated_connection is False


def test_cfg_options_set_their_fields(driver, stub_platform_cls):
    def hook(conn):
        return None

    platform = stub_platform_cls()
    c = Cfg(
        driver,
        with_config_sources(["running"]),
        with_on_prepare(hook),
        with_ignore_version(True),
        with_platform(platform),
    )

    assert c.on_prepare is hook
    assert c.ignore_version is True
    assert c.platform is platform


def test_failing_option_aborts_construction(driver):
    def boom(_):
        return OptionResult.failed(RuntimeError("bad option"), "boom")

    with pytest.raises(RuntimeError, match="bad option"):
        Cfg(driver, with_config_sources(["running"]), boom)
