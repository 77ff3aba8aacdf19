from __future__ import annotations

import pytest

from netcfg.core.cfg.applier import apply_options
from netcfg.core.cfg.errors import InvalidPlatformAttribute
from netcfg.core.cfg.models import OptionResult, OptionStatus


class Target:
    def __init__(self):
        self.value = None
        self.touched = []


def _set_value(v):
    def option(t):
        if not isinstance(t, Target):
            return OptionResult.not_applicable("set_value")
        t.value = v
        t.touched.append(v)
        return OptionResult.applied("set_value")

    return option


def _decline(t):
    return OptionResult.not_applicable("decline")


def test_applies_in_order_last_write_wins():
    t = Target()
    results = apply_options(t, [_set_value(1), _set_value(2)])
    assert t.value == 2
    assert t.touched == [1, 2]
    assert [r.status for r in results] == [OptionStatus.APPLIED, OptionStatus.APPLIED]


def test_not_applicable_is_skipped():
    t = Target()
    results = apply_options(t, [_decline, _set_value("x"), _decline])
    assert t.value == "x"
    assert [r.status for r in results] == [
        OptionStatus.NOT_APPLICABLE,
        OptionStatus.APPLIED,
        OptionStatus.NOT_APPLICABLE,
    ]


def test_failed_aborts_and_raises_carried_error():
    t = Target()
    err = InvalidPlatformAttribute(attr_name="nope", target_type="Target")

    def fail(_):
        return OptionResult.failed(err, "fail")

    with pytest.raises(InvalidPlatformAttribute) as ei:
        apply_options(t, [_set_value(1), fail, _set_value(2)])

    assert ei.value is err
    # the option after the failure never ran
    assert t.touched == [1]


def test_exception_raised_by_option_propagates():
    def boom(_):
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        apply_options(Target(), [boom])


def test_empty_options_is_noop():
    t = Target()
    assert apply_options(t, []) == []
    assert t.value is None
