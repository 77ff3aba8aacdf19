from __future__ import annotations

import collections.abc
import dataclasses
import logging
import types
from typing import Any, Callable, Dict, Tuple, Union, get_args, get_origin, get_type_hints

from .errors import CfgError, InvalidPlatformAttribute, InvalidPlatformAttributeValue
from .models import OptionResult

log = logging.getLogger("netcfg.cfg")

AttrSetter = Callable[[Any, Any], None]

# (platform type, attribute name) -> typed setter
_ATTR_SETTERS: Dict[Tuple[type, str], AttrSetter] = {}


def _field_hints(target_type: type) -> Dict[str, Any]:
    """Resolved type hint per dataclass field.

    When the annotations cannot be resolved (a dataclass declared in a local
    scope with string annotations), fields annotated with a real type keep it
    and string annotated fields fall back to `Any`, i.e. the value is not
    type checked.
    """
    try:
        hints = get_type_hints(target_type)
    except NameError:
        log.debug("cannot resolve type hints of %s, string annotated fields are unchecked", target_type.__name__)
        hints = {f.name: Any if isinstance(f.type, str) else f.type for f in dataclasses.fields(target_type)}
    return {f.name: hints.get(f.name, Any) for f in dataclasses.fields(target_type)}


def _type_name(hint: Any) -> str:
    if isinstance(hint, type):
        return hint.__name__
    return str(hint).replace("typing.", "")


def value_matches_hint(value: Any, hint: Any) -> bool:
    if hint is Any:
        return True
    if hint is type(None):
        return value is None

    origin = get_origin(hint)
    if origin is Union or (hasattr(types, "UnionType") and origin is getattr(types, "UnionType")):
        return any(value_matches_hint(value, a) for a in get_args(hint))
    if origin is collections.abc.Callable:
        return callable(value)
    if origin is not None:
        # parametrised generic, only the container type is checked
        return isinstance(value, origin)
    if isinstance(hint, type):
        return isinstance(value, hint)
    return True


def register_attr_setter(platform_type: type, attr_name: str, setter: AttrSetter) -> None:
    """Register a typed setter for one vendor attribute.

    Validated at registration time: the platform type must be a dataclass that
    declares `attr_name`, so a typo fails at import instead of at construction.
    """
    if not dataclasses.is_dataclass(platform_type) or attr_name not in {
        f.name for f in dataclasses.fields(platform_type)
    }:
        raise InvalidPlatformAttribute(attr_name=attr_name, target_type=platform_type.__name__)
    _ATTR_SETTERS[(platform_type, attr_name)] = setter


def unregister_attr_setter(platform_type: type, attr_name: str) -> None:
    _ATTR_SETTERS.pop((platform_type, attr_name), None)


def _registered_setter(target: Any, attr_name: str) -> AttrSetter | None:
    for klass in type(target).__mro__:
        setter = _ATTR_SETTERS.get((klass, attr_name))
        if setter is not None:
            return setter
    return None


def set_platform_attr(attr_name: str, attr_value: Any, target: Any, *, option: str = "") -> OptionResult:
    from .facade import Cfg

    if isinstance(target, Cfg):
        # only platforms are reachable through here
        return OptionResult.not_applicable(option)

    target_type = type(target).__name__

    setter = _registered_setter(target, attr_name)
    if setter is not None:
        try:
            setter(target, attr_value)
        except CfgError as e:
            return OptionResult.failed(e, option)
        log.debug("set platform attr %s on %s via registered setter", attr_name, target_type)
        return OptionResult.applied(option)

    if not dataclasses.is_dataclass(target):
        return OptionResult.failed(InvalidPlatformAttribute(attr_name=attr_name, target_type=target_type), option)

    hints = _field_hints(type(target))
    if attr_name not in hints:
        return OptionResult.failed(InvalidPlatformAttribute(attr_name=attr_name, target_type=target_type), option)

    hint = hints[attr_name]
    if not value_matches_hint(attr_value, hint):
        return OptionResult.failed(
            InvalidPlatformAttributeValue(
                attr_name=attr_name,
                target_type=target_type,
                expected=_type_name(hint),
                actual=type(attr_value).__name__,
            ),
            option,
        )

    setattr(target, attr_name, attr_value)
    log.debug("set platform attr %s on %s", attr_name, target_type)
    return OptionResult.applied(option)
