"""
Candidate config templating.

Placeholders are written as ``{{ name }}``. Each name maps either to a literal
string, or to a compiled pattern that is searched in the device's source
config; the named group ``value`` is used when the pattern defines it,
otherwise the whole match.

Any placeholder that cannot be resolved is an error; all such names are
reported together, sorted, so the outcome is deterministic.
"""
from __future__ import annotations

import re
from typing import Callable, Dict, Mapping, Set, Union

from .errors import UnresolvedSubstitution

PLACEHOLDER = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")

Substitute = Union[str, re.Pattern[str]]


def placeholder_names(template: str) -> Set[str]:
    return {m.group(1) for m in PLACEHOLDER.finditer(template)}


def needs_source_config(substitutes: Mapping[str, Substitute]) -> bool:
    return any(isinstance(v, re.Pattern) for v in substitutes.values())


def resolve_substitutes(
    substitutes: Mapping[str, Substitute],
    source_config: str,
) -> Dict[str, str]:
    resolved: Dict[str, str] = {}
    for name, sub in substitutes.items():
        if isinstance(sub, re.Pattern):
            m = sub.search(source_config)
            if m is None:
                continue
            value = m.group("value") if "value" in sub.groupindex else m.group(0)
            if value is None:
                # matched, but the value group did not take part
                continue
            resolved[name] = value
        else:
            resolved[name] = str(sub)
    return resolved


def render_template(
    template: str,
    substitutes: Mapping[str, Substitute],
    *,
    fetch_source_config: Callable[[], str],
) -> str:
    source_config = fetch_source_config() if needs_source_config(substitutes) else ""
    values = resolve_substitutes(substitutes, source_config)

    missing = placeholder_names(template) - set(values)
    if missing:
        raise UnresolvedSubstitution(names=missing)

    return PLACEHOLDER.sub(lambda m: values[m.group(1)], template)
