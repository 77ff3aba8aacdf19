from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Optional, TypeVar

from netcfg.core.cfg.applier import apply_options
from netcfg.core.cfg.errors import OperationNotSupported
from netcfg.core.cfg.models import PlatformArgs, Response
from netcfg.core.cfg.options import Option

if TYPE_CHECKING:
    from netcfg.core.platform_definitions.models import PlatformDefinition

log = logging.getLogger("netcfg.platforms")

P = TypeVar("P", bound="NetworkPlatform")


class Platform(ABC):
    """Capability every vendor platform implements.

    This is also the api surface the Cfg facade exposes to callers.
    """

    name: ClassVar[str]

    @abstractmethod
    def get_version(self) -> Response:
        """Fetch the device version; `result` holds the parsed version string."""

    @abstractmethod
    def get_config(self, source: str) -> Response:
        """Fetch the configuration of a source datastore (e.g. "running")."""

    def load_config(self, config: str, *, replace: bool = False) -> Response:
        raise OperationNotSupported(platform=self.name, operation="load_config")

    def abort_config(self) -> Response:
        raise OperationNotSupported(platform=self.name, operation="abort_config")

    def commit_config(self, source: str = "running") -> Response:
        raise OperationNotSupported(platform=self.name, operation="commit_config")

    def diff_config(self, source: str = "running") -> Response:
        raise OperationNotSupported(platform=self.name, operation="diff_config")


@dataclass
class NetworkPlatform(PlatformArgs, Platform):
    """Command driven platform: one show command per operation.

    Vendor variants add their own fields and override `_clean_config` when the
    device decorates config output with banners or timestamps.
    """

    name: ClassVar[str] = "generic"

    conn: Any = field(default=None, repr=False)
    version_command: str = "show version"

    @classmethod
    def create(cls: type[P], conn: Any, *options: Option, definition: Optional["PlatformDefinition"] = None) -> P:
        p = cls(conn=conn)
        if definition is not None:
            p.version_command = definition.version_command
            p.version_pattern = definition.compiled_version_pattern()
            p.config_command_map = dict(definition.config_command_map)
        apply_options(p, options)
        return p

    @property
    def host(self) -> str:
        return str(getattr(self.conn, "host", "") or "")

    def _send(self, operation: str, command: str) -> tuple[Response, Any]:
        r = Response(host=self.host, operation=operation)
        log.debug("%s %s sending %r", self.name, operation, command)
        return r, self.conn.send_command(command)

    def get_version(self) -> Response:
        r, out = self._send("get_version", self.version_command)
        raw = str(getattr(out, "result", "") or "")

        m = self.version_pattern.search(raw)
        version = m.group(0) if m else ""
        return r.record(raw_result=raw, result=version, failed=bool(getattr(out, "failed", False)))

    def get_config(self, source: str) -> Response:
        command = self.config_command_map.get(source)
        if command is None:
            r = Response(host=self.host, operation="get_config")
            return r.record(
                raw_result="",
                result="",
                failed=True,
                error=f"no config command for source '{source}' on platform '{self.name}'",
            )

        r, out = self._send("get_config", command)
        raw = str(getattr(out, "result", "") or "")
        failed = bool(getattr(out, "failed", False))
        return r.record(raw_result=raw, result="" if failed else self._clean_config(raw), failed=failed)

    def _clean_config(self, raw: str) -> str:
        return raw.strip()


def strip_leading_lines(raw: str, *prefixes: str) -> str:
    """Drop leading lines that start with any of `prefixes` (and blank lines among them)."""
    lines = raw.splitlines()
    i = 0
    while i < len(lines):
        line = lines[i].strip()
        if line == "" or any(line.startswith(p) for p in prefixes):
            i += 1
            continue
        break
    return "\n".join(lines[i:]).strip()
