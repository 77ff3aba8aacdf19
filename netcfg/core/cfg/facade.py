from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List, Mapping, Optional

from netcfg.core.observability.log_format import format_log_message
from netcfg.core.observability.metrics import inc_operation

from .applier import apply_options
from .errors import CfgNotPrepared, InvalidConfigSource, NoConfigSourcesProvided, NoPlatformBound, SubstitutionError
from .models import CfgState, Driver, Response
from .options import Option
from .state_machine import ensure_transition, is_terminal
from .substitution import Substitute, render_template

if TYPE_CHECKING:
    from netcfg.core.platforms.base import Platform

log = logging.getLogger("netcfg.cfg")


class Cfg:
    """Vendor agnostic configuration session.

    Holds target agnostic settings and delegates domain operations to the bound
    Platform. Responses are inspected and logged, never altered. The driver is
    shared, not owned: nothing here closes it.
    """

    def __init__(self, conn: Driver, *options: Option):
        self.config_sources: List[str] = []
        self.on_prepare: Optional[Callable[[Driver], None]] = None
        self.dedicated_connection: bool = False
        self.ignore_version: bool = False

        self.candidate_config: str = ""
        self.version_string: str = ""

        self.platform: Optional["Platform"] = None
        self.conn = conn
        self._state = CfgState.UNPREPARED

        apply_options(self, options)

        if not self.config_sources:
            # new_cfg seeds vendor default sources, so this means a bare Cfg or an explicit empty list
            raise NoConfigSourcesProvided()

    def __enter__(self) -> "Cfg":
        self.prepare()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    @property
    def state(self) -> CfgState:
        return self._state

    @property
    def prepared(self) -> bool:
        return self._state is CfgState.PREPARED

    # --- lifecycle ---

    def prepare(self) -> None:
        if self._state is CfgState.PREPARED:
            return
        ensure_transition(self._state, CfgState.PREPARED)

        if self.dedicated_connection:
            self._open_dedicated_connection()

        if self.on_prepare is not None:
            self.on_prepare(self.conn)

        if not self.ignore_version:
            if self.platform is None:
                log.debug(self._format_log_message("debug", "no platform bound, skipping version check"))
            else:
                self.version_string = self.get_version().result

        self._state = CfgState.PREPARED
        log.debug(self._format_log_message("debug", "cfg prepared"))

    def cleanup(self) -> None:
        if is_terminal(self._state):
            return
        ensure_transition(self._state, CfgState.CLOSED)

        self.version_string = ""
        self.candidate_config = ""
        self._state = CfgState.CLOSED
        log.debug(self._format_log_message("debug", "cfg cleaned up"))

    def _open_dedicated_connection(self) -> None:
        opener = getattr(self.conn, "open", None)
        isalive = getattr(self.conn, "isalive", None)
        if not callable(opener):
            return
        if callable(isalive) and isalive():
            return
        log.debug(self._format_log_message("debug", "opening dedicated connection"))
        opener()

    # --- domain operations ---

    def get_version(self) -> Response:
        if is_terminal(self._state):
            raise CfgNotPrepared(operation="get_version", state=self._state.value)

        r = self._require_platform().get_version()
        self._observe("get_version", r)

        if r.failed:
            log.error(self._format_log_message("error", "failed to fetch device version"))

        if r.result == "":
            log.warning(self._format_log_message("warning", "failed to parse device version"))

        return r

    def get_config(self, source: str = "running") -> Response:
        self._ensure_prepared("get_config")
        if source not in self.config_sources:
            raise InvalidConfigSource(source=source, config_sources=self.config_sources)

        r = self._require_platform().get_config(source)
        self._observe("get_config", r)

        if r.failed:
            log.error(self._format_log_message("error", "failed to fetch config from device, source=%s"), source)

        return r

    def render_substituted_config(
        self,
        template: str,
        substitutes: Optional[Mapping[str, Substitute]] = None,
        *,
        source: str = "running",
    ) -> str:
        """Render `template` into the candidate config.

        Pattern substitutes are searched in the `source` config fetched from the
        device; literal substitutes are used as is.
        """
        self._ensure_prepared("render_substituted_config")

        def fetch_source_config() -> str:
            r = self.get_config(source)
            if r.failed:
                raise SubstitutionError(f"cannot render substitutions, failed to fetch {source} config")
            return r.result

        self.candidate_config = render_template(
            template,
            substitutes or {},
            fetch_source_config=fetch_source_config,
        )
        return self.candidate_config

    def load_config(self, config: str, *, replace: bool = False) -> Response:
        self._ensure_prepared("load_config")
        return self._require_platform().load_config(config, replace=replace)

    def abort_config(self) -> Response:
        self._ensure_prepared("abort_config")
        return self._require_platform().abort_config()

    def commit_config(self, source: str = "running") -> Response:
        self._ensure_prepared("commit_config")
        return self._require_platform().commit_config(source)

    def diff_config(self, source: str = "running") -> Response:
        self._ensure_prepared("diff_config")
        return self._require_platform().diff_config(source)

    # --- internals ---

    def _require_platform(self) -> "Platform":
        if self.platform is None:
            raise NoPlatformBound()
        return self.platform

    def _ensure_prepared(self, operation: str) -> None:
        if self._state is not CfgState.PREPARED:
            raise CfgNotPrepared(operation=operation, state=self._state.value)

    def _observe(self, operation: str, r: Response) -> None:
        inc_operation(getattr(self.platform, "name", "unknown"), operation, r.failed)

    def _format_log_message(self, level: str, msg: str) -> str:
        return format_log_message(level, getattr(self.conn, "host", ""), getattr(self.conn, "port", 0), msg)

    def __repr__(self) -> str:
        return (
            f"Cfg(platform={getattr(self.platform, 'name', None)!r}, "
            f"config_sources={self.config_sources!r}, state={self._state.value})"
        )
