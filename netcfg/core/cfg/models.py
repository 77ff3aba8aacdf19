from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Protocol


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Driver(Protocol):
    """Minimal surface of the transport driver a Cfg/Platform talks through.

    `send_command` must return an object exposing `result` (str) and `failed` (bool).
    The driver is never owned (or closed) by this package.
    """

    host: str
    port: int

    def send_command(self, command: str) -> Any:
        ...


class CfgState(str, Enum):
    UNPREPARED = "UNPREPARED"
    PREPARED = "PREPARED"
    CLOSED = "CLOSED"


class OptionStatus(str, Enum):
    APPLIED = "APPLIED"
    NOT_APPLICABLE = "NOT_APPLICABLE"
    FAILED = "FAILED"


@dataclass(frozen=True)
class OptionResult:
    status: OptionStatus
    option: str = ""
    error: Optional[Exception] = None

    @classmethod
    def applied(cls, option: str = "") -> "OptionResult":
        return cls(status=OptionStatus.APPLIED, option=option)

    @classmethod
    def not_applicable(cls, option: str = "") -> "OptionResult":
        return cls(status=OptionStatus.NOT_APPLICABLE, option=option)

    @classmethod
    def failed(cls, error: Exception, option: str = "") -> "OptionResult":
        return cls(status=OptionStatus.FAILED, option=option, error=error)


@dataclass
class PlatformArgs:
    # attribute surface every vendor platform exposes; the injector writes into these
    version_pattern: re.Pattern[str] = field(default_factory=lambda: re.compile(r"\d+\.\d+"))
    config_command_map: Dict[str, str] = field(default_factory=dict)


@dataclass
class Response:
    host: str
    operation: str
    result: str = ""
    failed: bool = False
    raw_result: str = ""
    error: Optional[str] = None
    start_time: datetime = field(default_factory=_utc_now)
    finish_time: Optional[datetime] = None

    def record(self, *, raw_result: str, result: str, failed: bool, error: Optional[str] = None) -> "Response":
        self.finish_time = _utc_now()
        self.raw_result = raw_result
        self.result = result
        self.failed = failed
        self.error = error
        return self

    @property
    def elapsed_time(self) -> Optional[float]:
        if self.finish_time is None:
            return None
        return (self.finish_time - self.start_time).total_seconds()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "operation": self.operation,
            "result": self.result,
            "failed": self.failed,
            "raw_result": self.raw_result,
            "error": self.error,
            "start_time": self.start_time.isoformat().replace("+00:00", "Z"),
            "finish_time": self.finish_time.isoformat().replace("+00:00", "Z") if self.finish_time else None,
            "elapsed_time": self.elapsed_time,
        }
