from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

import pytest

from netcfg.core.cfg.models import Response
from netcfg.core.observability.metrics import reset_metrics
from netcfg.core.platforms.base import Platform


@dataclass
class FakeDriverResponse:
    result: str = ""
    failed: bool = False


class FakeDriver:
    """Stands in for the transport driver; records every command sent."""

    def __init__(self, outputs: Optional[Dict[str, FakeDriverResponse]] = None, *, alive: bool = True):
        self.host = "10.0.0.1"
        self.port = 22
        self.outputs: Dict[str, FakeDriverResponse] = dict(outputs or {})
        self.sent: List[str] = []
        self.alive = alive
        self.open_calls = 0
        self.close_calls = 0

    def send_command(self, command: str) -> FakeDriverResponse:
        self.sent.append(command)
        return self.outputs.get(command, FakeDriverResponse(result="% Invalid input", failed=True))

    def isalive(self) -> bool:
        return self.alive

    def open(self) -> None:
        self.open_calls += 1
        self.alive = True

    def close(self) -> None:
        self.close_calls += 1
        self.alive = False


class StubPlatform(Platform):
    name = "stub"

    def __init__(self, *, version: Optional[Response] = None, configs: Optional[Dict[str, Response]] = None):
        self.version = version or Response(host="10.0.0.1", operation="get_version", result="15.1")
        self.configs = configs or {}
        self.calls: List[str] = []

    def get_version(self) -> Response:
        self.calls.append("get_version")
        return self.version

    def get_config(self, source: str) -> Response:
        self.calls.append(f"get_config:{source}")
        return self.configs.get(source) or Response(
            host="10.0.0.1", operation="get_config", failed=True, error="no such source"
        )


@pytest.fixture(autouse=True)
def _reset_metrics():
    reset_metrics()
    yield
    reset_metrics()


@pytest.fixture()
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture()
def fake_driver_cls():
    return FakeDriver


@pytest.fixture()
def driver_response_cls():
    return FakeDriverResponse


@pytest.fixture()
def stub_platform_cls():
    return StubPlatform
