from __future__ import annotations

from collections import Counter
from typing import Dict

from prometheus_client import Counter as PromCounter

# Operation counters (platform/operation/outcome)
_OPERATIONS = Counter()

_PROM_OPERATIONS = PromCounter(
    "netcfg_platform_operations_total",
    "Total delegated platform operations",
    ["platform", "operation", "outcome"],
)


def reset_metrics() -> None:
    """
    Test helper: clears in-process counters to avoid cross-test leakage.
    The prometheus counter is process-global and is left as is.
    """
    _OPERATIONS.clear()


def inc_operation(platform: str, operation: str, failed: bool) -> None:
    p = platform or "unknown"
    outcome = "failed" if failed else "ok"

    _OPERATIONS["operations_total"] += 1
    _OPERATIONS[f"{p}|{operation}|{outcome}"] += 1
    _PROM_OPERATIONS.labels(platform=p, operation=operation, outcome=outcome).inc()


def snapshot() -> Dict[str, int]:
    return dict(_OPERATIONS)
