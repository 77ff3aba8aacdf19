from __future__ import annotations

import logging
from typing import Any, Iterable, List

from .models import OptionResult, OptionStatus
from .options import Option

log = logging.getLogger("netcfg.cfg")


def apply_options(target: Any, options: Iterable[Option]) -> List[OptionResult]:
    """Apply options to `target` in order, mutating it in place.

    NOT_APPLICABLE results are skipped; the first FAILED result aborts by raising
    its error. Exceptions raised by an option itself propagate unchanged.
    """
    results: List[OptionResult] = []

    for option in options:
        res = option(target)

        if res.status is OptionStatus.FAILED:
            if res.error is None:
                raise RuntimeError(f"option {res.option or option!r} failed without an error")
            raise res.error

        results.append(res)

    log.debug(
        "options applied target=%s applied=%s skipped=%s",
        type(target).__name__,
        sum(1 for r in results if r.status is OptionStatus.APPLIED),
        sum(1 for r in results if r.status is OptionStatus.NOT_APPLICABLE),
    )
    return results
