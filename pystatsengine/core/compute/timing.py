"""
Wall-clock timing for backends.

Backends split their work into named sections; the breakdown ends up in
``Result.timing`` as ``{'total_seconds': ..., '<section>': ...}``.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall timer plus accumulating named sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('moments'):
            mean = sample_mean(x)
        with timer.section('order_statistics'):
            q = interpolated_quantiles(np.sort(x), probs)
        timer.stop()
        timer.result()
        # {'total_seconds': 0.0002, 'moments': 0.0001, 'order_statistics': 0.0001}
    """

    def __init__(self):
        self._began: float | None = None
        self._total: float | None = None
        self._sections: dict[str, float] = {}

    def start(self) -> None:
        self._began = time.perf_counter()

    def stop(self) -> None:
        if self._began is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time a block; repeated names add up. Recorded even if the block raises."""
        began = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - began
            self._sections[name] = self._sections.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """Total and per-section seconds. Raises RuntimeError before stop()."""
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
