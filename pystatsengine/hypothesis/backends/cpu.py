"""
CPU backend for hypothesis tests.

Each design.test_type maps to one implementation function returning
(HTestParams, warnings).
"""

from __future__ import annotations

from pystatsengine.core.result import Result
from pystatsengine.core.compute.timing import Timer
from pystatsengine.hypothesis._common import HTestParams
from pystatsengine.hypothesis.design import HypothesisDesign
from pystatsengine.hypothesis.backends._t_test import t_one_sample, t_two_sample
from pystatsengine.hypothesis.backends._chisq_test import chisq_independence


_IMPLEMENTATIONS = {
    "t_one_sample": t_one_sample,
    "t_two_sample": t_two_sample,
    "chisq_independence": chisq_independence,
}


class CPUHypothesisBackend:
    """CPU backend for the t-tests and the chi-squared test."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        try:
            run = _IMPLEMENTATIONS[design.test_type]
        except KeyError:
            raise ValueError(f"unsupported test_type {design.test_type!r}") from None

        timer = Timer()
        timer.start()
        with timer.section(design.test_type):
            params, warnings_list = run(design)
        timer.stop()

        return Result(
            params=params,
            info={'test_type': design.test_type, 'alpha': design.alpha},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
