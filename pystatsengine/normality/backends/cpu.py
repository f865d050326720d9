"""
CPU backend for the normality test.
"""

from __future__ import annotations

from pystatsengine.core.exceptions import NumericalError
from pystatsengine.core.result import Result, _default_provenance
from pystatsengine.core.compute.timing import Timer
from pystatsengine.normality.design import NormalityDesign
from pystatsengine.normality.solution import NormalityParams
from pystatsengine.normality.backends._shapiro_wilk import (
    shapiro_wilk_statistic, shapiro_wilk_pvalue,
)

TEST_NAME = "Shapiro-Wilk normality test (Royston approximation)"

# is_normal threshold; fixed, not the caller's alpha
NORMALITY_ALPHA = 0.05


class CPUNormalityBackend:
    """CPU backend for the normality test."""

    @property
    def name(self) -> str:
        return 'cpu_normality'

    def solve(self, design: NormalityDesign) -> Result[NormalityParams]:
        x = design.sorted_data
        n = design.n

        if x[-1] - x[0] == 0.0:
            raise NumericalError(
                f"{design.name}: all values are identical, W statistic is undefined"
            )

        timer = Timer()
        timer.start()

        with timer.section('statistic'):
            w = shapiro_wilk_statistic(x)

        with timer.section('p_value'):
            p_value = shapiro_wilk_pvalue(w, n)

        timer.stop()

        params = NormalityParams(
            statistic=w,
            p_value=p_value,
            is_normal=bool(p_value > NORMALITY_ALPHA),
            test_name=TEST_NAME,
            n=n,
        )

        return Result(
            params=params,
            info={'n': n, 'name': design.name, 'threshold': NORMALITY_ALPHA},
            timing=timer.result(),
            backend_name=self.name,
            warnings=(
                "approximate Shapiro-Wilk p-value; treat the result as indicative",
            ),
            provenance={**_default_provenance(), 'algorithm': 'royston_1992'},
        )
