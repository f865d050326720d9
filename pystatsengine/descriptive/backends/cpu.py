"""
CPU reference backend for descriptive statistics.

Validated against numpy/scipy.stats to rtol=1e-10.
"""

from __future__ import annotations

import numpy as np

from pystatsengine.core.result import Result
from pystatsengine.core.compute.timing import Timer
from pystatsengine.core.validation import check_min_samples
from pystatsengine.descriptive.design import DescriptiveDesign
from pystatsengine.descriptive.solution import DescriptiveParams, Quartiles
from pystatsengine.descriptive._moments import (
    sample_mean, sample_variance, adjusted_skewness, adjusted_kurtosis, modes,
)
from pystatsengine.descriptive._quantiles import interpolated_quantiles


QUARTILE_PROBS = np.array([0.25, 0.5, 0.75])


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: DescriptiveDesign) -> Result[DescriptiveParams]:
        """
        Compute every descriptive statistic of the design's sample.

        Raises
        ------
        InsufficientSampleSizeError
            n < 2 (variance), n < 3 (skewness) or n < 4 (kurtosis).
        NumericalError
            Finite data whose moments overflow double precision.
        """
        x = design.data
        name = design.name
        n = design.n
        warnings_list: list[str] = []

        # Fail before doing any work: every field is required
        check_min_samples(x, 2, name, statistic="variance")

        timer = Timer()
        timer.start()

        with timer.section('moments'):
            mean = sample_mean(x, name)
            total = float(np.sum(x))
            variance = sample_variance(x, name)
            sd = float(np.sqrt(variance))

        with timer.section('shape'):
            skewness = adjusted_skewness(x, name)
            kurtosis = adjusted_kurtosis(x, name)
            if variance == 0.0:
                warnings_list.append(
                    "data are essentially constant; skewness and kurtosis are undefined"
                )

        with timer.section('order_statistics'):
            x_sorted = np.sort(x)
            q1, q2, q3 = interpolated_quantiles(x_sorted, QUARTILE_PROBS)
            minimum = float(x_sorted[0])
            maximum = float(x_sorted[-1])
            mode = modes(x_sorted)

        if mean == 0.0:
            cv = float('nan')
            warnings_list.append(
                "mean is zero; coefficient of variation is undefined"
            )
        else:
            cv = sd / mean

        timer.stop()

        params = DescriptiveParams(
            count=n,
            sum=total,
            mean=mean,
            median=float(q2),
            mode=mode,
            variance=variance,
            standard_deviation=sd,
            min=minimum,
            max=maximum,
            range=maximum - minimum,
            quartiles=Quartiles(q1=float(q1), q2=float(q2), q3=float(q3)),
            iqr=float(q3 - q1),
            skewness=float(skewness),
            kurtosis=float(kurtosis),
            coefficient_of_variation=float(cv),
        )

        return Result(
            params=params,
            info={'n': n, 'name': name, 'quantile_method': 'linear'},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
