"""
Pearson's chi-squared test of independence for an r x c contingency table.

No continuity correction is applied, for 2x2 tables included.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from pystatsengine.core.exceptions import DegenerateTableError
from pystatsengine.distributions import chi_square_sf
from pystatsengine.hypothesis._common import HTestParams, is_significant

if TYPE_CHECKING:
    from pystatsengine.hypothesis.design import HypothesisDesign


def chisq_independence(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    """Chi-squared test of independence for a contingency table."""
    table = np.array(design.table, dtype=np.float64)
    alpha = design.alpha
    warnings_list: list[str] = []

    nrow, ncol = table.shape
    row_sums = table.sum(axis=1)
    col_sums = table.sum(axis=0)
    total = table.sum()

    _check_not_degenerate(row_sums, col_sums)

    # Expected counts: E[i,j] = row_sum[i] * col_sum[j] / total
    expected = np.outer(row_sums, col_sums) / total

    chisq = float(np.sum((table - expected) ** 2 / expected))
    df = float((nrow - 1) * (ncol - 1))
    p_value = chi_square_sf(chisq, df)

    # Cramer's V = sqrt(chi2 / (N * (min(r, c) - 1)))
    cramers_v = float(np.sqrt(chisq / (total * (min(nrow, ncol) - 1))))

    if np.any(expected < 5):
        warnings_list.append(
            "Chi-squared approximation may be incorrect"
        )

    residuals = (table - expected) / np.sqrt(expected)
    for array in (table, expected, residuals):
        array.setflags(write=False)

    return HTestParams(
        statistic=chisq,
        statistic_name="X-squared",
        df=df,
        p_value=p_value,
        alpha=alpha,
        is_significant=is_significant(p_value, alpha),
        conf_int=None,
        effect_size=cramers_v,
        effect_size_name="Cramer's V",
        estimate=None,
        null_value=None,
        method="Pearson's Chi-squared test",
        data_name=design.data_name,
        extras={
            "observed": table,
            "expected": expected,
            "residuals": residuals,
            "cramers_v": cramers_v,
        },
    ), warnings_list


def _check_not_degenerate(row_sums: np.ndarray, col_sums: np.ndarray) -> None:
    """An all-zero row or column gives expected counts of zero."""
    zero_rows = np.flatnonzero(row_sums == 0)
    zero_cols = np.flatnonzero(col_sums == 0)
    if len(zero_rows) == 0 and len(zero_cols) == 0:
        return

    row = int(zero_rows[0]) if len(zero_rows) else None
    column = int(zero_cols[0]) if len(zero_cols) else None
    parts = []
    if row is not None:
        parts.append(f"rows {zero_rows.tolist()} sum to 0")
    if column is not None:
        parts.append(f"columns {zero_cols.tolist()} sum to 0")
    raise DegenerateTableError(
        f"table: degenerate contingency table, {' and '.join(parts)}; "
        f"expected counts would be 0",
        row=row,
        column=column,
    )
