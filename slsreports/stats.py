"""Summary statistics over the per-run values of report columns."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Union

from .columns import calculate_stats, sort_rows, sort_rows_found_first
from .types import StatCode

Number = Union[int, float]

_QUANTILES = (
    (StatCode.Q05, 0.05, "Q.05"),
    (StatCode.Q10, 0.10, "Q.10"),
    (StatCode.Q25, 0.25, "Q.25"),
    (StatCode.Q75, 0.75, "Q.75"),
    (StatCode.Q90, 0.90, "Q.90"),
    (StatCode.Q95, 0.95, "Q.95"),
    (StatCode.Q98, 0.98, "Q.98"),
)

_RATIOS = (
    (StatCode.QR7525, 0.75, 0.25, "Q.75/25"),
    (StatCode.QR9010, 0.90, 0.10, "Q.90/10"),
    (StatCode.QR9505, 0.95, 0.05, "Q.95/05"),
)


@dataclass
class StatSpec:
    """A requested statistic: which column it summarises and which figures to show."""

    id: str
    base_description: str
    data_column: str
    flags: StatCode = StatCode(0)
    sort_by_step: bool = False


def _median(element: Callable[[int], float], start: int, count: int) -> float:
    if count == 0:
        return 0.0
    value = element(start + ((count - 1) >> 1))
    if count % 2 == 0:
        value = (value + element(start + (count >> 1))) / 2.0
    return value


def compute_column_stats(
    values: Sequence[Number],
    flags: StatCode,
    steps: Optional[Sequence[Number]] = None,
    found: Optional[Sequence[Number]] = None,
) -> Dict[str, float]:
    """Requested statistics of a column's run values, keyed by name in report order.

    Order statistics rank the runs by the column's own values. ``steps`` is
    needed for the step-weighted mean; ``found`` (a solved flag per run) for
    the statistics split by outcome.
    """
    flags = StatCode(flags)
    runs = len(values)
    results: Dict[str, float] = {}
    if runs == 0:
        return results
    data = [float(v) for v in values]
    if steps is not None and len(steps) != runs:
        raise ValueError("values and steps differ in length")

    if flags.needs_calculation():
        total = math.fsum(data)
        total_sq = math.fsum(v * v for v in data)
        mean, stddev, cv = calculate_stats(total, total_sq, runs)
        variance = stddev * stddev
        stderr = stddev / math.sqrt(runs)
        vmr = variance / mean if mean != 0.0 else 0.0
        for code, name, value in (
            (StatCode.MEAN, "Mean", mean),
            (StatCode.STDDEV, "StdDev", stddev),
            (StatCode.CV, "CoeffVariance", cv),
            (StatCode.VAR, "Variance", variance),
            (StatCode.STDERR, "StdErr", stderr),
            (StatCode.VMR, "VarMeanRatio", vmr),
        ):
            if flags & code:
                results[name] = value

    if flags & StatCode.SUM:
        results["Sum"] = math.fsum(data)

    if flags.needs_sorting():
        order = sort_rows(data)

        def element(k: int) -> float:
            return data[order[k]]

        def at(q: float) -> float:
            return element(math.floor(q * (runs - 1)))

        if flags & StatCode.MEDIAN:
            results["Median"] = _median(element, 0, runs)
        if flags & StatCode.MIN:
            results["Min"] = element(0)
        if flags & StatCode.MAX:
            results["Max"] = element(runs - 1)
        for code, q, name in _QUANTILES:
            if flags & code:
                results[name] = at(q)
        for code, upper, lower, name in _RATIOS:
            if flags & code:
                high = at(upper)
                low = at(lower)
                results[name] = high / low if low != 0.0 else low

    if flags.needs_found_split():
        if found is None:
            raise ValueError("statistics split by outcome need the solved flag of each run")
        order = sort_rows_found_first(data, found)
        solved = sum(1 for f in found if f)
        failed = runs - solved

        def ranked(k: int) -> float:
            return data[order[k]]

        if flags & StatCode.STEPMEAN:
            if steps is None:
                raise ValueError("the step-weighted mean needs the steps of each run")
            step_total = math.fsum(float(s) for s in steps)
            weighted = math.fsum(float(s) * v for s, v in zip(steps, data))
            results["StepMean"] = weighted / step_total if step_total != 0.0 else 0.0
        if flags & StatCode.SOLVEMEAN:
            results["SuccessMean"] = (
                math.fsum(ranked(k) for k in range(solved)) / solved if solved else 0.0
            )
        if flags & StatCode.FAILMEAN:
            results["FailureMean"] = (
                math.fsum(ranked(k) for k in range(solved, runs)) / failed if failed else 0.0
            )
        if flags & StatCode.SOLVEMEDIAN:
            results["SuccessMedian"] = _median(ranked, 0, solved)
        if flags & StatCode.FAILMEDIAN:
            results["FailureMedian"] = _median(ranked, solved, failed)
        if flags & StatCode.SOLVEMIN:
            results["SuccessMin"] = ranked(0) if solved else 0.0
        if flags & StatCode.FAILMIN:
            results["FailureMin"] = ranked(solved) if failed else 0.0
        if flags & StatCode.SOLVEMAX:
            results["SuccessMax"] = ranked(solved - 1) if solved else 0.0
        if flags & StatCode.FAILMAX:
            results["FailureMax"] = ranked(runs - 1) if failed else 0.0

    return results


def format_stats(description: str, results: Mapping[str, float]) -> str:
    """Render statistics as ``<description>_<name> = <value>`` lines."""
    return "".join("%s_%s = %.12g\n" % (description, name, value) for name, value in results.items())


def percent_solved(solutions: int, runs: int) -> float:
    """Percentage of runs that found a solution."""
    if runs <= 0:
        raise ValueError("no runs to compute a success rate over")
    return 100.0 * solutions / runs


def flips_per_second(steps: Sequence[Number], total_time: float) -> float:
    """Search steps per second of processor time over all runs."""
    total = math.fsum(float(s) for s in steps)
    if total_time == 0.0:
        return math.inf if total > 0.0 else math.nan
    return total / total_time


def distribute_times(steps: Sequence[Number], total_time: float) -> List[float]:
    """Share the total time among runs in proportion to their steps."""
    total = math.fsum(float(s) for s in steps)
    if total == 0.0:
        return [0.0 for _ in steps]
    return [float(s) / total * total_time for s in steps]


def success_probabilities(steps: Sequence[Number], found: Sequence[Number]) -> List[float]:
    """Empirical run-length distribution value of each run (solved runs first, by steps)."""
    runs = len(steps)
    probabilities = [0.0] * runs
    for rank, row in enumerate(sort_rows_found_first(steps, found), start=1):
        probabilities[row] = rank / runs
    return probabilities