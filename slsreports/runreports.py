"""Per-run report rows: clause penalties, counters, bias, mobility and autocorrelation."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple, Union

from .columns import Stats, calculate_stats
from .types import ParmType

Number = Union[int, float]


class PenaltyAccumulator:
    """Collects final clause penalties of each run and summarises them per clause."""

    def __init__(self, num_clauses: int) -> None:
        if num_clauses < 0:
            raise ValueError("the number of clauses cannot be negative")
        self.num_clauses = num_clauses
        self.runs = 0
        self._sums = [0.0] * num_clauses
        self._sums2 = [0.0] * num_clauses

    def add(self, penalties: Sequence[Number]) -> None:
        """Account for the penalties of one finished run."""
        if len(penalties) != self.num_clauses:
            raise ValueError(
                f"expected {self.num_clauses} penalties, got {len(penalties)}"
            )
        for index, penalty in enumerate(penalties):
            value = float(penalty)
            self._sums[index] += value
            self._sums2[index] += value * value
        self.runs += 1

    def summary(self) -> List[Stats]:
        """Mean, standard deviation and coefficient of variation of each clause's penalty."""
        return [
            calculate_stats(total, total_sq, self.runs)
            for total, total_sq in zip(self._sums, self._sums2)
        ]


def normalise_penalties(
    penalties: Sequence[Number],
    total: Number = 0,
    base: Number = 0,
    fraction: bool = False,
    renorm_base: bool = False,
) -> List[float]:
    """Penalties as fractions of the total, as multiples of the base, or unchanged.

    ``fraction`` takes precedence over ``renorm_base``.
    """
    if fraction:
        divisor = float(total)
        what = "total"
    elif renorm_base:
        divisor = float(base)
        what = "base"
    else:
        return [float(p) for p in penalties]
    if divisor == 0.0:
        raise ValueError(f"cannot normalise penalties by a zero {what}")
    return [float(p) / divisor for p in penalties]


def format_counts_row(run: int, counts: Iterable[int]) -> str:
    """A run id followed by one integer per item, space separated."""
    return "%d" % run + "".join(" %d" % count for count in counts) + "\n"


def format_bias_counts(
    run: int,
    false_counts: Sequence[int],
    true_counts: Sequence[int],
    values: Sequence[object],
) -> str:
    """Steps false, steps true and the fraction of steps matching the final value, per variable.

    All three sequences hold one entry per variable, variables 1..n in order.
    """
    if not len(false_counts) == len(true_counts) == len(values):
        raise ValueError("counts and values differ in length")
    parts = ["%d" % run]
    for false_count, true_count, value in zip(false_counts, true_counts, values):
        parts.append(" %d %d" % (false_count, true_count))
        seen = false_count + true_count
        if seen > 0:
            same = true_count if value else false_count
            parts.append(" %5.4f" % (same / seen))
        else:
            parts.append(" %5.4f" % 0.0)
    parts.append("\n")
    return "".join(parts)


def mobility_means(
    window_sums: Sequence[Number],
    steps: int,
    display: int,
    num_vars: int,
    normalized: bool = False,
) -> List[float]:
    """Average mobility for window sizes 1..display.

    ``window_sums`` is indexed by window size; the sum for size j covers
    ``steps - j`` windows. Normalised means are divided by the largest
    possible mobility of the window, ``min(j, num_vars)``.
    """
    if display >= len(window_sums):
        raise ValueError("fewer window sums than window sizes to display")
    if display > 0 and steps <= display:
        raise ValueError("the run is not longer than the largest window")
    means = []
    for size in range(1, display + 1):
        mean = float(window_sums[size]) / (steps - size)
        if normalized:
            mean /= float(min(size, num_vars))
        means.append(mean)
    return means


def mobility_fixed_frequencies(
    frequencies: Sequence[int],
    steps: int,
    window: int,
    include_start: bool = True,
) -> List[Tuple[int, int, float, float]]:
    """Rows of (mobility, count, share of steps, cumulative share) for mobilities 0..window.

    Without ``include_start`` the share is taken over the steps after the
    first full window.
    """
    if len(frequencies) <= window:
        raise ValueError("fewer frequencies than mobility values")
    if include_start:
        if steps <= 0:
            return []
        divisor = steps
    else:
        divisor = steps - window if steps > window else steps
        if divisor <= 0:
            raise ValueError("no steps to share the frequencies over")
    scale = 1.0 / divisor
    rows = []
    cumulative = 0.0
    for mobility in range(window + 1):
        share = float(frequencies[mobility]) * scale
        cumulative += share
        rows.append((mobility, frequencies[mobility], share, cumulative))
    return rows


def autocorr_row(run: int, length: int, values: Iterable[float]) -> str:
    """Run id, autocorrelation length and the autocorrelation at lags 1, 2, ..."""
    return "%d %d" % (run, length) + "".join(" %.12g" % v for v in values) + "\n"


def _format_parameter(kind: ParmType, value: object) -> str:
    if kind is ParmType.UInt or kind is ParmType.SInt:
        return "%d " % int(value)
    if kind is ParmType.Bool:
        return "%d " % (1 if value else 0)
    if kind is ParmType.Probability:
        return "%.4g " % float(value)
    if kind is ParmType.String:
        return "[null] " if not value else "%s " % value
    if kind is ParmType.Float:
        return "%.6g " % float(value)
    return ""


def algorithm_parameter_string(
    name: str,
    variant: str,
    weighted: bool,
    parameters: Iterable[Tuple[str, ParmType, object]],
) -> str:
    """The command-line settings of an algorithm as one line.

    ``parameters`` holds (switch, type, value) triples; probabilities are
    given as floats between 0 and 1.
    """
    parts = ["-alg %s" % name]
    if variant:
        parts.append(" -v %s" % variant)
    if weighted:
        parts.append(" -w")
    for switch, kind, value in parameters:
        parts.append(" %s " % switch)
        parts.append(_format_parameter(ParmType(kind), value))
    return "".join(parts)