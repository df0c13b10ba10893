"""Report columns: per-run values accumulated from per-step observations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Sequence, Union

from .types import (
    FLOAT_MAX,
    FLOAT_STATS_MIN,
    SINT32_MAX,
    SINT32_MIN,
    UINT32_MAX,
    ColType,
    DataType,
)

Number = Union[int, float]

_STEP_TYPES = (ColType.Mean, ColType.Stddev, ColType.CV, ColType.Min, ColType.Max)
_SOURCE_TYPED = (ColType.Final, ColType.Min, ColType.Max)


class Stats(NamedTuple):
    """Mean, sample standard deviation and coefficient of variation."""

    mean: float
    stddev: float
    cv: float


def calculate_stats(total: float, total_sq: float, count: int) -> Stats:
    """Summary statistics from a sum, a sum of squares and a count."""
    if count <= 0:
        return Stats(0.0, 0.0, 0.0)
    mean = total / count
    if count == 1:
        return Stats(mean, 0.0, 0.0)
    variance = (total_sq / count - mean * mean) * (count / (count - 1))
    stddev = math.sqrt(variance) if variance > 0.0 else 0.0
    cv = stddev / mean if abs(mean) > FLOAT_STATS_MIN else 0.0
    return Stats(mean, stddev, cv)


def _convert(value: Number, data_type: DataType) -> Number:
    if data_type in (DataType.UInt, DataType.SInt):
        return int(value)
    return float(value)


@dataclass
class Column:
    """One column of run data, fed with step values and closed once per run."""

    id: str
    description: str = ""
    header1: str = ""
    header2: str = ""
    header3: str = ""
    print_format: str = "%u"
    col_type: ColType = ColType.Final
    source_type: DataType = DataType.UInt
    keep_data: bool = True

    rows: List[Number] = field(default_factory=list, init=False)
    current: Number = field(default=0, init=False)
    col_sum: float = field(default=0.0, init=False)
    col_sum2: float = field(default=0.0, init=False)
    row_sum: float = field(default=0.0, init=False)
    row_sum2: float = field(default=0.0, init=False)
    min_max: Number = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.source_type is DataType.String:
            raise ValueError("columns cannot hold string data")
        self.reset_run()

    @property
    def final_type(self) -> DataType:
        """Type of the value stored for each run."""
        if self.col_type in _SOURCE_TYPED:
            return self.source_type
        return DataType.Float

    def reset_run(self) -> None:
        """Clear the per-step accumulators before a new run."""
        self.row_sum = 0.0
        self.row_sum2 = 0.0
        if self.col_type is ColType.Max:
            initial = {DataType.UInt: 0, DataType.SInt: SINT32_MIN, DataType.Float: 0.0}
        else:
            initial = {DataType.UInt: UINT32_MAX, DataType.SInt: SINT32_MAX, DataType.Float: FLOAT_MAX}
        self.min_max = initial[self.source_type]

    def observe_step(self, value: Number) -> None:
        """Account for the value seen at one search step."""
        if self.col_type not in _STEP_TYPES:
            return
        value = _convert(value, self.source_type)
        if self.col_type in (ColType.Stddev, ColType.CV):
            self.row_sum2 += float(value) * float(value)
        if self.col_type in (ColType.Mean, ColType.Stddev, ColType.CV):
            self.row_sum += float(value)
        elif self.col_type is ColType.Min:
            if value < self.min_max:
                self.min_max = value
        elif self.col_type is ColType.Max:
            if value > self.min_max:
                self.min_max = value

    def finish_run(self, final_value: Optional[Number] = None, steps: int = 0) -> Number:
        """Compute the run's row value, store it and add it to the column sums."""
        kind = self.col_type
        if kind in (ColType.Final, ColType.FinalDivStep, ColType.FinalDivStep100):
            if final_value is None:
                raise ValueError(f"column {self.id!r} needs a final value")
        if kind is ColType.Final:
            row: Number = _convert(final_value, self.source_type)
        elif kind in (ColType.Min, ColType.Max):
            row = self.min_max
        elif kind in (ColType.FinalDivStep, ColType.FinalDivStep100):
            multiplier = 1.0 if steps == 0 else 1.0 / steps
            row = float(final_value) * multiplier
            if kind is ColType.FinalDivStep100:
                row *= 100.0
        else:
            stats = calculate_stats(self.row_sum, self.row_sum2, steps)
            row = {ColType.Mean: stats.mean, ColType.Stddev: stats.stddev}.get(kind, stats.cv)

        self.current = row
        if self.keep_data:
            self.rows.append(row)
        self.col_sum += float(row)
        self.col_sum2 += float(row) * float(row)
        return row

    def value(self, row: int) -> float:
        """Stored value of a run as a float."""
        if not self.keep_data:
            raise RuntimeError(f"column data for [{self.description}] was not kept")
        return float(self.rows[row])

    def format_value(self, row: int) -> str:
        """A run's value rendered with the column's print format."""
        raw = self.rows[row] if self.keep_data else self.current
        return self.print_format % _convert(raw, self.final_type)


def sort_rows(values: Sequence[Number]) -> List[int]:
    """Row indices ordered by ascending value."""
    return sorted(range(len(values)), key=lambda i: values[i])


def sort_rows_found_first(values: Sequence[Number], found: Sequence[Number]) -> List[int]:
    """Row indices with solved runs first, each part ordered by ascending value."""
    if len(values) != len(found):
        raise ValueError("values and found flags differ in length")
    return sorted(range(len(values)), key=lambda i: (not found[i], values[i]))


def format_row(columns: Sequence[Column], row: int) -> str:
    """One output line with each column's value for the given run."""
    return "  " + "".join(f"{col.format_value(row)} " for col in columns) + "\n"


def column_headers(columns: Sequence[Column]) -> List[str]:
    """Header lines (without comment prefix or newline) describing the columns."""
    lines = ["", "Output Columns: " + "".join(f"|{col.id}" for col in columns) + "|", ""]
    lines.extend(f"{col.id}: {col.description}" for col in columns)
    lines.append("")
    for attr in ("header1", "header2", "header3"):
        lines.append("".join(f"{getattr(col, attr)} " for col in columns))
    lines.append("")
    return lines