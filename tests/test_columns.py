import statistics

import pytest

from slsreports.columns import (
    Column,
    calculate_stats,
    column_headers,
    format_row,
    sort_rows,
    sort_rows_found_first,
)
from slsreports.types import ColType, DataType, UINT32_MAX


DATA = [2, 4, 4, 4, 5, 5, 7, 9]


def test_calculate_stats_matches_statistics():
    stats = calculate_stats(sum(DATA), sum(x * x for x in DATA), len(DATA))
    assert stats.mean == pytest.approx(statistics.mean(DATA))
    assert stats.stddev == pytest.approx(statistics.stdev(DATA))
    assert stats.cv == pytest.approx(statistics.stdev(DATA) / statistics.mean(DATA))


def test_calculate_stats_empty_and_single():
    assert calculate_stats(0.0, 0.0, 0) == (0.0, 0.0, 0.0)
    single = calculate_stats(7.0, 49.0, 1)
    assert single.mean == 7.0
    assert single.stddev == 0.0


def test_mean_column():
    col = Column("m", col_type=ColType.Mean, source_type=DataType.UInt)
    for v in DATA:
        col.observe_step(v)
    col.finish_run(steps=len(DATA))
    assert col.value(0) == pytest.approx(statistics.mean(DATA))


def test_stddev_column():
    col = Column("s", col_type=ColType.Stddev, source_type=DataType.Float)
    for v in DATA:
        col.observe_step(v)
    col.finish_run(steps=len(DATA))
    assert col.value(0) == pytest.approx(statistics.stdev(DATA))


def test_min_and_max_columns():
    low = Column("lo", col_type=ColType.Min)
    high = Column("hi", col_type=ColType.Max)
    for v in DATA:
        low.observe_step(v)
        high.observe_step(v)
    assert low.finish_run() == min(DATA)
    assert high.finish_run() == max(DATA)


def test_min_without_steps_keeps_initial_value():
    col = Column("lo", col_type=ColType.Min)
    assert col.finish_run() == UINT32_MAX


def test_float_max_starts_at_zero():
    col = Column("hi", col_type=ColType.Max, source_type=DataType.Float)
    col.observe_step(-5.0)
    col.observe_step(-2.0)
    assert col.finish_run() == 0.0


def test_final_div_step_variants():
    plain = Column("d", col_type=ColType.FinalDivStep)
    pct = Column("p", col_type=ColType.FinalDivStep100)
    assert plain.finish_run(5, 10) == pytest.approx(5 / 10)
    assert pct.finish_run(5, 10) == pytest.approx(100 * plain.value(0))
    zero = Column("z", col_type=ColType.FinalDivStep)
    assert zero.finish_run(5, 0) == pytest.approx(5.0)


def test_final_requires_value():
    col = Column("steps")
    with pytest.raises(ValueError):
        col.finish_run(None, 10)


def test_reset_between_runs_and_column_sums():
    col = Column("hi", col_type=ColType.Max)
    for run in ([1, 9, 3], [2, 4]):
        col.reset_run()
        for v in run:
            col.observe_step(v)
        col.finish_run()
    assert col.rows == [9, 4]
    assert col.col_sum == pytest.approx(col.value(0) + col.value(1))
    assert col.col_sum2 == pytest.approx(col.value(0) ** 2 + col.value(1) ** 2)


def test_value_requires_kept_data():
    col = Column("steps", description="Steps", keep_data=False)
    col.finish_run(12)
    with pytest.raises(RuntimeError):
        col.value(0)
    assert col.format_value(0) == "12"


def test_value_out_of_range():
    col = Column("steps")
    col.finish_run(3)
    with pytest.raises(IndexError):
        col.value(1)


def test_format_value_uses_print_format():
    col = Column("steps", print_format="%5u")
    col.finish_run(7)
    assert col.format_value(0) == "%5u" % 7


def test_format_row_layout():
    a = Column("steps", print_format="%u")
    b = Column("found", print_format="%u")
    a.finish_run(42)
    b.finish_run(1)
    assert format_row([a, b], 0) == "  42 1 \n"


def test_column_headers():
    a = Column("steps", description="Total steps", header1="A", header2="B", header3="C")
    b = Column("found", description="Solved", header1="D", header2="E", header3="F")
    lines = column_headers([a, b])
    assert "Output Columns: |steps|found|" in lines
    assert "steps: Total steps" in lines
    assert "A D " in lines
    assert "C F " in lines


def test_sort_rows_orders_values():
    values = [5, 1, 4, 1, 9]
    order = sort_rows(values)
    assert sorted(order) == list(range(len(values)))
    assert [values[i] for i in order] == sorted(values)


def test_sort_rows_found_first():
    values = [5, 1, 4, 2, 9]
    found = [1, 0, 1, 1, 0]
    order = sort_rows_found_first(values, found)
    n_found = sum(found)
    assert all(found[i] for i in order[:n_found])
    assert not any(found[i] for i in order[n_found:])
    solved = [values[i] for i in order[:n_found]]
    failed = [values[i] for i in order[n_found:]]
    assert solved == sorted(solved)
    assert failed == sorted(failed)


def test_sort_rows_found_first_length_mismatch():
    with pytest.raises(ValueError):
        sort_rows_found_first([1, 2], [1])