# slsreports

Building blocks for reporting on stochastic local search (SLS) SAT solver
experiments: per-run data columns, column statistics, CNF instance
statistics, model and solution output, and per-run trace report rows.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `slsreports.types`: the `EventPoint`, `ParmType`, `DataType` and
  `ColType` enumerations, the `StatCode` flags that select column
  statistics (with `needs_calculation`, `needs_sorting` and
  `needs_found_split`), and fixed limits and numeric bounds.
- `slsreports.literals`: integer literal encoding, where variable `v` maps
  to `2v` (positive) and `2v+1` (negative): `pos_lit`, `neg_lit`,
  `negated_lit`, `lit_sign`, `var_of_lit`, `lit_from_dimacs`,
  `is_lit_true`, `true_lit`, `false_lit`.
- `slsreports.timing`: `RunClock`, which measures user processor time (or
  any timer you pass in) for a whole session and for the current run, and
  `initial_seed`, which derives a seed from wall-clock time.
- `slsreports.columns`: `Column`, which accumulates per-step observations
  and stores one value per run (final, mean, stddev, CV, min, max, or final
  value divided by steps); `calculate_stats` (mean, sample standard
  deviation, coefficient of variation from sums); `sort_rows`,
  `sort_rows_found_first`; and `format_row` and `column_headers` for
  tabular output.
- `slsreports.stats`: `StatSpec`; `compute_column_stats`, which returns the
  statistics chosen by `StatCode` flags (moments, sum, median, quantiles,
  quantile ratios, step-weighted mean and figures split by solved/failed
  runs); `format_stats`; `percent_solved`; `flips_per_second`;
  `distribute_times`; `success_probabilities`.
- `slsreports.instance`: `CnfStats` and `cnf_stats` for clauses given as
  signed DIMACS literals, `format_cnf_stats`, `format_assignment`,
  `format_model`, `format_sat_competition` and `sat_competition_exit_code`.
- `slsreports.runreports`: `PenaltyAccumulator` for per-clause penalty
  summaries over runs, `normalise_penalties`, `format_counts_row`,
  `format_bias_counts`, `mobility_means`, `mobility_fixed_frequencies`,
  `autocorr_row` and `algorithm_parameter_string`.

## Example

```python
from slsreports.columns import calculate_stats
from slsreports.literals import lit_from_dimacs, var_of_lit
from slsreports.stats import compute_column_stats
from slsreports.types import StatCode

mean, stddev, cv = calculate_stats(total=10.0, total_sq=30.0, count=4)

lit = lit_from_dimacs(-3)
assert var_of_lit(lit) == 3

figures = compute_column_stats([12, 40, 7, 19], StatCode.MEAN | StatCode.MEDIAN)
```

## What this package does not do

- It contains no solver and no search algorithms, and installs no command.
- It does not read CNF files: `cnf_stats` takes clauses that you have
  already parsed.
- It writes nothing itself: the formatting functions return strings, and
  sending them to a file or the console is left to the caller.