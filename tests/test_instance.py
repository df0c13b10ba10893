import math

import pytest

from slsreports.instance import (
    CnfStats,
    cnf_stats,
    format_assignment,
    format_cnf_stats,
    format_model,
    format_sat_competition,
    sat_competition_exit_code,
)

SAMPLE = [[1, -2], [2, 3, -1], [-3]]


def _parse_model_literals(text):
    body = [line for line in text.splitlines() if line and not line.startswith("#")]
    return [int(tok) for line in body for tok in line.split()]


def test_empty_formula_prints_only_counts():
    stats = cnf_stats([], 3)
    assert format_cnf_stats(stats) == (
        "Clauses = 0\nVariables = 3 \nTotalLiterals = 0\nMaxClauseLen = 0\n"
    )
    assert stats.mean_clause_len is None


def test_counts_are_consistent():
    stats = cnf_stats(SAMPLE, 3)
    assert stats.num_clauses == len(SAMPLE)
    assert stats.num_lits == sum(len(c) for c in SAMPLE)
    assert sum(stats.length_counts.values()) == stats.num_clauses
    assert stats.num_pos + stats.num_neg == stats.num_lits
    assert stats.max_clause_len == max(len(c) for c in SAMPLE)


def test_means_and_ratio_follow_counts():
    stats = cnf_stats(SAMPLE, 3)
    assert stats.mean_clause_len == pytest.approx(stats.num_lits / stats.num_clauses)
    assert stats.mean_var_occ == pytest.approx(stats.num_lits / stats.num_vars)
    assert stats.pos_neg_ratio == pytest.approx(stats.num_pos / stats.num_neg)


def test_uniform_occurrences_have_zero_stddev():
    stats = cnf_stats([[1, 2], [-1, -2]], 2)
    assert stats.stddev_var_occ == 0.0
    assert stats.mean_var_occ == pytest.approx(stats.num_lits / 2)


def test_no_negative_literals_gives_infinite_ratio():
    stats = cnf_stats([[1], [2]], 2)
    assert stats.num_neg == 0
    assert stats.num_pos == 2
    assert stats.pos_neg_ratio == math.inf


def test_clause_distribution_line():
    text = format_cnf_stats(cnf_stats([[1, -2], [2, 3, -1]], 3))
    assert "FullClauseDistribution =  2:1 3:1\n" in text
    assert "NumClauseLen2 =  1 \n" in text
    assert "NumClauseLen1 = 0 \n" in text
    assert "NumClauseLen3+ = 1 \n" in text


def test_format_lines_in_order():
    lines = format_cnf_stats(cnf_stats(SAMPLE, 3)).splitlines()
    names = [line.split(" =")[0] for line in lines]
    assert names == [
        "Clauses", "Variables", "TotalLiterals", "MaxClauseLen",
        "NumClauseLen1", "NumClauseLen2", "NumClauseLen3+", "FullClauseDistribution",
        "MeanClauseLen", "MeanVariableOcc", "StdDevVariableOcc",
        "NumPosLit", "NumNegLit", "RatioPos:NegLit",
    ]


def test_clauses_of_length_defaults_to_zero():
    stats = CnfStats(num_clauses=1, num_vars=1, num_lits=1, max_clause_len=1, length_counts={1: 1})
    assert stats.clauses_of_length(1) == 1
    assert stats.clauses_of_length(5) == 0


@pytest.mark.parametrize("clauses, num_vars", [([[0]], 2), ([[1, 4]], 3), ([[-5]], 2)])
def test_invalid_literals_raise(clauses, num_vars):
    with pytest.raises(ValueError):
        cnf_stats(clauses, num_vars)


def test_negative_variable_count_raises():
    with pytest.raises(ValueError):
        cnf_stats([], -1)


def test_format_assignment_round_trip():
    values = [True, False, False, True, 1, 0]
    text = format_assignment(values)
    assert len(text) == len(values)
    assert [c == "1" for c in text] == [bool(v) for v in values]


def test_model_found_lists_every_variable():
    values = [i % 3 == 0 for i in range(1, 24)]
    text = format_model(values, True, 0)
    assert text.startswith("#\n#Solution found for -target 0\n\n")
    literals = _parse_model_literals(text)
    assert [abs(x) for x in literals] == list(range(1, len(values) + 1))
    assert [x > 0 for x in literals] == values


def test_model_ten_per_line_without_extra_newline():
    text = format_model([True] * 10, True, 0)
    body = text.split("\n\n", 1)[1]
    assert body.endswith("10\n")
    assert body.count("\n") == 1


def test_model_not_found_unweighted():
    assert format_model([True], False, 2) == "#No Solution found for -target 2\n"


def test_model_weighted_target():
    assert format_model([True], False, 1.5, True) == "#No Solution found for -wtarget 1.5\n\n"
    assert "Solution found for -wtarget 1.5\n\n" in format_model([True], True, 1.5, True)


def test_model_single_false_variable():
    text = format_model([False], True, 0)
    assert text == "#\n#Solution found for -target 0\n\n -1\n"
    assert _parse_model_literals(text) == [-1]


def test_sat_competition_satisfiable():
    text = format_sat_competition([True, False, True], True)
    assert text.startswith("s SATISFIABLE\nv ")
    assert text.endswith(" 0\n")
    tokens = [int(t) for line in text.splitlines()[1:] for t in line.split()[1:]]
    assert tokens[:-1] == [1, -2, 3]
    assert tokens[-1] == 0


def test_sat_competition_breaks_after_ten():
    text = format_sat_competition([True] * 10, True)
    assert text.endswith(" 10\nv  0\n")


def test_sat_competition_unknown():
    assert format_sat_competition([True], False) == "s UNKNOWN\n"


def test_sat_competition_exit_codes():
    assert sat_competition_exit_code(True) == 10
    assert sat_competition_exit_code(False) == 0