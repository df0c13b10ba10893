"""Instance statistics and printing of variable assignments (models)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

SAT_EXIT_SATISFIABLE = 10
SAT_EXIT_UNKNOWN = 0

_COMMENT = "#"


def _divide(numerator: float, denominator: float) -> float:
    """Division with IEEE results for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


@dataclass
class CnfStats:
    """Size and shape figures of a CNF formula.

    The float figures are ``None`` when the formula has no clauses.
    """

    num_clauses: int
    num_vars: int
    num_lits: int
    max_clause_len: int
    length_counts: Dict[int, int] = field(default_factory=dict)
    num_pos: int = 0
    num_neg: int = 0
    mean_clause_len: Optional[float] = None
    mean_var_occ: Optional[float] = None
    stddev_var_occ: Optional[float] = None
    pos_neg_ratio: Optional[float] = None

    def clauses_of_length(self, length: int) -> int:
        """Number of clauses with exactly the given number of literals."""
        return self.length_counts.get(length, 0)


def cnf_stats(clauses: Iterable[Sequence[int]], num_vars: int) -> CnfStats:
    """Compute statistics of a formula given as clauses of signed DIMACS literals."""
    if num_vars < 0:
        raise ValueError("the number of variables cannot be negative")
    pos_occ = [0] * (num_vars + 1)
    neg_occ = [0] * (num_vars + 1)
    length_counts: Dict[int, int] = {}
    num_clauses = 0
    num_lits = 0
    for clause in clauses:
        for literal in clause:
            var = abs(literal)
            if literal == 0:
                raise ValueError("literal 0 is not allowed inside a clause")
            if var > num_vars:
                raise ValueError(f"literal {literal} refers to a variable beyond {num_vars}")
            if literal > 0:
                pos_occ[var] += 1
            else:
                neg_occ[var] += 1
        length_counts[len(clause)] = length_counts.get(len(clause), 0) + 1
        num_lits += len(clause)
        num_clauses += 1

    stats = CnfStats(
        num_clauses=num_clauses,
        num_vars=num_vars,
        num_lits=num_lits,
        max_clause_len=max(length_counts, default=0),
        length_counts=dict(sorted(length_counts.items())),
        num_pos=sum(pos_occ),
        num_neg=sum(neg_occ),
    )
    if num_clauses == 0:
        return stats

    stats.mean_clause_len = num_lits / num_clauses
    mean_occ = _divide(float(num_lits), float(num_vars))
    stats.mean_var_occ = mean_occ
    if num_vars == 0:
        stats.stddev_var_occ = 0.0
    else:
        squares = math.fsum(
            (pos + neg - mean_occ) ** 2 for pos, neg in zip(pos_occ[1:], neg_occ[1:])
        )
        stats.stddev_var_occ = math.sqrt(_divide(squares, float(num_vars - 1)))
    stats.pos_neg_ratio = _divide(float(stats.num_pos), float(stats.num_neg))
    return stats


def format_cnf_stats(stats: CnfStats) -> str:
    """Render instance statistics as ``Name = value`` lines."""
    lines = [
        "Clauses = %d\n" % stats.num_clauses,
        "Variables = %d \n" % stats.num_vars,
        "TotalLiterals = %d\n" % stats.num_lits,
        "MaxClauseLen = %d\n" % stats.max_clause_len,
    ]
    if stats.num_clauses > 0:
        len1 = stats.clauses_of_length(1)
        len2 = stats.clauses_of_length(2)
        distribution = "".join(
            " %d:%d" % (length, count)
            for length, count in sorted(stats.length_counts.items())
            if count > 0
        )
        lines += [
            "NumClauseLen1 = %d \n" % len1,
            "NumClauseLen2 =  %d \n" % len2,
            "NumClauseLen3+ = %d \n" % (stats.num_clauses - len1 - len2),
            "FullClauseDistribution = %s\n" % distribution,
            "MeanClauseLen = %.12g \n" % stats.mean_clause_len,
            "MeanVariableOcc = %.12g \n" % stats.mean_var_occ,
            "StdDevVariableOcc = %.12g \n" % stats.stddev_var_occ,
            "NumPosLit = %d \n" % stats.num_pos,
            "NumNegLit = %d \n" % stats.num_neg,
            "RatioPos:NegLit = %.12g \n" % stats.pos_neg_ratio,
        ]
    return "".join(lines)


def format_assignment(values: Sequence[object]) -> str:
    """A string of 0s and 1s, one per variable, for values of variables 1..n in order."""
    return "".join("1" if value else "0" for value in values)


def _signed_literals(values: Sequence[object]) -> Iterator[str]:
    for var, value in enumerate(values, start=1):
        yield (" %d" % var) if value else (" -%d" % var)


def format_model(
    values: Sequence[object],
    found: bool,
    target: float,
    weighted: bool = False,
) -> str:
    """The model report: the solution as signed literals, ten per line.

    ``values`` holds the truth values of variables 1..n in order.
    """
    target_text = ("-wtarget %.6g" % target) if weighted else ("-target %d" % int(target))
    if not found:
        ending = "\n\n" if weighted else "\n"
        return f"{_COMMENT}No Solution found for {target_text}{ending}"
    parts: List[str] = [f"{_COMMENT}\n", f"{_COMMENT}Solution found for {target_text}\n\n"]
    for index, literal in enumerate(_signed_literals(values), start=1):
        parts.append(literal)
        if index % 10 == 0:
            parts.append("\n")
    if len(values) % 10 != 0:
        parts.append("\n")
    return "".join(parts)


def format_sat_competition(values: Sequence[object], found: bool) -> str:
    """The solution lines of the SAT competition output format."""
    if not found:
        return "s UNKNOWN\n"
    parts: List[str] = ["s SATISFIABLE\n", "v "]
    for index, literal in enumerate(_signed_literals(values), start=1):
        parts.append(literal)
        if index % 10 == 0:
            parts.append("\nv ")
    parts.append(" 0\n")
    return "".join(parts)


def sat_competition_exit_code(found: bool) -> int:
    """Process exit status of the SAT competition format: 10 if satisfiable, else 0."""
    return SAT_EXIT_SATISFIABLE if found else SAT_EXIT_UNKNOWN