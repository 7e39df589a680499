"""Linear programming: simplex and branch-and-bound integer optimisation.

Problems take the form: maximise ``c . x`` subject to ``a x <= b`` and ``x >= 0``.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from typing import NamedTuple

EPSILON = 1.0e-6
_TIE = 1.0e-12


class InfeasibleError(ValueError):
    """The constraints admit no solution."""


class UnboundedError(ValueError):
    """The objective can be made arbitrarily large."""


class Solution(NamedTuple):
    """An optimal objective value and a point reaching it."""

    value: float
    x: list


class _Dictionary:
    """A simplex dictionary: ``basic_i = b_i - sum_j a_ij * nonbasic_j``."""

    def __init__(self, a: Sequence[Sequence[float]], b: Sequence[float], c: Sequence[float]):
        self.a = [[float(v) for v in row] for row in a]
        self.b = [float(v) for v in b]
        self.c = [float(v) for v in c]
        self.y = 0.0
        n, m = len(self.c), len(self.b)
        self.nonbasic = list(range(n))
        self.basic = list(range(n, n + m))

    def pivot(self, row: int, col: int) -> None:
        a, b, c = self.a, self.b, self.c
        pivot_row = a[row]
        inverse = 1.0 / pivot_row[col]
        entering = c[col]

        self.y += entering * b[row] * inverse
        self.c = [
            -entering * inverse if j == col else cj - entering * aj * inverse
            for j, (cj, aj) in enumerate(zip(c, pivot_row))
        ]
        for i, current in enumerate(a):
            if i == row:
                continue
            factor = current[col]
            b[i] -= factor * b[row] * inverse
            a[i] = [
                -factor * inverse if j == col else value - factor * pivot_value * inverse
                for j, (value, pivot_value) in enumerate(zip(current, pivot_row))
            ]
        a[row] = [inverse if j == col else value * inverse for j, value in enumerate(pivot_row)]
        b[row] *= inverse

        self.nonbasic[col], self.basic[row] = self.basic[row], self.nonbasic[col]

    def _leaving_row(self, col: int) -> int | None:
        best: int | None = None
        best_ratio = 0.0
        for i, (row, rhs) in enumerate(zip(self.a, self.b)):
            coefficient = row[col]
            if coefficient <= EPSILON:
                continue
            ratio = rhs / coefficient
            if (
                best is None
                or ratio < best_ratio - _TIE
                or (abs(ratio - best_ratio) <= _TIE and self.basic[i] < self.basic[best])
            ):
                best, best_ratio = i, ratio
        return best

    def optimise(self) -> None:
        """Pivot until no nonbasic variable can raise the objective."""
        while True:
            candidates = [j for j, cj in enumerate(self.c) if cj > EPSILON]
            if not candidates:
                return
            col = min(candidates, key=self.nonbasic.__getitem__)
            row = self._leaving_row(col)
            if row is None:
                raise UnboundedError("the objective is unbounded")
            self.pivot(row, col)

    def make_feasible(self) -> None:
        """Reach a feasible dictionary through an auxiliary problem if needed."""
        if not self.b:
            return
        start = min(range(len(self.b)), key=self.b.__getitem__)
        if self.b[start] >= 0:
            return
        objective = self.c
        aux = len(self.nonbasic) + len(self.basic)
        for row in self.a:
            row.append(-1.0)
        self.nonbasic.append(aux)
        self.c = [0.0] * (len(self.nonbasic) - 1) + [-1.0]
        self.y = 0.0
        self.pivot(start, len(self.nonbasic) - 1)
        self.optimise()
        if self.y < -EPSILON:
            raise InfeasibleError("the constraints have no feasible point")

        if aux in self.basic:
            row = self.basic.index(aux)
            col = max(range(len(self.nonbasic)), key=lambda j: abs(self.a[row][j]))
            if abs(self.a[row][col]) <= EPSILON:
                del self.a[row], self.b[row], self.basic[row]
            else:
                self.pivot(row, col)
        if aux in self.nonbasic:
            col = self.nonbasic.index(aux)
            del self.nonbasic[col]
            for row in self.a:
                del row[col]
        self._restore_objective(objective)

    def _restore_objective(self, objective: list[float]) -> None:
        columns = {var: j for j, var in enumerate(self.nonbasic)}
        rows = {var: i for i, var in enumerate(self.basic)}
        c = [0.0] * len(self.nonbasic)
        y = 0.0
        for var, cost in enumerate(objective):
            if not cost:
                continue
            if var in columns:
                c[columns[var]] += cost
            else:
                i = rows[var]
                y += cost * self.b[i]
                c = [cj - cost * aij for cj, aij in zip(c, self.a[i])]
        self.c = c
        self.y = y

    def value_of(self, variable: int) -> float:
        if variable in self.basic:
            return self.b[self.basic.index(variable)]
        return 0.0


def _check_shape(a: Sequence[Sequence[float]], b: Sequence[float], c: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(f"{len(a)} constraint rows but {len(b)} right-hand sides")
    for row in a:
        if len(row) != len(c):
            raise ValueError(f"constraint row of length {len(row)} for {len(c)} variables")


def simplex(a: Sequence[Sequence[float]], b: Sequence[float], c: Sequence[float]) -> Solution:
    """Maximise ``c . x`` subject to ``a x <= b`` and ``x >= 0``.

    Raises InfeasibleError or UnboundedError when there is no optimum.
    """
    _check_shape(a, b, c)
    dictionary = _Dictionary(a, b, c)
    dictionary.make_feasible()
    dictionary.optimise()
    x = [dictionary.value_of(j) for j in range(len(c))]
    return Solution(dictionary.y, x)


def _integral(x: list[float]) -> list[int] | None:
    rounded = [round(v) for v in x]
    if all(abs(v - r) < EPSILON for v, r in zip(x, rounded)):
        return rounded
    return None


def _branch_variable(x: list[float], lower: dict[int, float], upper: dict[int, float]) -> int | None:
    for j, v in enumerate(x):
        if abs(v - round(v)) < EPSILON:
            continue
        if math.floor(v) < lower.get(j, 0) or math.ceil(v) > upper.get(j, math.inf):
            continue
        return j
    return None


def integer_optimum(
    a: Sequence[Sequence[float]], b: Sequence[float], c: Sequence[float]
) -> Solution:
    """Maximise ``c . x`` over integer ``x >= 0`` with ``a x <= b``.

    Raises InfeasibleError when no integer point is feasible and UnboundedError
    when the relaxed problem is unbounded.
    """
    _check_shape(a, b, c)
    n = len(c)

    def relax(lower: dict[int, float], upper: dict[int, float]) -> Solution | None:
        rows = [list(row) for row in a]
        rhs = list(b)
        for j in range(n):
            if j in lower:
                rows.append([-1.0 if k == j else 0.0 for k in range(n)])
                rhs.append(-lower[j])
            if j in upper:
                rows.append([1.0 if k == j else 0.0 for k in range(n)])
                rhs.append(upper[j])
        try:
            return simplex(rows, rhs, c)
        except (InfeasibleError, UnboundedError):
            return None

    root = simplex(a, b, c)
    whole = _integral(root.x)
    if whole is not None:
        return Solution(root.value, whole)

    best_value = -math.inf
    best_x: list[int] | None = None
    queue: deque[tuple[Solution, dict[int, float], dict[int, float], int]] = deque()
    variable = _branch_variable(root.x, {}, {})
    if variable is not None:
        queue.append((root, {}, {}, variable))

    while queue:
        node, lower, upper, variable = queue.popleft()
        if node.value < best_value:
            continue
        v = node.x[variable]
        children = (
            (lower, {**upper, variable: min(upper.get(variable, math.inf), math.floor(v))}),
            ({**lower, variable: max(lower.get(variable, -math.inf), math.ceil(v))}, upper),
        )
        for child_lower, child_upper in children:
            solution = relax(child_lower, child_upper)
            if solution is None:
                continue
            whole = _integral(solution.x)
            if whole is not None:
                if solution.value > best_value:
                    best_value, best_x = solution.value, whole
            elif solution.value >= best_value:
                branch = _branch_variable(solution.x, child_lower, child_upper)
                if branch is not None:
                    queue.append((solution, child_lower, child_upper, branch))

    if best_x is None:
        raise InfeasibleError("no integer point satisfies the constraints")
    return Solution(best_value, best_x)