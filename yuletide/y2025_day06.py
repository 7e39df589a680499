"""Trash compactor: a worksheet of column arithmetic problems."""

from __future__ import annotations

import math
from collections.abc import Iterator

_OPERATORS = {"+": sum, "*": math.prod}


def transpose(text: str) -> str:
    """Swap rows and columns of the text, padding short lines with spaces."""
    rows = text.splitlines()
    width = max((len(row) for row in rows), default=0)
    padded = [row.ljust(width) for row in rows]
    return "\n".join("".join(column) for column in zip(*padded))


def part_one(text: str) -> int:
    """Grand total when numbers are read along the rows."""
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        return 0
    *number_rows, operator_row = lines
    operators = operator_row.split()
    for op in operators:
        if op not in _OPERATORS:
            raise ValueError(f"unknown operator {op!r}")
    rows = []
    for line in number_rows:
        try:
            row = [int(token) for token in line.split()]
        except ValueError:
            raise ValueError(f"malformed number row: {line!r}") from None
        if len(row) != len(operators):
            raise ValueError(f"row has {len(row)} numbers for {len(operators)} problems")
        rows.append(row)
    columns = zip(*rows) if rows else [()] * len(operators)
    return sum(_OPERATORS[op](column) for op, column in zip(operators, columns))


def _blocks(text: str) -> Iterator[list[str]]:
    block: list[str] = []
    for line in text.splitlines():
        if line.strip():
            block.append(line)
        elif block:
            yield block
            block = []
    if block:
        yield block


def _solve_column_problem(block: list[str]) -> int:
    operators = [cell for line in block for cell in line if cell in _OPERATORS]
    if len(operators) != 1:
        raise ValueError(f"problem needs exactly one operator, found {len(operators)}")
    op = operators[0]
    numbers = []
    for line in block:
        try:
            numbers.append(int(line.replace(op, "").strip()))
        except ValueError:
            raise ValueError(f"malformed number column: {line!r}") from None
    return _OPERATORS[op](numbers)


def part_two(text: str) -> int:
    """Grand total when each number is written down a column."""
    return sum(_solve_column_problem(block) for block in _blocks(transpose(text)))