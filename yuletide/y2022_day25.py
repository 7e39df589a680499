"""Full of hot air: balanced base-five SNAFU numbers."""

from __future__ import annotations

_DIGIT_VALUES = {"2": 2, "1": 1, "0": 0, "-": -1, "=": -2}
_VALUE_DIGITS = {value: digit for digit, value in _DIGIT_VALUES.items()}


def snafu_to_int(snafu: str) -> int:
    """Decode a SNAFU number."""
    snafu = snafu.strip()
    if not snafu:
        raise ValueError("empty SNAFU number")
    number = 0
    for digit in snafu:
        try:
            number = 5 * number + _DIGIT_VALUES[digit]
        except KeyError:
            raise ValueError(f"invalid SNAFU digit {digit!r}") from None
    return number


def int_to_snafu(number: int) -> str:
    """Encode a non-negative integer as a SNAFU number."""
    if number < 0:
        raise ValueError("SNAFU encoding needs a non-negative number")
    digits = []
    while True:
        remainder = (number + 2) % 5 - 2
        digits.append(_VALUE_DIGITS[remainder])
        number = (number - remainder) // 5
        if number == 0:
            break
    return "".join(reversed(digits))


def part_one(text: str) -> str:
    """SNAFU sum of all the numbers in the input."""
    total = sum(snafu_to_int(line) for line in text.splitlines() if line.strip())
    return int_to_snafu(total)