"""Text patterns of stars and numbers, each returned as newline-terminated lines."""

from __future__ import annotations

from collections.abc import Iterable


def _render(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def square(n: int) -> str:
    """An n by n block of "* " cells."""
    return _render("* " * n for _ in range(n))


def triangle(n: int) -> str:
    """n rows; row i (from 0) holds i "* " cells, so the first row is empty."""
    return _render("* " * i for i in range(n))


def number_triangle(n: int) -> str:
    """Row i (from 1) counts "1 2 ... i " with a space after each number."""
    return _render(
        "".join(f"{j} " for j in range(1, i + 1)) for i in range(1, n + 1)
    )


def repeated_number_triangle(n: int) -> str:
    """Row i (from 1) repeats "i " i times."""
    return _render(f"{i} " * i for i in range(1, n + 1))


def inverted_triangle(n: int) -> str:
    """Rows of n, n-1, ..., 1 "* " cells."""
    return _render("* " * i for i in range(n, 0, -1))


def inverted_number_triangle(n: int) -> str:
    """Rows counting 1..i without separators, for i from n down to 1."""
    return _render(
        "".join(str(j) for j in range(1, i + 1)) for i in range(n, 0, -1)
    )


def _pyramid_rows(n: int) -> list[str]:
    return [
        " " * (n - 1 - i) + "*" * (2 * i + 1) + " " * (n - 1 - i) for i in range(n)
    ]


def pyramid(n: int) -> str:
    """A centred pyramid of n rows, padded with spaces on both sides."""
    return _render(_pyramid_rows(n))


def inverted_pyramid(n: int) -> str:
    """An upside-down pyramid drawn with " *" cells and double-space padding."""
    return _render(
        "  " * i + " *" * (2 * n - (2 * i + 1)) + "  " * i for i in range(n)
    )


def diamond(n: int) -> str:
    """A pyramid followed by its mirror image; the widest row appears twice."""
    top = _pyramid_rows(n)
    bottom = [" " * i + "*" * ((n - i) * 2 - 1) + " " * i for i in range(n)]
    return _render(top + bottom)