"""Trapezoidal integration, by strip count or to a precision."""

import sys
from typing import Callable, List, NamedTuple, Optional, Sequence

_MAX_STRIPS = 0xFFFFFFFF

Function = Callable[[float], float]


class Integral(NamedTuple):
    """Result of an integration to a precision, with the strips it took."""

    value: float
    strips: int


def polynomial(x: float) -> float:
    """The integrand used by the command line: 2x^2 + 9x + 4."""
    return 2 * x**2 + 9 * x + 4


def _exact_polynomial_integral(a: float, b: float) -> float:
    def antiderivative(x: float) -> float:
        return (2 / 3.0) * x**3 + (9 / 2.0) * x**2 + 4 * x

    return antiderivative(b) - antiderivative(a)


def _trapezoid(f: Function, a: float, b: float, n: int) -> float:
    width = (b - a) / n
    total = 0.0
    left = a
    for _ in range(n):
        right = left + width
        total += ((f(left) + f(right)) / 2) * width
        left = right
    return total


def integrate_n(f: Function, a: float, b: float, n: int) -> float:
    """Integrate f over [a, b] with n trapezoidal strips."""
    if b < a:
        raise ValueError("upper bound must not be below lower bound")
    if not 1 <= n <= _MAX_STRIPS:
        raise ValueError("number of strips must be between 1 and 2**32 - 1")
    return _trapezoid(f, a, b, n)


def integrate_p(f: Function, a: float, b: float, p: float) -> Integral:
    """Integrate f over [a, b], doubling strips until within p of the exact value.

    Convergence is judged against the exact integral of ``polynomial``.
    """
    if b < a:
        raise ValueError("upper bound must not be below lower bound")
    if p <= 0:
        raise ValueError("precision must be positive")
    exact = _exact_polynomial_integral(a, b)
    n = 1
    value = _trapezoid(f, a, b, n)
    while abs(value - exact) > p:
        n *= 2
        if n > _MAX_STRIPS:
            raise ArithmeticError("integration did not reach the requested precision")
        value = _trapezoid(f, a, b, n)
    return Integral(value, n)


def _usage() -> int:
    print("usage: integrate <a> <b> (-n <strips> | -p <precision>)", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Integrate ``polynomial`` over an interval given on the command line."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        return _usage()
    try:
        a = float(args[0])
        b = float(args[1])
    except ValueError:
        return _usage()
    if b < a:
        return _usage()

    mode, amount = args[2], args[3]
    if mode == "-n":
        try:
            strips = int(amount)
        except ValueError:
            return _usage()
        if not 1 <= strips <= _MAX_STRIPS:
            return _usage()
        value = integrate_n(polynomial, a, b, strips)
    elif mode == "-p":
        try:
            precision = float(amount)
        except ValueError:
            return _usage()
        if not 0 < precision <= 1:
            return _usage()
        value, strips = integrate_p(polynomial, a, b, precision)
    else:
        return _usage()

    print(f"interval: [{a:f}-{b:f}], n: {strips}, result={value:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())