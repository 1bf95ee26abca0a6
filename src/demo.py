"""
Пример запуска quadrature engine

    python -m src.demo [--digits N] [--json]

A1: ∫_0^1 (x^3 - 2x^2 + 1) dx при parts=1 (формула Симпсона точна для кубик)
A2: 1/sqrt(2*pi) * ∫_0^INF exp(-x^2/2) dx, INF = approx_upper_border(g, P)
"""

import argparse
import json
import logging
from decimal import Decimal
from typing import Optional, Sequence

from src.core.contracts import validate_integration_report
from src.core.domain.precision import DEFAULT_DIGITS, PrecisionContext
from src.core.math.decimal_ops import ONE, TWO, exp_d, pi_d, sqrt_d
from src.quadrature import approx_upper_border, refine_integral, simpson_integral

logger = logging.getLogger(__name__)


def cubic(x: Decimal) -> Decimal:
    """f(x) = x^3 - 2x^2 + 1"""
    return x ** 3 - TWO * x ** 2 + ONE


def gaussian(precision: PrecisionContext):
    """g(x) = exp(-x^2 / 2), вычисленная с P значащими цифрами."""

    def g(x: Decimal) -> Decimal:
        return exp_d(-(x ** 2) / TWO, precision)

    return g


def normal_scale(precision: PrecisionContext) -> Decimal:
    """1 / sqrt(2 * pi)"""
    ctx = precision.decimal_context()
    return ctx.divide(ONE, sqrt_d(ctx.multiply(TWO, pi_d(precision)), precision))


def run(precision: PrecisionContext, as_json: bool = False) -> None:
    a1 = simpson_integral(cubic, 0, 1, 1, precision)
    print(f"A1: {a1}")

    g = gaussian(precision)
    upper = approx_upper_border(g, precision)
    result = refine_integral(g, 0, upper, precision)
    a2 = precision.decimal_context().multiply(normal_scale(precision), result.value)
    print(f"A2: {a2}")

    if as_json:
        report = result.to_report()
        validate_integration_report(report)
        print(json.dumps(report, indent=2))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Decimal Simpson quadrature examples")
    parser.add_argument("--digits", type=int, default=DEFAULT_DIGITS, help="significant digits P")
    parser.add_argument("--json", action="store_true", help="print the A2 integration report")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every refinement step")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    precision = PrecisionContext(digits=args.digits)
    logger.info("Running examples with %d significant digits", precision.digits)
    run(precision, as_json=args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
