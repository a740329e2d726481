"""
Command Line Interface for fastseries
"""

import argparse
import json
import sys
from typing import List, Optional
import sympy as sp

from fastseries.expansion.classifier import EligibilityClassifier
from fastseries.expansion.expander import FastSeriesExpander
from fastseries.expansion.results import FastPathInfeasible
from fastseries.functions.elementary import (
    COMPOSITION_RULES,
    ElementaryFunction,
    supported_function_names,
)
from fastseries.utils.config import Settings, get_settings
from fastseries.utils.logging_config import setup_logging


class FastSeriesCLI:
    """Command line interface for fast series expansion"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.classifier = EligibilityClassifier()

    def expand(self, args) -> int:
        """Expand a single expression"""
        expr = self._parse(args.expression)
        x = sp.Symbol(args.var)
        order = args.order if args.order is not None else self.settings.default_order

        settings = self.settings
        if args.no_fallback:
            settings = self.settings.model_copy(update={"fallback_enabled": False})

        try:
            outcome = FastSeriesExpander(settings=settings).expand(expr, x, point=args.point, order=order)
        except (FastPathInfeasible, ValueError) as e:
            print(str(e), file=sys.stderr)
            return 1

        if args.output_format == 'json':
            output = {
                'expression': str(expr),
                'variable': str(x),
                'point': str(args.point),
                'order': order,
                'series': str(outcome.expr),
                'path': outcome.path,
                'reason': outcome.reason,
            }
            if outcome.power_series is not None:
                output['coefficients'] = [str(c) for c in outcome.power_series.coefficients()]
            print(json.dumps(output, indent=2))
        elif args.output_format == 'latex':
            print(sp.latex(outcome.expr))
        else:  # text
            print(f"Series: {outcome.expr}")
            print(f"Path: {outcome.path}")
            if outcome.reason:
                print(f"Fallback reason: {outcome.reason}")

        return 0

    def check(self, args) -> int:
        """Report whether the fast path accepts an expression"""
        expr = self._parse(args.expression)
        eligibility = self.classifier.inspect(expr)

        print(f"Eligible: {'Yes' if eligibility.eligible else 'No'}")
        if eligibility.variable is not None:
            print(f"Variable: {eligibility.variable}")
        if eligibility.reason:
            print(f"Reason: {eligibility.reason}")

        return 0 if eligibility.eligible else 1

    def list_functions(self, args) -> int:
        """List whitelisted functions"""
        print("=== Supported Functions ===")
        for name in supported_function_names():
            rule = COMPOSITION_RULES[ElementaryFunction(name)]
            print(f"  {name}: argument constant term must be {rule.required_constant}")
        return 0

    @staticmethod
    def _parse(text: str) -> sp.Expr:
        try:
            return sp.sympify(text)
        except (sp.SympifyError, SyntaxError, TypeError) as e:
            print(f"Could not parse expression '{text}': {e}", file=sys.stderr)
            sys.exit(2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='fastseries CLI - exact truncated power series of SymPy expressions'
    )
    parser.add_argument('--log-level', default=None, help='Logging level (default from settings)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Expand command
    expand_parser = subparsers.add_parser('expand', help='Expand an expression')
    expand_parser.add_argument('expression', help='Expression, e.g. "sin(x)*cos(x)"')
    expand_parser.add_argument('--var', default='x', help='Expansion variable')
    expand_parser.add_argument('--point', default='0', help='Expansion point')
    expand_parser.add_argument('--order', type=int, default=None, help='Truncation order')
    expand_parser.add_argument('--output-format', choices=['text', 'json', 'latex'], default='text')
    expand_parser.add_argument('--no-fallback', action='store_true',
                               help='Fail instead of falling back to sympy.series')

    # Check command
    check_parser = subparsers.add_parser('check', help='Check fast path eligibility')
    check_parser.add_argument('expression', help='Expression to check')

    # List functions command
    subparsers.add_parser('list-functions', help='List supported functions')

    # Version command
    subparsers.add_parser('version', help='Show version')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.log_level)
    cli = FastSeriesCLI()

    if args.command == 'expand':
        return cli.expand(args)
    elif args.command == 'check':
        return cli.check(args)
    elif args.command == 'list-functions':
        return cli.list_functions(args)
    elif args.command == 'version':
        from fastseries import __version__
        print(f"fastseries Version: {__version__}")
        return 0

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
