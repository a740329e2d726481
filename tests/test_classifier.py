"""
Unit tests for the fast path eligibility classifier
"""

import unittest
import sympy as sp

from fastseries.expansion.classifier import EligibilityClassifier


class TestEligibilityClassifier(unittest.TestCase):
    """Structural acceptance and rejection"""

    def setUp(self):
        self.classifier = EligibilityClassifier()
        self.x = sp.Symbol('x')
        self.y = sp.Symbol('y')

    def test_accepts_supported_expressions(self):
        x = self.x
        accepted = [
            x,
            sp.Rational(3, 7),
            sp.Integer(-2),
            x**2 + 3*x + sp.Rational(1, 2),
            sp.sin(x) * sp.cos(x),
            sp.sqrt(x + 4),
            (1 + x)**x,
            sp.exp(sp.tan(x)) / (1 - x),
            sp.log(1 + x) + sp.atanh(x) + sp.asinh(x),
            sp.asin(x) * sp.atan(x) * sp.sinh(x) * sp.cosh(x) * sp.tanh(x),
        ]
        for expr in accepted:
            with self.subTest(expr=expr):
                self.assertTrue(self.classifier.classify(expr))

    def test_rejects_two_variables(self):
        self.assertFalse(self.classifier.classify(self.x * self.y))
        self.assertFalse(self.classifier.classify(sp.sin(self.x) + sp.exp(self.y)))
        self.assertFalse(self.classifier.classify(self.x**self.y))

    def test_structurally_different_symbols(self):
        dummy = sp.Dummy('x')
        real_x = sp.Symbol('x', real=True)
        self.assertFalse(self.classifier.classify(self.x + dummy))
        self.assertFalse(self.classifier.classify(self.x * real_x))

    def test_rejects_inexact_numbers(self):
        x = self.x
        for expr in (x + sp.Float(0.5), sp.Float(2.0) * x, x**sp.Float(1.5), sp.Float(3.0)):
            with self.subTest(expr=expr):
                self.assertFalse(self.classifier.classify(expr))

    def test_rejects_symbolic_constants(self):
        x = self.x
        for expr in (sp.pi * x, x + sp.E, sp.I * x, x**sp.pi, sp.EulerGamma):
            with self.subTest(expr=expr):
                self.assertFalse(self.classifier.classify(expr))

    def test_rejects_unsupported_functions(self):
        x = self.x
        f = sp.Function('f')
        for expr in (sp.acos(x), sp.Abs(x), f(x), sp.gamma(x + 1), sp.erf(x)):
            with self.subTest(expr=expr):
                self.assertFalse(self.classifier.classify(expr))

    def test_rejects_other_nodes(self):
        x = self.x
        for expr in (sp.Integral(x, x), sp.Derivative(sp.Function('g')(x), x), sp.oo, sp.nan):
            with self.subTest(expr=expr):
                self.assertFalse(self.classifier.classify(expr))

    def test_log_with_base_is_accepted_structurally(self):
        # log(x, 2) == log(x)/log(2); composition decides feasibility
        self.assertTrue(self.classifier.classify(sp.log(self.x, 2)))

    def test_inspect_reports_variable_and_reason(self):
        accepted = self.classifier.inspect(sp.sin(self.x) + 1)
        self.assertTrue(accepted.eligible)
        self.assertEqual(accepted.variable, self.x)
        self.assertEqual(accepted.reason, "")

        rejected = self.classifier.inspect(self.x + self.y)
        self.assertFalse(rejected)
        self.assertIn("second variable", rejected.reason)

    def test_constant_expression_has_no_variable(self):
        result = self.classifier.inspect(sp.Rational(5, 2))
        self.assertTrue(result.eligible)
        self.assertIsNone(result.variable)

    def test_no_state_between_passes(self):
        self.assertTrue(self.classifier.classify(self.x + 1))
        self.assertTrue(self.classifier.classify(self.y + 1))
        self.assertFalse(self.classifier.classify(self.x * self.y))
        self.assertTrue(self.classifier.classify(sp.cos(self.y)))

    def test_accepts_strings(self):
        self.assertTrue(self.classifier.classify("exp(t) + t**2"))
