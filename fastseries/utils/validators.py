# fastseries/utils/validators.py - Request validation utilities
# ============================================================================
"""
Validation of series expansion requests
"""

from typing import Any, Optional, Tuple
import sympy as sp


class RequestValidator:
    """Validator for expansion variable, point and order"""

    # Limits
    MIN_ORDER = 1

    @classmethod
    def validate_order(cls, value: Any, max_order: Optional[int] = None) -> int:
        """Validate the truncation order"""
        if isinstance(value, bool):
            raise ValueError("order must be an integer")

        if not isinstance(value, int):
            try:
                as_int = int(value)
            except (TypeError, ValueError):
                raise ValueError("order must be an integer") from None
            if as_int != value:
                raise ValueError("order must be an integer")
            value = as_int

        if value < cls.MIN_ORDER:
            raise ValueError(f"order must be at least {cls.MIN_ORDER}")

        if max_order is not None and value > max_order:
            raise ValueError(f"order must not exceed {max_order}")

        return value

    @classmethod
    def validate_variable(cls, value: Any) -> sp.Symbol:
        """Validate the expansion variable"""
        if isinstance(value, str):
            value = sp.Symbol(value)

        if not isinstance(value, sp.Symbol):
            raise ValueError(f"Expansion variable must be a symbol, got {value!r}")

        return value

    @classmethod
    def validate_point(cls, value: Any) -> sp.Expr:
        """Validate the expansion point"""
        try:
            point = sp.sympify(value)
        except (sp.SympifyError, TypeError):
            raise ValueError(f"Expansion point must be a number, got {value!r}") from None

        if not point.is_number:
            raise ValueError(f"Expansion point must be a number, got {point}")

        return point

    @classmethod
    def validate_relation(cls, relation: Any) -> Tuple[sp.Symbol, sp.Expr]:
        """Validate ``Eq(x, point)`` or a ``(x, point)`` pair"""
        if isinstance(relation, sp.Equality):
            variable, point = relation.lhs, relation.rhs
        elif isinstance(relation, (tuple, list)) and len(relation) == 2:
            variable, point = relation
        else:
            raise ValueError(
                f"Relation must be Eq(variable, point) or (variable, point), got {relation!r}"
            )

        return cls.validate_variable(variable), cls.validate_point(point)
