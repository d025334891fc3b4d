"""Domain types for stylizer.

This module contains the expression handles and rotation values shared by
the style and render layers.

Key classes:
- Expression, Literal, Property, Function: Values evaluated at render time
- Rotation, RotationKind: Tagged rotation variant
"""

from stylizer.domain.expression import (
    Expression,
    Function,
    Literal,
    Property,
    Rotation,
    RotationKind,
    as_expression,
    resolve_rotation,
)

__all__: list[str] = [
    # Enums
    "RotationKind",
    # Expressions
    "Expression",
    "Function",
    "Literal",
    "Property",
    "as_expression",
    # Rotation
    "Rotation",
    "resolve_rotation",
]
