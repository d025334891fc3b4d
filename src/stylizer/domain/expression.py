"""Expressions and rotation values.

This module defines the expression handles written into rendering structures
and the tagged rotation value resolved from a symbolizer's ``rotation``:

- Expression: Base class for values evaluated against a feature at render time
- Literal: A constant value
- Property: The value of a named feature attribute
- Function: A named function applied to argument expressions
- RotationKind / Rotation: Tagged rotation variant (absent, constant, expression)
"""

import numbers
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, auto
from typing import Any

import structlog

from stylizer.exceptions import ExpressionEvaluationError

logger = structlog.get_logger(__name__)


class Expression(ABC):
    """A value computed when a feature is rendered."""

    @abstractmethod
    def evaluate(self, feature: Mapping[str, Any] | None = None) -> Any:
        """Evaluate the expression.

        Args:
            feature: Attribute mapping of the feature being rendered

        Returns:
            The computed value
        """
        raise NotImplementedError


@dataclass(frozen=True)
class Literal(Expression):
    """A constant value.

    Attributes:
        value: The wrapped constant
    """

    value: Any

    def evaluate(self, feature: Mapping[str, Any] | None = None) -> Any:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Property(Expression):
    """A feature attribute looked up by name.

    Attributes:
        name: Attribute name
    """

    name: str

    def evaluate(self, feature: Mapping[str, Any] | None = None) -> Any:
        if feature is None:
            return None
        return feature.get(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Function(Expression):
    """A named function over argument expressions.

    Arguments that are not already expressions are wrapped in ``Literal``.
    When ``fn`` is None the function can still be written to SLD but
    cannot be evaluated locally.

    Example:
        angle = Function("sqrt", Property("area"), fn=math.sqrt)
        angle.evaluate({"area": 16})  # 4.0

    Attributes:
        name: Function name as understood by the rendering engine
        args: Argument expressions
        fn: Optional Python callable used for local evaluation
    """

    name: str
    args: tuple[Expression, ...] = ()
    fn: Callable[..., Any] | None = field(default=None, compare=False, repr=False)

    def __init__(
        self, name: str, *args: Any, fn: Callable[..., Any] | None = None
    ) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "args", tuple(as_expression(a) for a in args))
        object.__setattr__(self, "fn", fn)

    def evaluate(self, feature: Mapping[str, Any] | None = None) -> Any:
        if self.fn is None:
            raise ExpressionEvaluationError(str(self), "no local implementation")
        return self.fn(*(arg.evaluate(feature) for arg in self.args))

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(a) for a in self.args)})"


def as_expression(value: Any) -> Expression:
    """Wrap a plain value in a Literal unless it already is an expression."""
    if isinstance(value, Expression):
        return value
    return Literal(value)


class RotationKind(Enum):
    """How a rotation is written into a graphic."""

    ABSENT = auto()
    CONSTANT = auto()
    EXPRESSION = auto()


@dataclass(frozen=True)
class Rotation:
    """A resolved rotation.

    Attributes:
        kind: Which of the three states this rotation is in
        degrees: Angle for CONSTANT rotations
        expression: Handle for EXPRESSION rotations
    """

    kind: RotationKind
    degrees: float | None = None
    expression: Expression | None = None

    @classmethod
    def absent(cls) -> "Rotation":
        return cls(RotationKind.ABSENT)

    @classmethod
    def constant(cls, degrees: float) -> "Rotation":
        return cls(RotationKind.CONSTANT, degrees=degrees)

    @classmethod
    def dynamic(cls, expression: Expression) -> "Rotation":
        return cls(RotationKind.EXPRESSION, expression=expression)

    def to_expression(self) -> Expression | None:
        """Get the expression to write into a graphic.

        Returns:
            Literal for constants, the handle itself for expressions,
            None when no rotation should be written
        """
        if self.kind is RotationKind.CONSTANT:
            return Literal(self.degrees)
        if self.kind is RotationKind.EXPRESSION:
            return self.expression
        return None


def resolve_rotation(value: Any) -> Rotation:
    """Resolve a symbolizer rotation value.

    Zero and negative angles mean "no rotation" and are never written.
    Numeric strings are read as numbers.

    Args:
        value: None, a number, a numeric string, or an Expression

    Returns:
        The resolved Rotation
    """
    if value is None:
        return Rotation.absent()
    if isinstance(value, Expression):
        return Rotation.dynamic(value)
    if isinstance(value, bool):
        logger.warning("Ignoring boolean rotation", rotation=value)
        return Rotation.absent()
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            logger.warning("Ignoring non-numeric rotation", rotation=value)
            return Rotation.absent()
    if not isinstance(value, (numbers.Real, Decimal)):
        logger.warning("Ignoring rotation of unsupported type", type=type(value).__name__)
        return Rotation.absent()
    if isinstance(value, Decimal) and value.is_nan():
        return Rotation.absent()
    if value > 0:
        return Rotation.constant(float(value))
    return Rotation.absent()
