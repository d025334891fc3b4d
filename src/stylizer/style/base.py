"""Base classes for style symbolizers.

A style symbolizer is a small declarative object (a Shape, a Stroke, a
Fill) that knows how to write itself into the render structures of a rule.

Key classes:
- Symbolizer: Base class with rule creation, application and SLD export
- Composite: Several symbolizers applied together
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from stylizer.render import model
from stylizer.render.factory import StyleFactory, style_factory

if TYPE_CHECKING:
    from stylizer.config import SldConfig


class Symbolizer:
    """Base class for style symbolizers.

    Subclasses list the render symbolizer variants they style in
    ``targets`` and implement ``apply``.
    """

    targets: ClassVar[tuple[type[model.Symbolizer], ...]] = ()
    factory: ClassVar[StyleFactory] = style_factory

    def apply_to(self, rule: model.Rule) -> None:
        """Apply this symbolizer to every targeted symbolizer in a rule.

        Symbolizers of other variants are left untouched and no new
        symbolizers are added.

        Args:
            rule: Rule to modify in place
        """
        for kind in self.targets:
            for symbolizer in rule.symbolizers_of(kind):
                self.apply(symbolizer)

    def apply(self, symbolizer: model.Symbolizer) -> None:
        """Write this symbolizer's properties into a render symbolizer."""
        raise NotImplementedError

    def symbolizer_kinds(self) -> list[type[model.Symbolizer]]:
        """Get the render symbolizer variants a new rule needs."""
        return list(self.targets)

    def create_rule(self, name: str | None = None) -> model.Rule:
        """Create a new rule styled by this symbolizer.

        Args:
            name: Optional rule name

        Returns:
            Rule with one fresh symbolizer per targeted variant
        """
        rule = self.factory.create_rule(
            (self.factory.create_symbolizer(kind) for kind in self.symbolizer_kinds()),
            name=name,
        )
        self.apply_to(rule)
        return rule

    def create_style(self, name: str | None = None) -> model.Style:
        """Create a single-rule style from this symbolizer."""
        return self.factory.create_style([self.create_rule()], name=name)

    def to_sld(self, config: "SldConfig | None" = None) -> str:
        """Encode this symbolizer as an SLD document.

        Args:
            config: SLD settings (defaults if None)

        Returns:
            SLD XML string
        """
        from stylizer.render.sld import SldWriter

        writer = SldWriter(config)
        return writer.write(self.create_style(name=writer.config.style_name))

    def __add__(self, other: "Symbolizer") -> "Composite":
        return Composite(self, other)

    @staticmethod
    def _build_string(name: str, values: Mapping[str, Any]) -> str:
        props = ", ".join(f"{k} = {v}" for k, v in values.items() if v is not None)
        return f"{name}({props})"


class Composite(Symbolizer):
    """Symbolizers applied together, in order.

    Example:
        style = Fill("wheat") + Stroke("brown", 0.5)
    """

    def __init__(self, *parts: Symbolizer) -> None:
        self.parts: list[Symbolizer] = []
        for part in parts:
            if isinstance(part, Composite):
                self.parts.extend(part.parts)
            else:
                self.parts.append(part)

    def apply_to(self, rule: model.Rule) -> None:
        for part in self.parts:
            part.apply_to(rule)

    def apply(self, symbolizer: model.Symbolizer) -> None:
        for part in self.parts:
            if isinstance(symbolizer, part.targets):
                part.apply(symbolizer)

    def symbolizer_kinds(self) -> list[type[model.Symbolizer]]:
        kinds: list[type[model.Symbolizer]] = []
        for part in self.parts:
            for kind in part.symbolizer_kinds():
                if kind not in kinds:
                    kinds.append(kind)
        return kinds

    def __str__(self) -> str:
        return f"Composite({', '.join(str(p) for p in self.parts)})"
