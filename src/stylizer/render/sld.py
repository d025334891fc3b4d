"""SLD writer.

Encodes render styles as OGC Styled Layer Descriptor (SLD 1.0) XML.
"""

import xml.etree.ElementTree as ElementTree
from xml.etree.ElementTree import Element, SubElement

from stylizer.config import SldConfig
from stylizer.domain.expression import Expression, Function, Literal, Property
from stylizer.exceptions import SldWriteError
from stylizer.render.model import (
    Fill,
    Graphic,
    LineSymbolizer,
    Mark,
    PointSymbolizer,
    PolygonSymbolizer,
    RasterSymbolizer,
    Rule,
    Stroke,
    Style,
    Symbolizer,
    TextSymbolizer,
)

SLD_NS = "http://www.opengis.net/sld"
OGC_NS = "http://www.opengis.net/ogc"

ElementTree.register_namespace("", SLD_NS)
ElementTree.register_namespace("ogc", OGC_NS)


def _sld(tag: str) -> str:
    return f"{{{SLD_NS}}}{tag}"


def _ogc(tag: str) -> str:
    return f"{{{OGC_NS}}}{tag}"


def _format_value(value: object) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class SldWriter:
    """Writes styles as SLD documents.

    Example:
        writer = SldWriter()
        xml = writer.write(shape.create_style())
    """

    def __init__(self, config: SldConfig | None = None) -> None:
        """Initialize the writer.

        Args:
            config: SLD settings (defaults if None)
        """
        self.config = config or SldConfig()

    def write(self, style: Style | Rule) -> str:
        """Encode a style, or a single rule, as an SLD document.

        Args:
            style: Style or Rule to encode

        Returns:
            XML string

        Raises:
            SldWriteError: If the style holds something SLD cannot express
        """
        if isinstance(style, Rule):
            style = Style(name=self.config.style_name, rules=[style])

        root = Element(_sld("StyledLayerDescriptor"), {"version": self.config.version})
        layer = SubElement(root, _sld("NamedLayer"))
        SubElement(layer, _sld("Name")).text = style.name or self.config.style_name
        user_style = SubElement(layer, _sld("UserStyle"))
        SubElement(user_style, _sld("Name")).text = style.name or self.config.style_name
        feature_type_style = SubElement(user_style, _sld("FeatureTypeStyle"))
        for rule in style.rules:
            self._rule(feature_type_style, rule)

        if self.config.pretty:
            ElementTree.indent(root)
        return ElementTree.tostring(root, encoding="unicode")

    def _rule(self, parent: Element, rule: Rule) -> None:
        element = SubElement(parent, _sld("Rule"))
        if rule.name:
            SubElement(element, _sld("Name")).text = rule.name
        for symbolizer in rule.symbolizers:
            self._symbolizer(element, symbolizer)

    def _symbolizer(self, parent: Element, symbolizer: Symbolizer) -> None:
        if isinstance(symbolizer, PointSymbolizer):
            element = SubElement(parent, _sld("PointSymbolizer"))
            self._geometry(element, symbolizer)
            if symbolizer.graphic is not None:
                self._graphic(element, "Graphic", symbolizer.graphic)
        elif isinstance(symbolizer, LineSymbolizer):
            element = SubElement(parent, _sld("LineSymbolizer"))
            self._geometry(element, symbolizer)
            if symbolizer.stroke is not None:
                self._stroke(element, symbolizer.stroke)
        elif isinstance(symbolizer, PolygonSymbolizer):
            element = SubElement(parent, _sld("PolygonSymbolizer"))
            self._geometry(element, symbolizer)
            if symbolizer.fill is not None:
                self._fill(element, symbolizer.fill)
            if symbolizer.stroke is not None:
                self._stroke(element, symbolizer.stroke)
        elif isinstance(symbolizer, TextSymbolizer):
            element = SubElement(parent, _sld("TextSymbolizer"))
            self._geometry(element, symbolizer)
            if symbolizer.label is not None:
                self._expression(SubElement(element, _sld("Label")), symbolizer.label)
            if symbolizer.fill is not None:
                self._fill(element, symbolizer.fill)
            if symbolizer.graphic is not None:
                self._graphic(element, "Graphic", symbolizer.graphic)
        elif isinstance(symbolizer, RasterSymbolizer):
            element = SubElement(parent, _sld("RasterSymbolizer"))
            self._geometry(element, symbolizer)
            if symbolizer.opacity is not None:
                self._expression(SubElement(element, _sld("Opacity")), symbolizer.opacity)
        else:
            raise SldWriteError(f"unsupported symbolizer {type(symbolizer).__name__}")

    def _geometry(self, parent: Element, symbolizer: Symbolizer) -> None:
        if symbolizer.geometry:
            geometry = SubElement(parent, _sld("Geometry"))
            SubElement(geometry, _ogc("PropertyName")).text = symbolizer.geometry

    def _graphic(self, parent: Element, tag: str, graphic: Graphic) -> None:
        element = SubElement(parent, _sld(tag))
        if tag != "Graphic":
            element = SubElement(element, _sld("Graphic"))
        for mark in graphic.symbols:
            self._mark(element, mark)
        if graphic.opacity is not None:
            self._expression(SubElement(element, _sld("Opacity")), graphic.opacity)
        if graphic.size is not None:
            self._expression(SubElement(element, _sld("Size")), graphic.size)
        if graphic.rotation is not None:
            self._expression(SubElement(element, _sld("Rotation")), graphic.rotation)

    def _mark(self, parent: Element, mark: Mark) -> None:
        element = SubElement(parent, _sld("Mark"))
        if mark.well_known_name is not None:
            self._expression(SubElement(element, _sld("WellKnownName")), mark.well_known_name)
        if mark.fill is not None:
            self._fill(element, mark.fill)
        if mark.stroke is not None:
            self._stroke(element, mark.stroke)

    def _fill(self, parent: Element, fill: Fill) -> None:
        element = SubElement(parent, _sld("Fill"))
        if fill.graphic_fill is not None:
            self._graphic(element, "GraphicFill", fill.graphic_fill)
        self._css(element, "fill", fill.color)
        self._css(element, "fill-opacity", fill.opacity)

    def _stroke(self, parent: Element, stroke: Stroke) -> None:
        element = SubElement(parent, _sld("Stroke"))
        if stroke.graphic_stroke is not None:
            self._graphic(element, "GraphicStroke", stroke.graphic_stroke)
        self._css(element, "stroke", stroke.color)
        self._css(element, "stroke-width", stroke.width)
        self._css(element, "stroke-opacity", stroke.opacity)
        self._css(element, "stroke-linecap", stroke.line_cap)
        self._css(element, "stroke-linejoin", stroke.line_join)
        if stroke.dash_array:
            self._css(
                element,
                "stroke-dasharray",
                Literal(" ".join(_format_value(float(d)) for d in stroke.dash_array)),
            )

    def _css(self, parent: Element, name: str, expression: Expression | None) -> None:
        if expression is None:
            return
        element = SubElement(parent, _sld("CssParameter"), {"name": name})
        self._expression(element, expression)

    def _expression(self, element: Element, expression: Expression) -> None:
        if isinstance(expression, Literal):
            element.text = _format_value(expression.value)
        elif isinstance(expression, Property):
            SubElement(element, _ogc("PropertyName")).text = expression.name
        elif isinstance(expression, Function):
            function = SubElement(element, _ogc("Function"), {"name": expression.name})
            for arg in expression.args:
                if isinstance(arg, Literal):
                    SubElement(function, _ogc("Literal")).text = _format_value(arg.value)
                else:
                    self._expression(function, arg)
        else:
            raise SldWriteError(f"unsupported expression {type(expression).__name__}")
