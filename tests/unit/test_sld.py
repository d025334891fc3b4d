"""Tests for the SLD writer."""

import xml.etree.ElementTree as ElementTree

import pytest

from stylizer.config import SldConfig
from stylizer.domain import Expression, Function, Literal, Property
from stylizer.exceptions import SldWriteError
from stylizer.render import (
    PointSymbolizer,
    RasterSymbolizer,
    Rule,
    SldWriter,
    Symbolizer,
    TextSymbolizer,
)
from stylizer.render.sld import OGC_NS, SLD_NS
from stylizer.style import Fill, Shape, Stroke

NS = {"sld": SLD_NS, "ogc": OGC_NS}


def _parse(xml: str) -> ElementTree.Element:
    return ElementTree.fromstring(xml)


class TestSldWriter:
    """Tests for SldWriter."""

    def test_document_structure(self) -> None:
        """Test the root element and named layer."""
        root = _parse(Shape("red").to_sld())
        assert root.tag == f"{{{SLD_NS}}}StyledLayerDescriptor"
        assert root.get("version") == "1.0.0"
        assert root.find("sld:NamedLayer/sld:Name", NS).text == "Default Styler"
        rules = root.findall(".//sld:FeatureTypeStyle/sld:Rule", NS)
        assert len(rules) == 1

    def test_shape_mark(self) -> None:
        """Test a shape is written as a graphic with one mark."""
        shape = Shape("#ff0000", 8, "star", 0.5, 45).with_stroke("#000080", 2)
        root = _parse(shape.to_sld())

        graphic = root.find(".//sld:PointSymbolizer/sld:Graphic", NS)
        assert graphic is not None
        assert graphic.find("sld:Mark/sld:WellKnownName", NS).text == "star"
        assert graphic.find("sld:Size", NS).text == "8"
        assert graphic.find("sld:Rotation", NS).text == "45"

        fill = {
            p.get("name"): p.text
            for p in graphic.findall("sld:Mark/sld:Fill/sld:CssParameter", NS)
        }
        assert fill == {"fill": "#ff0000", "fill-opacity": "0.5"}

        stroke = {
            p.get("name"): p.text
            for p in graphic.findall("sld:Mark/sld:Stroke/sld:CssParameter", NS)
        }
        assert stroke["stroke"] == "#000080"
        assert stroke["stroke-width"] == "2"

    def test_zero_rotation_omitted(self) -> None:
        """Test no Rotation element when rotation is not written."""
        root = _parse(Shape("red", rotation=0).to_sld())
        assert root.find(".//sld:Rotation", NS) is None

    def test_no_color_no_fill(self) -> None:
        """Test a mark without fill has no Fill element."""
        root = _parse(Shape().to_sld())
        assert root.find(".//sld:Mark/sld:Fill", NS) is None

    def test_property_rotation(self) -> None:
        """Test attribute rotations become ogc:PropertyName."""
        root = _parse(Shape("red", rotation=Property("heading")).to_sld())
        prop = root.find(".//sld:Rotation/ogc:PropertyName", NS)
        assert prop is not None
        assert prop.text == "heading"

    def test_function_rotation(self) -> None:
        """Test function rotations become ogc:Function."""
        angle = Function("mul", Property("heading"), 2)
        root = _parse(Shape("red", rotation=angle).to_sld())
        function = root.find(".//sld:Rotation/ogc:Function", NS)
        assert function is not None
        assert function.get("name") == "mul"
        assert function.find("ogc:PropertyName", NS).text == "heading"
        assert function.find("ogc:Literal", NS).text == "2"

    def test_line_dash_array(self) -> None:
        """Test dash patterns are written space separated."""
        root = _parse(Stroke("black", 1, [5, 2.5]).to_sld())
        params = {
            p.get("name"): p.text
            for p in root.findall(".//sld:LineSymbolizer/sld:Stroke/sld:CssParameter", NS)
        }
        assert params["stroke-dasharray"] == "5 2.5"

    def test_polygon_with_graphic_fill(self) -> None:
        """Test a shape applied to a polygon is written as a GraphicFill."""
        rule = Fill("white").create_rule()
        Shape("red", 4, "x").apply(rule.symbolizers[0])
        root = _parse(SldWriter().write(rule))
        mark = root.find(
            ".//sld:PolygonSymbolizer/sld:Fill/sld:GraphicFill/sld:Graphic/sld:Mark", NS
        )
        assert mark is not None
        assert mark.find("sld:WellKnownName", NS).text == "x"

    def test_text_and_raster(self) -> None:
        """Test text labels and raster opacity."""
        rule = Rule(
            symbolizers=[
                TextSymbolizer(label=Property("name")),
                RasterSymbolizer(opacity=Literal(0.7)),
            ]
        )
        root = _parse(SldWriter().write(rule))
        assert root.find(".//sld:TextSymbolizer/sld:Label/ogc:PropertyName", NS).text == "name"
        assert root.find(".//sld:RasterSymbolizer/sld:Opacity", NS).text == "0.7"

    def test_geometry_property(self) -> None:
        """Test a geometry property name is written."""
        rule = Rule(symbolizers=[PointSymbolizer(geometry="the_geom")])
        root = _parse(SldWriter().write(rule))
        geometry = root.find(".//sld:PointSymbolizer/sld:Geometry/ogc:PropertyName", NS)
        assert geometry.text == "the_geom"

    def test_config(self) -> None:
        """Test style name and compact output from config."""
        xml = Shape("red").to_sld(SldConfig(style_name="points", pretty=False))
        assert "\n" not in xml
        assert _parse(xml).find("sld:NamedLayer/sld:Name", NS).text == "points"

    def test_unknown_symbolizer(self) -> None:
        """Test symbolizers SLD cannot express are rejected."""
        with pytest.raises(SldWriteError):
            SldWriter().write(Rule(symbolizers=[Symbolizer()]))

    def test_unknown_expression(self) -> None:
        """Test expressions SLD cannot express are rejected."""

        class Custom(Expression):
            def evaluate(self, feature=None):
                return None

        with pytest.raises(SldWriteError):
            SldWriter().write(Rule(symbolizers=[TextSymbolizer(label=Custom())]))
