"""Tests for graphic slot lookup."""

from unittest.mock import Mock

import pytest

from stylizer.render import (
    Fill,
    Graphic,
    GraphicSlot,
    LineSymbolizer,
    PointSymbolizer,
    PolygonSymbolizer,
    RasterSymbolizer,
    SlotOutcome,
    Stroke,
    StyleFactory,
    Symbolizer,
    TextSymbolizer,
    locate_graphic,
)


class TestLocateGraphic:
    """Tests for locate_graphic."""

    def test_point_creates_graphic(self) -> None:
        """Test a point symbolizer without a graphic gets one."""
        sym = PointSymbolizer()
        slot = locate_graphic(sym)
        assert slot.outcome == SlotOutcome.CREATED
        assert slot.graphic is sym.graphic
        assert slot.supported

    def test_point_existing_graphic(self) -> None:
        """Test an existing point graphic is returned as-is."""
        existing = Graphic()
        sym = PointSymbolizer(graphic=existing)
        slot = locate_graphic(sym)
        assert slot.outcome == SlotOutcome.FOUND
        assert slot.graphic is existing

    def test_text_uses_own_graphic(self) -> None:
        """Test a text symbolizer's own graphic slot."""
        sym = TextSymbolizer()
        slot = locate_graphic(sym)
        assert slot.outcome == SlotOutcome.CREATED
        assert slot.graphic is sym.graphic

    def test_polygon_uses_graphic_fill(self) -> None:
        """Test a polygon symbolizer's fill graphic slot."""
        fill = Fill()
        sym = PolygonSymbolizer(fill=fill)
        slot = locate_graphic(sym)
        assert slot.outcome == SlotOutcome.CREATED
        assert sym.fill is fill
        assert fill.graphic_fill is slot.graphic

    def test_polygon_existing_graphic_fill(self) -> None:
        """Test an existing graphic fill is reused."""
        existing = Graphic()
        sym = PolygonSymbolizer(fill=Fill(graphic_fill=existing))
        slot = locate_graphic(sym)
        assert slot.outcome == SlotOutcome.FOUND
        assert slot.graphic is existing

    def test_line_uses_graphic_stroke(self) -> None:
        """Test a line symbolizer's stroke graphic slot."""
        stroke = Stroke()
        sym = LineSymbolizer(stroke=stroke)
        slot = locate_graphic(sym)
        assert slot.outcome == SlotOutcome.CREATED
        assert stroke.graphic_stroke is slot.graphic

    def test_line_existing_graphic_stroke(self) -> None:
        """Test an existing graphic stroke is reused."""
        existing = Graphic()
        sym = LineSymbolizer(stroke=Stroke(graphic_stroke=existing))
        assert locate_graphic(sym).graphic is existing

    @pytest.mark.parametrize("sym", [RasterSymbolizer(), Symbolizer()])
    def test_unsupported_variants(self, sym: Symbolizer) -> None:
        """Test variants without a slot are reported, not raised."""
        slot = locate_graphic(sym)
        assert slot == GraphicSlot(SlotOutcome.UNSUPPORTED)
        assert slot.graphic is None
        assert not slot.supported

    def test_uses_given_factory(self) -> None:
        """Test new graphics come from the supplied factory."""
        graphic = Graphic()
        factory = Mock(spec=StyleFactory)
        factory.create_graphic.return_value = graphic

        slot = locate_graphic(PointSymbolizer(), factory)

        factory.create_graphic.assert_called_once_with()
        assert slot.graphic is graphic

    def test_factory_not_used_for_existing(self) -> None:
        """Test the factory is not called when the slot exists."""
        factory = Mock(spec=StyleFactory)
        locate_graphic(PointSymbolizer(graphic=Graphic()), factory)
        factory.create_graphic.assert_not_called()
