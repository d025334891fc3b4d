"""End-to-end tests for the command-line interface."""

import io
import xml.etree.ElementTree as ElementTree
from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from stylizer import __version__
from stylizer.cli import app
from stylizer.render.sld import OGC_NS, SLD_NS

NS = {"sld": SLD_NS, "ogc": OGC_NS}

runner = CliRunner()


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """Write a small PNG to disk."""
    path = tmp_path / "0.png"
    Image.new("RGB", (16, 8), (0, 0, 255)).save(path)
    return path


class TestShapeCommand:
    """Tests for `stylizer shape`."""

    def test_prints_sld(self) -> None:
        """Test the SLD goes to stdout."""
        result = runner.invoke(
            app, ["shape", "--color", "red", "--size", "8", "--type", "star", "--rotation", "45"]
        )
        assert result.exit_code == 0, result.output
        root = ElementTree.fromstring(result.stdout)
        graphic = root.find(".//sld:PointSymbolizer/sld:Graphic", NS)
        assert graphic.find("sld:Mark/sld:WellKnownName", NS).text == "star"
        assert graphic.find("sld:Size", NS).text == "8"
        assert graphic.find("sld:Rotation", NS).text == "45"

    def test_rotation_property(self) -> None:
        """Test a rotation read from a feature attribute."""
        result = runner.invoke(
            app, ["shape", "--color", "red", "--rotation-property", "heading"]
        )
        assert result.exit_code == 0, result.output
        root = ElementTree.fromstring(result.stdout)
        assert root.find(".//sld:Rotation/ogc:PropertyName", NS).text == "heading"

    def test_rotation_options_exclusive(self) -> None:
        """Test --rotation and --rotation-property cannot be combined."""
        result = runner.invoke(
            app, ["shape", "--rotation", "10", "--rotation-property", "heading"]
        )
        assert result.exit_code == 1

    def test_stroke_options(self) -> None:
        """Test outline options produce a mark stroke."""
        result = runner.invoke(
            app, ["shape", "--color", "red", "--stroke-color", "navy", "--stroke-width", "2"]
        )
        assert result.exit_code == 0, result.output
        root = ElementTree.fromstring(result.stdout)
        params = {
            p.get("name"): p.text
            for p in root.findall(".//sld:Mark/sld:Stroke/sld:CssParameter", NS)
        }
        assert params["stroke"] == "#000080"
        assert params["stroke-width"] == "2"

    def test_no_color_no_fill(self) -> None:
        """Test a shape without color has no fill."""
        result = runner.invoke(app, ["shape", "--type", "x"])
        assert result.exit_code == 0, result.output
        root = ElementTree.fromstring(result.stdout)
        assert root.find(".//sld:Mark/sld:Fill", NS) is None

    def test_invalid_color(self) -> None:
        """Test a malformed color exits with an error."""
        result = runner.invoke(app, ["shape", "--color", "not-a-color"])
        assert result.exit_code == 1
        assert "Invalid color" in result.output

    def test_malformed_dash(self) -> None:
        """Test a malformed dash pattern exits with an error, not a traceback."""
        result = runner.invoke(app, ["shape", "--color", "red", "--dash", "5 x"])
        assert result.exit_code == 1
        assert "Invalid dash pattern" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_output_file(self, tmp_path: Path) -> None:
        """Test writing the SLD to a file."""
        output = tmp_path / "shape.sld"
        result = runner.invoke(app, ["shape", "--color", "red", "--output", str(output)])
        assert result.exit_code == 0, result.output
        root = ElementTree.parse(output).getroot()
        assert root.tag == f"{{{SLD_NS}}}StyledLayerDescriptor"


class TestBandsCommand:
    """Tests for `stylizer bands`."""

    def test_lists_bands(self, tmp_path: Path) -> None:
        """Test bands are listed in channel order."""
        path = tmp_path / "rgb.tif"
        Image.new("RGB", (2, 2), (1, 2, 3)).save(path, format="TIFF")

        result = runner.invoke(app, ["bands", str(path)])

        assert result.exit_code == 0, result.output
        red = result.output.index("RED_BAND")
        green = result.output.index("GREEN_BAND")
        blue = result.output.index("BLUE_BAND")
        assert red < green < blue

    def test_missing_raster(self, tmp_path: Path) -> None:
        """Test a missing raster exits with an error."""
        result = runner.invoke(app, ["bands", str(tmp_path / "missing.tif")])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestTileCommand:
    """Tests for `stylizer tile`."""

    def test_describes_tile(self, png_file: Path) -> None:
        """Test tile string and decoded size are printed."""
        result = runner.invoke(app, ["tile", str(png_file), "-z", "1", "-x", "0", "-y", "2"])
        assert result.exit_code == 0, result.output
        assert "Tile(x:0, y:2, z:1)" in result.output
        assert "16 x 8 px" in result.output

    def test_undecodable_tile(self, tmp_path: Path) -> None:
        """Test a payload that is not an image exits with an error."""
        path = tmp_path / "bad.png"
        path.write_bytes(io.BytesIO(b"nope").getvalue())
        result = runner.invoke(app, ["tile", str(path)])
        assert result.exit_code == 1
        assert "Could not decode" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file exits with an error."""
        result = runner.invoke(app, ["tile", str(tmp_path / "nope.png")])
        assert result.exit_code == 1


class TestVersion:
    """Tests for --version."""

    def test_version(self) -> None:
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
