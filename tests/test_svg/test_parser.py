"""Tests for SVG parser."""

from tests.conftest import ARROW_SVG, LINE_SVG, NO_PATH_SVG, NO_VIEWBOX_SVG, WIDE_SVG

from icongen.svg.parser import ViewBox, extract_path_data, parse_viewbox


def test_viewbox_extraction():
    vb = parse_viewbox(WIDE_SVG)
    assert vb == ViewBox(0.0, 0.0, 48.0, 24.0)


def test_viewbox_missing_uses_default():
    assert parse_viewbox(NO_VIEWBOX_SVG) == ViewBox(0.0, 0.0, 24.0, 24.0)


def test_viewbox_single_quotes():
    vb = parse_viewbox("<svg viewBox='-2 -2 28 32'></svg>")
    assert vb == ViewBox(-2.0, -2.0, 28.0, 32.0)


def test_viewbox_extra_whitespace():
    vb = parse_viewbox('<svg viewBox="  0   0\t100 50 "></svg>')
    assert vb.width == 100.0
    assert vb.height == 50.0


def test_viewbox_wrong_arity_uses_default():
    assert parse_viewbox('<svg viewBox="0 0 24"></svg>') == ViewBox.default()
    assert parse_viewbox('<svg viewBox="0 0 24 24 24"></svg>') == ViewBox.default()
    assert parse_viewbox('<svg viewBox="0,0,48,48"></svg>') == ViewBox.default()


def test_viewbox_non_numeric_uses_default():
    assert parse_viewbox('<svg viewBox="0 0 24px 24px"></svg>') == ViewBox.default()


def test_viewbox_degenerate_extent_uses_default():
    assert parse_viewbox('<svg viewBox="0 0 0 24"></svg>') == ViewBox.default()
    assert parse_viewbox('<svg viewBox="0 0 24 -5"></svg>') == ViewBox.default()
    assert parse_viewbox('<svg viewBox="0 0 inf 24"></svg>') == ViewBox.default()


def test_extract_single_path():
    assert extract_path_data(LINE_SVG) == ["M12,12 L0,0"]


def test_extract_paths_in_document_order():
    assert extract_path_data(WIDE_SVG) == ["M4 4h40v16H4z", "M10 8L38 8L24 18Z"]


def test_extract_path_with_attribute_before_d():
    assert extract_path_data(ARROW_SVG)[0].startswith("M20 11H7.83")


def test_extract_ignores_other_shapes():
    assert extract_path_data(NO_PATH_SVG) == []


def test_extract_skips_path_without_d():
    svg = '<svg><path id="empty"/><path id="p" d="M1 1"/></svg>'
    assert extract_path_data(svg) == ["M1 1"]
