"""Tests for SVG and JSON rendering."""

import json

from shieldgen.badge import Badge, BadgeFormat, BadgeStyle
from shieldgen.colors import Hex, NamedColor
from shieldgen.render import (
    JSON_CONTENT_TYPE,
    SVG_CONTENT_TYPE,
    _num,
    badge_to_dict,
    cache_control,
    render,
    render_error,
    render_json,
    render_svg,
)
from shieldgen.resolver import for_version
from shieldgen.widths import text_width


class TestNum:
    def test_integers_lose_decimal(self):
        assert _num(55.0) == "55"
        assert _num(0.0) == "0"

    def test_rounds_to_three_places(self):
        assert _num(36.666666) == "36.667"
        assert _num(192.5) == "192.5"


class TestRenderSvg:
    def test_structure(self):
        svg = render_svg(for_version({}, "npm", "1.2.3"))
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        assert svg.endswith("</svg>")
        assert "<title>npm: v1.2.3</title>" in svg
        assert 'aria-label="npm: v1.2.3"' in svg
        assert 'role="img"' in svg

    def test_colors(self):
        svg = render_svg(Badge(label="build", value="passing", value_color=NamedColor.GREEN))
        assert 'fill="#555"' in svg
        assert 'fill="#3C1"' in svg

    def test_label_color_option(self):
        svg = render_svg(Badge(label="a", value="b", label_color=Hex("123456"), value_color=NamedColor.RED))
        assert 'fill="#123456"' in svg

    def test_text_length_matches_measured_width(self):
        svg = render_svg(Badge(label="npm", value="v1.2.3", value_color=NamedColor.BLUE))
        assert f'textLength="{_num(text_width("npm"))}"' in svg
        assert f'textLength="{_num(text_width("v1.2.3"))}"' in svg

    def test_shadow_runs(self):
        two_tone = render_svg(Badge(label="a", value="b", value_color=NamedColor.BLUE))
        assert two_tone.count("<text ") == 4
        assert two_tone.count('opacity="0.25"') == 2
        mono = render_svg(Badge(value="b", value_color=NamedColor.BLUE))
        assert mono.count("<text ") == 2

    def test_gradient_only_for_flat(self):
        flat = render_svg(Badge(value="b", value_color=NamedColor.BLUE))
        plastic = render_svg(Badge(value="b", value_color=NamedColor.BLUE, style=BadgeStyle.PLASTIC))
        assert "<linearGradient" in flat
        assert 'fill="url(#s)"' in flat
        assert "<linearGradient" not in plastic
        assert "url(#s)" not in plastic

    def test_radius_mask(self):
        svg = render_svg(Badge(value="b", value_color=NamedColor.BLUE))
        assert 'rx="27.5"' in svg
        square = render_svg(Badge(value="b", value_color=NamedColor.BLUE, style=BadgeStyle.FLAT_SQUARE))
        assert '<mask id="r"><rect' in square
        assert 'rx="0" fill="#fff"' in square

    def test_device_size(self):
        svg = render_svg(Badge(value="b", value_color=NamedColor.BLUE, scale=2.0))
        assert 'height="40"' in svg

    def test_icon_embedded(self):
        svg = render_svg(Badge(label="a", value="b", icon="star", value_color=NamedColor.BLUE))
        assert "<image " in svg
        assert 'href="data:image/svg+xml;base64,' in svg

    def test_unknown_icon_skipped(self):
        svg = render_svg(Badge(label="a", value="b", icon="nope", value_color=NamedColor.BLUE))
        assert "<image " not in svg

    def test_custom_catalog(self):
        badge = Badge(label="a", value="b", icon="rocket", value_color=NamedColor.BLUE)
        assert "<image " in render_svg(badge, {"rocket": "M0 0h1"})

    def test_value_only_has_no_label_box(self):
        svg = render_svg(Badge(value="b", value_color=NamedColor.BLUE))
        assert 'fill="#555"' not in svg

    def test_escapes_text(self):
        svg = render_svg(Badge(label="a&b", value="<b>", value_color=NamedColor.BLUE))
        assert "&lt;b&gt;" in svg
        assert "a&amp;b" in svg
        assert "<b>" not in svg

    def test_deterministic(self):
        badge = for_version({}, "npm", "1.2.3")
        assert render_svg(badge) == render_svg(for_version({}, "npm", "1.2.3"))


class TestRenderJson:
    def test_fields(self):
        data = json.loads(render_json(for_version({"format": "json"}, "npm", "0.3.0")))
        assert data["label"] == "npm"
        assert data["value"] == "v0.3.0"
        assert data["color"] == "#F73"
        assert data["labelColor"] == "#555"
        assert data["iconColor"] == "#fff"
        assert data["style"] == "flat"
        assert data["radius"] == 3
        assert data["scale"] == 1.0
        assert data["cacheSeconds"] == 86400
        assert data["format"] == "json"

    def test_dict_has_no_placeholders(self):
        data = badge_to_dict(Badge(value="b"))
        assert data["color"] == "#08C"
        assert data["labelColor"] == "#555"


class TestRender:
    def test_svg(self):
        rendered = render(Badge(value="b", value_color=NamedColor.BLUE))
        assert rendered.content_type == SVG_CONTENT_TYPE == "image/svg+xml"
        assert rendered.body.startswith(b"<svg")

    def test_json(self):
        rendered = render(Badge(value="b", format=BadgeFormat.JSON))
        assert rendered.content_type == JSON_CONTENT_TYPE == "application/json"
        assert json.loads(rendered.body)["value"] == "b"

    def test_body_is_utf8(self):
        rendered = render(Badge(label="python", value="≥3.8", value_color=NamedColor.BLUE))
        assert "≥3.8".encode("utf-8") in rendered.body

    def test_cache_control(self):
        rendered = render(Badge(value="b", cache_seconds=3600))
        assert rendered.cache_control == (
            "public, max-age=3600, s-maxage=300, stale-while-revalidate=3600"
        )

    def test_cache_control_default(self):
        assert cache_control(Badge()) == (
            "public, max-age=86400, s-maxage=300, stale-while-revalidate=86400"
        )


class TestRenderError:
    def test_status(self):
        rendered = render_error(status=500)
        assert b"500 Internal Server Error" in rendered.body
        assert b'fill="#E43"' in rendered.body
        assert b"<title>error: 500 Internal Server Error</title>" in rendered.body

    def test_json_error(self):
        rendered = render_error({"format": "json"}, reason="api error")
        data = json.loads(rendered.body)
        assert (data["label"], data["value"], data["color"]) == ("error", "api error", "#E43")
