"""Tests for the page view model and rendered markup."""

import re

import pytest

from folio.assets import process_assets
from folio.behaviors.reveal import fade_up
from folio.behaviors.tilt import REST, tilt_for_pointer
from folio.catalog import SECTION_ANCHORS, build_catalog
from folio.config import TiltSettings
from folio.models import Side
from folio.output.icons import icon_svg
from folio.output.page import build_page_model, render_page, reveal_attrs

SERVICE_CARD = re.compile(
    r'class="service__card glass" data-index="(\d+)" data-reveal="fade-up" '
    r'data-reveal-delay="([^"]+)".*?<h3>([^<]*)</h3>',
    re.S,
)


def _three_services():
    return build_catalog({
        "services": [
            {"icon": "palette", "title": "A", "description": "first"},
            {"icon": "code", "title": "B", "description": "second"},
            {"icon": "terminal", "title": "C", "description": "third"},
        ],
    })


class TestPageModel:
    def test_services_staggered_in_order(self, config):
        model = build_page_model(_three_services(), config)
        assert [item.entry.title for item in model.services] == ["A", "B", "C"]
        assert [item.delay_s for item in model.services] == [0.0, 0.2, 0.4]

    def test_timeline_alternates_sides(self, catalog, config):
        model = build_page_model(catalog, config)
        assert [item.side for item in model.timeline] == [Side.LEFT, Side.RIGHT, Side.LEFT]

    def test_portfolio_zooms_in(self, catalog, config):
        model = build_page_model(catalog, config)
        assert all(item.reveal.name == "zoom-in" for item in model.portfolio)
        assert [item.delay_s for item in model.portfolio] == [0.0, 0.1, 0.2, 0.3]
        assert model.portfolio[0].reveal.hidden.scale == 0.9


class TestRenderPage:
    def test_service_cards_render_in_catalog_order(self, config):
        html = render_page(build_page_model(_three_services(), config))
        cards = SERVICE_CARD.findall(html)
        assert cards == [("0", "0", "A"), ("1", "0.2", "B"), ("2", "0.4", "C")]

    def test_every_section_anchor_present(self, catalog, config):
        html = render_page(build_page_model(catalog, config))
        for anchor in SECTION_ANCHORS:
            assert f'id="{anchor}"' in html
        assert 'href="#service"' in html

    def test_timeline_sides_in_markup(self, catalog, config):
        html = render_page(build_page_model(catalog, config))
        assert html.count('class="timeline-item left"') == 2
        assert html.count('class="timeline-item right"') == 1

    def test_new_tab_only_where_requested(self, catalog, config):
        html = render_page(build_page_model(catalog, config))
        assert 'href="https://github.com/pragadeesh1024" target="_blank" rel="noopener noreferrer"' in html
        assert 'href="https://t.me/Potter_1024" class="social__btn"' in html
        assert 'href="tel:+917094985957" class="social__btn"' in html

    def test_text_is_escaped(self, config):
        catalog = build_catalog({
            "services": [{"icon": "bug", "title": "<script>alert(1)</script>", "description": "a & b"}],
        })
        html = render_page(build_page_model(catalog, config))
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
        assert "a &amp; b" in html

    def test_phrases_embedded_for_script(self, config):
        catalog = build_catalog({"profile": {"name": "Ada", "phrases": ["Builder", "</script>"]}})
        html = render_page(build_page_model(catalog, config))
        assert '"Builder"' in html
        assert html.count("</script>") == 1

    def test_tilt_attributes(self, catalog, config):
        html = render_page(build_page_model(catalog, config))
        assert 'data-tilt-max-x="15" data-tilt-max-y="15" data-tilt-scale="1.05"' in html
        assert 'data-tilt-max-x="5" data-tilt-max-y="5" data-tilt-scale="1.02"' in html
        assert 'data-tilt-speed="1500"' in html

    def test_preview_and_dimensions_from_assets(self, small_catalog, config, static_dir, tmp_path):
        report = process_assets(small_catalog, config.assets, static_dir, tmp_path / "out")
        html = render_page(build_page_model(small_catalog, config, report))
        assert '<img src="wide-preview.png" alt="Wide Dashboard" loading="lazy" width="960" height="480">' in html
        assert '<img src="small.png" alt="Small Site" loading="lazy" width="640" height="480">' in html
        assert '<img src="missing.png" alt="Lost Project" loading="lazy">' in html


class TestRevealAttrs:
    def test_hidden_pose_as_custom_properties(self):
        attrs = reveal_attrs(fade_up(50, 0.6, delay_s=0.4))
        assert attrs.startswith('data-reveal="fade-up" data-reveal-delay="0.4"')
        assert "--reveal-opacity: 0;" in attrs
        assert "--reveal-y: 50px;" in attrs
        assert "transition-delay: 0.4s" in attrs


class TestIcons:
    def test_known_icon(self):
        assert 'class="icon icon-github"' in icon_svg("github")

    def test_unknown_icon(self):
        with pytest.raises(KeyError):
            icon_svg("myspace")


class TestTilt:
    def test_centre_is_flat(self):
        pose = tilt_for_pointer(0.5, 0.5, TiltSettings())
        assert pose.rotate_x == 0 and pose.rotate_y == 0

    def test_top_left_corner(self):
        pose = tilt_for_pointer(0.0, 0.0, TiltSettings(max_angle_x=15, max_angle_y=15, scale=1.05))
        assert (pose.rotate_x, pose.rotate_y, pose.scale) == (15, -15, 1.05)

    def test_outside_card_is_clamped(self):
        pose = tilt_for_pointer(2.0, -1.0, TiltSettings())
        assert (pose.rotate_x, pose.rotate_y) == (10, 10)

    def test_css_transform(self):
        assert REST.css_transform(1000) == (
            "perspective(1000px) rotateX(0.00deg) rotateY(0.00deg) scale3d(1.0, 1.0, 1.0)"
        )
