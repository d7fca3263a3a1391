"""Shared test fixtures for folio tests."""

import random

import pytest
from PIL import Image

from folio.catalog import build_catalog, default_catalog
from folio.config import Config, TypewriterConfig
from folio.runtime.loop import EventLoop
from folio.runtime.window import Window


@pytest.fixture()
def loop():
    return EventLoop()


@pytest.fixture()
def window():
    """1280x800 viewport over a 3000px document (max scroll 2200)."""
    return Window(inner_width=1280, inner_height=800, document_height=3000)


@pytest.fixture()
def config():
    return Config()


@pytest.fixture()
def steady_typewriter_config():
    """Typewriter timings with jitter switched off, so delays equal their base values."""
    return TypewriterConfig(jitter_ms=0)


@pytest.fixture()
def rng():
    return random.Random(1024)


@pytest.fixture()
def catalog():
    return default_catalog()


@pytest.fixture()
def static_dir(tmp_path):
    """Static folder with a small hero image, a wide portfolio shot and a CV."""
    static = tmp_path / "static"
    static.mkdir()
    Image.new("RGB", (200, 100), (124, 58, 237)).save(static / "hero.png")
    Image.new("RGB", (300, 300), (34, 211, 238)).save(static / "about.jpg")
    Image.new("RGB", (2000, 1000), (236, 72, 153)).save(static / "wide.png")
    Image.new("RGB", (640, 480), (63, 185, 80)).save(static / "small.png")
    (static / "cv.pdf").write_bytes(b"%PDF-1.4 placeholder")
    return static


@pytest.fixture()
def small_catalog():
    """Catalog whose assets all live in ``static_dir`` except one missing shot."""
    return build_catalog({
        "profile": {
            "name": "Ada",
            "phrases": ["Frontend Developer", "Freelancer"],
            "hero_image": "hero.png",
            "about_image": "about.jpg",
            "cv_path": "cv.pdf",
        },
        "portfolio": [
            {"image_source": "wide.png", "title": "Wide Dashboard", "tags": ["React"]},
            {"image_source": "small.png", "title": "Small Site", "tags": ["CSS", "HTML"]},
            {"image_source": "missing.png", "title": "Lost Project", "tags": ["Legacy"]},
        ],
    })
