"""Static assets — measure images, copy them into the site, write previews.

Uses Pillow to read image dimensions (emitted as width/height attributes so
the page does not shift while loading) and to downscale wide portfolio shots.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from folio.catalog import ContentCatalog
from folio.config import AssetsConfig

logger = logging.getLogger(__name__)


class AssetError(FileNotFoundError):
    """A referenced static asset does not exist (strict mode only)."""


@dataclass
class AssetInfo:
    source: str
    path: Path
    width: int | None = None
    height: int | None = None
    preview: str | None = None  # relative name of the downscaled copy

    @property
    def is_image(self) -> bool:
        return self.width is not None


@dataclass
class AssetReport:
    assets: dict[str, AssetInfo] = field(default_factory=dict)
    missing: list[str] = field(default_factory=list)
    previews_written: int = 0

    def get(self, source: str) -> AssetInfo | None:
        return self.assets.get(source)

    def __repr__(self) -> str:
        return (
            f"AssetReport({len(self.assets)} assets, {len(self.missing)} missing, "
            f"{self.previews_written} previews)"
        )


def inspect_image(path: Path) -> tuple[int, int] | None:
    """Return (width, height), or None when the file is not an image Pillow can read."""
    try:
        with Image.open(path) as img:
            return img.size
    except UnidentifiedImageError:
        return None


def preview_name(source: str, suffix: str) -> str:
    p = Path(source)
    return str(p.with_name(f"{p.stem}{suffix}{p.suffix}"))


def write_preview(src: Path, dest: Path, max_width: int) -> tuple[int, int]:
    """Write a copy of ``src`` no wider than ``max_width``, keeping aspect ratio."""
    with Image.open(src) as img:
        ratio = max_width / img.width
        size = (max_width, max(1, round(img.height * ratio)))
        resized = img.resize(size, Image.Resampling.LANCZOS)
        dest.parent.mkdir(parents=True, exist_ok=True)
        resized.save(dest)
        return resized.size


def _referenced(catalog: ContentCatalog) -> list[str]:
    sources = catalog.image_sources()
    if catalog.profile.cv_path and catalog.profile.cv_path not in sources:
        sources.append(catalog.profile.cv_path)
    return sources


def process_assets(
    catalog: ContentCatalog,
    config: AssetsConfig,
    static_dir: Path,
    output_dir: Path | None = None,
) -> AssetReport:
    """Resolve every asset the catalog references under ``static_dir``.

    With ``output_dir`` set, assets are copied there and previews written
    for portfolio images wider than ``config.max_preview_width``. Missing
    files are logged and skipped, or raise ``AssetError`` in strict mode.
    """
    report = AssetReport()
    portfolio_sources = {item.image_source for item in catalog.portfolio}

    for source in _referenced(catalog):
        path = static_dir / source.lstrip("/")
        if not path.is_file():
            if config.strict:
                raise AssetError(f"Static asset not found: {path}")
            logger.warning("Static asset not found: %s", path)
            report.missing.append(source)
            continue

        info = AssetInfo(source=source, path=path)
        size = inspect_image(path)
        if size is not None:
            info.width, info.height = size

        if output_dir is not None:
            dest = output_dir / source.lstrip("/")
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(path, dest)
            if (
                source in portfolio_sources
                and info.width is not None
                and info.width > config.max_preview_width
            ):
                name = preview_name(source.lstrip("/"), config.preview_suffix)
                pw, ph = write_preview(path, output_dir / name, config.max_preview_width)
                info.preview = name
                info.width, info.height = pw, ph
                report.previews_written += 1
                logger.debug("Preview %s (%dx%d)", name, pw, ph)

        report.assets[source] = info

    logger.info("Assets: %s", report)
    return report
