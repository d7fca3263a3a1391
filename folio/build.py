"""Site build orchestrator — assets, page model, rendered HTML."""

import logging
from pathlib import Path

from folio.assets import process_assets
from folio.catalog import ContentCatalog
from folio.config import Config
from folio.output.page import build_page_model, render_page

logger = logging.getLogger(__name__)


class BuildResult:
    """Summary of a site build."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir
        self.page_path: Path | None = None
        self.page_bytes = 0
        self.services = 0
        self.timeline = 0
        self.portfolio = 0
        self.assets_copied = 0
        self.assets_missing: list[str] = []
        self.previews_written = 0

    def __repr__(self) -> str:
        parts = [
            f"BuildResult({self.page_path or self.output_dir}: ",
            f"{self.page_bytes} bytes ",
            f"[services={self.services}, timeline={self.timeline}, portfolio={self.portfolio}], ",
            f"assets={self.assets_copied}",
        ]
        if self.previews_written:
            parts.append(f", previews={self.previews_written}")
        if self.assets_missing:
            parts.append(f", missing={len(self.assets_missing)}")
        parts.append(")")
        return "".join(parts)


def build_site(
    catalog: ContentCatalog,
    config: Config,
    output_dir: Path | None = None,
    static_dir: Path | None = None,
    strict: bool | None = None,
) -> BuildResult:
    """Render ``index.html`` and copy the referenced assets into ``output_dir``."""
    if output_dir is None:
        output_dir = config.resolved_output_dir
    if static_dir is None:
        static_dir = config.resolved_static_dir
    assets_config = config.assets
    if strict is not None:
        assets_config = assets_config.model_copy(update={"strict": strict})

    result = BuildResult(output_dir)
    logger.info("Building site into %s (static: %s)", output_dir, static_dir)

    output_dir.mkdir(parents=True, exist_ok=True)
    report = process_assets(catalog, assets_config, static_dir, output_dir)
    result.assets_copied = len(report.assets)
    result.assets_missing = list(report.missing)
    result.previews_written = report.previews_written

    model = build_page_model(catalog, config, report)
    result.services = len(model.services)
    result.timeline = len(model.timeline)
    result.portfolio = len(model.portfolio)

    html = render_page(model)
    page_path = output_dir / "index.html"
    page_path.write_text(html, encoding="utf-8")
    result.page_path = page_path
    result.page_bytes = len(html.encode("utf-8"))

    logger.info("Build complete: %s", result)
    return result
