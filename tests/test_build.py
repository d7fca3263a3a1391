"""Tests for the site build and the command line."""

import pytest
import yaml

from folio.assets import AssetError
from folio.build import build_site
from folio.cli import main


class TestBuildSite:
    def test_writes_index(self, small_catalog, config, static_dir, tmp_path):
        out = tmp_path / "dist"
        result = build_site(small_catalog, config, output_dir=out, static_dir=static_dir)
        page = out / "index.html"
        assert result.page_path == page
        assert page.is_file()
        html = page.read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert result.page_bytes == len(html.encode("utf-8"))
        assert (result.services, result.timeline, result.portfolio) == (4, 3, 3)
        assert result.assets_copied == 5
        assert result.assets_missing == ["missing.png"]
        assert result.previews_written == 1
        assert "missing=1" in repr(result)

    def test_strict_override(self, small_catalog, config, static_dir, tmp_path):
        with pytest.raises(AssetError):
            build_site(small_catalog, config, output_dir=tmp_path / "dist", static_dir=static_dir, strict=True)


class TestCli:
    def test_build(self, static_dir, tmp_path, capsys):
        out = tmp_path / "dist"
        code = main(["build", "--out", str(out), "--static", str(static_dir)])
        assert code == 0
        assert (out / "index.html").is_file()
        printed = capsys.readouterr().out
        assert "BuildResult(" in printed
        assert "Missing assets:" in printed

    def test_build_from_catalog_file(self, static_dir, tmp_path, capsys):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump({
            "profile": {"name": "Ada", "phrases": ["Builder"], "hero_image": "hero.png"},
            "portfolio": [{"image_source": "small.png", "title": "Small", "tags": ["CSS"]}],
        }))
        out = tmp_path / "dist"
        code = main(["build", "--catalog", str(path), "--out", str(out), "--static", str(static_dir), "--strict"])
        assert code == 0
        assert "Ada" in (out / "index.html").read_text(encoding="utf-8")

    def test_catalog_listing(self, capsys):
        assert main(["catalog"]) == 0
        printed = capsys.readouterr().out
        assert "Services (4):" in printed
        assert "Experience (3):" in printed
        assert "[palette] UI/UX Design" in printed

    def test_typewriter_frames(self, capsys):
        assert main(["typewriter", "--ms", "1000", "--seed", "3", "--text", "Hi"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].strip().startswith("0ms")
        assert any(line.endswith("Hi|") or line.endswith("Hi ") for line in lines)

    def test_missing_catalog(self, tmp_path, capsys):
        assert main(["catalog", "--catalog", str(tmp_path / "nope.yaml")]) == 1
        assert "Catalog file not found" in capsys.readouterr().err

    def test_invalid_catalog(self, tmp_path, capsys):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump({"services": []}))
        assert main(["catalog", "--catalog", str(path)]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_malformed_yaml(self, tmp_path, capsys):
        path = tmp_path / "catalog.yaml"
        path.write_text("services: [unclosed\n")
        assert main(["catalog", "--catalog", str(path)]) == 1
        assert "Invalid YAML" in capsys.readouterr().err

    def test_catalog_must_be_mapping(self, tmp_path, capsys):
        path = tmp_path / "catalog.yaml"
        path.write_text("- a\n- b\n")
        assert main(["build", "--catalog", str(path), "--out", str(tmp_path / "dist")]) == 1
        assert "mapping" in capsys.readouterr().err
        assert not (tmp_path / "dist").exists()
