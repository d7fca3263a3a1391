"""CLI entry point for the portfolio site generator."""

import argparse
import logging
import sys
from pathlib import Path

from folio.build import build_site
from folio.catalog import CatalogError, load_catalog
from folio.config import Config, load_config


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Portfolio site generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    sub = parser.add_subparsers(dest="command")

    # build command
    build_parser = sub.add_parser("build", help="Render the site and copy static assets")
    build_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    build_parser.add_argument("--catalog", type=Path, default=None, help="Content catalog YAML")
    build_parser.add_argument("--out", type=Path, default=None, help="Output directory")
    build_parser.add_argument("--static", type=Path, default=None, help="Static assets directory")
    build_parser.add_argument(
        "--strict", action="store_true",
        help="Fail when a referenced asset is missing instead of skipping it",
    )

    # catalog command
    catalog_parser = sub.add_parser("catalog", help="Show the content catalog")
    catalog_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    catalog_parser.add_argument("--catalog", type=Path, default=None, help="Content catalog YAML")

    # typewriter command
    tw_parser = sub.add_parser("typewriter", help="Simulate the hero typewriter on a virtual clock")
    tw_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    tw_parser.add_argument("--catalog", type=Path, default=None, help="Content catalog YAML")
    tw_parser.add_argument("--ms", type=int, default=8000, help="Virtual milliseconds to run")
    tw_parser.add_argument("--seed", type=int, default=None, help="Jitter seed")
    tw_parser.add_argument(
        "--text", action="append", default=None,
        help="Phrase to type (repeatable). Defaults to the catalog phrases.",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    try:
        if args.command == "build":
            catalog_path = args.catalog or _default_catalog_path(config)
            catalog = load_catalog(catalog_path)
            result = build_site(
                catalog, config,
                output_dir=args.out,
                static_dir=args.static,
                strict=True if args.strict else None,
            )
            print(result)
            if result.assets_missing:
                print("\nMissing assets:")
                for source in result.assets_missing:
                    print(f"  - {source}")

        elif args.command == "catalog":
            catalog = load_catalog(args.catalog or _default_catalog_path(config))
            print(f"{catalog.profile.name}: {', '.join(catalog.profile.phrases)}")
            print(f"\nServices ({len(catalog.services)}):")
            for s in catalog.services:
                print(f"  [{s.icon.value}] {s.title}")
            print(f"\nExperience ({len(catalog.experience)}):")
            for e in catalog.experience:
                print(f"  {e.year}: {e.role} @ {e.company}")
            print(f"\nPortfolio ({len(catalog.portfolio)}):")
            for p in catalog.portfolio:
                print(f"  {p.title} ({', '.join(p.tags)}) <- {p.image_source}")
            print(f"\nSocial links ({len(catalog.social_links)}):")
            for link in catalog.social_links:
                print(f"  {link.icon_kind.value}: {link.target_url}")
            if catalog.skills:
                print(f"\nSkills ({len(catalog.skills)}):")
                for skill in catalog.skills:
                    print(f"  {skill.percentage:3d}% {skill.name}")

        elif args.command == "typewriter":
            from folio.behaviors.typewriter import simulate

            texts = args.text or list(load_catalog(args.catalog or _default_catalog_path(config)).profile.phrases)
            for at_ms, frame in simulate(texts, args.ms, config.typewriter, seed=args.seed):
                print(f"{at_ms:8.0f}ms  {frame}")

        else:
            parser.print_help()

    except (CatalogError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _default_catalog_path(config: Config) -> Path | None:
    """The configured catalog file if it exists, else None for the built-in content."""
    path = config.resolved_catalog_path
    return path if path.exists() else None


if __name__ == "__main__":
    sys.exit(main())
