"""Content catalog — the authored collections rendered on the page.

The catalog is plain immutable data. The default content lives here; a
``catalog.yaml`` can replace any part of it.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from folio.models import (
    ExperienceEntry,
    IconKind,
    NavLink,
    PortfolioEntry,
    Profile,
    ServiceEntry,
    SkillEntry,
    SocialLink,
)

logger = logging.getLogger(__name__)

SECTION_ANCHORS = ("home", "about", "service", "portfolio", "contact")


class CatalogError(ValueError):
    """Raised when authored content breaks a catalog rule."""


class ContentCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile: Profile
    services: tuple[ServiceEntry, ...]
    experience: tuple[ExperienceEntry, ...]
    portfolio: tuple[PortfolioEntry, ...]
    social_links: tuple[SocialLink, ...]
    skills: tuple[SkillEntry, ...] = ()
    nav_links: tuple[NavLink, ...] = ()

    @model_validator(mode="after")
    def _collections_not_empty(self) -> "ContentCatalog":
        for name in ("services", "experience", "portfolio", "social_links"):
            if not getattr(self, name):
                raise ValueError(f"catalog collection '{name}' is empty")
        for link in self.nav_links:
            if link.anchor not in SECTION_ANCHORS:
                raise ValueError(f"nav link '{link.label}' targets unknown section '{link.anchor}'")
        return self

    def counts(self) -> dict[str, int]:
        return {
            "services": len(self.services),
            "experience": len(self.experience),
            "portfolio": len(self.portfolio),
            "social_links": len(self.social_links),
            "skills": len(self.skills),
        }

    def image_sources(self) -> list[str]:
        """Every static image the page references, in render order, deduplicated."""
        sources = [self.profile.hero_image, self.profile.about_image]
        sources.extend(item.image_source for item in self.portfolio)
        seen: set[str] = set()
        result: list[str] = []
        for s in sources:
            if s and s not in seen:
                seen.add(s)
                result.append(s)
        return result


DEFAULT_NAV_LINKS = (
    NavLink(label="Home", anchor="home"),
    NavLink(label="About", anchor="about"),
    NavLink(label="Services", anchor="service"),
    NavLink(label="Portfolio", anchor="portfolio"),
    NavLink(label="Contact", anchor="contact"),
)


def default_catalog() -> ContentCatalog:
    """The authored content shipped with the site."""
    return ContentCatalog(
        profile=Profile(
            name="Pragadeesh",
            phrases=("Frontend Developer", "Freelancer"),
            description=(
                "I am a professional Freelancer and Developer. I build beautiful digital "
                "experiences and automate business workflows with Google App Script."
            ),
            hero_image="pragadeesh_new.jpg",
            about_image="pragadeesh2.jpg",
            cv_path="Pragadeesh_CV.png",
            footer="Copyright © 2026. Designed & Built by Pragadeesh.",
        ),
        services=(
            ServiceEntry(
                icon=IconKind.PALETTE, title="UI/UX Design",
                description="Crafting intuitive and aesthetic user interfaces that drive engagement and satisfaction.",
            ),
            ServiceEntry(
                icon=IconKind.CODE, title="Frontend Developer",
                description="Building responsive web apps with React, standard semantic HTML5, and modern CSS.",
            ),
            ServiceEntry(
                icon=IconKind.TERMINAL, title="Google App Script",
                description="Automating Google Workspace (Sheet, Docs, Forms) to save time and streamline workflows.",
            ),
            ServiceEntry(
                icon=IconKind.LAYOUT, title="Freelance Services",
                description="Delivering high-quality web solutions on time and within budget for global clients.",
            ),
        ),
        experience=(
            ExperienceEntry(
                year="2023 - Present", role="Frontend Developer", company="Freelance",
                description="Building modern web applications for diverse clients using React and Tailwind.",
            ),
            ExperienceEntry(
                year="2022 - 2023", role="Junior Web Designer", company="Creative Studio",
                description="Assisted in designing layouts and implementing responsive UI components.",
            ),
            ExperienceEntry(
                year="2021 - 2022", role="Intern", company="Tech Solutions",
                description="Learned the fundamentals of web development and contributed to internal tools.",
            ),
        ),
        portfolio=(
            PortfolioEntry(image_source="b1.png", title="E-Commerce Dashboard", tags=("React", "Chart.js")),
            PortfolioEntry(image_source="i3.png", title="SaaS Platform", tags=("Next.js", "Tailwind")),
            PortfolioEntry(image_source="i4.png", title="Portfolio V1", tags=("Legacy", "CSS")),
            PortfolioEntry(image_source="i5.jpg", title="Future AI System", tags=("OpenAI", "React")),
        ),
        social_links=(
            SocialLink(icon_kind=IconKind.GITHUB, target_url="https://github.com/pragadeesh1024", label="GitHub"),
            SocialLink(
                icon_kind=IconKind.LINKEDIN,
                target_url="https://www.linkedin.com/in/pragadeesh-waran-t-b732212a3", label="LinkedIn",
            ),
            SocialLink(icon_kind=IconKind.WHATSAPP, target_url="https://wa.me/917094985957", label="WhatsApp"),
            SocialLink(
                icon_kind=IconKind.TELEGRAM, target_url="https://t.me/Potter_1024",
                new_tab=False, label="Telegram",
            ),
            SocialLink(icon_kind=IconKind.PHONE, target_url="tel:+917094985957", new_tab=False, label="Phone"),
        ),
        skills=(
            SkillEntry(name="Frontend Development (HTML/CSS/JS)", percentage=95),
            SkillEntry(name="Google App Script & Automation", percentage=92),
            SkillEntry(name="React.js & Redux", percentage=90),
            SkillEntry(name="Freelancing & Client Management", percentage=88),
        ),
        nav_links=DEFAULT_NAV_LINKS,
    )


def build_catalog(raw: dict[str, Any]) -> ContentCatalog:
    """Build a catalog from raw mappings, filling absent sections from the defaults."""
    if not isinstance(raw, dict):
        raise CatalogError(f"catalog must be a mapping of sections, got {type(raw).__name__}")
    base = default_catalog().model_dump()
    merged = {**base, **raw}
    try:
        return ContentCatalog.model_validate(merged)
    except ValidationError as e:
        raise CatalogError(str(e)) from e


def load_catalog(catalog_path: Path | None = None) -> ContentCatalog:
    """Load a catalog from YAML.

    With no path, the default content is returned. An explicit path that does
    not exist is an error.
    """
    if catalog_path is None:
        return default_catalog()

    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {catalog_path}")

    try:
        raw: dict[str, Any] = yaml.safe_load(catalog_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {catalog_path}: {e}") from e
    catalog = build_catalog(raw)
    logger.info("Loaded catalog from %s: %s", catalog_path, catalog.counts())
    return catalog
