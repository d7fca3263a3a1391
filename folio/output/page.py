"""Portfolio page — turns the catalog into a self-contained HTML document.

``build_page_model`` pairs every listed element with its reveal transition
(staggered by index); ``render_page`` writes the markup, inlining the
stylesheet and the behaviour script.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from folio.assets import AssetReport
from folio.behaviors.navigation import NavigationState
from folio.behaviors.reveal import (
    RevealSpec,
    portfolio_reveals,
    section_reveal,
    service_reveals,
    skill_reveals,
    timeline_reveals,
    zoom_in,
)
from folio.catalog import ContentCatalog
from folio.config import Config, TiltSettings
from folio.models import ExperienceEntry, PortfolioEntry, ServiceEntry, SkillEntry, Side, timeline_side
from folio.output.icons import icon_svg
from folio.output.script import render_script
from folio.output.styles import PAGE_CSS

logger = logging.getLogger(__name__)


def _esc(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;").replace("'", "&#39;")


# --- View model ---


@dataclass
class ListedItem:
    """One element of a staggered list with its entrance transition."""
    index: int
    entry: Any
    reveal: RevealSpec
    side: Side | None = None  # timeline only

    @property
    def delay_s(self) -> float:
        return self.reveal.delay_s


@dataclass
class PageModel:
    catalog: ContentCatalog
    config: Config
    hero_reveal: RevealSpec
    hero_image_reveal: RevealSpec
    skills: list[ListedItem] = field(default_factory=list)
    timeline: list[ListedItem] = field(default_factory=list)
    services: list[ListedItem] = field(default_factory=list)
    portfolio: list[ListedItem] = field(default_factory=list)
    assets: AssetReport | None = None


def build_page_model(
    catalog: ContentCatalog,
    config: Config,
    assets: AssetReport | None = None,
) -> PageModel:
    rc = config.reveal

    def listed(entries: tuple, specs: list[RevealSpec], with_side: bool = False) -> list[ListedItem]:
        return [
            ListedItem(i, e, spec, timeline_side(i) if with_side else None)
            for i, (e, spec) in enumerate(zip(entries, specs))
        ]

    return PageModel(
        catalog=catalog,
        config=config,
        hero_reveal=section_reveal(rc),
        hero_image_reveal=zoom_in(rc.hero_image_hidden_scale, rc.hero_image_duration_s),
        skills=listed(catalog.skills, skill_reveals(len(catalog.skills), rc)),
        timeline=listed(catalog.experience, timeline_reveals(len(catalog.experience), rc), with_side=True),
        services=listed(catalog.services, service_reveals(len(catalog.services), rc)),
        portfolio=listed(catalog.portfolio, portfolio_reveals(len(catalog.portfolio), rc)),
        assets=assets,
    )


# --- Attribute helpers ---


def _num(v: float) -> str:
    return f"{v:g}"


def reveal_attrs(spec: RevealSpec) -> str:
    h = spec.hidden
    # Hidden pose as custom properties so the .revealed rule can override it.
    style = (
        f"--reveal-opacity: {_num(h.opacity)}; --reveal-x: {_num(h.x)}px; --reveal-y: {_num(h.y)}px; "
        f"--reveal-scale: {_num(h.scale)}; "
        f"transition-duration: {_num(spec.duration_s)}s; transition-delay: {_num(spec.delay_s)}s"
    )
    return f'data-reveal="{spec.name}" data-reveal-delay="{_num(spec.delay_s)}" style="{style}"'


def tilt_attrs(t: TiltSettings) -> str:
    return (
        f'data-tilt data-tilt-max-x="{_num(t.max_angle_x)}" data-tilt-max-y="{_num(t.max_angle_y)}" '
        f'data-tilt-scale="{_num(t.scale)}" data-tilt-perspective="{t.perspective}" '
        f'data-tilt-speed="{t.transition_speed_ms}"'
    )


def _img(model: PageModel, src: str, alt: str, css_class: str = "") -> str:
    attrs = [f'alt="{_esc(alt)}"', 'loading="lazy"']
    if css_class:
        attrs.append(f'class="{css_class}"')
    info = model.assets.get(src) if model.assets else None
    if info is not None:
        if info.preview:
            src = info.preview
        if info.width is not None:
            attrs.append(f'width="{info.width}" height="{info.height}"')
    return f'<img src="{_esc(src.lstrip("/"))}" {" ".join(attrs)}>'


# --- Sections ---


def _nav(model: PageModel) -> str:
    site = model.config.site
    # Server-rendered at the top of the page with the menu closed.
    nav_class = "scrolled" if NavigationState().uses_scrolled_style else ""
    links = "\n".join(
        f'            <li><a href="{link.href}">{_esc(link.label)}</a></li>'
        for link in model.catalog.nav_links
    )
    return f'''<nav class="{nav_class}">
    <div class="nav__bar">
        <a href="#home" class="nav__logo">
            <div class="logo-icon">{_esc(site.logo_letter)}</div>
            <span>{_esc(site.handle)}</span>
        </a>
        <button class="menu-btn" type="button" aria-label="Toggle menu" aria-expanded="false">{icon_svg("menu")}{icon_svg("close")}</button>
        <ul class="nav__links">
{links}
        </ul>
    </div>
</nav>'''


def _hero(model: PageModel) -> str:
    p = model.catalog.profile
    tilt = model.config.tilt.hero
    cv = ""
    if p.cv_path:
        cv = f'<a href="{_esc(p.cv_path.lstrip("/"))}" download class="btn btn-secondary">Download CV {icon_svg("download", 18)}</a>'
    image = ""
    if p.hero_image:
        image = f'''<div {tilt_attrs(tilt)}>
            <div class="header__image" {reveal_attrs(model.hero_image_reveal)}>
                <div class="hero-shape"></div>
                {_img(model, p.hero_image, p.name)}
            </div>
        </div>'''
    return f'''<header class="section__container header__container" id="home">
    <div class="header__content-wrapper">
        <div class="header__content" {reveal_attrs(model.hero_reveal)}>
            <div class="hire-badge">{_esc(p.badge)}</div>
            <h2 class="header__greeting">{_esc(p.greeting)}</h2>
            <h1 class="header__name">{_esc(p.name)}<br>
                <span class="text-gradient typewriter" data-typewriter>|</span>
            </h1>
            <p class="header__description">{_esc(p.description)}</p>
            <div class="header__btns">
                <a href="#contact" class="btn btn-primary">Hire Me {icon_svg("briefcase", 18)}</a>
                {cv}
            </div>
        </div>
        {image}
    </div>
</header>'''


def _skill(item: ListedItem) -> str:
    skill: SkillEntry = item.entry
    return f'''<div class="skill-bar-container" {reveal_attrs(item.reveal)}>
                <div class="skill-info"><span>{_esc(skill.name)}</span><span>{skill.percentage}%</span></div>
                <div class="skill-track"><div class="skill-progress" data-fill="{skill.percentage}"></div></div>
            </div>'''


def _timeline_item(item: ListedItem) -> str:
    e: ExperienceEntry = item.entry
    return f'''<div class="timeline-item {item.side.value}">
                <div class="timeline-dot"></div>
                <div class="timeline-content" {reveal_attrs(item.reveal)}>
                    <span class="timeline-year">{_esc(e.year)}</span>
                    <h3 class="timeline-role">{_esc(e.role)}</h3>
                    <p class="timeline-company">{_esc(e.company)}</p>
                    <p class="timeline-desc">{_esc(e.description)}</p>
                </div>
            </div>'''


def _about(model: PageModel) -> str:
    p = model.catalog.profile
    image = _img(model, p.about_image, "About Me", "about__image") if p.about_image else ""
    skills = "\n            ".join(_skill(i) for i in model.skills)
    timeline = "\n            ".join(_timeline_item(i) for i in model.timeline)
    return f'''<section class="section__container about__container" id="about">
    <div>
        {image}
        <span class="section__subtitle">About Me</span>
        <h2 class="section__title">Technical Proficiency</h2>
        <div class="skills-wrapper">
            {skills}
        </div>
    </div>
    <div class="timeline-container-wrapper">
        <h3 class="timeline-heading">My Journey</h3>
        <div class="timeline">
            {timeline}
        </div>
    </div>
</section>'''


def _service_card(item: ListedItem, tilt: TiltSettings) -> str:
    s: ServiceEntry = item.entry
    return f'''<div {tilt_attrs(tilt)}>
            <div class="service__card glass" data-index="{item.index}" {reveal_attrs(item.reveal)}>
                <div class="service__icon">{icon_svg(s.icon, 32)}</div>
                <h3>{_esc(s.title)}</h3>
                <p>{_esc(s.description)}</p>
            </div>
        </div>'''


def _services(model: PageModel) -> str:
    cards = "\n        ".join(_service_card(i, model.config.tilt.service) for i in model.services)
    return f'''<section class="section__container" id="service">
    <div class="section__header-wrapper">
        <span class="section__subtitle">What I Offer</span>
        <h2 class="section__title">Specialized Services</h2>
    </div>
    <div class="service__grid">
        {cards}
    </div>
</section>'''


def _portfolio_card(model: PageModel, item: ListedItem) -> str:
    entry: PortfolioEntry = item.entry
    tags = "".join(f'<span class="portfolio__tag">{_esc(t)}</span>' for t in entry.tags)
    return f'''<div {tilt_attrs(model.config.tilt.portfolio)}>
            <div class="portfolio__card" data-index="{item.index}" {reveal_attrs(item.reveal)}>
                {_img(model, entry.image_source, entry.title)}
                <div class="portfolio__overlay">
                    <h3>{_esc(entry.title)}</h3>
                    <div class="portfolio__tags">{tags}</div>
                </div>
            </div>
        </div>'''


def _portfolio(model: PageModel) -> str:
    cards = "\n        ".join(_portfolio_card(model, i) for i in model.portfolio)
    return f'''<section class="section__container" id="portfolio">
    <div class="section__header-wrapper">
        <span class="section__subtitle">My Work</span>
        <h2 class="section__title">Featured Projects</h2>
    </div>
    <div class="portfolio__grid">
        {cards}
    </div>
</section>'''


def _contact(model: PageModel) -> str:
    buttons = []
    for link in model.catalog.social_links:
        target = ' target="_blank" rel="noopener noreferrer"' if link.new_tab else ""
        buttons.append(
            f'<a href="{_esc(link.target_url)}"{target} class="social__btn" '
            f'aria-label="{_esc(link.accessible_label)}">{icon_svg(link.icon_kind)}</a>'
        )
    joined = "\n        ".join(buttons)
    return f'''<section class="section__container contact__container" id="contact">
    <span class="section__subtitle">Contact Me</span>
    <h2 class="section__title">Let's Work Together</h2>
    <p class="contact__lead">Always open to discussing product design work or partnership opportunities.</p>
    <div class="social__links">
        {joined}
    </div>
</section>'''


def render_page(model: PageModel) -> str:
    site = model.config.site
    footer = model.catalog.profile.footer or f"Designed & Built by {model.catalog.profile.name}."
    return f'''<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{_esc(site.title)}</title>
<style>
{PAGE_CSS}
</style>
</head>
<body>
<div class="cursor-dot"></div>
<div class="cursor-outline"></div>
<div class="progress-bar"></div>
<div class="bg-animation">
    <div class="blob blob-1"></div>
    <div class="blob blob-2"></div>
    <div class="blob blob-3"></div>
</div>

{_nav(model)}

{_hero(model)}

{_about(model)}

{_services(model)}

{_portfolio(model)}

{_contact(model)}

<footer>
    <p>{_esc(footer)}</p>
</footer>
<script>
{render_script(model.config, model.catalog.profile.phrases)}
</script>
</body>
</html>'''
