"""Navigation bar — scrolled flag plus mobile menu toggle."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from folio.config import NavigationConfig
from folio.models import NavLink
from folio.runtime.component import Component
from folio.runtime.events import ScrollEvent

logger = logging.getLogger(__name__)


@dataclass
class NavigationState:
    scrolled: bool = False
    menu_open: bool = False

    @property
    def uses_scrolled_style(self) -> bool:
        """Opaque bar whenever the page is scrolled or the menu is open."""
        return self.scrolled or self.menu_open


def is_scrolled(scroll_y: float, threshold: float) -> bool:
    return scroll_y > threshold


class NavigationBar(Component):
    def __init__(
        self,
        links: Sequence[NavLink] = (),
        config: NavigationConfig | None = None,
        on_navigate: Callable[[NavLink], None] | None = None,
    ) -> None:
        super().__init__()
        self.links = tuple(links)
        self.config = config or NavigationConfig()
        self.on_navigate = on_navigate
        self.state = NavigationState()

    @property
    def css_class(self) -> str:
        return "scrolled" if self.state.uses_scrolled_style else ""

    def on_mount(self) -> None:
        self.state = NavigationState(
            scrolled=is_scrolled(self.window.scroll_y, self.config.scroll_threshold_px),
        )
        self.listen("scroll", self._on_scroll)

    def _on_scroll(self, event: ScrollEvent) -> None:
        scrolled = is_scrolled(event.scroll_y, self.config.scroll_threshold_px)
        if scrolled != self.state.scrolled:
            logger.debug("Navigation scrolled=%s at %.0fpx", scrolled, event.scroll_y)
        self.state.scrolled = scrolled

    def toggle_menu(self) -> bool:
        self.state.menu_open = not self.state.menu_open
        return self.state.menu_open

    def activate_link(self, link: NavLink | str) -> NavLink:
        """Follow a nav link: the menu always closes, then ``on_navigate`` runs."""
        if isinstance(link, str):
            matches = [l for l in self.links if l.anchor == link or l.label == link]
            if not matches:
                raise ValueError(f"Unknown navigation link: {link}")
            link = matches[0]
        self.state.menu_open = False
        if self.on_navigate is not None:
            self.on_navigate(link)
        return link
