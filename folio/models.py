"""Pydantic models for the portfolio content catalog."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IconKind(str, Enum):
    PALETTE = "palette"
    CODE = "code"
    TERMINAL = "terminal"
    LAYOUT = "layout"
    BUG = "bug"
    USER_SMILE = "user_smile"
    GITHUB = "github"
    LINKEDIN = "linkedin"
    INSTAGRAM = "instagram"
    WHATSAPP = "whatsapp"
    TELEGRAM = "telegram"
    PHONE = "phone"


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


# --- Content records (authored, immutable) ---


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class ServiceEntry(_Record):
    icon: IconKind
    title: str
    description: str


class ExperienceEntry(_Record):
    year: str
    role: str
    company: str
    description: str


class PortfolioEntry(_Record):
    image_source: str
    title: str
    tags: tuple[str, ...]

    @field_validator("tags")
    @classmethod
    def _tags_not_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("portfolio entry needs at least one tag")
        return v


class SocialLink(_Record):
    icon_kind: IconKind
    target_url: str
    new_tab: bool = True
    label: str = ""

    @property
    def accessible_label(self) -> str:
        return self.label or self.icon_kind.value.replace("_", " ").title()


class SkillEntry(_Record):
    name: str
    percentage: int = Field(ge=0, le=100)


class NavLink(_Record):
    label: str
    anchor: str

    @property
    def href(self) -> str:
        return f"#{self.anchor}"


class Profile(_Record):
    name: str
    phrases: tuple[str, ...]
    badge: str = "Available for Work"
    greeting: str = "HELLO, I'M"
    description: str = ""
    hero_image: str = ""
    about_image: str = ""
    cv_path: str = ""
    footer: str = ""

    @field_validator("phrases")
    @classmethod
    def _phrases_not_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v or any(not p for p in v):
            raise ValueError("typewriter phrases must be a non-empty list of non-empty strings")
        return v


def timeline_side(index: int) -> Side:
    """Timeline nodes alternate sides; index 0 sits on the left."""
    return Side.LEFT if index % 2 == 0 else Side.RIGHT
