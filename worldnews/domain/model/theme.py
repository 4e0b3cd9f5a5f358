"""Theme settings.

Site-wide presentation preferences and the visual effects derived from them.
"""

import re

from pydantic import BaseModel, ConfigDict, field_validator

from worldnews.domain.model.common import DomainModel
from worldnews.domain.value import FontFamily, FontSize, ImageSize

_HSL_PATTERN = re.compile(r"^\d{1,3}(\.\d+)? \d{1,3}(\.\d+)?% \d{1,3}(\.\d+)?%$")

FONT_SIZES: dict[FontSize, str] = {
    FontSize.SMALL: "14px",
    FontSize.MEDIUM: "16px",
    FontSize.LARGE: "18px",
}

FONT_FAMILIES: dict[FontFamily, str] = {
    FontFamily.INTER: "Inter, system-ui, -apple-system, sans-serif",
    FontFamily.PLAYFAIR: "Playfair Display, serif",
    FontFamily.SYSTEM: "system-ui, -apple-system, sans-serif",
}

IMAGE_HEIGHTS: dict[ImageSize, int] = {
    ImageSize.SMALL: 200,
    ImageSize.MEDIUM: 300,
    ImageSize.LARGE: 400,
}


def _check_hsl(v: str) -> str:
    if not _HSL_PATTERN.match(v):
        raise ValueError("Color must be an HSL triplet such as '200 100% 50%'")
    return v


class ThemeSettings(DomainModel):
    """Theme settings with the site defaults."""

    primary_color: str = "200 100% 50%"
    accent_color: str = "15 90% 60%"
    font_size: FontSize = FontSize.MEDIUM
    image_size: ImageSize = ImageSize.MEDIUM
    font_family: FontFamily = FontFamily.INTER

    @field_validator("primary_color", "accent_color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Validate HSL color descriptors."""
        return _check_hsl(v)

    def merge(self, update: "ThemeUpdate") -> "ThemeSettings":
        """Return new settings with the given fields replaced.

        Fields left unset in the update keep their current value.
        """
        changes = update.model_dump(exclude_none=True)
        return ThemeSettings.model_validate({**self.model_dump(), **changes})


class ThemeUpdate(BaseModel):
    """Partial theme settings."""

    model_config = ConfigDict(extra="forbid")

    primary_color: str | None = None
    accent_color: str | None = None
    font_size: FontSize | None = None
    image_size: ImageSize | None = None
    font_family: FontFamily | None = None

    @field_validator("primary_color", "accent_color")
    @classmethod
    def validate_color(cls, v: str | None) -> str | None:
        """Validate HSL color descriptors when given."""
        return _check_hsl(v) if v is not None else v


class ThemeApplication(DomainModel):
    """Every visual effect of a theme, applied together."""

    css_variables: dict[str, str]
    attributes: dict[str, str]
    image_height_px: int

    @classmethod
    def from_settings(cls, settings: ThemeSettings) -> "ThemeApplication":
        """Derive the full effect batch from settings."""
        return cls(
            css_variables={
                "--primary": settings.primary_color,
                "--accent": settings.accent_color,
                "--font-size": FONT_SIZES[settings.font_size],
                "--font-sans": FONT_FAMILIES[settings.font_family],
            },
            attributes={"data-image-size": settings.image_size.value},
            image_height_px=IMAGE_HEIGHTS[settings.image_size],
        )

    def to_css(self) -> str:
        """Render the batch as a root stylesheet."""
        lines = [f"  {name}: {value};" for name, value in self.css_variables.items()]
        lines.append(f"  font-size: {self.css_variables['--font-size']};")
        image_size = self.attributes["data-image-size"]
        return (
            ":root {\n"
            + "\n".join(lines)
            + "\n}\n"
            + f'[data-image-size="{image_size}"] .post-image {{\n'
            + f"  height: {self.image_height_px}px;\n"
            + "}\n"
        )
