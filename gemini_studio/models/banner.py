"""BannerCraft request and result models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .fields import NonEmptyList, NonEmptyStr


@dataclass(frozen=True)
class BannerRequest:
    """Form input for a banner strategy."""

    brand_name: str
    product_name: str
    campaign_goal: str
    target_audience: str
    dimensions: str = "300x250"
    tone: str = "Professional & Trustworthy"


class _CamelModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class VisualDirection(_CamelModel):
    color_palette: NonEmptyList = Field(description="List of hex codes or color names.")
    layout_description: NonEmptyStr = Field(description="Description of how elements are arranged.")
    imagery_description: NonEmptyStr = Field(description="What images/icons should be used.")
    typography: str | None = Field(default=None, description="Font style suggestions.")
    background_color_hex: NonEmptyStr = Field(description="Main background hex code for preview.")
    text_color_hex: NonEmptyStr = Field(description="Main text hex code for preview.")


class BannerSpec(_CamelModel):
    """Ad creative specification returned by the strategy call."""

    headline: NonEmptyStr = Field(description="Catchy main headline for the ad.")
    subheadline: NonEmptyStr = Field(description="Supporting text or value prop.")
    cta: NonEmptyStr = Field(description="Call to action button text.")
    body: NonEmptyStr = Field(description="Main body copy (short and punchy).")
    visual_direction: VisualDirection
    rationale: NonEmptyStr = Field(description="Why this design works for the audience/goal.")
