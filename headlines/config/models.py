"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


DEFAULT_PLACEHOLDER_IMAGE = "/placeholder.svg?height=400&width=600"


class GNewsConfig(BaseModel):
    """GNews API configuration."""

    base_url: str = Field("https://gnews.io/api/v4", description="API base URL")
    api_key_env: Optional[str] = Field(
        "GNEWS_API_KEY", description="Environment variable for API key"
    )
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    country: str = Field("in", description="Fixed country filter", min_length=2, max_length=2)
    timeout: float = Field(30.0, description="Transport timeout in seconds", gt=0.0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so paths can be appended."""
        return v.rstrip("/")

    @field_validator("country")
    @classmethod
    def lower_country(cls, v: str) -> str:
        return v.lower()


class UIConfig(BaseModel):
    """Terminal view configuration."""

    category_delay: float = Field(
        1.0, description="Cosmetic category-loading delay in seconds", ge=0.0
    )
    placeholder_image: str = Field(
        DEFAULT_PLACEHOLDER_IMAGE, description="Image reference used when an article has none"
    )


class ConfigModel(BaseModel):
    """Main configuration model."""

    gnews: GNewsConfig = Field(default_factory=GNewsConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
