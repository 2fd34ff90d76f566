"""Configuration type definitions for sgrfmt."""

from dataclasses import dataclass, field

from sgrfmt.utils.logging import LogLevel

COLOR_CHOICES = ("auto", "always", "never")


@dataclass(frozen=True)
class FeatureConfig:
    """Optional features."""

    const_format: bool = False  # allows the '#' sigil


@dataclass(frozen=True)
class Settings:
    """Process-wide sgrfmt settings."""

    features: FeatureConfig = field(default_factory=FeatureConfig)
    color: str = "auto"  # CLI output only: "auto", "always" or "never"
    log_level: int = LogLevel.NONE

    @property
    def const_format(self) -> bool:
        return self.features.const_format
