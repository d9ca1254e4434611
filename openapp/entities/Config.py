"""
Configuration domain entities, validated with pydantic.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictStr

# Platform identifiers used as section names in the config file
PLATFORMS = ("linux", "macos", "windows")


class PlatformConfig(BaseModel):
    """Settings scoped to one operating system."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    aliases: dict[str, StrictStr] = Field(
        default_factory=dict, description="Platform-specific app aliases"
    )
    file_manager: Optional[StrictStr] = Field(
        default=None,
        validation_alias=AliasChoices("file_manager", "fileManager"),
        description="Executable used to reveal apps where there is no native API",
    )


class Config(BaseModel):
    """Contents of the user's config file."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    aliases: dict[str, StrictStr] = Field(
        default_factory=dict, description="App aliases shared by every platform"
    )
    linux: PlatformConfig = Field(default_factory=PlatformConfig)
    macos: PlatformConfig = Field(default_factory=PlatformConfig)
    windows: PlatformConfig = Field(default_factory=PlatformConfig)

    def platform(self, identifier: str) -> PlatformConfig:
        """
        Get the section for a platform.

        Args:
            identifier: One of "linux", "macos" or "windows"

        Returns:
            The platform's PlatformConfig (empty when the file has no such section)
        """
        if identifier not in PLATFORMS:
            raise ValueError(f"Unknown platform: {identifier}")
        return getattr(self, identifier)
