"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use PODDOWN_ prefix (e.g., PODDOWN_TITLE_WINDOW=300).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use PODDOWN_ prefix.

    Examples:
        PODDOWN_LANGUAGE_TAG=perl
        PODDOWN_DESCRIPTION_MAX_LENGTH=400
        PODDOWN_CODE_MIN_LENGTH=20
    """

    model_config = SettingsConfigDict(
        env_prefix="PODDOWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Rendering / extraction
    language_tag: str = Field(
        default="perl",
        description="Language tag attached to fenced code and to every usage example",
    )

    synopsis_title: str = Field(
        default="Synopsis",
        description="Title given to examples taken from the SYNOPSIS section",
    )

    synopsis_description: str = Field(
        default="Basic usage example from the module synopsis",
        description="Description given to examples taken from the SYNOPSIS section",
    )

    document_fallback_title: str = Field(
        default="Code Example",
        description="Title for whole-document examples with no usable context",
    )

    code_min_length: int = Field(
        default=10,
        description="Whole-document code blocks must be longer than this to be reported",
    )

    # Context inference
    title_window: int = Field(
        default=200,
        description="Characters scanned before a code block when looking for its title",
    )

    title_max_length: int = Field(
        default=50,
        description="Plain text lines used as titles must be shorter than this",
    )

    description_window: int = Field(
        default=300,
        description="Characters scanned after a code block when building its description",
    )

    description_max_length: int = Field(
        default=200,
        description="Stop accumulating description text once it exceeds this length",
    )

    description_min_length: int = Field(
        default=10,
        description="Descriptions of this length or shorter are discarded",
    )

    module_description_default: str = Field(
        default="Perl module",
        description="Module description used when NAME and DESCRIPTION yield nothing",
    )

    # CLI
    input_suffixes: Tuple[str, ...] = Field(
        default=(".pod", ".pm"),
        description="File suffixes picked up by the CLI when no --inputFile is given",
    )

    module_suffixes: Tuple[str, ...] = Field(
        default=(".pm", ".pl"),
        description="Suffixes of Perl source files; only their embedded POD blocks are converted",
    )

    def fence_open(self) -> str:
        """
        Opening line of a fenced code block in the rendered Markdown.

        Example:
            >>> AppSettings().fence_open()
            '```perl'
        """
        return f"```{self.language_tag}"


# Singleton instance - import this in your code
appsettings = AppSettings()
