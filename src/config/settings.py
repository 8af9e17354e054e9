"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use CHATMARKUP_ prefix (e.g., CHATMARKUP_CLASS_BOLD=fw-bold).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.tokens import TokenKind


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use CHATMARKUP_ prefix.

    Examples:
        CHATMARKUP_CLASS_BOLD=fw-bold
        CHATMARKUP_CLASS_STRIKE=line-through
        CHATMARKUP_VERBOSITY=3
    """

    model_config = SettingsConfigDict(
        env_prefix="CHATMARKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Renderer configuration
    class_bold: str = Field(
        default="text-bold",
        description="Default CSS class for *asterisk* spans",
    )

    class_italic: str = Field(
        default="text-italic",
        description="Default CSS class for _underscore_ spans",
    )

    class_strike: str = Field(
        default="text-strike",
        description="Default CSS class for ~tilde~ spans",
    )

    # Logging configuration
    verbosity: int = Field(
        default=0,
        description="Logging verbosity used when no MarkupState is connected (0 = silent)",
    )

    def classes_default(self) -> Dict[TokenKind, str]:
        """
        Build the default kind -> CSS class mapping.

        Returns a fresh dict on every call, so callers may modify it freely.

        Example:
            >>> settings = AppSettings()
            >>> settings.classes_default()[TokenKind.ASTERISK]
            'text-bold'
        """
        return {
            TokenKind.ASTERISK: self.class_bold,
            TokenKind.UNDERSCORE: self.class_italic,
            TokenKind.TILDE: self.class_strike,
        }


# Singleton instance - import this in your code
appsettings = AppSettings()
