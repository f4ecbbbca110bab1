"""Theme mode and color token models."""

from enum import Enum
from typing import Dict, Union

from pydantic import BaseModel, field_validator

from ..exceptions import ThemeError


# Chakra UI default gray scale
PALETTE: Dict[str, str] = {
    "white": "#FFFFFF",
    "black": "#000000",
    "gray.50": "#F7FAFC",
    "gray.100": "#EDF2F7",
    "gray.200": "#E2E8F0",
    "gray.300": "#CBD5E0",
    "gray.400": "#A0AEC0",
    "gray.500": "#718096",
    "gray.600": "#4A5568",
    "gray.700": "#2D3748",
    "gray.800": "#1A202C",
    "gray.900": "#171923",
}


class ThemeMode(str, Enum):
    """Two-valued UI color mode."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value: Union[str, "ThemeMode"]) -> "ThemeMode":
        """Parse a theme mode, accepting any letter case.

        Raises:
            ThemeError: If the value is not light or dark
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ThemeError(f"Unknown theme mode: {value!r} (expected 'light' or 'dark')")


def resolve_color(token: str) -> str:
    """Resolve a color token such as ``gray.700`` to its CSS hex value."""
    try:
        return PALETTE[token]
    except KeyError:
        raise ThemeError(f"Unknown color token: {token}")


class ColorTokens(BaseModel):
    """Secondary text color token for each theme mode."""

    light: str = "gray.700"
    dark: str = "gray.400"

    @field_validator("light", "dark")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Validate the token exists in the palette."""
        if v not in PALETTE:
            raise ValueError(f"Unknown color token: {v}")
        return v

    def for_mode(self, mode: Union[str, ThemeMode]) -> str:
        """Select the token for a theme mode."""
        mode = ThemeMode.parse(mode)
        return self.light if mode is ThemeMode.LIGHT else self.dark
