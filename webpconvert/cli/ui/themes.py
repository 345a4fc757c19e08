"""
Theme Management
Color themes for terminal output
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from rich.console import Console
from rich.style import Style
from rich.theme import Theme as RichTheme


class ThemeType(str, Enum):
    """Built-in theme types"""

    DARK = "dark"
    LIGHT = "light"
    MINIMAL = "minimal"


@dataclass
class Theme:
    """Theme configuration"""

    name: str
    type: ThemeType
    styles: Dict[str, Dict[str, Any]]
    description: str = ""

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich Theme object"""
        return RichTheme({name: Style(**style_def) for name, style_def in self.styles.items()})


THEMES: Dict[ThemeType, Theme] = {
    ThemeType.DARK: Theme(
        name="Dark",
        type=ThemeType.DARK,
        styles={
            "info": {"color": "cyan"},
            "warning": {"color": "yellow", "bold": True},
            "error": {"color": "red", "bold": True},
            "success": {"color": "green"},
            "highlight": {"color": "bright_yellow", "bold": True},
        },
        description="Default theme for dark terminals",
    ),
    ThemeType.LIGHT: Theme(
        name="Light",
        type=ThemeType.LIGHT,
        styles={
            "info": {"color": "blue"},
            "warning": {"color": "dark_orange", "bold": True},
            "error": {"color": "red3", "bold": True},
            "success": {"color": "dark_green"},
            "highlight": {"color": "magenta", "bold": True},
        },
        description="Theme for light terminal backgrounds",
    ),
    ThemeType.MINIMAL: Theme(
        name="Minimal",
        type=ThemeType.MINIMAL,
        styles={
            "info": {},
            "warning": {"bold": True},
            "error": {"bold": True},
            "success": {},
            "highlight": {"bold": True},
        },
        description="No colors, emphasis only",
    ),
}


def get_theme(name: Optional[str] = None) -> Theme:
    """Look up a built-in theme, falling back to the dark theme"""
    try:
        return THEMES[ThemeType((name or ThemeType.DARK.value).lower())]
    except ValueError:
        return THEMES[ThemeType.DARK]


def create_console(
    theme_name: Optional[str] = None, stderr: bool = False, **console_kwargs: Any
) -> Console:
    """Create a Rich console with the specified theme.

    Long paths are never wrapped so every status message stays on one line.
    """
    console_kwargs.setdefault("soft_wrap", True)
    return Console(
        theme=get_theme(theme_name).to_rich_theme(), stderr=stderr, **console_kwargs
    )
