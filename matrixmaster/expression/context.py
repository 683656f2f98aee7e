"""
Render settings for the display pass.

Numeric display precision and locale only matter when a result is turned into
text. They are carried in an explicit ``RenderSettings`` value handed to the
renderers rather than read from process-wide state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from matrixmaster.core.config import Settings


SUPPORTED_LOCALES = ("en", "ja")


@dataclass(frozen=True)
class Labels:
    """Locale-dependent labels used around rendered results."""

    result: str = "Result"
    error: str = "Error"
    expanded: str = "Expanded"


LABELS: dict[str, Labels] = {
    "en": Labels(),
    "ja": Labels(result="計算結果", error="エラー", expanded="展開"),
}


@dataclass(frozen=True)
class RenderSettings:
    """
    Formatting options for the render pass.

    Attributes:
        precision: Significant digits for numeric values
        locale: Language used for labels ("en" or "ja")
        tex: Render expressions as LaTeX instead of plain text
        expand: Append a SymPy-expanded preview to symbolic results
        symbols: Optional TeX overrides for symbol names
    """

    precision: int = 4
    locale: str = "en"
    tex: bool = False
    expand: bool = False
    symbols: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.precision < 1:
            raise ValueError("precision must be at least 1")
        if self.locale not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale: {self.locale!r}")

    @property
    def labels(self) -> Labels:
        return LABELS[self.locale]

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RenderSettings":
        """
        Load render settings from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            RenderSettings instance
        """
        with open(path, "r", encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        symbols = {}
        for entry in data.get("symbols", []):
            if isinstance(entry, dict):
                symbols[entry["name"]] = entry["latex"]

        return cls(
            precision=data.get("precision", 4),
            locale=data.get("locale", "en"),
            tex=data.get("tex", False),
            expand=data.get("expand", False),
            symbols=symbols,
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RenderSettings":
        """Build render settings from application settings."""
        return cls(precision=settings.PRECISION, locale=settings.LOCALE)
