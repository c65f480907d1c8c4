"""Loading of the three image sheets the game is drawn from."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from ishido.constants import BACKGROUND_IMAGE, STATUSAREA_IMAGE, TILESET_IMAGE


class AssetLoadError(RuntimeError):
    """Raised when an image sheet is missing or unreadable. Fatal at startup."""


@dataclass(slots=True)
class Assets:
    # Background sheet: one column per cosmetic variant; rows are border, interior, then both again hinted.
    background: Image.Image
    # Tile sheet: one column per color, one row per symbol.
    tileset: Image.Image
    statusarea: Image.Image


class AssetProvider:
    def __init__(self, graphics_dir: Path):
        self._graphics_dir = Path(graphics_dir)

    @property
    def graphics_dir(self) -> Path:
        return self._graphics_dir

    def load(self) -> Assets:
        return Assets(
            background=self._load_image(BACKGROUND_IMAGE),
            tileset=self._load_image(TILESET_IMAGE),
            statusarea=self._load_image(STATUSAREA_IMAGE),
        )

    def _load_image(self, name: str) -> Image.Image:
        path = self._graphics_dir / name
        if not path.exists():
            raise AssetLoadError(f"Failed to load image {path}: file not found")
        try:
            with Image.open(path) as img:
                return img.convert("RGBA")
        except OSError as exc:
            raise AssetLoadError(f"Failed to load image {path}: {exc}") from exc
