"""Generate placeholder sprite sheets for demos and tests."""

from __future__ import annotations

import colorsys
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw

from .sheet_definitions import SHEET_DEFINITIONS


def frame_color(index: int, count: int) -> tuple[int, int, int, int]:
    """Get a distinct opaque color for a frame."""
    hue = index / max(count, 1)
    r, g, b = colorsys.hsv_to_rgb(hue, 0.55, 0.9)
    return (int(r * 255), int(g * 255), int(b * 255), 255)


class PlaceholderGenerator:
    """Generates numbered placeholder sprite sheets."""

    def __init__(self, output_dir: Optional[Path] = None):
        """Initialize the generator.

        Args:
            output_dir: Output directory for generated sheets.
        """
        self.output_dir = output_dir or Path("assets")

    def build_sheet(
        self,
        cols: int,
        rows: int,
        frame_size: tuple[int, int],
    ) -> Image.Image:
        """Draw a sheet with one colored, numbered cell per frame.

        Args:
            cols: Frames per row.
            rows: Number of rows.
            frame_size: ``(width, height)`` of one frame.

        Returns:
            The sheet image.
        """
        w, h = frame_size
        img = Image.new("RGBA", (cols * w, rows * h), (0, 0, 0, 0))
        draw = ImageDraw.Draw(img)
        count = cols * rows

        for index in range(count):
            x = (index % cols) * w
            y = (index // cols) * h
            color = frame_color(index, count)
            draw.rectangle([x, y, x + w - 1, y + h - 1], fill=color, outline=(40, 30, 20, 255))
            draw.text((x + 3, y + 2), str(index), fill=(255, 255, 255, 255))

        return img

    def generate_sheet(self, sheet_id: str) -> Path:
        """Write one built-in sheet as PNG.

        Returns:
            Path to the generated file.
        """
        sheet = SHEET_DEFINITIONS[sheet_id]
        img = self.build_sheet(
            sheet["cols"],
            sheet["rows"],
            (sheet["frame_width"], sheet["frame_height"]),
        )

        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / f"{sheet_id}.png"
        img.save(output_path)
        return output_path

    def generate_all(self) -> dict[str, Path]:
        """Write all built-in sheets.

        Returns:
            Dictionary of sheet id to generated file path.
        """
        return {sheet_id: self.generate_sheet(sheet_id) for sheet_id in SHEET_DEFINITIONS}
