#!/usr/bin/env python3
"""Render a tile map to a PNG file."""

import argparse
import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tile_edit.app import Application, EditorConfig, configure_logging
from tile_edit.assets import PlaceholderGenerator
from tile_edit.types import TileEditError


def checkerboard(width: int, height: int, tiles: int) -> list[list[int]]:
    """Build a map that cycles through the available tiles."""
    return [[(x + y) % tiles for x in range(width)] for y in range(height)]


def main():
    parser = argparse.ArgumentParser(description="TileEdit map renderer")
    parser.add_argument("--config", type=Path, help="JSON editor config")
    parser.add_argument("--output", type=Path, default=Path("frame.png"), help="Output image")
    parser.add_argument("--frames", type=int, default=1, help="Ticks to run before saving")
    parser.add_argument(
        "--placeholder",
        action="store_true",
        help="Generate placeholder sheets into the asset root first",
    )
    args = parser.parse_args()

    try:
        config = EditorConfig.from_file(args.config) if args.config else EditorConfig()
    except TileEditError as e:
        parser.error(str(e))

    configure_logging(config.log_level)

    if args.placeholder:
        PlaceholderGenerator(Path(config.asset_root)).generate_all()

    app = Application(config)
    try:
        app.initialize()
        tiles = app.view.tiles.num_frames
        app.load_map(checkerboard(config.map_width, config.map_height, tiles))
        app.run_frames(args.frames)
        output = app.save_frame(args.output)
    except TileEditError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        app.shutdown()

    print(f"Saved frame to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
