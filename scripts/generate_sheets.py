#!/usr/bin/env python3
"""Generate placeholder sprite sheets for TileEdit."""

from pathlib import Path
import sys

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tile_edit.assets import PlaceholderGenerator


def main():
    """Generate all placeholder sheets."""
    output_dir = Path(__file__).parent.parent / "assets"
    print(f"Generating placeholder sheets in {output_dir}")

    generated = PlaceholderGenerator(output_dir).generate_all()

    print(f"Generated {len(generated)} sheets:")
    for sheet_id, path in generated.items():
        print(f"  - {sheet_id}: {path}")


if __name__ == "__main__":
    main()
