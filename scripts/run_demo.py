#!/usr/bin/env python3
"""Play a sprite playlist headlessly and print every frame change."""

import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tile_edit.assets import PlaceholderGenerator, create_playlist, get_sheet_definition
from tile_edit.engine import AnimatedSprite, Texture
from tile_edit.renderer import HeadlessRenderer, transform


def main():
    sheet = get_sheet_definition("walker")
    image = PlaceholderGenerator().build_sheet(
        sheet["cols"], sheet["rows"], (sheet["frame_width"], sheet["frame_height"])
    )
    sprite = AnimatedSprite(Texture(image, "walker"), sheet["frame_width"], sheet["frame_height"])
    sprite.animate_fresh(create_playlist("walker", ["idle", "turn", "walk_left"]), loop_queue=False)

    renderer = HeadlessRenderer(width=1, height=1, cell_size=(sheet["frame_width"], sheet["frame_height"]))
    dt = 1.0 / 30
    last = None

    print("Walker demo")
    print("=" * 40)
    for tick in range(90):
        sprite.update(dt)
        renderer.clear()
        sprite.draw(transform.identity(), renderer)
        renderer.present()

        frame = renderer.frames_drawn()[0]
        if frame != last:
            anim = sprite.active_index
            print(f"t={tick * dt:5.2f}s  animation {anim}  frame {frame}")
            last = frame


if __name__ == "__main__":
    main()
