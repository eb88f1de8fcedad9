"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from tile_edit.assets import PlaceholderGenerator
from tile_edit.engine import AnimatedSprite, Texture


@pytest.fixture
def generator(tmp_path) -> PlaceholderGenerator:
    """Create a placeholder generator writing into a temp dir."""
    return PlaceholderGenerator(tmp_path / "assets")


@pytest.fixture
def strip_texture(generator) -> Texture:
    """A 192x64 sheet holding three 64x64 frames in one row."""
    return Texture(generator.build_sheet(3, 1, (64, 64)), name="strip")


@pytest.fixture
def grid_texture(generator) -> Texture:
    """A 96x64 sheet holding six 32x32 frames in two rows."""
    return Texture(generator.build_sheet(3, 2, (32, 32)), name="grid")


@pytest.fixture
def strip_sprite(strip_texture) -> AnimatedSprite:
    """Sprite over the three frame strip."""
    return AnimatedSprite(strip_texture, 64, 64)


@pytest.fixture
def grid_sprite(grid_texture) -> AnimatedSprite:
    """Sprite over the six frame grid."""
    return AnimatedSprite(grid_texture, 32, 32)


@pytest.fixture
def asset_dir(generator):
    """Asset directory with all built-in placeholder sheets written to it."""
    generator.generate_all()
    return generator.output_dir
