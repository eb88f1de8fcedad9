"""Texture loading and reference counted caching."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from tile_edit.types import ContractViolationError, Rect, TextureUnavailableError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Texture:
    """Read-only RGBA image shared between sprites."""

    def __init__(self, image: Image.Image, name: str = ""):
        """Initialize the texture.

        Args:
            image: Source image. Converted to RGBA if needed.
            name: Name used in logs and errors.
        """
        self._image = image if image.mode == "RGBA" else image.convert("RGBA")
        self.name = name

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    @property
    def image(self) -> Image.Image:
        return self._image

    def crop(self, rect: Rect) -> Image.Image:
        """Cut a region out of the texture.

        Args:
            rect: Region in texture pixels.

        Returns:
            A new image holding the region.
        """
        left = int(round(rect.x))
        top = int(round(rect.y))
        return self._image.crop(
            (left, top, left + int(round(rect.w)), top + int(round(rect.h)))
        )

    def pixels(self) -> np.ndarray:
        """Get the texture as a ``(height, width, 4)`` uint8 array."""
        return np.asarray(self._image)

    def __repr__(self) -> str:
        return f"Texture({self.name!r}, {self.width}x{self.height})"


@dataclass(frozen=True)
class TextureHandle:
    """Reference to a slot in a TextureManager.

    The generation changes every time the slot is (re)loaded, so a handle
    kept across an eviction no longer resolves.
    """

    path: Path
    generation: int


@dataclass
class _Slot:
    texture: Texture
    generation: int
    ref_count: int = 0


class TextureManager:
    """Loads textures once and keeps them while they are referenced."""

    def __init__(self, root: PathLike = "assets"):
        """Initialize the texture manager. Nothing is loaded up front.

        Args:
            root: Directory that texture paths are relative to.
        """
        self._root = Path(root)
        self._slots: dict[Path, _Slot] = {}
        self._next_generation = 1

    @property
    def root(self) -> Path:
        return self._root

    def acquire(self, path: PathLike) -> TextureHandle:
        """Get a handle to a texture, loading it if needed.

        Each call adds one reference that must be given back with
        :meth:`release`.

        Args:
            path: Texture path relative to the root.

        Returns:
            Handle for the texture.

        Raises:
            TextureUnavailableError: If the file is missing or not an image.
        """
        key = Path(path)
        slot = self._slots.get(key)
        if slot is None:
            slot = self._add_slot(key, self._load(key))
        slot.ref_count += 1
        return TextureHandle(key, slot.generation)

    def get(self, path: PathLike) -> Texture:
        """Acquire a texture and return it directly."""
        return self.texture(self.acquire(path))

    def texture(self, handle: TextureHandle) -> Texture:
        """Resolve a handle.

        Raises:
            TextureUnavailableError: If the texture was evicted since the
                handle was issued.
        """
        slot = self._slots.get(handle.path)
        if slot is None or slot.generation != handle.generation:
            raise TextureUnavailableError(handle.path, "evicted")
        return slot.texture

    def release(self, handle: Union[TextureHandle, PathLike]) -> None:
        """Give back one reference to a texture.

        Raises:
            ContractViolationError: If the texture holds no references.
        """
        path = handle.path if isinstance(handle, TextureHandle) else Path(handle)
        slot = self._slots.get(path)
        if slot is None or slot.ref_count == 0:
            raise ContractViolationError(f"Texture {path} released more often than acquired")
        if isinstance(handle, TextureHandle) and handle.generation != slot.generation:
            raise ContractViolationError(f"Stale handle for texture {path}")
        slot.ref_count -= 1

    def register(self, path: PathLike, image: Image.Image) -> TextureHandle:
        """Put an in-memory image into the cache under ``path``.

        The texture starts with one reference held by the caller.
        """
        key = Path(path)
        if key in self._slots:
            raise ContractViolationError(f"Texture {key} is already loaded")
        slot = self._add_slot(key, Texture(image, name=str(key)))
        slot.ref_count += 1
        return TextureHandle(key, slot.generation)

    def is_loaded(self, path: PathLike) -> bool:
        return Path(path) in self._slots

    def ref_count(self, path: PathLike) -> int:
        slot = self._slots.get(Path(path))
        return slot.ref_count if slot else 0

    def clean(self) -> int:
        """Evict every texture that is no longer referenced.

        Returns:
            Number of evicted textures.
        """
        unused = [path for path, slot in self._slots.items() if slot.ref_count == 0]
        for path in unused:
            del self._slots[path]
            logger.debug("Evicted texture %s", path)
        return len(unused)

    def __len__(self) -> int:
        return len(self._slots)

    def _add_slot(self, key: Path, texture: Texture) -> _Slot:
        slot = _Slot(texture=texture, generation=self._next_generation)
        self._next_generation += 1
        self._slots[key] = slot
        return slot

    def _load(self, key: Path) -> Texture:
        full_path = self._root / key
        try:
            with Image.open(full_path) as img:
                img.load()
                image = img.convert("RGBA")
        except FileNotFoundError:
            raise TextureUnavailableError(full_path, "not found") from None
        except (UnidentifiedImageError, OSError) as e:
            raise TextureUnavailableError(full_path, f"cannot decode: {e}") from e

        logger.debug("Loaded texture %s (%dx%d)", full_path, image.width, image.height)
        return Texture(image, name=str(key))
