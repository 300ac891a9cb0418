"""Cached loading of images, fonts and sounds, with release of unused ones."""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from typing import Any

from .errors import EngineError
from .log import LogType, log

# A cached value that only its cache refers to shows two references: the
# cache's own and the temporary passed to sys.getrefcount.
_CACHE_ONLY_REFS = 2


def _load_image(path: str) -> Any:
    import pygame

    return pygame.image.load(path)


def _scale_image(surface: Any, width: int, height: int) -> Any:
    import pygame

    return pygame.transform.smoothscale(surface, (width, height))


def _load_font(path: str, size: int) -> Any:
    import pygame

    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _load_sound(path: str) -> Any:
    import pygame

    return pygame.mixer.Sound(path)


class _SampleInstance:
    """A playable copy of a sound with its own loop mode, volume and start position."""

    def __init__(self, sound: Any) -> None:
        import pygame

        settings = pygame.mixer.get_init()
        if settings is None:
            raise RuntimeError("the mixer is not initialised")
        frequency, size, channels = settings
        self._sound = sound
        self._frame_bytes = abs(size) // 8 * channels
        self._raw = sound.get_raw()
        self.frequency = frequency
        self.length = len(self._raw) // self._frame_bytes
        self.loop = False
        self.volume = 1.0
        self.position = 0
        self._channel: Any = None

    def set_playmode(self, loop: bool) -> bool:
        self.loop = bool(loop)
        return True

    def set_volume(self, volume: float) -> bool:
        if volume < 0:
            return False
        self.volume = volume
        return True

    def set_position(self, index: int) -> bool:
        if not 0 <= index <= self.length:
            return False
        self.position = index
        return True

    def play(self) -> bool:
        import pygame

        sound = self._sound
        if self.position:
            sound = pygame.mixer.Sound(buffer=self._raw[self.position * self._frame_bytes:])
        channel = sound.play(loops=-1 if self.loop else 0)
        if channel is None:
            return False
        channel.set_volume(self.volume)
        self._channel = channel
        return True

    def is_playing(self) -> bool:
        return self._channel is not None and bool(self._channel.get_busy())

    def stop(self) -> bool:
        if self._channel is None:
            return False
        self._channel.stop()
        return True


class Resources:
    """Loads images, fonts and sounds on first use and keeps them cached.

    Loaders are injectable; the defaults use pygame.
    """

    def __init__(
        self,
        root: str = "Resource",
        *,
        bitmap_loader: Callable[[str], Any] | None = None,
        scaler: Callable[[Any, int, int], Any] | None = None,
        font_loader: Callable[[str, int], Any] | None = None,
        sample_loader: Callable[[str], Any] | None = None,
        instance_factory: Callable[[Any], Any] | None = None,
    ) -> None:
        self.bitmap_path_prefix = f"{root}/images/"
        self.font_path_prefix = f"{root}/fonts/"
        self.sample_path_prefix = f"{root}/audios/"
        self._load_bitmap = bitmap_loader or _load_image
        self._scale = scaler or _scale_image
        self._load_font = font_loader or _load_font
        self._load_sample = sample_loader or _load_sound
        self._make_instance = instance_factory or _SampleInstance
        self._bitmaps: dict[str, Any] = {}
        self._fonts: dict[str, Any] = {}
        self._samples: dict[str, Any] = {}
        self._sample_instance_pairs: dict[str, tuple[Any, Any]] = {}

    def release_unused(self) -> None:
        """Drop every cached resource that nothing outside the cache still uses."""
        for key in list(self._bitmaps):
            if sys.getrefcount(self._bitmaps[key]) <= _CACHE_ONLY_REFS:
                log(LogType.INFO, "Destroyed Resource<image>: ", key)
                del self._bitmaps[key]
        for key in list(self._fonts):
            if sys.getrefcount(self._fonts[key]) <= _CACHE_ONLY_REFS:
                log(LogType.INFO, "Destroyed Resource<font>: ", key)
                del self._fonts[key]
        for key in list(self._sample_instance_pairs):
            if sys.getrefcount(self._sample_instance_pairs[key][0]) <= _CACHE_ONLY_REFS:
                log(LogType.INFO, "Destroyed<sample_instance>: ", key)
                del self._sample_instance_pairs[key]
        for key in list(self._samples):
            if sys.getrefcount(self._samples[key]) <= _CACHE_ONLY_REFS:
                log(LogType.INFO, "Destroyed Resource<audio>: ", key)
                del self._samples[key]

    def _load(self, loader: Callable[..., Any], what: str, path: str, *args: Any) -> Any:
        try:
            value = loader(path, *args)
        except (OSError, RuntimeError) as exc:
            raise EngineError(f"failed to load {what}: {path}") from exc
        if value is None:
            raise EngineError(f"failed to load {what}: {path}")
        return value

    def get_bitmap(self, name: str, width: int | None = None, height: int | None = None) -> Any:
        """Return the image file under the images folder, optionally scaled to width x height."""
        scaled = width is not None or height is not None
        if scaled and (width is None or height is None):
            raise ValueError("both width and height are needed to scale an image")
        key = f"{name}?{width}x{height}" if scaled else name
        if key in self._bitmaps:
            return self._bitmaps[key]
        path = self.bitmap_path_prefix + name
        bitmap = self._load(self._load_bitmap, "image", path)
        if scaled:
            try:
                bitmap = self._scale(bitmap, width, height)
            except (OSError, RuntimeError, ValueError) as exc:
                raise EngineError(
                    f"failed to create bitmap when creating resized image: {path}"
                ) from exc
            log(LogType.INFO, "Loaded Resource<image>: ", path, " scaled to ", width, "x", height)
        else:
            log(LogType.INFO, "Loaded Resource<image>: ", path)
        self._bitmaps[key] = bitmap
        return bitmap

    def get_font(self, name: str, font_size: int) -> Any:
        """Return the font file under the fonts folder at the given size."""
        key = f"{name}?{font_size}"
        if key in self._fonts:
            return self._fonts[key]
        path = self.font_path_prefix + name
        font = self._load(self._load_font, "font", path, font_size)
        log(LogType.INFO, "Loaded Resource<font>: ", path, " with size ", font_size)
        self._fonts[key] = font
        return font

    def get_sample(self, name: str) -> Any:
        """Return the sound file under the audios folder."""
        if name in self._samples:
            return self._samples[name]
        path = self.sample_path_prefix + name
        sample = self._load(self._load_sample, "audio", path)
        log(LogType.INFO, "Loaded Resource<audio>: ", path)
        self._samples[name] = sample
        return sample

    def get_sample_instance(self, name: str) -> Any:
        """Create a new playable instance of the named sound."""
        sample = self.get_sample(name)
        path = self.sample_path_prefix + name
        try:
            instance = self._make_instance(sample)
        except (OSError, RuntimeError) as exc:
            raise EngineError(f"failed to create sample instance: {path}") from exc
        if instance is None:
            raise EngineError(f"failed to create sample instance: {path}")
        log(LogType.INFO, "Created<sample_instance>: ", path)
        self._sample_instance_pairs[name] = (instance, sample)
        return instance


@functools.lru_cache(maxsize=None)
def default_resources() -> Resources:
    """Return the shared resource cache of the program."""
    return Resources()