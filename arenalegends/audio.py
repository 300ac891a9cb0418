"""Playing sound effects, background music and controllable sound instances."""

from __future__ import annotations

from typing import Any

from .errors import EngineError
from .log import LogType, log
from .resources import Resources, default_resources


class AudioPlayer:
    """Plays sounds loaded through a resource cache."""

    def __init__(
        self,
        resources: Resources | None = None,
        bgm_volume: float = 0.2,
        sfx_volume: float = 0.2,
    ) -> None:
        self.resources = resources if resources is not None else default_resources()
        self.bgm_volume = bgm_volume
        self.sfx_volume = sfx_volume

    def _play(self, name: str, loops: int, volume: float, kind: str) -> Any:
        channel = self.resources.get_sample(name).play(loops=loops)
        if channel is None:
            log(LogType.INFO, f"failed to play audio ({kind})")
            return None
        channel.set_volume(volume)
        log(LogType.VERBOSE, f"played audio ({kind})")
        return channel

    def play_audio(self, name: str) -> Any:
        """Play a sound once at the effects volume; return its channel, or None."""
        return self._play(name, 0, self.sfx_volume, "once")

    def play_bgm(self, name: str) -> Any:
        """Loop a sound at the music volume; return its channel, or None."""
        return self._play(name, -1, self.bgm_volume, "bgm")

    def stop_bgm(self, channel: Any) -> None:
        """Stop music started with play_bgm."""
        channel.stop()
        log(LogType.INFO, "stopped audio (bgm)")

    def play_sample(
        self, name: str, loop: bool = False, volume: float = 1.0, position: float = 0.0
    ) -> Any:
        """Create and start a sound instance; position is the start offset in seconds."""
        sample = self.resources.get_sample_instance(name)
        if not sample.set_playmode(loop):
            raise EngineError("failed to set audio play mode (sample)")
        if volume != 1:
            self.change_sample_volume(sample, volume)
        if position != 0:
            self.change_sample_position(sample, position)
        if not sample.play():
            log(LogType.INFO, "failed to play audio (sample)")
        else:
            log(LogType.VERBOSE, "played audio (sample)")
        return sample

    def stop_sample(self, sample: Any) -> None:
        """Stop a sound instance if it is playing."""
        if not sample.is_playing():
            return
        if not sample.stop():
            log(LogType.INFO, "failed to stop audio (sample)")
        else:
            log(LogType.INFO, "stopped audio (sample)")

    def change_sample_volume(self, sample: Any, volume: float) -> None:
        """Set the gain of a sound instance."""
        if not sample.set_volume(volume):
            raise EngineError(f"failed to change sample volume to {volume:f}")

    def change_sample_position(self, sample: Any, position: float) -> None:
        """Move a sound instance to the given time in seconds."""
        index = int(sample.frequency * position)
        if not sample.set_position(index):
            raise EngineError(f"failed to change sample position to {position:f} s")

    def get_sample_length(self, sample: Any) -> int:
        """Return the length of a sound instance in whole seconds."""
        return sample.length // sample.frequency