"""
Background music: a looping playlist switched by the music-switch gesture.
"""
import logging
from typing import List, Optional, Sequence

from .config import MusicConfig
from .types import AudioPlayerProto, GestureSnapshot

logger = logging.getLogger(__name__)


class Playlist:
    """Ordered track list with wrap-around and a clamped volume."""

    def __init__(self, tracks: Sequence[str], volume: float = 0.3):
        if not tracks:
            raise ValueError("Playlist needs at least one track")
        self.tracks: List[str] = list(tracks)
        self.current_index = 0
        self.volume = 0.0
        self.set_volume(volume)

    @property
    def current(self) -> str:
        return self.tracks[self.current_index % len(self.tracks)]

    def select(self, index: int) -> str:
        self.current_index = index % len(self.tracks)
        return self.current

    def next(self) -> str:
        return self.select(self.current_index + 1)

    def set_volume(self, volume: float) -> float:
        self.volume = max(0.0, min(1.0, volume))
        return self.volume


class MusicController:
    """
    Starts, switches and controls the background music.

    The first switch gesture starts track 0; later ones advance to the
    next track. Switches are rate-limited by their own cooldown.
    """

    def __init__(self, player: AudioPlayerProto, cfg: MusicConfig):
        """Initialize with an audio backend and playlist settings."""
        self.player = player
        self.cfg = cfg
        self.playlist = Playlist(cfg.tracks, cfg.volume)
        self.is_playing = False
        self.last_switch_ms: Optional[float] = None

    def handle_gestures(self, snapshot: Optional[GestureSnapshot], now_ms: float) -> bool:
        """
        React to the music-switch flag of a snapshot.

        Args:
            snapshot: Current gesture snapshot
            now_ms: Monotonic timestamp in milliseconds

        Returns:
            True if the music was switched this frame
        """
        if snapshot is None or not snapshot.is_music_switch:
            return False

        if self.last_switch_ms is not None and now_ms - self.last_switch_ms <= self.cfg.switch_cooldown_ms:
            return False

        self.switch_music()
        self.last_switch_ms = now_ms
        return True

    def switch_music(self) -> None:
        if not self.is_playing:
            self.play(0)
        else:
            self.next()

    def play(self, index: Optional[int] = None) -> None:
        if index is not None:
            self.playlist.select(index)
        if self.is_playing:
            self.player.stop()

        track = self.playlist.current
        self.is_playing = self.player.play(track, self.playlist.volume)
        if self.is_playing:
            logger.info(f"Playing {track}")
        else:
            logger.warning(f"Playback of {track} was refused by the audio backend")

    def next(self) -> None:
        self.playlist.next()
        self.play()

    def pause(self) -> None:
        if self.is_playing:
            self.player.pause()
            self.is_playing = False

    def resume(self) -> None:
        if not self.is_playing:
            self.player.resume()
            self.is_playing = True

    def stop(self) -> None:
        self.player.stop()
        self.is_playing = False

    def set_volume(self, volume: float) -> None:
        self.player.set_volume(self.playlist.set_volume(volume))
