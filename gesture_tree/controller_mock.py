"""
Mock collaborators for running the core without audio, a scene or a camera.
"""
from collections import deque
from typing import Dict, Iterable, List, Optional, Tuple

from .types import HandLandmarks


class MockAudioPlayer:
    """Mock audio backend that prints actions instead of playing sound."""

    def __init__(self, refuse_playback: bool = False):
        """Initialize the mock player."""
        self.refuse_playback = refuse_playback
        self.played: List[str] = []
        self.stop_count = 0
        self.pause_count = 0
        self.resume_count = 0
        self.volume: Optional[float] = None

    def play(self, url: str, volume: float) -> bool:
        """Record the track instead of playing it."""
        self.played.append(url)
        self.volume = volume
        print(f"[MockAudioPlayer] Play: {url} at volume {volume:.2f} (call #{len(self.played)})")
        return not self.refuse_playback

    def pause(self) -> None:
        self.pause_count += 1
        print("[MockAudioPlayer] Pause")

    def resume(self) -> None:
        self.resume_count += 1
        print("[MockAudioPlayer] Resume")

    def stop(self) -> None:
        self.stop_count += 1
        print("[MockAudioPlayer] Stop")

    def set_volume(self, volume: float) -> None:
        self.volume = volume
        print(f"[MockAudioPlayer] Volume: {volume:.2f}")

    def reset_counters(self) -> None:
        """Reset action counters for testing."""
        self.played.clear()
        self.stop_count = 0
        self.pause_count = 0
        self.resume_count = 0


class MockPhotoSurface:
    """Mock photo surface: photos sit at fixed NDC points and are picked by proximity."""

    def __init__(self, photos: Optional[Dict[str, Tuple[float, float]]] = None, pick_radius: float = 0.2):
        self.photos = dict(photos or {})
        self.pick_radius = pick_radius
        self.highlighted: List[str] = []
        self.reset_calls: List[str] = []
        self.shown: List[str] = []

    def pick(self, ndc_x: float, ndc_y: float) -> Optional[str]:
        best_id, best_dist = None, self.pick_radius
        for photo_id, (px, py) in self.photos.items():
            dist = ((px - ndc_x) ** 2 + (py - ndc_y) ** 2) ** 0.5
            if dist <= best_dist:
                best_id, best_dist = photo_id, dist
        return best_id

    def highlight(self, photo_id: str) -> None:
        self.highlighted.append(photo_id)
        print(f"[MockPhotoSurface] Highlight: {photo_id}")

    def reset(self, photo_id: str) -> None:
        self.reset_calls.append(photo_id)

    def show(self, photo_id: str) -> None:
        self.shown.append(photo_id)
        print(f"[MockPhotoSurface] Show: {photo_id}")


class ReplayTrackingSource:
    """
    Tracking source that replays recorded frames.

    Each call to ``advance`` moves to the next frame, mimicking the tracker
    overwriting its latest-result slot; polling without advancing returns
    the same frame again.
    """

    def __init__(self, frames: Iterable[List[HandLandmarks]] = ()):
        self._pending = deque(frames)
        self._latest: List[HandLandmarks] = []

    def push(self, hands: List[HandLandmarks]) -> None:
        self._pending.append(hands)

    def advance(self) -> bool:
        if not self._pending:
            return False
        self._latest = self._pending.popleft()
        return True

    def latest_hands(self) -> List[HandLandmarks]:
        return self._latest
