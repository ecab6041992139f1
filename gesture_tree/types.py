"""
Type definitions for the gesture-driven particle tree.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Protocol, Sequence, Tuple, runtime_checkable


class Point3D(NamedTuple):
    """A landmark or derived point in normalized camera space."""
    x: float
    y: float
    z: float = 0.0


# 21 points, wrist first, in MediaPipe hand-skeleton order
HandLandmarks = Sequence[Sequence[float]]


@dataclass(frozen=True)
class HandFeatures:
    """Per-hand features derived from one frame of landmarks."""
    center: Point3D
    is_pinching: bool
    fingers_up: Tuple[bool, bool, bool, bool, bool]  # thumb, index, middle, ring, pinky
    landmarks: Tuple[Point3D, ...] = field(repr=False, default=())


@dataclass(frozen=True)
class GestureSnapshot:
    """Immutable summary of all hands detected in a single frame."""
    hand_count: int
    hands: Tuple[HandFeatures, ...]
    inter_hand_distance: Optional[float] = None  # two hands only
    is_heart_gesture: bool = False
    is_music_switch: bool = False


@dataclass
class CooldownState:
    """Timestamps (ms) of the last firing of each composite gesture, None if never fired."""
    last_heart_ms: Optional[float] = None
    last_music_switch_ms: Optional[float] = None

    def since_heart(self, now_ms: float) -> float:
        if self.last_heart_ms is None:
            return math.inf
        return now_ms - self.last_heart_ms

    def since_music_switch(self, now_ms: float) -> float:
        if self.last_music_switch_ms is None:
            return math.inf
        return now_ms - self.last_music_switch_ms


@dataclass
class TargetTransform:
    """Transform applied to the controlled object by the renderer."""
    yaw: float = 0.0
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0

    def reset(self) -> None:
        """Return to the identity transform."""
        self.yaw = 0.0
        self.x = 0.0
        self.y = 0.0
        self.scale = 1.0


class DisplayMode(Enum):
    """Layout the particle layers are animating toward."""
    ATTACHED = "attached"
    EXPLODED = "exploded"
    TEXT = "text"


class ModeSignal(Enum):
    """Discrete transition requested by the interaction logic."""
    EXPLODE = "explode"
    RESTORE = "restore"


@runtime_checkable
class HandTrackingSource(Protocol):
    """Anything that can be polled for the latest hand-tracking result."""

    def latest_hands(self) -> List[HandLandmarks]:
        """Return 0, 1 or 2 landmark lists from the most recent result."""
        ...


@runtime_checkable
class AudioPlayerProto(Protocol):
    """Abstract protocol for audio backends driven by the music controller."""

    def play(self, url: str, volume: float) -> bool:
        """Start looping the given track. Returns False if playback was refused."""
        ...

    def pause(self) -> None:
        ...

    def resume(self) -> None:
        ...

    def stop(self) -> None:
        ...

    def set_volume(self, volume: float) -> None:
        ...


@runtime_checkable
class PhotoSurfaceProto(Protocol):
    """Abstract protocol for the scene objects that display photos."""

    def pick(self, ndc_x: float, ndc_y: float) -> Optional[str]:
        """Return the id of the photo under the given screen point, if any."""
        ...

    def highlight(self, photo_id: str) -> None:
        ...

    def reset(self, photo_id: str) -> None:
        ...

    def show(self, photo_id: str) -> None:
        """Display the photo enlarged."""
        ...
