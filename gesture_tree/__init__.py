"""
Gesture Tree

Turns hand landmarks from a tracking model into gestures that rotate, pan and
zoom a particle tree, explode it, or rearrange its particles into text.
"""

__version__ = "0.1.0"

from .types import (
    Point3D,
    HandFeatures,
    GestureSnapshot,
    CooldownState,
    TargetTransform,
    DisplayMode,
    ModeSignal,
    HandTrackingSource,
    AudioPlayerProto,
    PhotoSurfaceProto,
)
from .config import load_config, Cfg
from .landmarks import palm_center, distance, is_pinching, fingers_up, is_index_only, is_open_hand
from .gestures import GestureClassifier, classify
from .interaction import InteractionLogic
from .display import DisplayModeController, ParticleLayer
from .tree import build_tree_layers
from .music import MusicController, Playlist
from .photos import PhotoInteraction
from .session import GestureTreeSession, FrameResult

__all__ = [
    "Point3D",
    "HandFeatures",
    "GestureSnapshot",
    "CooldownState",
    "TargetTransform",
    "DisplayMode",
    "ModeSignal",
    "HandTrackingSource",
    "AudioPlayerProto",
    "PhotoSurfaceProto",
    "load_config",
    "Cfg",
    "palm_center",
    "distance",
    "is_pinching",
    "fingers_up",
    "is_index_only",
    "is_open_hand",
    "GestureClassifier",
    "classify",
    "InteractionLogic",
    "DisplayModeController",
    "ParticleLayer",
    "build_tree_layers",
    "MusicController",
    "Playlist",
    "PhotoInteraction",
    "GestureTreeSession",
    "FrameResult",
]
