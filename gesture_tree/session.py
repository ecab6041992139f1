"""
Per-frame orchestration of tracking, classification, interaction and display.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .config import Cfg
from .display import DisplayModeController
from .gestures import GestureClassifier
from .interaction import InteractionLogic
from .music import MusicController
from .photos import PhotoInteraction
from .types import DisplayMode, GestureSnapshot, HandTrackingSource, ModeSignal, TargetTransform

logger = logging.getLogger(__name__)


@dataclass
class FrameResult:
    """What the renderer needs after one frame."""
    snapshot: Optional[GestureSnapshot]
    signal: Optional[ModeSignal]
    transform: TargetTransform
    mode: DisplayMode
    animation_progress: float
    text_toggled: bool = False
    music_switched: bool = False


class GestureTreeSession:
    """
    Drives one frame of the pipeline per ``step`` call.

    The tracking source is polled, never pushed: if it has not produced a
    new result since the last frame the same hands are classified again.
    """

    def __init__(
        self,
        cfg: Cfg,
        source: HandTrackingSource,
        display: DisplayModeController,
        music: Optional[MusicController] = None,
        photos: Optional[PhotoInteraction] = None,
        transform: Optional[TargetTransform] = None,
    ):
        """Wire the core components together."""
        self.cfg = cfg
        self.source = source
        self.display = display
        self.music = music
        self.photos = photos
        self.transform = transform if transform is not None else TargetTransform()
        self.classifier = GestureClassifier(cfg.classifier)
        self.interaction = InteractionLogic(self.transform, display, cfg.interaction)

    def step(self, now_ms: float) -> FrameResult:
        """
        Process one rendered frame.

        Args:
            now_ms: Monotonic timestamp in milliseconds

        Returns:
            FrameResult with the updated transform and display mode
        """
        snapshot = self.classifier.classify(self.source.latest_hands(), now_ms)
        signal = None
        text_toggled = False
        music_switched = False

        if snapshot is not None:
            signal = self.interaction.apply(snapshot)
            if self.photos is not None:
                self.photos.update(snapshot)
            if self.music is not None:
                music_switched = self.music.handle_gestures(snapshot, now_ms)
            if snapshot.is_heart_gesture:
                text_toggled = self.display.toggle_text()

        if self.photos is not None:
            self.photos.set_dispersed(self.display.is_dispersed())

        progress = self.display.update()

        return FrameResult(
            snapshot=snapshot,
            signal=signal,
            transform=self.transform,
            mode=self.display.current_mode(),
            animation_progress=progress,
            text_toggled=text_toggled,
            music_switched=music_switched,
        )

    def set_text(self, text: str) -> None:
        """Change the string spelled on the next TextMode entry."""
        self.display.set_text(text)
        logger.info(f"Text set to {self.display.custom_text!r}")
