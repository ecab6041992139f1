"""
Gesture classification: turns raw per-frame landmarks into a GestureSnapshot.
"""
import logging
from typing import List, Optional, Sequence

from .config import ClassifierConfig
from .landmarks import (
    THUMB_TIP,
    INDEX_TIP,
    distance,
    fingers_up,
    is_pinching,
    others_down,
    palm_center,
    to_point,
)
from .types import CooldownState, GestureSnapshot, HandFeatures, HandLandmarks

logger = logging.getLogger(__name__)

INDEX_ONLY = (False, True, False, False, False)


def extract_features(landmarks: HandLandmarks, pinch_threshold: float) -> HandFeatures:
    """
    Derive the stateless per-hand features.

    Args:
        landmarks: List of 21 hand landmarks
        pinch_threshold: Thumb-index distance below which the hand pinches

    Returns:
        HandFeatures for this hand
    """
    return HandFeatures(
        center=palm_center(landmarks),
        is_pinching=is_pinching(landmarks, pinch_threshold),
        fingers_up=fingers_up(landmarks),
        landmarks=tuple(to_point(p) for p in landmarks),
    )


class GestureClassifier:
    """
    Converts 0, 1 or 2 hands of landmarks into a GestureSnapshot.

    Owns the cooldown timestamps for the composite gestures:
    - Heart: both index tips and both thumb tips touching, other fingers curled
    - Music switch: an open hand beside a second hand, or a lone index finger
    """

    def __init__(self, cfg: ClassifierConfig, cooldowns: Optional[CooldownState] = None):
        """Initialize classifier with configuration."""
        self.cfg = cfg
        self.cooldowns = cooldowns if cooldowns is not None else CooldownState()

    def classify(self, hands: Sequence[HandLandmarks], now_ms: float) -> Optional[GestureSnapshot]:
        """
        Classify one frame of tracking output.

        Args:
            hands: Landmark lists for each detected hand (at most two are used)
            now_ms: Monotonic timestamp in milliseconds

        Returns:
            GestureSnapshot, or None when no hand is present
        """
        if not hands:
            return None

        features = tuple(
            extract_features(landmarks, self.cfg.pinch_threshold)
            for landmarks in list(hands)[:2]
        )

        if len(features) == 2:
            first, second = features
            inter_hand_distance = distance(first.center, second.center)
            heart = self._check_heart(first, second, now_ms)
            music = self._check_two_hand_music_switch(features, now_ms)
            return GestureSnapshot(
                hand_count=2,
                hands=features,
                inter_hand_distance=inter_hand_distance,
                is_heart_gesture=heart,
                is_music_switch=music,
            )

        music = self._check_index_only_music_switch(features[0], now_ms)
        return GestureSnapshot(hand_count=1, hands=features, is_music_switch=music)

    def _check_heart(self, first: HandFeatures, second: HandFeatures, now_ms: float) -> bool:
        """Both hands form a heart: tips together, remaining fingers down."""
        if self.cooldowns.since_heart(now_ms) <= self.cfg.heart_cooldown_ms:
            return False

        dist_index = distance(first.landmarks[INDEX_TIP], second.landmarks[INDEX_TIP])
        dist_thumb = distance(first.landmarks[THUMB_TIP], second.landmarks[THUMB_TIP])
        threshold = self.cfg.heart_tip_threshold
        if dist_index >= threshold or dist_thumb >= threshold:
            return False

        if not (others_down(first.fingers_up) and others_down(second.fingers_up)):
            return False

        self.cooldowns.last_heart_ms = now_ms
        logger.info("Heart gesture detected")
        return True

    def _check_two_hand_music_switch(self, features: Sequence[HandFeatures], now_ms: float) -> bool:
        """At least one of the two hands is fully open."""
        if not any(all(hand.fingers_up) for hand in features):
            return False
        return self._fire_music_switch(now_ms)

    def _check_index_only_music_switch(self, hand: HandFeatures, now_ms: float) -> bool:
        """A single hand points with the index finger alone."""
        if hand.fingers_up != INDEX_ONLY:
            return False
        return self._fire_music_switch(now_ms)

    def _fire_music_switch(self, now_ms: float) -> bool:
        # Shared cooldown across the one-hand and two-hand paths
        if self.cooldowns.since_music_switch(now_ms) <= self.cfg.music_switch_cooldown_ms:
            return False
        self.cooldowns.last_music_switch_ms = now_ms
        logger.info("Music switch gesture detected")
        return True


def classify(
    hands: Sequence[HandLandmarks],
    cooldowns: CooldownState,
    now_ms: float,
    cfg: Optional[ClassifierConfig] = None,
) -> Optional[GestureSnapshot]:
    """Functional wrapper around GestureClassifier for callers that hold their own cooldowns."""
    return GestureClassifier(cfg or ClassifierConfig(), cooldowns).classify(hands, now_ms)


def hand_centers(snapshot: Optional[GestureSnapshot]) -> List[tuple]:
    """Return the (x, y) palm centres of a snapshot, for overlays."""
    if snapshot is None:
        return []
    return [(hand.center.x, hand.center.y) for hand in snapshot.hands]
