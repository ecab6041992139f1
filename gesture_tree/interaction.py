"""
Interaction state machine: consecutive gesture snapshots drive the tree transform
and request explode/restore transitions.
"""
import logging
from typing import Optional

from .config import InteractionConfig
from .display import DisplayModeController
from .types import DisplayMode, GestureSnapshot, ModeSignal, TargetTransform

logger = logging.getLogger(__name__)


class InteractionLogic:
    """
    Rotates, pans and zooms the target object from hand motion.

    One hand: pinch-drag translates, open-hand drag rotates (yaw).
    Two hands: rapid separation explodes (or restores once exploded),
    small distance changes scale, anything in between is ignored.
    """

    def __init__(
        self,
        transform: TargetTransform,
        display: Optional[DisplayModeController],
        cfg: InteractionConfig,
    ):
        """Initialize interaction logic for a target transform."""
        self.transform = transform
        self.display = display
        self.cfg = cfg
        self.last_snapshot: Optional[GestureSnapshot] = None
        self.is_moving = False

    def apply(self, snapshot: Optional[GestureSnapshot]) -> Optional[ModeSignal]:
        """
        Apply one frame of gesture input.

        Args:
            snapshot: Current frame's gesture snapshot (None if no hands)

        Returns:
            The mode signal sent to the display controller this frame, if any
        """
        if snapshot is None:
            return None

        signal = None
        previous = self.last_snapshot

        if previous is not None and previous.hand_count == snapshot.hand_count:
            if snapshot.hand_count == 1:
                self._apply_one_hand(previous, snapshot)
            elif snapshot.hand_count == 2:
                signal = self._apply_two_hands(previous, snapshot)

        # Snapshots are frozen, so the reference itself is the frame-local copy
        self.last_snapshot = snapshot
        return signal

    def _apply_one_hand(self, previous: GestureSnapshot, current: GestureSnapshot) -> None:
        hand = current.hands[0]
        last_hand = previous.hands[0]
        dx = hand.center.x - last_hand.center.x
        dy = hand.center.y - last_hand.center.y

        if hand.is_pinching:
            self.transform.x += dx * self.cfg.translation_sensitivity
            # Image y grows downward
            self.transform.y -= dy * self.cfg.translation_sensitivity
            self.is_moving = True
        else:
            self.transform.yaw += dx * self.cfg.rotation_sensitivity
            self.is_moving = False

    def _apply_two_hands(self, previous: GestureSnapshot, current: GestureSnapshot) -> Optional[ModeSignal]:
        prev_distance = previous.inter_hand_distance
        curr_distance = current.inter_hand_distance
        if prev_distance is None or curr_distance is None:
            return None

        delta = curr_distance - prev_distance

        if delta > self.cfg.explode_delta:
            return self._signal_separation()

        if abs(delta) < self.cfg.scale_band:
            self._apply_scale(prev_distance, curr_distance)

        return None

    def _signal_separation(self) -> Optional[ModeSignal]:
        if self.display is None:
            return None

        mode = self.display.current_mode()
        if mode == DisplayMode.ATTACHED:
            logger.info("Hands separated quickly, exploding")
            self.display.explode()
            return ModeSignal.EXPLODE
        if mode == DisplayMode.EXPLODED:
            logger.info("Large separation while exploded, restoring")
            self.display.restore()
            return ModeSignal.RESTORE
        return None

    def _apply_scale(self, prev_distance: float, curr_distance: float) -> None:
        if prev_distance <= 0:
            logger.debug("Skipping scale update: previous inter-hand distance is zero")
            return
        ratio = curr_distance / prev_distance
        new_scale = self.transform.scale * ratio
        self.transform.scale = max(self.cfg.min_scale, min(self.cfg.max_scale, new_scale))

    def reset(self) -> None:
        """Reset position, rotation and scale of the target."""
        self.transform.reset()
        self.is_moving = False
