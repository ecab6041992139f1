"""
Photo selection while the tree is dispersed.
"""
import logging
from typing import Optional

from .types import GestureSnapshot, PhotoSurfaceProto

logger = logging.getLogger(__name__)


class PhotoInteraction:
    """Pinch (or click) to highlight a photo, pinch it again to enlarge it."""

    def __init__(self, surface: PhotoSurfaceProto):
        self.surface = surface
        self.selected: Optional[str] = None
        self.is_dispersed = False

    def set_dispersed(self, dispersed: bool) -> None:
        self.is_dispersed = dispersed

    def update(self, snapshot: Optional[GestureSnapshot]) -> Optional[str]:
        """
        Pick the photo at the screen centre when a single hand pinches.

        Returns:
            The id of the photo picked this frame, if any
        """
        if snapshot is None or not self.is_dispersed:
            return None
        if snapshot.hand_count != 1 or not snapshot.hands[0].is_pinching:
            return None
        return self._pick(0.0, 0.0)

    def handle_click(self, x_px: float, y_px: float, width: int, height: int) -> Optional[str]:
        """Mouse fallback: select the photo under a click in window pixels."""
        if not self.is_dispersed:
            return None
        ndc_x = (x_px / width) * 2 - 1
        ndc_y = -(y_px / height) * 2 + 1
        return self._pick(ndc_x, ndc_y)

    def _pick(self, ndc_x: float, ndc_y: float) -> Optional[str]:
        photo_id = self.surface.pick(ndc_x, ndc_y)
        if photo_id is not None:
            self.select(photo_id)
        return photo_id

    def select(self, photo_id: str) -> None:
        if self.selected == photo_id:
            logger.info(f"Showing photo {photo_id}")
            self.surface.show(photo_id)
            return

        if self.selected is not None:
            self.surface.reset(self.selected)
        self.selected = photo_id
        self.surface.highlight(photo_id)
