"""
Test cases for photo selection.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gesture_tree.controller_mock import MockPhotoSurface
from gesture_tree.photos import PhotoInteraction
from gesture_tree.types import GestureSnapshot, HandFeatures, PhotoSurfaceProto, Point3D


def one_hand(pinching):
    hand = HandFeatures(center=Point3D(0.5, 0.5, 0.0), is_pinching=pinching, fingers_up=(False,) * 5)
    return GestureSnapshot(hand_count=1, hands=(hand,))


class TestPhotoInteraction(unittest.TestCase):
    """Test pinch and click selection."""

    def setUp(self):
        """Photos at the centre and the top-left corner."""
        self.surface = MockPhotoSurface({"centre": (0.0, 0.0), "corner": (-0.9, 0.9)})
        self.photos = PhotoInteraction(self.surface)
        self.photos.set_dispersed(True)

    def test_mock_implements_protocol(self):
        self.assertIsInstance(self.surface, PhotoSurfaceProto)

    def test_inactive_when_attached(self):
        """Nothing is picked while the tree is attached."""
        self.photos.set_dispersed(False)
        self.assertIsNone(self.photos.update(one_hand(True)))
        self.assertEqual(self.surface.highlighted, [])

    def test_pinch_selects_centre(self):
        """A pinch picks the photo at the screen centre."""
        self.assertEqual(self.photos.update(one_hand(True)), "centre")
        self.assertEqual(self.surface.highlighted, ["centre"])

    def test_open_hand_does_not_select(self):
        self.assertIsNone(self.photos.update(one_hand(False)))

    def test_second_pick_shows_photo(self):
        """Picking the selected photo again enlarges it."""
        self.photos.update(one_hand(True))
        self.photos.update(one_hand(True))
        self.assertEqual(self.surface.shown, ["centre"])

    def test_click_switches_selection(self):
        """Clicking another photo resets the previous highlight."""
        self.photos.update(one_hand(True))
        self.assertEqual(self.photos.handle_click(32, 24, 640, 480), "corner")
        self.assertEqual(self.surface.reset_calls, ["centre"])
        self.assertEqual(self.photos.selected, "corner")


if __name__ == '__main__':
    unittest.main()
