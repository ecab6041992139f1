"""
Test cases for hand landmark geometry.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from gesture_tree.landmarks import (
    distance,
    palm_center,
    is_pinching,
    fingers_up,
    fingers_extended,
    is_open_hand,
    is_index_only,
    to_point,
)
from gesture_tree.types import Point3D
from synthetic_hands import make_hand, open_hand, fist, index_only


class TestDistance(unittest.TestCase):
    """Test Euclidean distance."""

    def test_three_dimensional(self):
        """Distance uses all three axes with no weighting."""
        self.assertAlmostEqual(distance((0, 0, 0), (1, 2, 2)), 3.0)

    def test_two_dimensional_points(self):
        """Points without z are treated as z = 0."""
        self.assertAlmostEqual(distance((0, 0), (3, 4)), 5.0)
        self.assertEqual(to_point((0.1, 0.2)), Point3D(0.1, 0.2, 0.0))


class TestPalmCenter(unittest.TestCase):
    """Test palm centre estimation."""

    def test_midpoint_of_wrist_and_middle_base(self):
        """Centre averages landmark 0 and landmark 9 on every axis."""
        landmarks = [(0.0, 0.0, 0.0)] * 21
        landmarks[0] = (0.2, 0.8, -0.1)
        landmarks[9] = (0.4, 0.4, 0.3)

        center = palm_center(landmarks)

        self.assertAlmostEqual(center.x, 0.3)
        self.assertAlmostEqual(center.y, 0.6)
        self.assertAlmostEqual(center.z, 0.1)

    def test_synthetic_hand_center(self):
        """Synthetic hands are centred where requested."""
        center = palm_center(open_hand(cx=0.3, cy=0.7))
        self.assertAlmostEqual(center.x, 0.3)
        self.assertAlmostEqual(center.y, 0.7)


class TestPinch(unittest.TestCase):
    """Test pinch detection."""

    def _hand_with_tip_gap(self, gap):
        landmarks = [(0.0, 0.0, 0.0)] * 21
        landmarks[4] = (gap, 0.0, 0.0)
        return landmarks

    def test_close_tips_pinch(self):
        """Tips closer than 0.05 are a pinch."""
        self.assertTrue(is_pinching(self._hand_with_tip_gap(0.049)))

    def test_boundary_is_not_pinch(self):
        """Exactly 0.05 apart is not a pinch (strict comparison)."""
        self.assertFalse(is_pinching(self._hand_with_tip_gap(0.05)))

    def test_open_hand_not_pinching(self):
        """Spread fingers are not a pinch."""
        self.assertFalse(is_pinching(open_hand()))
        self.assertTrue(is_pinching(make_hand(pinch=True)))

    def test_custom_threshold(self):
        """Threshold is configurable."""
        self.assertTrue(is_pinching(self._hand_with_tip_gap(0.07), threshold=0.08))


class TestFingersUp(unittest.TestCase):
    """Test per-finger extension classification."""

    def test_open_hand_all_up(self):
        """A fully open hand reports every finger up."""
        self.assertEqual(fingers_up(open_hand()), (True, True, True, True, True))
        self.assertTrue(is_open_hand(open_hand()))
        self.assertEqual(fingers_extended(open_hand()), 5)

    def test_fist_all_down(self):
        """A closed fist reports every finger down."""
        self.assertEqual(fingers_up(fist()), (False, False, False, False, False))
        self.assertEqual(fingers_extended(fist()), 0)

    def test_index_only(self):
        """Pointing hand has only the index finger up."""
        self.assertEqual(fingers_up(index_only()), (False, True, False, False, False))
        self.assertTrue(is_index_only(index_only()))
        self.assertFalse(is_index_only(open_hand()))

    def test_thumb_uses_x_axis(self):
        """Thumb state depends only on tip x versus joint x."""
        landmarks = list(fist())
        landmarks[4] = (landmarks[3][0] + 0.01, 0.0, 0.0)
        self.assertTrue(fingers_up(landmarks)[0])


if __name__ == '__main__':
    unittest.main()
