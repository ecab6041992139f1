"""
Test cases for gesture classification with synthetic hand poses.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from gesture_tree.gestures import GestureClassifier, classify, extract_features
from gesture_tree.types import CooldownState, GestureSnapshot
from gesture_tree.config import load_config
from synthetic_hands import make_hand, open_hand, fist, index_only, two_fists, heart_pair


class TestSingleHand(unittest.TestCase):
    """Test one-hand snapshots."""

    def setUp(self):
        """Set up test configuration."""
        self.cfg = load_config()
        self.classifier = GestureClassifier(self.cfg.classifier)
        self.t0 = 100_000.0

    def test_no_hands_returns_none(self):
        """No detected hands is 'no gesture', not an error."""
        self.assertIsNone(self.classifier.classify([], self.t0))

    def test_features(self):
        """Per-hand features are populated."""
        snapshot = self.classifier.classify([make_hand(cx=0.3, cy=0.6, pinch=True)], self.t0)

        self.assertIsInstance(snapshot, GestureSnapshot)
        self.assertEqual(snapshot.hand_count, 1)
        hand = snapshot.hands[0]
        self.assertAlmostEqual(hand.center.x, 0.3)
        self.assertAlmostEqual(hand.center.y, 0.6)
        self.assertTrue(hand.is_pinching)
        self.assertIsNone(snapshot.inter_hand_distance)
        self.assertFalse(snapshot.is_heart_gesture)

    def test_index_only_switches_music(self):
        """A lone pointing finger fires the music switch."""
        snapshot = self.classifier.classify([index_only()], self.t0)
        self.assertTrue(snapshot.is_music_switch)
        self.assertEqual(self.classifier.cooldowns.last_music_switch_ms, self.t0)

    def test_other_poses_do_not_switch_music(self):
        """Open hand and fist are not the single-hand music pattern."""
        self.assertFalse(self.classifier.classify([open_hand()], self.t0).is_music_switch)
        self.assertFalse(self.classifier.classify([fist()], self.t0).is_music_switch)

    def test_music_switch_cooldown(self):
        """Music switch cannot fire again within 2000 ms."""
        self.assertTrue(self.classifier.classify([index_only()], self.t0).is_music_switch)
        self.assertFalse(self.classifier.classify([index_only()], self.t0 + 1000).is_music_switch)
        self.assertFalse(self.classifier.classify([index_only()], self.t0 + 2000).is_music_switch)
        self.assertTrue(self.classifier.classify([index_only()], self.t0 + 2001).is_music_switch)


class TestTwoHands(unittest.TestCase):
    """Test two-hand composite gestures."""

    def setUp(self):
        """Set up test configuration."""
        self.cfg = load_config()
        self.classifier = GestureClassifier(self.cfg.classifier)
        self.t0 = 100_000.0

    def test_inter_hand_distance(self):
        """Distance is measured between palm centres."""
        snapshot = self.classifier.classify(two_fists(0.3), self.t0)
        self.assertEqual(snapshot.hand_count, 2)
        self.assertAlmostEqual(snapshot.inter_hand_distance, 0.3)
        self.assertFalse(snapshot.is_heart_gesture)
        self.assertFalse(snapshot.is_music_switch)

    def test_extra_hands_ignored(self):
        """Only the first two hands are classified."""
        hands = two_fists(0.3) + [fist()]
        self.assertEqual(self.classifier.classify(hands, self.t0).hand_count, 2)

    def test_heart_gesture(self):
        """Touching index and thumb tips with other fingers curled is a heart."""
        snapshot = self.classifier.classify(heart_pair(), self.t0)
        self.assertTrue(snapshot.is_heart_gesture)
        self.assertEqual(self.classifier.cooldowns.last_heart_ms, self.t0)

    def test_heart_requires_curled_fingers(self):
        """Extended middle fingers break the heart."""
        left, right = heart_pair()
        open_left = make_hand(cx=0.4)
        open_left[4], open_left[8] = left[4], left[8]
        snapshot = self.classifier.classify([open_left, right], self.t0)
        self.assertFalse(snapshot.is_heart_gesture)

    def test_heart_requires_touching_tips(self):
        """Hands far apart are not a heart even with the right finger pattern."""
        hands = [index_only(cx=0.2), index_only(cx=0.8)]
        self.assertFalse(self.classifier.classify(hands, self.t0).is_heart_gesture)

    def test_heart_refractory_window(self):
        """Heart fires once per 1000 ms however long the pose is held."""
        results = [
            self.classifier.classify(heart_pair(), self.t0 + dt).is_heart_gesture
            for dt in range(0, 1001, 100)
        ]
        self.assertEqual(results.count(True), 1)
        self.assertTrue(self.classifier.classify(heart_pair(), self.t0 + 1001).is_heart_gesture)

    def test_open_hand_switches_music(self):
        """An open hand next to another hand fires the music switch."""
        snapshot = self.classifier.classify([open_hand(cx=0.3), fist(cx=0.7)], self.t0)
        self.assertTrue(snapshot.is_music_switch)

    def test_music_cooldown_shared_between_paths(self):
        """A one-hand switch blocks a two-hand switch inside the window."""
        self.assertTrue(self.classifier.classify([index_only()], self.t0).is_music_switch)
        snapshot = self.classifier.classify([open_hand(cx=0.3), fist(cx=0.7)], self.t0 + 500)
        self.assertFalse(snapshot.is_music_switch)


class TestFunctionalClassify(unittest.TestCase):
    """Test the functional entry point."""

    def test_caller_owned_cooldowns(self):
        """classify() updates the cooldown state it is given."""
        cooldowns = CooldownState()
        snapshot = classify([index_only()], cooldowns, 5000.0)
        self.assertTrue(snapshot.is_music_switch)
        self.assertEqual(cooldowns.last_music_switch_ms, 5000.0)
        self.assertFalse(classify([index_only()], cooldowns, 6000.0).is_music_switch)

    def test_snapshot_is_immutable(self):
        """Snapshots cannot be mutated after construction."""
        snapshot = classify([fist()], CooldownState(), 0.0)
        with self.assertRaises(AttributeError):
            snapshot.hand_count = 2

    def test_extract_features_keeps_landmarks(self):
        """Features carry the 21 points used for cross-hand checks."""
        features = extract_features(fist(), 0.05)
        self.assertEqual(len(features.landmarks), 21)


if __name__ == '__main__':
    unittest.main()
