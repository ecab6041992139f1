"""
Hand landmark tracking using MediaPipe.
"""
import logging
from typing import List, Optional, Sequence, Tuple

import cv2
import mediapipe as mp
import numpy as np

from .config import MediaPipeConfig
from .types import Point3D

logger = logging.getLogger(__name__)


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands. Implements HandTrackingSource."""

    def __init__(self, cfg: MediaPipeConfig):
        """
        Initialize the hands tracker.

        Args:
            cfg: MediaPipe settings (hand count, model complexity, confidences)
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=cfg.max_num_hands,
            model_complexity=cfg.model_complexity,
            min_detection_confidence=cfg.min_detection_confidence,
            min_tracking_confidence=cfg.min_tracking_confidence
        )
        self._latest: List[List[Point3D]] = []
        logger.info(f"MediaPipe Hands ready (max_num_hands={cfg.max_num_hands})")

    def process(self, frame_bgr: np.ndarray) -> List[List[Point3D]]:
        """
        Process a frame and store the detected hands as the latest result.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            One list of 21 (x, y, z) points per detected hand
        """
        # Convert BGR to RGB for MediaPipe
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        hands = []
        if results.multi_hand_landmarks:
            for hand_landmarks in results.multi_hand_landmarks:
                hands.append([Point3D(lm.x, lm.y, lm.z) for lm in hand_landmarks.landmark])

        self._latest = hands
        return hands

    def latest_hands(self) -> List[List[Point3D]]:
        return self._latest

    def close(self) -> None:
        self.hands.close()


def draw_landmarks(frame: np.ndarray, hands: Sequence[Sequence[Point3D]],
                   centers: Optional[Sequence[Tuple[float, float]]] = None) -> np.ndarray:
    """
    Draw hand landmarks and palm centres on the frame.

    Args:
        frame: Input frame
        hands: Landmark lists in [0..1] range
        centers: Optional palm centres in [0..1] range

    Returns:
        Frame with landmarks drawn
    """
    height, width = frame.shape[:2]

    for landmarks in hands:
        for i, point in enumerate(landmarks):
            px = int(point[0] * width)
            py = int(point[1] * height)
            cv2.circle(frame, (px, py), 3, (0, 255, 0), -1)
            cv2.putText(frame, str(i), (px + 5, py - 5), cv2.FONT_HERSHEY_SIMPLEX, 0.3, (255, 255, 255), 1)

    for cx, cy in centers or ():
        cv2.circle(frame, (int(cx * width), int(cy * height)), 8, (0, 0, 255), -1)

    return frame
