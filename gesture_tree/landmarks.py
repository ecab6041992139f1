"""
Hand landmark geometry: palm centre, distances, pinch and finger states.
"""
import math
from typing import Sequence, Tuple

from .types import HandLandmarks, Point3D

WRIST = 0
THUMB_IP = 3
THUMB_TIP = 4
INDEX_PIP = 6
INDEX_TIP = 8
MIDDLE_MCP = 9
MIDDLE_PIP = 10
MIDDLE_TIP = 12
RING_PIP = 14
RING_TIP = 16
PINKY_PIP = 18
PINKY_TIP = 20

FINGER_TIPS = (INDEX_TIP, MIDDLE_TIP, RING_TIP, PINKY_TIP)
FINGER_PIPS = (INDEX_PIP, MIDDLE_PIP, RING_PIP, PINKY_PIP)

DEFAULT_PINCH_THRESHOLD = 0.05


def to_point(landmark: Sequence[float]) -> Point3D:
    """Coerce an (x, y[, z]) landmark into a Point3D."""
    if isinstance(landmark, Point3D):
        return landmark
    z = landmark[2] if len(landmark) > 2 else 0.0
    return Point3D(float(landmark[0]), float(landmark[1]), float(z))


def distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """
    Plain 3D Euclidean distance between two points.

    Args:
        p1: First point (x, y, z)
        p2: Second point (x, y, z)

    Returns:
        Distance in the same normalized units as the inputs
    """
    a = to_point(p1)
    b = to_point(p2)
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2)


def palm_center(landmarks: HandLandmarks) -> Point3D:
    """
    Calculate the centre of the palm.

    Args:
        landmarks: List of 21 hand landmarks

    Returns:
        Midpoint of the wrist (0) and the middle-finger base (9)
    """
    wrist = to_point(landmarks[WRIST])
    middle_mcp = to_point(landmarks[MIDDLE_MCP])
    return Point3D(
        (wrist.x + middle_mcp.x) / 2,
        (wrist.y + middle_mcp.y) / 2,
        (wrist.z + middle_mcp.z) / 2,
    )


def is_pinching(landmarks: HandLandmarks, threshold: float = DEFAULT_PINCH_THRESHOLD) -> bool:
    """
    Check whether the thumb tip and index tip are touching.

    Args:
        landmarks: List of 21 hand landmarks
        threshold: Strict upper bound on the tip distance

    Returns:
        True if the thumb-index distance is below the threshold
    """
    return distance(landmarks[THUMB_TIP], landmarks[INDEX_TIP]) < threshold


def fingers_up(landmarks: HandLandmarks) -> Tuple[bool, bool, bool, bool, bool]:
    """
    Classify each finger as extended or curled.

    Args:
        landmarks: List of 21 hand landmarks

    Returns:
        (thumb, index, middle, ring, pinky) booleans
    """
    # Thumb extends sideways: tip x beyond the IP joint x
    thumb = landmarks[THUMB_TIP][0] > landmarks[THUMB_IP][0]

    # Other fingers: tip above the PIP joint (smaller y in image space)
    others = tuple(
        landmarks[tip][1] < landmarks[pip][1]
        for tip, pip in zip(FINGER_TIPS, FINGER_PIPS)
    )
    return (thumb,) + others


def fingers_extended(landmarks: HandLandmarks) -> int:
    """
    Count the number of extended fingers.

    Args:
        landmarks: List of 21 hand landmarks

    Returns:
        Number of extended fingers (0-5)
    """
    return sum(fingers_up(landmarks))


def is_open_hand(landmarks: HandLandmarks) -> bool:
    """Check if all five fingers are extended."""
    return all(fingers_up(landmarks))


def is_index_only(landmarks: HandLandmarks) -> bool:
    """Check if only the index finger is extended."""
    return fingers_up(landmarks) == (False, True, False, False, False)


def others_down(fingers: Sequence[bool]) -> bool:
    """True when middle, ring and pinky are all curled."""
    return not (fingers[2] or fingers[3] or fingers[4])
