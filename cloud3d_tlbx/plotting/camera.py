"""Camera controls of the 3-D view and their gesture-driven toggles.

A gesture classifier (hand-pose model plus finger-curl estimator) runs outside this package
and reports a label with a confidence score for every video frame. Only the camera reacts to
it: an open hand starts the orbit, a closed fist stops it. The mapping engine never sees
gestures.
"""

import math
from dataclasses import dataclass
from enum import StrEnum


class Gesture(StrEnum):
    """Gesture labels understood by the camera controls."""

    HAND_OPEN = "hand_open"
    """All five fingers straight."""
    HAND_CLOSED = "hand_closed"
    """All five fingers curled (fist)."""


# Gesture estimator scores range from 0 to 10; weaker detections are ignored.
DEFAULT_MIN_GESTURE_SCORE = 5.0
OPEN_HAND_ROTATE_SPEED = 2.0
# An auto-rotate speed of 1.0 orbits once per minute.
SECONDS_PER_ORBIT_AT_UNIT_SPEED = 60.0


@dataclass
class CameraControls:
    """Orbit camera settings consumed by the renderers.

    Attributes:
        auto_rotate: Whether the camera orbits the origin on its own.
        auto_rotate_speed: Orbit speed; 2.0 completes one orbit every 30 seconds.
        enable_damping: Smooth out manual camera moves.
        damping_factor: Inertia applied when damping is enabled.
        min_distance: Closest allowed zoom distance, in scene units.
        max_distance: Farthest allowed zoom distance, in scene units.
    """

    auto_rotate: bool = False
    auto_rotate_speed: float = OPEN_HAND_ROTATE_SPEED
    enable_damping: bool = True
    damping_factor: float = 0.05
    min_distance: float = 5.0
    max_distance: float = 50.0

    @property
    def orbit_seconds(self) -> float:
        """Duration of one full orbit at the current speed (infinite when the speed is 0)."""
        if self.auto_rotate_speed == 0:
            return math.inf
        return SECONDS_PER_ORBIT_AT_UNIT_SPEED / abs(self.auto_rotate_speed)


def apply_gesture(
    controls: CameraControls,
    label: str,
    score: float,
    min_score: float = DEFAULT_MIN_GESTURE_SCORE,
) -> Gesture | None:
    """Update ``controls`` from one classified gesture.

    Args:
        controls: Camera controls to update in place
        label: Gesture label reported by the classifier
        score: Classifier confidence; only scores strictly above ``min_score`` are acted upon
        min_score: Confidence threshold

    Returns:
        The recognized gesture, or None when the label is unknown or the score too low
    """
    if score <= min_score:
        return None
    try:
        gesture = Gesture(label)
    except ValueError:
        return None

    if gesture is Gesture.HAND_OPEN:
        controls.auto_rotate = True
        controls.auto_rotate_speed = OPEN_HAND_ROTATE_SPEED
    else:
        controls.auto_rotate = False
    return gesture


def stop_gesture_control(controls: CameraControls) -> None:
    """Switch gesture control off; the camera always stops orbiting."""
    controls.auto_rotate = False


def orbit_camera_eyes(
    controls: CameraControls,
    n_frames: int,
    distance: float,
) -> list[dict[str, float]]:
    """Camera eye positions for one full orbit around the vertical axis.

    The orbit starts at ``(distance, distance, distance)`` and turns counter-clockwise for a
    positive speed, clockwise for a negative one.

    Args:
        controls: Camera controls (only the sign of the speed matters here)
        n_frames: Number of positions on the orbit
        distance: Eye offset along each axis at the start of the orbit

    Returns:
        List of ``{"x", "y", "z"}`` eye positions
    """
    if n_frames < 1:
        raise ValueError(f"n_frames must be positive, got {n_frames}")
    radius = math.hypot(distance, distance)
    start = math.atan2(distance, distance)
    direction = 1.0 if controls.auto_rotate_speed >= 0 else -1.0
    return [
        {
            "x": radius * math.cos(start + direction * 2 * math.pi * i / n_frames),
            "y": radius * math.sin(start + direction * 2 * math.pi * i / n_frames),
            "z": distance,
        }
        for i in range(n_frames)
    ]


__all__ = [
    "DEFAULT_MIN_GESTURE_SCORE",
    "CameraControls",
    "Gesture",
    "apply_gesture",
    "orbit_camera_eyes",
    "stop_gesture_control",
]
