"""Renderers and camera controls for point clouds."""

from .camera import CameraControls, Gesture, apply_gesture, orbit_camera_eyes, stop_gesture_control
from .point_cloud_plots import plot_point_cloud, plot_point_cloud_plotly
from .profile_plots import plot_column_profiles


__all__ = [
    "CameraControls",
    "Gesture",
    "apply_gesture",
    "orbit_camera_eyes",
    "plot_column_profiles",
    "plot_point_cloud",
    "plot_point_cloud_plotly",
    "stop_gesture_control",
]
