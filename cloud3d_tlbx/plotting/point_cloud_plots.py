"""Point cloud renderers (interactive plotly and static matplotlib)."""

import matplotlib.pyplot as plt
import plotly.graph_objects as go
from matplotlib.figure import Figure

from cloud3d_tlbx.analysis.axis_selection import AXES
from cloud3d_tlbx.analysis.point_cloud import PointCloud
from cloud3d_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig

from .camera import CameraControls, orbit_camera_eyes


def _marker_pixels(cloud: PointCloud, config: PlottingConfig) -> float:
    """Marker diameter on screen derived from the point size in scene units."""
    return max(2.0, cloud.point_size * config.marker_pixels_per_unit)


def _hover_text(cloud: PointCloud) -> list[str]:
    return [
        "<br>".join([f"row: {i}", *(f"{col}: {cell}" for col, cell in record.items())])
        for i, record in enumerate(cloud.records)
    ]


def _scene_axis(cloud: PointCloud, axis: str, config: PlottingConfig) -> dict:
    half = cloud.scale / 2
    layout = dict(
        title=cloud.axes[axis].label,
        range=[-half * 1.05, half * 1.05],
        backgroundcolor=config.scene_background,
        gridcolor=config.grid_color,
        showbackground=True,
        zeroline=True,
    )
    positions, labels = cloud.tick_positions(axis)
    if labels:
        layout.update(tickmode="array", tickvals=positions, ticktext=labels)
    return layout


def plot_point_cloud_plotly(
    cloud: PointCloud,
    *,
    controls: CameraControls | None = None,
    config: PlottingConfig = DEFAULT_PLOT_CFG,
    n_frames: int = 72,
    height: int = 700,
    width: int = 900,
) -> go.Figure:
    """Interactive 3-D scatter of a point cloud.

    Implemented with Plotly's [:class:`plotly.graph_objects.Scatter3d`](https://plotly.com/python/3d-scatter-plots/).
    Every point is coloured by its row-order hue and shows its original record on hover. Categorical
    axes are labelled with their category values at the normalized code positions.

    When ``controls.auto_rotate`` is on, ``n_frames`` camera frames orbiting the origin and a play
    button are attached; one orbit lasts ``controls.orbit_seconds``.

    Args:
        cloud: Point cloud built by :func:`~cloud3d_tlbx.analysis.point_cloud.build_point_cloud`
        controls: Camera controls (defaults to a static camera)
        config: Plotting style
        n_frames: Number of orbit frames when auto-rotating
        height: Figure height in pixels
        width: Figure width in pixels

    Returns:
        Plotly figure
    """
    controls = controls or CameraControls()
    points = cloud.points
    eye = dict(x=config.camera_distance, y=config.camera_distance, z=config.camera_distance)

    fig = go.Figure(
        go.Scatter3d(
            x=points["x"],
            y=points["y"],
            z=points["z"],
            mode="markers",
            marker=dict(
                size=_marker_pixels(cloud, config),
                color=points["color"].tolist(),
                opacity=config.marker_opacity,
            ),
            text=_hover_text(cloud),
            hovertemplate="%{text}<extra></extra>",
            name="Points",
        ),
    )
    fig.update_layout(
        title=" | ".join(cloud.legend()),
        width=width,
        height=height,
        template=config.plotly_template,
        paper_bgcolor=config.scene_background,
        scene=dict(
            **{f"{axis}axis": _scene_axis(cloud, axis, config) for axis in AXES},
            aspectmode="cube",
            camera=dict(eye=eye, center=dict(x=0, y=0, z=0)),
        ),
        showlegend=False,
    )

    if controls.auto_rotate:
        eyes = orbit_camera_eyes(controls, n_frames=n_frames, distance=config.camera_distance)
        frame_ms = controls.orbit_seconds * 1000 / n_frames
        fig.frames = [go.Frame(layout=dict(scene=dict(camera=dict(eye=e))), name=str(i)) for i, e in enumerate(eyes)]
        fig.update_layout(
            updatemenus=[
                dict(
                    type="buttons",
                    showactive=False,
                    buttons=[
                        dict(
                            label="Rotate",
                            method="animate",
                            args=[
                                None,
                                dict(
                                    frame=dict(duration=frame_ms, redraw=True),
                                    transition=dict(duration=0),
                                    fromcurrent=True,
                                    mode="immediate",
                                ),
                            ],
                        ),
                        dict(
                            label="Stop",
                            method="animate",
                            args=[[None], dict(frame=dict(duration=0, redraw=False), mode="immediate")],
                        ),
                    ],
                ),
            ],
        )
    return fig


def plot_point_cloud(
    cloud: PointCloud,
    figsize: tuple[int, int] = (9, 9),
    config: PlottingConfig = DEFAULT_PLOT_CFG,
    elev: float = 35.0,
    azim: float = 45.0,
) -> Figure:
    """Static 3-D scatter of a point cloud using matplotlib's ``3d`` projection.

    Args:
        cloud: Point cloud to draw
        figsize: Figure size (width, height)
        config: Plotting style
        elev: Camera elevation in degrees
        azim: Camera azimuth in degrees

    Returns:
        matplotlib Figure object
    """
    points = cloud.points
    half = cloud.scale / 2

    with config.apply():
        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(projection="3d")
        ax.scatter(
            points["x"],
            points["y"],
            points["z"],
            c=points["color"].tolist(),
            s=_marker_pixels(cloud, config) ** 2,
            alpha=config.marker_opacity,
            depthshade=True,
        )
        setters = {
            "x": (ax.set_xlabel, ax.set_xlim, ax.set_xticks),
            "y": (ax.set_ylabel, ax.set_ylim, ax.set_yticks),
            "z": (ax.set_zlabel, ax.set_zlim, ax.set_zticks),
        }
        for axis in AXES:
            set_label, set_lim, set_ticks = setters[axis]
            set_label(cloud.axes[axis].label)
            set_lim(-half, half)
            positions, labels = cloud.tick_positions(axis)
            if labels:
                set_ticks(positions, labels=labels)
        ax.set_facecolor(config.scene_background)
        ax.view_init(elev=elev, azim=azim)
        ax.set_title(f"{cloud.n_points} points")
        fig.tight_layout()
    return fig
