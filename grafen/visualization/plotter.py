import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from typing import Optional

from ..core.points import Points
from ..shapes.base import AbstractComponent

component_colors = {
    0: '#2E86AB', 1: '#A23B72', 2: '#3CAB70', 3: '#F5B700', 4: '#0F8B8D',
    5: '#8963BA', 6: '#EC9A29', 7: '#2C5784', 8: '#9B4F0F', 9: '#1B998B'
}


def plot_points(points: Points, ax=None, title: str = "Lattice points",
                color: str = '#2E86AB', show_box: bool = True):
    """Scatter a planar point set in the xy plane with its box outline."""
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    xyz = points.to_array()

    ax.set_title(title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.grid(True, linestyle=':', alpha=0.3)
    ax.set_aspect('equal')
    ax.scatter(xyz[:, 0], xyz[:, 1], color=color, s=12, zorder=2)

    if show_box:
        box = Rectangle((0.0, 0.0), points.box_size.x, points.box_size.y,
                        fill=False, edgecolor='gray', linestyle='--', zorder=1)
        ax.add_patch(box)

    return ax


def plot_component(component: AbstractComponent, ax=None, index: int = 0,
                   title: Optional[str] = None):
    """
    Scatter the absolute coordinates of a component in 3D.

    Positions are origin + coordinate, i.e. the residue base positions.
    """
    if ax is None:
        fig = plt.figure(figsize=(7, 6))
        ax = fig.add_subplot(111, projection='3d')

    origin = component.origin.to_numpy()
    xyz = np.array([c.to_tuple() for c in component.coords], dtype=float).reshape(-1, 3) + origin

    color = component_colors[index % len(component_colors)]

    ax.set_title(title if title is not None else component.describe_short())
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.scatter(xyz[:, 0], xyz[:, 1], xyz[:, 2], color=color, s=8,
               label=component.describe_short())

    return ax
