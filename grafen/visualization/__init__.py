"""
Plotting tools for point sets and components.
"""

from .plotter import plot_component, plot_points

__all__ = ['plot_component', 'plot_points']
