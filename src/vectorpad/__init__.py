"""Vectorpad - Path geometry engine for an interactive 2D vector-drawing surface.

Vectorpad models paths as ordered move/line/quadratic/cubic/close control
points and provides the geometry an editor needs on top of them: tight
bounding boxes, nearest-point queries, in-place curve subdivision, point
selection masks, and lossless SVG path data import/export.

Example:
    $ vectorpad info drawing.svg

This prints every path in drawing.svg with its point count and bounding box.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
