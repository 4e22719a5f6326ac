"""Rendering subpackage.

Turns a :class:`grid_walk.state.State` snapshot plus an elapsed time into a
Pillow image: every grid cell as a filled circle in its cell color, then both
tokens as opaque circles at their eased positions. See
:mod:`grid_walk.renderer.canvas`.
"""
