"""Tick systems.

Each system is a pure function over :class:`grid_walk.state.State`; the
reducer in :mod:`grid_walk.step` runs them in order once per tick.
"""
