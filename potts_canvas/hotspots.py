#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Hotspot Motion
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         hotspots.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Hotspots are points of locally raised temperature. They live in the
lattice's physical coordinate space and are held as an (n, 2) float array.

Motion modes:
- orbital: sources evenly spaced on a circle, all rotating together
- outline: sources resampled from externally supplied path segments,
  replaced wholesale at the start of each hold window
- static: sources placed by hand (e.g. painted in the app)
- none: no sources
"""

import logging
import math
import numpy as np
from typing import Callable, Optional, Sequence, Tuple

from .config import HotspotConfig, MotionMode, OrbitConfig, OutlineConfig


logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Segment = Tuple[Point, Point]

# Maps a frame index to the segments in force for that hold window
OutlineProvider = Callable[[int], Sequence[Segment]]


def empty_hotspots() -> np.ndarray:
    return np.zeros((0, 2), dtype=np.float64)


def resample_segment(start: Point, end: Point, dr: float) -> np.ndarray:
    """
    Evenly spaced points along one segment.

    With n = floor(length / dr), returns start + k * (end - start) / n for
    k = 0 .. n-1 followed by the exact end point. Segments shorter than dr
    (including zero-length ones) yield only the end point.

    Args:
        start: (x, y) start point
        end: (x, y) end point
        dr: Target spacing along the segment

    Returns:
        (n + 1, 2) array of points
    """
    x0, y0 = float(start[0]), float(start[1])
    x1, y1 = float(end[0]), float(end[1])
    delta_x = x1 - x0
    delta_y = y1 - y0

    length = math.sqrt(delta_x * delta_x + delta_y * delta_y)
    n_points = int(math.floor(length / dr))

    points = np.empty((n_points + 1, 2), dtype=np.float64)
    if n_points > 0:
        k = np.arange(n_points, dtype=np.float64) / n_points
        points[:n_points, 0] = x0 + k * delta_x
        points[:n_points, 1] = y0 + k * delta_y
    points[n_points] = (x1, y1)

    return points


def resample_segments(segments: Sequence[Segment], dr: float) -> np.ndarray:
    """Concatenate resample_segment over an ordered sequence of segments."""
    if len(segments) == 0:
        return empty_hotspots()
    return np.concatenate([resample_segment(start, end, dr) for start, end in segments])


class OrbitalMotion:
    """
    Sources at equal angular spacing on a circle.

    Every advance() rotates all phases by 2π / steps_per_revolution.
    """

    def __init__(self, config: OrbitConfig, center: Point):
        self.n_sources = config.n_sources
        self.path_radius = config.path_radius
        self.center = center
        self.delta_theta = 2.0 * np.pi / config.steps_per_revolution

        self.phases = 2.0 * np.pi * np.arange(self.n_sources, dtype=np.float64) / max(self.n_sources, 1)
        self.positions = self._positions_from_phases()

    def _positions_from_phases(self) -> np.ndarray:
        positions = np.empty((self.n_sources, 2), dtype=np.float64)
        positions[:, 0] = self.path_radius * np.cos(self.phases) + self.center[0]
        positions[:, 1] = self.path_radius * np.sin(self.phases) + self.center[1]
        return positions

    def advance(self) -> np.ndarray:
        self.phases = self.phases + self.delta_theta
        self.positions = self._positions_from_phases()
        return self.positions


class OutlineTracing:
    """
    Sources resampled from outline segments, one outline per hold window.

    Steps before equilibration_steps have no sources. After that, step s
    belongs to window (s - equilibration_steps) // hold_steps; the provider
    is queried once at the first step of each window.
    """

    def __init__(self, config: OutlineConfig, provider: OutlineProvider):
        self.hold_steps = config.hold_steps
        self.dr = config.dr
        self.equilibration_steps = config.equilibration_steps
        self.provider = provider

        self.window: Optional[int] = None
        self.positions = empty_hotspots()

    def window_for_step(self, step: int) -> Optional[int]:
        if step < self.equilibration_steps:
            return None
        return (step - self.equilibration_steps) // self.hold_steps

    def advance(self, step: int) -> np.ndarray:
        window = self.window_for_step(step)
        if window is None or window == self.window:
            return self.positions

        segments = self.provider(window)
        positions = resample_segments(segments, self.dr)

        if len(positions) == 0:
            logger.warning("Outline frame %d has no segments; hotspot set is empty", window)
        else:
            logger.info(
                "Hold window %d: %d segments resampled into %d hotspots",
                window, len(segments), len(positions)
            )

        # Swap in the complete set only once it is built
        self.positions = positions
        self.window = window
        return self.positions


class HotspotController:
    """
    Owns the hotspot set and moves it according to the configured mode.

    The set is exposed read-only through `positions`; the temperature
    controller never modifies it.
    """

    def __init__(
        self,
        config: HotspotConfig,
        center: Point,
        provider: Optional[OutlineProvider] = None
    ):
        self.mode = config.mode
        self._orbit: Optional[OrbitalMotion] = None
        self._outline: Optional[OutlineTracing] = None
        self._static = empty_hotspots()

        if self.mode is MotionMode.ORBITAL:
            orbit_center = config.orbit.center if config.orbit.center is not None else center
            self._orbit = OrbitalMotion(config.orbit, orbit_center)
        elif self.mode is MotionMode.OUTLINE:
            self._outline = OutlineTracing(config.outline, provider)

    @property
    def positions(self) -> np.ndarray:
        if self._orbit is not None:
            return self._orbit.positions
        if self._outline is not None:
            return self._outline.positions
        return self._static

    @property
    def window(self) -> Optional[int]:
        """Current hold window in outline mode."""
        return self._outline.window if self._outline is not None else None

    def advance(self, step: int) -> np.ndarray:
        """Move the hotspots for the given step index and return them."""
        if self._orbit is not None:
            return self._orbit.advance()
        if self._outline is not None:
            return self._outline.advance(step)
        return self._static

    def add(self, x: float, y: float) -> None:
        """Place a static hotspot."""
        if self.mode is not MotionMode.STATIC:
            raise RuntimeError(f"Hotspots can only be placed in static mode, not {self.mode.value}")
        self._static = np.vstack([self._static, [[x, y]]])

    def clear(self) -> None:
        if self.mode is not MotionMode.STATIC:
            raise RuntimeError(f"Hotspots can only be cleared in static mode, not {self.mode.value}")
        self._static = empty_hotspots()
