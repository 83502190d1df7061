#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Lattice State and Geometry
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         lattice.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

The lattice is an (n_x, n_y) int16 array indexed [i, j] with periodic
boundaries on both axes. Cell (i, j) sits at the physical point

    (x0 + i * w_x, y0 + j * w_y)

which is the coordinate space shared with the hotspots.
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple

from .config import LatticeConfig
from .rng import DeterministicRNG


LATTICE_DTYPE = np.int16


@dataclass(frozen=True)
class LatticeGeometry:
    """Mapping from lattice indices to physical coordinates."""
    n_x: int
    n_y: int
    cell_size: Tuple[float, float]
    origin: Tuple[float, float]

    @classmethod
    def from_config(cls, config: LatticeConfig) -> "LatticeGeometry":
        return cls(
            n_x=config.n_x,
            n_y=config.n_y,
            cell_size=(float(config.cell_size[0]), float(config.cell_size[1])),
            origin=tuple(float(v) for v in config.resolved_origin),
        )

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """(x0, x1, y0, y1) bounds of the lattice in physical units."""
        x0, y0 = self.origin
        return (x0, x0 + self.n_x * self.cell_size[0], y0, y0 + self.n_y * self.cell_size[1])

    @property
    def center(self) -> Tuple[float, float]:
        x0, x1, y0, y1 = self.extent
        return ((x0 + x1) / 2.0, (y0 + y1) / 2.0)

    def x_coordinates(self) -> np.ndarray:
        """Physical x of every row index i."""
        return self.origin[0] + np.arange(self.n_x, dtype=np.float64) * self.cell_size[0]

    def y_coordinates(self) -> np.ndarray:
        """Physical y of every column index j."""
        return self.origin[1] + np.arange(self.n_y, dtype=np.float64) * self.cell_size[1]

    def cell_position(self, i: int, j: int) -> Tuple[float, float]:
        return (self.origin[0] + i * self.cell_size[0], self.origin[1] + j * self.cell_size[1])

    def cell_at(self, x: float, y: float) -> Tuple[int, int]:
        """Index of the cell containing a physical point (wrapped onto the torus)."""
        i = int(np.floor((x - self.origin[0]) / self.cell_size[0])) % self.n_x
        j = int(np.floor((y - self.origin[1]) / self.cell_size[1])) % self.n_y
        return i, j


def create_lattice(config: LatticeConfig, rng: DeterministicRNG) -> np.ndarray:
    """
    Build the initial lattice.

    A "random" lattice draws one state per cell in row-major order and so
    advances the RNG by n_x * n_y draws; a "uniform" lattice draws nothing.

    Args:
        config: Lattice configuration
        rng: Random source

    Returns:
        (n_x, n_y) int16 array of states
    """
    shape = (config.n_x, config.n_y)

    if config.initial == "random":
        return rng.integers(config.n_states, size=shape).astype(LATTICE_DTYPE)

    return np.full(shape, config.initial_state, dtype=LATTICE_DTYPE)


def states_in_range(lattice: np.ndarray, n_states: int) -> bool:
    """True when every cell holds a state in [0, n_states)."""
    return bool(np.all(lattice >= 0) and np.all(lattice < n_states))


def state_counts(lattice: np.ndarray, n_states: int) -> np.ndarray:
    """Number of cells in each state."""
    return np.bincount(lattice.ravel().astype(np.int64), minlength=n_states)
