#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Deterministic Random Source
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         rng.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Thin wrapper around NumPy's PCG64 generator.

Every draw, scalar or block, is taken from the generator's stream of uniform
doubles. Integer draws are derived as floor(f * high), and acceptance draws
as 1 - f so that they lie in (0, 1]. A sweep pulls one (n_trials, 4) block
whose rows are (site-i, site-j, candidate, u); because the block is filled
in C order it consumes exactly the same stream as n_trials rounds of scalar
draws in that order.
"""

import numpy as np
from typing import Optional, Union


class DeterministicRNG:
    """Seeded uniform random source with a fixed draw order."""

    def __init__(self, seed: int = 12345):
        self.seed = seed
        self._generator = np.random.Generator(np.random.PCG64(seed))

    def random(self, size: Optional[Union[int, tuple]] = None):
        """Uniform float(s) in [0, 1)."""
        return self._generator.random(size)

    def integers(self, high: int, size: Optional[Union[int, tuple]] = None):
        """
        Uniform integer(s) in [0, high).

        Args:
            high: Exclusive upper bound (must be >= 1)
            size: Optional output shape

        Returns:
            A Python int, or an int64 array when size is given
        """
        if size is None:
            return min(int(self._generator.random() * high), high - 1)

        values = np.floor(self._generator.random(size) * high).astype(np.int64)
        return np.minimum(values, high - 1)

    def open_uniform(self) -> float:
        """Uniform float in (0, 1], safe to pass to log()."""
        return 1.0 - self._generator.random()

    def trial_block(self, n_trials: int) -> np.ndarray:
        """
        Raw uniforms for n_trials Metropolis trials.

        Returns:
            (n_trials, 4) float64 array; column order is
            site-i, site-j, candidate state, acceptance
        """
        return self._generator.random((n_trials, 4))

    def clone(self) -> "DeterministicRNG":
        """Independent copy positioned at the same point in the stream."""
        twin = DeterministicRNG(self.seed)
        twin._generator.bit_generator.state = self._generator.bit_generator.state
        return twin
