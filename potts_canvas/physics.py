#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Potts Energy and Metropolis Update Engine
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         physics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This module implements the nearest-neighbour Potts energy on a periodic
lattice and the single-spin-flip Metropolis sweep.

The local energy of cell (i, j) is:
    E(i, j) = 4 - 2k

Where:
    - k: number of the four orthogonal neighbours sharing the cell's state

E ranges from -4 (all neighbours match) to +4 (none match), so low
temperature (high beta) favours uniform patches.

A trial proposes a new state and keeps it when
    ln(u) <= beta * (E_old - E_new)
which accepts with probability min(1, exp(-beta * dE)).

Trials update the lattice in place, one after the other: each trial sees
every change made by the trials before it.
"""

import numpy as np
from numba import jit
from dataclasses import dataclass
from typing import Union

from .rng import DeterministicRNG


@dataclass
class SweepStats:
    """Counters for one sweep."""
    trials: int = 0
    accepted: int = 0   # candidate kept (including same-state proposals)
    flipped: int = 0    # candidate kept and different from the old state

    @property
    def acceptance_rate(self) -> float:
        if self.trials == 0:
            return 0.0
        return self.accepted / self.trials

    @property
    def flip_rate(self) -> float:
        if self.trials == 0:
            return 0.0
        return self.flipped / self.trials


@jit(nopython=True, cache=True)
def local_energy(lattice: np.ndarray, i: int, j: int) -> float:
    """
    Local Potts energy of cell (i, j).

    Args:
        lattice: (n_x, n_y) array of states
        i: Row index
        j: Column index

    Returns:
        4 - 2 * (number of matching periodic neighbours)
    """
    n_x = lattice.shape[0]
    n_y = lattice.shape[1]
    s = lattice[i, j]

    k = 0
    if lattice[(i + n_x - 1) % n_x, j] == s:
        k += 1
    if lattice[(i + 1) % n_x, j] == s:
        k += 1
    if lattice[i, (j + n_y - 1) % n_y] == s:
        k += 1
    if lattice[i, (j + 1) % n_y] == s:
        k += 1

    return 4.0 - 2.0 * k


@jit(nopython=True, cache=True)
def metropolis_trial(
    lattice: np.ndarray,
    i: int,
    j: int,
    candidate: int,
    u: float,
    beta: float
) -> bool:
    """
    One Metropolis trial at (i, j).

    Writes the candidate into the cell, then restores the old state if
    ln(u) > beta * (E_old - E_new).

    Args:
        lattice: (n_x, n_y) array of states, modified in place
        i: Row index
        j: Column index
        candidate: Proposed state
        u: Acceptance draw in (0, 1]
        beta: Local inverse temperature

    Returns:
        True if the candidate was kept
    """
    old_energy = local_energy(lattice, i, j)
    old_state = lattice[i, j]

    lattice[i, j] = candidate
    new_energy = local_energy(lattice, i, j)

    if np.log(u) > beta * (old_energy - new_energy):
        lattice[i, j] = old_state
        return False

    return True


@jit(nopython=True, cache=True)
def _sweep_kernel(
    lattice: np.ndarray,
    beta_field: np.ndarray,
    draws: np.ndarray,
    n_states: int
):
    """
    Run one trial per row of draws.

    Each row holds raw uniforms (site-i, site-j, candidate, acceptance).
    Integer draws are floor(f * high) capped at high - 1; the acceptance
    draw is 1 - f so it never reaches zero.
    """
    n_x = lattice.shape[0]
    n_y = lattice.shape[1]

    accepted = 0
    flipped = 0

    for t in range(draws.shape[0]):
        i = min(int(draws[t, 0] * n_x), n_x - 1)
        j = min(int(draws[t, 1] * n_y), n_y - 1)
        candidate = min(int(draws[t, 2] * n_states), n_states - 1)
        u = 1.0 - draws[t, 3]

        old_state = lattice[i, j]
        if metropolis_trial(lattice, i, j, candidate, u, beta_field[i, j]):
            accepted += 1
            if candidate != old_state:
                flipped += 1

    return accepted, flipped


def sweep(
    lattice: np.ndarray,
    beta: Union[float, np.ndarray],
    rng: DeterministicRNG,
    n_states: int
) -> SweepStats:
    """
    Perform one sweep of n_x * n_y Metropolis trials.

    Args:
        lattice: (n_x, n_y) array of states, modified in place
        beta: Scalar inverse temperature or (n_x, n_y) beta field
        rng: Random source; advanced by 4 * n_x * n_y draws
        n_states: Number of states

    Returns:
        SweepStats for this sweep
    """
    n_trials = lattice.shape[0] * lattice.shape[1]

    if np.ndim(beta) == 0:
        beta_field = np.full(lattice.shape, float(beta), dtype=np.float64)
    else:
        beta_field = np.ascontiguousarray(beta, dtype=np.float64)
        if beta_field.shape != lattice.shape:
            raise ValueError(
                f"beta field shape {beta_field.shape} does not match lattice {lattice.shape}"
            )

    draws = rng.trial_block(n_trials)
    accepted, flipped = _sweep_kernel(lattice, beta_field, draws, n_states)

    return SweepStats(trials=n_trials, accepted=int(accepted), flipped=int(flipped))


def calculate_local_energies(lattice: np.ndarray) -> np.ndarray:
    """
    Local energy of every cell at once.

    Vectorised with periodic np.roll; matches local_energy cell by cell.
    """
    matches = (
        (lattice == np.roll(lattice, 1, axis=0)).astype(np.int64)
        + (lattice == np.roll(lattice, -1, axis=0))
        + (lattice == np.roll(lattice, 1, axis=1))
        + (lattice == np.roll(lattice, -1, axis=1))
    )
    return 4.0 - 2.0 * matches


def calculate_total_energy(lattice: np.ndarray) -> float:
    """
    Total lattice energy.

    Every bond appears in the local energy of both of its cells, so the
    total is half the sum of local energies (+1 per mismatched bond,
    -1 per matched bond).
    """
    return 0.5 * float(np.sum(calculate_local_energies(lattice)))


def acceptance_probability(delta_energy: float, beta: float) -> float:
    """Metropolis acceptance probability min(1, exp(-beta * dE))."""
    if delta_energy <= 0.0:
        return 1.0
    return float(np.exp(-beta * delta_energy))
