#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Temperature Field Control and Observables
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         thermodynamics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This module controls the inverse temperature seen by the update engine and
measures the state of the lattice:
- Triangle-wave beta schedule (anneal/melt cycles)
- Hotspot-shaped beta field
- Order parameter, domain-wall density and phase identification
- Bounded observable history
"""

import logging
import numpy as np
from numba import jit
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .config import BetaConfig, TemperatureMode, critical_beta
from .lattice import LatticeGeometry
from .physics import calculate_total_energy


logger = logging.getLogger(__name__)


class BetaSchedule:
    """
    Triangle-wave inverse temperature.

    Each advance() first reverses direction if beta has left
    [beta_start, beta_end], then adds delta. Beta therefore overshoots a
    bound by at most one delta before turning back.
    """

    def __init__(
        self,
        beta_start: float,
        beta_end: float,
        n_steps: int,
        initial: Optional[float] = None,
        oscillate: bool = True
    ):
        self.beta_start = beta_start
        self.beta_end = beta_end
        self.beta = beta_start if initial is None else initial
        self.delta = (beta_end - beta_start) / n_steps
        self.oscillate = oscillate

    @classmethod
    def from_config(cls, config: BetaConfig) -> "BetaSchedule":
        return cls(
            config.beta_start,
            config.beta_end,
            config.n_schedule_steps,
            initial=config.schedule_initial,
            oscillate=config.oscillate,
        )

    def advance(self) -> float:
        """Move one step along the schedule and return the new beta."""
        if not self.oscillate:
            return self.beta

        if self.beta > self.beta_end or self.beta < self.beta_start:
            self.delta = -self.delta
            logger.debug("Beta schedule reversed at beta=%.5f", self.beta)

        self.beta += self.delta
        return self.beta


@jit(nopython=True, cache=True)
def compute_beta_field(
    beta_field: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    hotspots: np.ndarray,
    max_r: float,
    beta_low: float,
    beta_high: float
) -> np.ndarray:
    """
    Fill the beta field from hotspot distances.

    For each cell, r is the distance to the nearest hotspot, capped at
    max_r. The field interpolates linearly from beta_low at a hotspot to
    beta_high at max_r and beyond.

    Args:
        beta_field: (n_x, n_y) output array, filled in place
        xs: Physical x of each row index
        ys: Physical y of each column index
        hotspots: (n, 2) hotspot positions (n may be 0)
        max_r: Influence radius
        beta_low: Beta at a hotspot
        beta_high: Beta far from every hotspot

    Returns:
        beta_field
    """
    n_x = beta_field.shape[0]
    n_y = beta_field.shape[1]
    n_hotspots = hotspots.shape[0]

    for i in range(n_x):
        for j in range(n_y):
            r = max_r
            for h in range(n_hotspots):
                dx = hotspots[h, 0] - xs[i]
                dy = hotspots[h, 1] - ys[j]
                d = np.sqrt(dx * dx + dy * dy)
                if d < r:
                    r = d

            frac = r / max_r
            if frac < 0.0:
                frac = 0.0
            elif frac > 1.0:
                frac = 1.0

            beta_field[i, j] = beta_low * (1.0 - frac) + beta_high * frac

    return beta_field


class TemperatureFieldController:
    """
    Produces the beta seen by each sweep.

    In uniform mode the result is the schedule's scalar beta. In spatial
    mode it is a per-cell field built from the hotspots, with beta_low and
    beta_high either fixed or following the schedule.
    """

    def __init__(self, config: BetaConfig, geometry: LatticeGeometry):
        self.config = config
        self.mode = config.mode
        self.schedule = BetaSchedule.from_config(config)

        self._xs = geometry.x_coordinates()
        self._ys = geometry.y_coordinates()

        self.beta_field: Optional[np.ndarray] = None
        if self.mode is TemperatureMode.SPATIAL:
            self.beta_field = np.full(
                (geometry.n_x, geometry.n_y), self.beta_high, dtype=np.float64
            )

    @property
    def scheduled_beta(self) -> float:
        """
        Schedule value as seen by the sweep.

        The schedule itself may dip one delta below beta_start before it
        turns back; beta handed out is never negative.
        """
        return max(0.0, self.schedule.beta)

    @property
    def beta_low(self) -> float:
        return self.scheduled_beta if self.config.drive_low else self.config.beta_low

    @property
    def beta_high(self) -> float:
        return self.scheduled_beta if self.config.drive_high else self.config.beta_high

    @property
    def current(self) -> Union[float, np.ndarray]:
        """Scalar beta (uniform mode) or the beta field (spatial mode)."""
        if self.mode is TemperatureMode.SPATIAL:
            return self.beta_field
        return self.scheduled_beta

    def update(self, hotspots: np.ndarray) -> Union[float, np.ndarray]:
        """
        Advance the schedule and rebuild the field for this step.

        Args:
            hotspots: (n, 2) hotspot positions, read only

        Returns:
            Scalar beta or the (n_x, n_y) beta field
        """
        self.schedule.advance()

        if self.mode is TemperatureMode.SPATIAL:
            compute_beta_field(
                self.beta_field,
                self._xs,
                self._ys,
                np.ascontiguousarray(hotspots, dtype=np.float64).reshape(-1, 2),
                self.config.max_r,
                self.beta_low,
                self.beta_high,
            )

        return self.current

    def beta_at(self, i: int, j: int) -> float:
        if self.mode is TemperatureMode.SPATIAL:
            return float(self.beta_field[i, j])
        return float(self.scheduled_beta)


# ---------------------------------------------------------------------------
# Observables
# ---------------------------------------------------------------------------

class Phase(Enum):
    """Coarse ordering of the lattice."""
    ORDERED = "ordered"
    MIXED = "mixed"
    DISORDERED = "disordered"


@dataclass
class PhaseInfo:
    """Information about the current ordering."""
    phase: Phase
    order_parameter: float
    domain_wall_density: float
    beta: float
    description: str


# Order parameter thresholds
ORDERED_THRESHOLD = 0.8
DISORDERED_THRESHOLD = 0.2


def calculate_order_parameter(lattice: np.ndarray, n_states: int) -> float:
    """
    Potts order parameter.

    m = (q * f_max - 1) / (q - 1), where f_max is the fraction of cells in
    the most common state. m = 1 for a uniform lattice, ~0 for a random one.

    Args:
        lattice: (n_x, n_y) array of states
        n_states: Number of states q

    Returns:
        Order parameter in [0, 1]
    """
    if n_states <= 1:
        return 1.0

    counts = np.bincount(lattice.ravel().astype(np.int64), minlength=n_states)
    f_max = counts.max() / lattice.size
    return float((n_states * f_max - 1.0) / (n_states - 1.0))


def calculate_domain_wall_density(lattice: np.ndarray) -> float:
    """Fraction of nearest-neighbour bonds joining different states."""
    walls_x = lattice != np.roll(lattice, -1, axis=0)
    walls_y = lattice != np.roll(lattice, -1, axis=1)
    return float((np.sum(walls_x) + np.sum(walls_y)) / (2.0 * lattice.size))


def energy_per_site(lattice: np.ndarray) -> float:
    """Total energy divided by the number of cells (range -2 to +2)."""
    return calculate_total_energy(lattice) / lattice.size


def identify_phase(
    order_parameter: float,
    domain_wall_density: float,
    beta: float
) -> PhaseInfo:
    """
    Classify the lattice as ordered, mixed or disordered.

    Args:
        order_parameter: Potts order parameter
        domain_wall_density: Fraction of mismatched bonds
        beta: Representative inverse temperature (e.g. field mean)

    Returns:
        PhaseInfo with phase and description
    """
    if order_parameter > ORDERED_THRESHOLD:
        return PhaseInfo(
            phase=Phase.ORDERED,
            order_parameter=order_parameter,
            domain_wall_density=domain_wall_density,
            beta=beta,
            description=f"Ordered: m={order_parameter:.2f}, walls={domain_wall_density:.2f}"
        )

    if order_parameter < DISORDERED_THRESHOLD:
        return PhaseInfo(
            phase=Phase.DISORDERED,
            order_parameter=order_parameter,
            domain_wall_density=domain_wall_density,
            beta=beta,
            description=f"Disordered: m={order_parameter:.2f}, β={beta:.3f}"
        )

    return PhaseInfo(
        phase=Phase.MIXED,
        order_parameter=order_parameter,
        domain_wall_density=domain_wall_density,
        beta=beta,
        description=f"Mixed: m={order_parameter:.2f}, walls={domain_wall_density:.2f}, β={beta:.3f}"
    )


def relative_beta(beta: float, n_states: int) -> float:
    """Beta in units of the critical beta of the q-state model."""
    return beta / critical_beta(n_states)


class ObservableTracker:
    """
    Track observables over time.

    Keeps a bounded history of beta, energy, order parameter and
    acceptance rate, and records phase changes.
    """

    def __init__(self, history_length: int = 500):
        self.history_length = history_length
        self.step_history: List[int] = []
        self.beta_history: List[float] = []
        self.energy_history: List[float] = []
        self.order_history: List[float] = []
        self.acceptance_history: List[float] = []
        self.phase_history: List[Phase] = []

        self.transition_events: List[tuple] = []

    def update(
        self,
        step: int,
        lattice: np.ndarray,
        n_states: int,
        beta: float,
        acceptance_rate: float
    ) -> Optional[tuple]:
        """
        Record one measurement.

        Returns:
            (old_phase, new_phase) if the phase changed, else None
        """
        order = calculate_order_parameter(lattice, n_states)
        walls = calculate_domain_wall_density(lattice)
        phase = identify_phase(order, walls, beta).phase

        self.step_history.append(step)
        self.beta_history.append(beta)
        self.energy_history.append(energy_per_site(lattice))
        self.order_history.append(order)
        self.acceptance_history.append(acceptance_rate)
        self.phase_history.append(phase)

        if len(self.step_history) > self.history_length:
            for history in (
                self.step_history, self.beta_history, self.energy_history,
                self.order_history, self.acceptance_history, self.phase_history
            ):
                history.pop(0)

        if len(self.phase_history) >= 2:
            old_phase = self.phase_history[-2]
            if old_phase != phase:
                self.transition_events.append((step, old_phase, phase))
                return (old_phase, phase)

        return None
