#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Lattice Monte Carlo Simulation Engine
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         simulation.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Core simulation loop. One step is:
1. Advance the hotspots
2. Recompute beta (scalar or field) from the schedule and hotspots
3. Run one Metropolis sweep with that beta

All mutable state (lattice, beta, hotspots, RNG, schedule) lives in one
SimulationState passed explicitly to step(), so independent simulations
never share anything.
"""

import logging
import numpy as np
from dataclasses import dataclass, field
from typing import Optional, Union

from .config import (
    BETA_C,
    BetaConfig,
    HotspotConfig,
    LatticeConfig,
    MotionMode,
    OrbitConfig,
    OutlineConfig,
    SimulationConfig,
    TemperatureMode,
    ConfigurationError,
)
from .hotspots import HotspotController, OutlineProvider
from .lattice import LatticeGeometry, create_lattice
from .physics import SweepStats, sweep
from .rng import DeterministicRNG
from .thermodynamics import TemperatureFieldController


logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """Everything a simulation owns between steps."""
    config: SimulationConfig
    geometry: LatticeGeometry
    lattice: np.ndarray
    rng: DeterministicRNG
    temperature: TemperatureFieldController
    hotspots: HotspotController
    step: int = 0
    last_sweep: SweepStats = field(default_factory=SweepStats)

    @property
    def n_states(self) -> int:
        return self.config.lattice.n_states

    @property
    def shape(self):
        return self.lattice.shape

    @property
    def beta(self) -> Union[float, np.ndarray]:
        """Scalar beta or beta field used by the most recent sweep."""
        return self.temperature.current

    @property
    def hotspot_positions(self) -> np.ndarray:
        return self.hotspots.positions

    @property
    def mean_beta(self) -> float:
        return float(np.mean(self.temperature.current))


def initialize_from_config(
    config: SimulationConfig,
    outline_provider: Optional[OutlineProvider] = None
) -> SimulationState:
    """
    Build a SimulationState from a complete configuration.

    Raises:
        ConfigurationError: if any setting is invalid
    """
    config.validate()
    if config.hotspots.mode is MotionMode.OUTLINE and outline_provider is None:
        raise ConfigurationError("outline motion requires an outline provider")

    geometry = LatticeGeometry.from_config(config.lattice)
    rng = DeterministicRNG(config.seed)
    lattice = create_lattice(config.lattice, rng)

    temperature = TemperatureFieldController(config.beta, geometry)
    hotspots = HotspotController(config.hotspots, geometry.center, outline_provider)

    logger.info(
        "Initialized %dx%d lattice, %d states, seed %d, %s beta, %s hotspots",
        geometry.n_x, geometry.n_y, config.lattice.n_states, config.seed,
        config.beta.mode.value, config.hotspots.mode.value
    )

    return SimulationState(
        config=config,
        geometry=geometry,
        lattice=lattice,
        rng=rng,
        temperature=temperature,
        hotspots=hotspots,
    )


def initialize(
    n_x: int,
    n_y: int,
    n_states: int,
    seed: int,
    beta_config: BetaConfig,
    hotspot_config: Optional[HotspotConfig] = None,
    lattice_config: Optional[LatticeConfig] = None,
    outline_provider: Optional[OutlineProvider] = None
) -> SimulationState:
    """
    Create a simulation.

    Args:
        n_x: Lattice size along i
        n_y: Lattice size along j
        n_states: Number of cell states
        seed: RNG seed
        beta_config: Temperature configuration
        hotspot_config: Hotspot motion (default: none)
        lattice_config: Geometry and initial configuration; its
            n_x, n_y and n_states are overridden by the arguments
        outline_provider: Segment source for outline motion

    Returns:
        Initial SimulationState (no step taken yet)
    """
    lattice = lattice_config if lattice_config is not None else LatticeConfig()
    lattice = LatticeConfig(
        n_x=n_x,
        n_y=n_y,
        n_states=n_states,
        cell_size=lattice.cell_size,
        origin=lattice.origin,
        initial=lattice.initial,
        initial_state=lattice.initial_state,
    )

    config = SimulationConfig(
        lattice=lattice,
        beta=beta_config,
        hotspots=hotspot_config if hotspot_config is not None else HotspotConfig(),
        seed=seed,
    )
    return initialize_from_config(config, outline_provider)


def step(state: SimulationState) -> SimulationState:
    """
    Advance the simulation by one step (hotspots, beta, sweep).

    The state is modified in place and returned.
    """
    hotspots = state.hotspots.advance(state.step)
    beta = state.temperature.update(hotspots)
    state.last_sweep = sweep(state.lattice, beta, state.rng, state.n_states)
    state.step += 1

    logger.debug(
        "Step %d: accepted %d/%d, flipped %d, mean beta %.4f",
        state.step, state.last_sweep.accepted, state.last_sweep.trials,
        state.last_sweep.flipped, state.mean_beta
    )
    return state


def read_cell(state: SimulationState, i: int, j: int) -> int:
    """State of cell (i, j)."""
    _check_index(state, i, j)
    return int(state.lattice[i, j])


def read_beta(state: SimulationState, i: int, j: int) -> float:
    """Inverse temperature at cell (i, j)."""
    _check_index(state, i, j)
    return state.temperature.beta_at(i, j)


def _check_index(state: SimulationState, i: int, j: int) -> None:
    n_x, n_y = state.lattice.shape
    if not (0 <= i < n_x and 0 <= j < n_y):
        raise IndexError(f"cell ({i}, {j}) outside {n_x}x{n_y} lattice")


class LatticeSimulation:
    """
    Object wrapper around the functional step API.

    Holds one SimulationState and offers the usual initialize / step / run
    calls plus hotspot painting for static mode.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        outline_provider: Optional[OutlineProvider] = None
    ):
        self.config = config or SimulationConfig()
        self.outline_provider = outline_provider
        self.state: Optional[SimulationState] = None

    def initialize(self) -> SimulationState:
        self.state = initialize_from_config(self.config, self.outline_provider)
        return self.state

    def step(self) -> SimulationState:
        if self.state is None:
            raise RuntimeError("Simulation not initialized")
        return step(self.state)

    def run(self, n_steps: int) -> SimulationState:
        """Run simulation for n_steps."""
        for _ in range(n_steps):
            self.step()
        return self.state

    def add_hotspot(self, x: float, y: float) -> None:
        """Place a static hotspot at physical point (x, y)."""
        if self.state is None:
            raise RuntimeError("Simulation not initialized")
        self.state.hotspots.add(x, y)

    def clear_hotspots(self) -> None:
        if self.state is None:
            raise RuntimeError("Simulation not initialized")
        self.state.hotspots.clear()


def create_orbit_simulation(
    size: float = 500.0,
    cell_width: float = 2.5,
    n_states: int = 2,
    n_hotspots: int = 360,
    path_radius: Optional[float] = None,
    hotspot_radius: Optional[float] = None,
    steps_per_revolution: int = 300,
    seed: int = 12345
) -> LatticeSimulation:
    """
    Ring of hotspots circling an initially uniform, cold lattice.

    The hot end of the field is fixed at 0.5 β_c while the cold end
    oscillates between 0.5 β_c and 2 β_c once per revolution.

    Args:
        size: Physical side length of the square lattice
        cell_width: Physical width of one cell
        n_states: Number of cell states
        n_hotspots: Number of sources on the ring
        path_radius: Radius of the ring (default: 0.3 * size)
        hotspot_radius: Influence radius max_r (default: 0.1 * size)
        steps_per_revolution: Steps per orbit (and per schedule sweep)
        seed: RNG seed

    Returns:
        Initialized LatticeSimulation
    """
    if path_radius is None:
        path_radius = 0.3 * size
    if hotspot_radius is None:
        hotspot_radius = 0.1 * size

    n_side = max(1, int(size / cell_width))
    beta_start = 0.5 * BETA_C
    beta_end = 2.0 * BETA_C

    config = SimulationConfig(
        lattice=LatticeConfig(
            n_x=n_side, n_y=n_side, n_states=n_states,
            cell_size=(cell_width, cell_width), initial="uniform"
        ),
        beta=BetaConfig(
            mode=TemperatureMode.SPATIAL,
            beta_start=beta_start,
            beta_end=beta_end,
            n_schedule_steps=steps_per_revolution,
            initial_beta=beta_end,
            beta_low=beta_start,
            beta_high=beta_end,
            max_r=hotspot_radius,
            drive_high=True,
        ),
        hotspots=HotspotConfig(
            mode=MotionMode.ORBITAL,
            orbit=OrbitConfig(
                n_sources=n_hotspots,
                path_radius=path_radius,
                steps_per_revolution=steps_per_revolution,
            ),
        ),
        seed=seed,
    )

    sim = LatticeSimulation(config)
    sim.initialize()
    return sim


def create_glyph_simulation(
    characters: str = "ABC",
    size: float = 500.0,
    cell_width: float = 2.5,
    n_states: int = 5,
    hotspot_radius: Optional[float] = None,
    dr: float = 10.0,
    equilibration_steps: int = 100,
    hold_steps: int = 180,
    seed: int = 12345,
    outline_provider: Optional[OutlineProvider] = None
) -> LatticeSimulation:
    """
    Hotspots tracing glyph outlines on a randomly initialised lattice.

    After equilibration, each character is held for hold_steps steps
    before the next one replaces it.

    Args:
        characters: Characters to cycle through
        hotspot_radius: Influence radius max_r (default: 0.1 * size)
        outline_provider: Segment source; defaults to matplotlib glyphs
            sized to the lattice

    Returns:
        Initialized LatticeSimulation
    """
    if hotspot_radius is None:
        hotspot_radius = 0.1 * size
    n_side = max(1, int(size / cell_width))

    if outline_provider is None:
        from .glyphs import GlyphOutlineProvider
        outline_provider = GlyphOutlineProvider(characters, size=0.75 * size)

    config = SimulationConfig(
        lattice=LatticeConfig(
            n_x=n_side, n_y=n_side, n_states=n_states,
            cell_size=(cell_width, cell_width), initial="random"
        ),
        beta=BetaConfig(
            mode=TemperatureMode.SPATIAL,
            beta_start=0.01 * BETA_C,
            beta_end=3.0 * BETA_C,
            oscillate=False,
            beta_low=0.01 * BETA_C,
            beta_high=3.0 * BETA_C,
            max_r=hotspot_radius,
        ),
        hotspots=HotspotConfig(
            mode=MotionMode.OUTLINE,
            outline=OutlineConfig(
                hold_steps=hold_steps,
                dr=dr,
                equilibration_steps=equilibration_steps,
            ),
        ),
        seed=seed,
    )

    sim = LatticeSimulation(config, outline_provider)
    sim.initialize()
    return sim


def create_annealing_simulation(
    n_side: int = 50,
    n_states: int = 3,
    n_schedule_steps: int = 100,
    seed: int = 12345
) -> LatticeSimulation:
    """
    Uniform beta sweeping back and forth between 0.01 β_c and 3 β_c.

    Returns:
        Initialized LatticeSimulation
    """
    config = SimulationConfig(
        lattice=LatticeConfig(n_x=n_side, n_y=n_side, n_states=n_states, initial="uniform"),
        beta=BetaConfig(
            mode=TemperatureMode.UNIFORM,
            beta_start=0.01 * BETA_C,
            beta_end=3.0 * BETA_C,
            n_schedule_steps=n_schedule_steps,
        ),
        seed=seed,
    )

    sim = LatticeSimulation(config)
    sim.initialize()
    return sim


def create_painting_simulation(
    n_side: int = 100,
    n_states: int = 2,
    hotspot_radius: float = 10.0,
    seed: int = 12345
) -> LatticeSimulation:
    """
    Cold, ordered lattice with static hotspots placed by hand.

    Returns:
        Initialized LatticeSimulation
    """
    config = SimulationConfig(
        lattice=LatticeConfig(n_x=n_side, n_y=n_side, n_states=n_states, initial="uniform"),
        beta=BetaConfig(
            mode=TemperatureMode.SPATIAL,
            oscillate=False,
            beta_low=0.01 * BETA_C,
            beta_high=3.0 * BETA_C,
            max_r=hotspot_radius,
        ),
        hotspots=HotspotConfig(mode=MotionMode.STATIC),
        seed=seed,
    )

    sim = LatticeSimulation(config)
    sim.initialize()
    return sim
