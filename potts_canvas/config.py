#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Simulation Configuration
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         config.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Configuration dataclasses for the lattice, the temperature field and the
hotspot motion. Each block validates itself; invalid settings raise
ConfigurationError before any state is built.

Temperatures are expressed as inverse temperatures (beta) in units where the
coupling between matching neighbours is 1. The 2-state model then orders
below T_c, i.e. above

    beta_c = ln(1 + sqrt(2)) / 2 ≈ 0.4407
"""

import json
import math
from dataclasses import dataclass, field, asdict
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np


BETA_C = math.log1p(math.sqrt(2.0)) / 2.0

# Lattice cells are stored as int16
MAX_STATES = int(np.iinfo(np.int16).max)


def critical_beta(n_states: int) -> float:
    """
    Critical inverse temperature of the 2D q-state Potts model.

    With energy 4 - 2k per site (bond energy +/-1) the coupling is J = 2
    in the usual delta convention, so beta_c = ln(1 + sqrt(q)) / 2.
    """
    return math.log1p(math.sqrt(n_states)) / 2.0


class ConfigurationError(ValueError):
    """Raised when a simulation is configured with invalid parameters."""


class TemperatureMode(Enum):
    """How the inverse temperature is distributed over the lattice."""
    UNIFORM = "uniform"
    SPATIAL = "spatial"


class MotionMode(Enum):
    """How the hotspots move."""
    NONE = "none"
    ORBITAL = "orbital"
    OUTLINE = "outline"
    STATIC = "static"


def _check_beta(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0.0:
        raise ConfigurationError(f"{name} must be finite and non-negative, got {value!r}")


@dataclass
class LatticeConfig:
    """Lattice dimensions, cell geometry and initial configuration."""
    n_x: int = 100
    n_y: int = 100
    n_states: int = 2

    # Physical size of one cell; hotspot radii are in the same units
    cell_size: Tuple[float, float] = (1.0, 1.0)

    # Physical coordinate of cell (0, 0); None centres the lattice on the origin
    origin: Optional[Tuple[float, float]] = None

    initial: str = "uniform"  # "uniform" or "random"
    initial_state: int = 0

    def validate(self) -> None:
        if self.n_x < 1 or self.n_y < 1:
            raise ConfigurationError(f"lattice must be at least 1x1, got {self.n_x}x{self.n_y}")
        if not 1 <= self.n_states <= MAX_STATES:
            raise ConfigurationError(f"n_states must be in [1, {MAX_STATES}], got {self.n_states}")
        if self.cell_size[0] <= 0 or self.cell_size[1] <= 0:
            raise ConfigurationError(f"cell_size must be positive, got {self.cell_size}")
        if self.initial not in ("uniform", "random"):
            raise ConfigurationError(f"unknown initial configuration {self.initial!r}")
        if not 0 <= self.initial_state < self.n_states:
            raise ConfigurationError(
                f"initial_state {self.initial_state} outside [0, {self.n_states})"
            )

    @property
    def resolved_origin(self) -> Tuple[float, float]:
        if self.origin is not None:
            return self.origin
        return (-0.5 * self.n_x * self.cell_size[0], -0.5 * self.n_y * self.cell_size[1])

    @property
    def center(self) -> Tuple[float, float]:
        """Physical midpoint of the lattice extent."""
        x0, y0 = self.resolved_origin
        return (x0 + 0.5 * self.n_x * self.cell_size[0], y0 + 0.5 * self.n_y * self.cell_size[1])


@dataclass
class BetaConfig:
    """
    Inverse-temperature configuration.

    The schedule (beta_start, beta_end, n_schedule_steps, oscillate,
    initial_beta) drives the scalar beta in uniform mode. In spatial mode it
    optionally drives beta_low and/or beta_high, selected by drive_low and
    drive_high; otherwise those stay fixed.
    """
    mode: TemperatureMode = TemperatureMode.UNIFORM

    # Oscillating schedule
    beta_start: float = 0.5 * BETA_C
    beta_end: float = 2.0 * BETA_C
    n_schedule_steps: int = 100
    oscillate: bool = True
    initial_beta: Optional[float] = None  # defaults to beta_start

    # Hotspot-shaped field
    beta_low: float = 0.01 * BETA_C    # at a hotspot (hot)
    beta_high: float = 3.0 * BETA_C    # max_r or further from every hotspot (cold)
    max_r: float = 50.0
    drive_low: bool = False
    drive_high: bool = False

    @classmethod
    def constant(cls, beta: float) -> "BetaConfig":
        """Uniform, non-oscillating beta."""
        return cls(
            mode=TemperatureMode.UNIFORM,
            beta_start=beta,
            beta_end=beta,
            oscillate=False,
            initial_beta=beta,
        )

    @property
    def schedule_initial(self) -> float:
        return self.beta_start if self.initial_beta is None else self.initial_beta

    def validate(self) -> None:
        if not isinstance(self.mode, TemperatureMode):
            raise ConfigurationError(f"unknown temperature mode {self.mode!r}")
        for name in ("beta_start", "beta_end", "beta_low", "beta_high"):
            _check_beta(name, getattr(self, name))
        if self.initial_beta is not None:
            _check_beta("initial_beta", self.initial_beta)
        if self.beta_start > self.beta_end:
            raise ConfigurationError(
                f"beta_start ({self.beta_start}) must not exceed beta_end ({self.beta_end})"
            )
        if self.n_schedule_steps < 1:
            raise ConfigurationError(f"n_schedule_steps must be >= 1, got {self.n_schedule_steps}")
        if not math.isfinite(self.max_r) or self.max_r <= 0.0:
            raise ConfigurationError(f"max_r must be positive, got {self.max_r!r}")


@dataclass
class OrbitConfig:
    """Sources spaced evenly on a circle, all advancing by the same angle."""
    n_sources: int = 360
    path_radius: float = 150.0
    steps_per_revolution: int = 300
    center: Optional[Tuple[float, float]] = None  # None = lattice centre

    def validate(self) -> None:
        if self.n_sources < 0:
            raise ConfigurationError(f"n_sources must be >= 0, got {self.n_sources}")
        if self.steps_per_revolution < 1:
            raise ConfigurationError(
                f"steps_per_revolution must be >= 1, got {self.steps_per_revolution}"
            )
        if not math.isfinite(self.path_radius) or self.path_radius < 0.0:
            raise ConfigurationError(f"path_radius must be non-negative, got {self.path_radius!r}")


@dataclass
class OutlineConfig:
    """Outline tracing: hold windows of hold_steps after an equilibration period."""
    hold_steps: int = 180
    dr: float = 10.0
    equilibration_steps: int = 100

    def validate(self) -> None:
        if self.hold_steps < 1:
            raise ConfigurationError(f"hold_steps must be >= 1, got {self.hold_steps}")
        if not math.isfinite(self.dr) or self.dr <= 0.0:
            raise ConfigurationError(f"dr must be positive, got {self.dr!r}")
        if self.equilibration_steps < 0:
            raise ConfigurationError(
                f"equilibration_steps must be >= 0, got {self.equilibration_steps}"
            )


@dataclass
class HotspotConfig:
    """Hotspot motion mode plus the settings of each mode."""
    mode: MotionMode = MotionMode.NONE
    orbit: OrbitConfig = field(default_factory=OrbitConfig)
    outline: OutlineConfig = field(default_factory=OutlineConfig)

    def validate(self) -> None:
        if not isinstance(self.mode, MotionMode):
            raise ConfigurationError(f"unknown motion mode {self.mode!r}")
        if self.mode is MotionMode.ORBITAL:
            self.orbit.validate()
        elif self.mode is MotionMode.OUTLINE:
            self.outline.validate()


@dataclass
class SimulationConfig:
    """Complete configuration of a simulation run."""
    lattice: LatticeConfig = field(default_factory=LatticeConfig)
    beta: BetaConfig = field(default_factory=BetaConfig)
    hotspots: HotspotConfig = field(default_factory=HotspotConfig)
    seed: int = 12345

    def validate(self) -> None:
        self.lattice.validate()
        self.beta.validate()
        self.hotspots.validate()

    def to_dict(self) -> dict:
        data = asdict(self)
        data["beta"]["mode"] = self.beta.mode.value
        data["hotspots"]["mode"] = self.hotspots.mode.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """
        Build a configuration from plain JSON-style data.

        Missing keys keep their defaults; mode strings are converted to
        their enums and lists to tuples.
        """
        try:
            lattice = dict(data.get("lattice", {}))
            for key in ("cell_size", "origin"):
                if lattice.get(key) is not None:
                    lattice[key] = tuple(lattice[key])

            beta = dict(data.get("beta", {}))
            if "mode" in beta:
                beta["mode"] = TemperatureMode(beta["mode"])

            hotspots = dict(data.get("hotspots", {}))
            if "mode" in hotspots:
                hotspots["mode"] = MotionMode(hotspots["mode"])
            orbit = dict(hotspots.pop("orbit", {}))
            if orbit.get("center") is not None:
                orbit["center"] = tuple(orbit["center"])
            outline = dict(hotspots.pop("outline", {}))

            return cls(
                lattice=LatticeConfig(**lattice),
                beta=BetaConfig(**beta),
                hotspots=HotspotConfig(
                    orbit=OrbitConfig(**orbit),
                    outline=OutlineConfig(**outline),
                    **hotspots
                ),
                seed=data.get("seed", 12345),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"invalid configuration: {exc}") from exc


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """Load and validate a SimulationConfig from a JSON file."""
    with open(path, "r") as f:
        data = json.load(f)

    config = SimulationConfig.from_dict(data)
    config.validate()
    return config


def save_config(config: SimulationConfig, path: Union[str, Path]) -> None:
    """Write a SimulationConfig to a JSON file."""
    with open(path, "w") as f:
        json.dump(config.to_dict(), f, indent=2)
