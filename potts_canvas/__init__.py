#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Potts Hotspot Canvas
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Description:    Lattice Monte Carlo simulation of a q-state Potts model driven
                by a moving, spatially varying inverse-temperature field

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This package implements a single-spin-flip Metropolis sampler featuring:
- Nearest-neighbour Potts energy on a periodic (toroidal) lattice
- Numba-compiled sweeps with a reproducible random draw order
- Oscillating anneal/melt schedules for the inverse temperature
- "Hotspots" that orbit the grid or trace glyph outlines, carving hot,
  disordered regions into an otherwise cold, ordered field

Modules:
    - rng: Seeded, reproducible random source
    - config: Configuration dataclasses and validation
    - lattice: Lattice state, geometry and initial configurations
    - physics: Potts energy and Metropolis update engine
    - thermodynamics: Beta schedules, beta field and observables
    - hotspots: Orbital, outline-tracing and static hotspot motion
    - simulation: Simulation state aggregate and step loop
    - glyphs: Glyph outline segments via matplotlib TextPath
    - visualization: Rendering of lattice states and beta fields
    - logger_setup: Package logger configuration
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"
