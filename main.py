#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Potts Hotspot Canvas - Command Line Interface
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Command line interface for running and rendering the Potts Hotspot Canvas
lattice simulation.
"""

import argparse
import time
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from potts_canvas.config import (
    BETA_C, BetaConfig, LatticeConfig, MotionMode, SimulationConfig, load_config
)
from potts_canvas.glyphs import GlyphOutlineProvider
from potts_canvas.logger_setup import setup_logging
from potts_canvas.simulation import (
    LatticeSimulation,
    create_annealing_simulation,
    create_glyph_simulation,
    create_orbit_simulation,
)
from potts_canvas.thermodynamics import (
    ObservableTracker, calculate_domain_wall_density, calculate_order_parameter,
    identify_phase
)
from potts_canvas.visualization import (
    VisualizationConfig, create_animation, render_beta_field, render_lattice_matplotlib,
    render_observable_plot, save_frame
)


def build_simulation(
    preset: str,
    size: float,
    n_states: Optional[int],
    seed: int,
    config_path: Optional[str] = None
) -> LatticeSimulation:
    """Create a simulation from a JSON config file or a named preset."""
    if config_path is not None:
        config = load_config(config_path)
        provider = None
        if config.hotspots.mode is MotionMode.OUTLINE:
            width = config.lattice.n_x * config.lattice.cell_size[0]
            height = config.lattice.n_y * config.lattice.cell_size[1]
            provider = GlyphOutlineProvider(size=0.75 * min(width, height), center=config.lattice.center)
        sim = LatticeSimulation(config, provider)
        sim.initialize()
        return sim

    if preset == "orbit":
        return create_orbit_simulation(size=size, n_states=n_states or 2, seed=seed)
    if preset == "glyph":
        return create_glyph_simulation(size=size, n_states=n_states or 5, seed=seed)
    if preset == "anneal":
        return create_annealing_simulation(n_side=int(size / 2.5), n_states=n_states or 3, seed=seed)
    raise ValueError(f"Unknown preset {preset!r}")


def run_sampling_test(
    n_side: int = 64,
    n_states: int = 2,
    n_steps: int = 500,
    seed: int = 12345,
    sim: Optional[LatticeSimulation] = None
):
    """
    Quench a random lattice at constant beta and report ordering.

    Args:
        n_side: Lattice side length
        n_states: Number of states
        n_steps: Number of sweeps
        seed: RNG seed
        sim: Initialized simulation to sample instead of the constant-beta quench
    """
    print("=" * 60)
    print("Potts Hotspot Canvas - Sampling Test")
    print("=" * 60)

    if sim is None:
        sim = LatticeSimulation(SimulationConfig(
            lattice=LatticeConfig(n_x=n_side, n_y=n_side, n_states=n_states, initial="random"),
            beta=BetaConfig.constant(2.0 * BETA_C),
            seed=seed,
        ))
        sim.initialize()
    state = sim.state
    n_states = state.n_states

    print(f"\nSampling {state.shape[0]}x{state.shape[1]} lattice ({n_states} states), "
          f"initial mean β = {state.mean_beta:.4f}...")

    tracker = ObservableTracker(history_length=n_steps)
    t_start = time.time()

    for _ in range(n_steps):
        sim.step()
        tracker.update(
            state.step, state.lattice, n_states, state.mean_beta,
            state.last_sweep.acceptance_rate
        )
        if state.step % 100 == 0:
            print(f"  Step {state.step:5d}: m = {tracker.order_history[-1]:.4f}, "
                  f"E/N = {tracker.energy_history[-1]:.4f}, "
                  f"acc = {state.last_sweep.acceptance_rate:.3f}")

    t_end = time.time()

    print(f"\nSimulation completed in {t_end - t_start:.2f} seconds")
    print(f"Sweeps per second: {n_steps / (t_end - t_start):.1f}")

    order = calculate_order_parameter(state.lattice, n_states)
    walls = calculate_domain_wall_density(state.lattice)
    phase_info = identify_phase(order, walls, state.mean_beta)

    print(f"\nFinal State:")
    print(f"  Order Parameter:     {order:.4f}")
    print(f"  Domain Wall Density: {walls:.4f}")
    print(f"  Phase:               {phase_info.phase.value}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    render_observable_plot(tracker.step_history, tracker.beta_history, tracker.order_history, ax=axes[0])
    render_lattice_matplotlib(state.lattice, n_states, state.geometry.extent, ax=axes[1])
    axes[1].set_title("Final Configuration")

    plt.tight_layout()
    plt.savefig("sampling_test.png", dpi=150)
    print(f"\nPlot saved to sampling_test.png")
    plt.show()


def run_demo(sim: LatticeSimulation, name: str, n_steps: int = 600, n_snapshots: int = 4):
    """
    Run a preset and plot lattice and beta-field snapshots.

    Args:
        sim: Initialized simulation
        name: Preset name used in titles and the output file
        n_steps: Number of steps
        n_snapshots: Number of snapshots to plot
    """
    print("=" * 60)
    print(f"Potts Hotspot Canvas - {name.capitalize()} Demonstration")
    print("=" * 60)

    state = sim.state
    snapshot_steps = {int(s) for s in np.linspace(n_steps // n_snapshots, n_steps, n_snapshots)}

    fig, axes = plt.subplots(2, n_snapshots, figsize=(4 * n_snapshots, 8))
    vis_config = VisualizationConfig(show_hotspots=True)
    column = 0

    for _ in range(n_steps):
        sim.step()
        if state.step in snapshot_steps:
            render_lattice_matplotlib(
                state.lattice, state.n_states, state.geometry.extent, vis_config,
                ax=axes[0, column], hotspots=state.hotspot_positions
            )
            axes[0, column].set_title(f"Step {state.step}")
            render_beta_field(state.beta, state.geometry.extent, ax=axes[1, column], colorbar=False)
            column += 1

            order = calculate_order_parameter(state.lattice, state.n_states)
            print(f"  Step {state.step:5d}: mean β = {state.mean_beta:.3f}, m = {order:.3f}, "
                  f"hotspots = {len(state.hotspot_positions)}")

    plt.tight_layout()
    output = f"{name}_demo.png"
    plt.savefig(output, dpi=150)
    print(f"\nPlot saved to {output}")
    plt.show()


def run_animation(sim: LatticeSimulation, n_frames: int = 200, n_steps_per_frame: int = 1):
    """
    Create a GIF animation of the simulation.

    Args:
        sim: Initialized simulation
        n_frames: Number of animation frames
        n_steps_per_frame: Simulation steps between frames
    """
    print("=" * 60)
    print("Potts Hotspot Canvas - Animation")
    print("=" * 60)

    state = sim.state
    history = []

    print(f"Simulating {n_frames} frames...")
    for _ in range(n_frames):
        for _ in range(n_steps_per_frame):
            sim.step()
        history.append(state.lattice.copy())

    ani = create_animation(history, state.n_states, state.geometry.extent, fps=20)

    print("Saving animation (this may take a while)...")
    ani.save("simulation_animation.gif", writer="pillow", fps=20)
    print("Animation saved to simulation_animation.gif")


def export_frames(sim: LatticeSimulation, directory: str, n_frames: int, scale: int = 2):
    """Step the simulation and write one numbered PNG per step."""
    state = sim.state
    print(f"Writing {n_frames} frames to {directory}/ ...")
    for frame in range(n_frames):
        sim.step()
        save_frame(state.lattice, state.n_states, directory, frame, scale=scale)
    print("Done.")


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Potts Hotspot Canvas - Lattice Monte Carlo with moving heat sources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --run                   Quench test at constant beta
  python main.py --demo orbit            Orbiting hotspot ring
  python main.py --demo glyph            Hotspots tracing the letters A, B, C
  python main.py --animate --demo anneal Animated anneal/melt cycle
  python main.py --frames out --demo orbit --steps 300
  python main.py --app                   Launch Streamlit app
        """
    )

    parser.add_argument('--run', action='store_true',
                       help='Run constant-beta sampling test')
    parser.add_argument('--demo', choices=['orbit', 'glyph', 'anneal'],
                       help='Run a preset demonstration')
    parser.add_argument('--animate', action='store_true',
                       help='Create GIF animation of the selected preset')
    parser.add_argument('--frames', metavar='DIR',
                       help='Export numbered PNG frames of the selected preset')
    parser.add_argument('--app', action='store_true',
                       help='Launch Streamlit web app')
    parser.add_argument('--config', metavar='JSON',
                       help='Load simulation configuration from a JSON file')
    parser.add_argument('--size', type=float, default=250.0,
                       help='Physical lattice side length for presets (default: 250)')
    parser.add_argument('--states', '-q', type=int, default=None,
                       help='Number of states (default: preset value)')
    parser.add_argument('--steps', '-s', type=int, default=600,
                       help='Number of simulation steps (default: 600)')
    parser.add_argument('--seed', type=int, default=12345,
                       help='Random seed (default: 12345)')
    parser.add_argument('--log-level', default='INFO',
                       help='Logging level (default: INFO)')
    parser.add_argument('--log-file', default=None,
                       help='Optional log file path')

    args = parser.parse_args()
    setup_logging(args.log_level, args.log_file)

    preset = args.demo or 'orbit'

    if args.run:
        sim = None
        if args.config:
            sim = build_simulation(preset, args.size, args.states, args.seed, args.config)
        run_sampling_test(
            n_side=int(args.size / 2.5), n_states=args.states or 2,
            n_steps=args.steps, seed=args.seed, sim=sim
        )
    elif args.animate:
        sim = build_simulation(preset, args.size, args.states, args.seed, args.config)
        run_animation(sim, n_frames=args.steps)
    elif args.frames:
        sim = build_simulation(preset, args.size, args.states, args.seed, args.config)
        export_frames(sim, args.frames, n_frames=args.steps)
    elif args.demo or args.config:
        sim = build_simulation(preset, args.size, args.states, args.seed, args.config)
        run_demo(sim, preset, n_steps=args.steps)
    elif args.app:
        import subprocess
        print("Launching Streamlit app...")
        subprocess.run(['streamlit', 'run', 'app.py'])
    else:
        parser.print_help()
        print("\nNo action specified. Run with --run, --demo, --animate, --frames or --app")


if __name__ == "__main__":
    main()
