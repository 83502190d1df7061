#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Potts Hotspot Canvas - Interactive Streamlit Application
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This is the main Streamlit application for the Potts Hotspot Canvas.
Users can:
- Start one of the preset simulations (orbit, glyph, anneal, paint)
- Run, pause and single-step the lattice
- Paint static hotspots onto a cold, ordered lattice
- View the lattice, the beta field and the order parameter history
"""

import time

import streamlit as st
import matplotlib.pyplot as plt

from potts_canvas.config import BETA_C, MotionMode
from potts_canvas.simulation import (
    LatticeSimulation,
    create_annealing_simulation,
    create_glyph_simulation,
    create_orbit_simulation,
    create_painting_simulation,
)
from potts_canvas.thermodynamics import (
    ObservableTracker, Phase, calculate_domain_wall_density,
    calculate_order_parameter, identify_phase
)
from potts_canvas.visualization import VisualizationConfig, render_beta_png, render_lattice_png


# Page configuration
st.set_page_config(
    page_title="Potts Hotspot Canvas",
    page_icon="🔥",
    layout="wide",
    initial_sidebar_state="expanded"
)

PRESETS = {
    "Orbiting Ring": "orbit",
    "Glyph Outlines": "glyph",
    "Anneal / Melt": "anneal",
    "Paint Hotspots": "paint",
}

PHASE_COLORS = {
    Phase.ORDERED: "#3b82f6",
    Phase.MIXED: "#8b5cf6",
    Phase.DISORDERED: "#ef4444",
}


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'simulation' not in st.session_state:
        st.session_state.simulation = None
    if 'running' not in st.session_state:
        st.session_state.running = False
    if 'tracker' not in st.session_state:
        st.session_state.tracker = ObservableTracker()


def create_simulation(preset: str, size: float, n_states: int, seed: int) -> LatticeSimulation:
    """Create a new simulation from a preset name."""
    if preset == "orbit":
        return create_orbit_simulation(size=size, n_states=n_states, seed=seed)
    if preset == "glyph":
        return create_glyph_simulation(size=size, n_states=n_states, seed=seed)
    if preset == "anneal":
        return create_annealing_simulation(n_side=int(size / 2.5), n_states=n_states, seed=seed)
    return create_painting_simulation(n_side=int(size / 2.5), n_states=n_states, seed=seed)


def render_sidebar():
    """Render the sidebar with controls."""
    st.sidebar.title("🔥 Potts Hotspot Canvas")

    st.sidebar.markdown("""
    ---
    A **q-state Potts lattice** sampled with the Metropolis rule. Each cell
    prefers to match its four neighbours:

    $$E_{ij} = 4 - 2k$$

    **Hotspots** lower the inverse temperature β around them, melting the
    ordered pattern locally.

    ---
    """)

    st.sidebar.subheader("⚙️ Simulation Setup")

    preset_label = st.sidebar.selectbox("Preset", list(PRESETS.keys()))
    size = st.sidebar.slider(
        "Lattice Size (physical units)",
        min_value=100.0, max_value=500.0, value=250.0, step=25.0,
        help="Cells are 2.5 units wide; hotspot radii are in the same units"
    )
    n_states = st.sidebar.slider("Number of States (q)", min_value=2, max_value=8, value=2)
    seed = st.sidebar.number_input("Seed", min_value=0, value=12345, step=1)

    if st.sidebar.button("🚀 Initialize Simulation", use_container_width=True):
        st.session_state.simulation = create_simulation(
            PRESETS[preset_label], size, n_states, int(seed)
        )
        st.session_state.tracker = ObservableTracker()
        st.session_state.running = False
        st.rerun()

    st.sidebar.markdown("---")
    st.sidebar.markdown(f"*Critical β (q=2): {BETA_C:.4f}*")


def run_simulation_step(n_steps: int = 1):
    """Run simulation for n steps and record observables."""
    sim = st.session_state.simulation
    if sim is None:
        return

    for _ in range(n_steps):
        sim.step()

    state = sim.state
    st.session_state.tracker.update(
        state.step, state.lattice, state.n_states, state.mean_beta,
        state.last_sweep.acceptance_rate
    )


def render_paint_controls(sim: LatticeSimulation):
    """Sliders and buttons for placing static hotspots."""
    state = sim.state
    x0, x1, y0, y1 = state.geometry.extent

    st.markdown("### 🖌️ Paint Hotspots")
    paint_col1, paint_col2 = st.columns(2)
    with paint_col1:
        x = st.slider("X Position", float(x0), float(x1), float((x0 + x1) / 2), step=1.0)
    with paint_col2:
        y = st.slider("Y Position", float(y0), float(y1), float((y0 + y1) / 2), step=1.0)

    paint_btn1, paint_btn2 = st.columns(2)
    with paint_btn1:
        if st.button("🔥 Add Hotspot Here", use_container_width=True):
            sim.add_hotspot(x, y)
            st.rerun()
    with paint_btn2:
        if st.button("❄️ Clear Hotspots", use_container_width=True):
            sim.clear_hotspots()
            st.rerun()


def render_main_content():
    """Render the main simulation content."""
    sim = st.session_state.simulation

    if sim is None:
        st.title("🔥 Potts Hotspot Canvas")
        st.markdown("""
        ## Welcome!

        Watch a lattice of coloured cells order itself at low temperature and
        melt wherever a **hotspot** passes by.

        ### 🚀 Getting Started:
        1. Pick a preset in the sidebar
        2. Click **Initialize Simulation**
        3. Press **Run** and watch the pattern evolve

        *👈 Use the sidebar to begin!*
        """)
        return

    state = sim.state
    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("Lattice")

        btn_col1, btn_col2, btn_col3, btn_col4 = st.columns(4)
        with btn_col1:
            run_label = "▶️ Run" if not st.session_state.running else "⏸️ Pause"
            if st.button(run_label, use_container_width=True, key="run_pause_btn"):
                st.session_state.running = not st.session_state.running
                st.rerun()
        with btn_col2:
            if st.button("⏭️ Step (x10)", use_container_width=True):
                run_simulation_step(10)
        with btn_col3:
            if st.button("🔄 Reset", use_container_width=True):
                st.session_state.simulation = None
                st.session_state.running = False
                st.rerun()
        with btn_col4:
            st.metric("Steps", state.step)

        if st.session_state.running:
            run_simulation_step(1)

        scale = max(1, 500 // state.lattice.shape[0])
        st.image(render_lattice_png(state.lattice, state.n_states, scale=scale))

        if state.config.hotspots.mode is MotionMode.STATIC and not st.session_state.running:
            render_paint_controls(sim)

    with col2:
        st.subheader("Analysis")

        order = calculate_order_parameter(state.lattice, state.n_states)
        walls = calculate_domain_wall_density(state.lattice)
        phase_info = identify_phase(order, walls, state.mean_beta)

        st.markdown(
            f'<div style="background-color:{PHASE_COLORS[phase_info.phase]};color:white;'
            f'padding:10px;border-radius:8px;text-align:center;font-weight:bold;">'
            f'{phase_info.phase.value.upper()}</div>',
            unsafe_allow_html=True
        )

        met1, met2 = st.columns(2)
        with met1:
            st.metric("Order (m)", f"{order:.3f}")
        with met2:
            st.metric("Mean β", f"{state.mean_beta:.3f}")

        met3, met4 = st.columns(2)
        with met3:
            st.metric("Acceptance", f"{state.last_sweep.acceptance_rate:.3f}")
        with met4:
            st.metric("Hotspots", len(state.hotspot_positions))

        st.markdown("### Beta Field")
        st.image(render_beta_png(
            state.beta, state.geometry.extent,
            VisualizationConfig(figsize=(4, 4), beta_min=0.0)
        ))

        tracker = st.session_state.tracker
        if len(tracker.order_history) > 1:
            st.markdown("### Order History")
            fig, ax = plt.subplots(figsize=(6, 3))
            ax.plot(tracker.step_history, tracker.order_history, 'b-', linewidth=1)
            ax.set_xlabel('Step')
            ax.set_ylabel('m')
            ax.set_ylim(-0.05, 1.05)
            ax.grid(True, alpha=0.3)
            plt.tight_layout()
            st.pyplot(fig)
            plt.close()

    if st.session_state.running:
        time.sleep(0.05)
        st.rerun()


def main():
    """Main application entry point."""
    initialize_session_state()
    render_sidebar()
    render_main_content()


if __name__ == "__main__":
    main()
