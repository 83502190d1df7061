#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Lattice Visualization Module
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This module provides visualization tools for the lattice simulation:
- State palettes and lattice-to-RGBA conversion
- Lattice and beta-field rendering for Matplotlib and Streamlit
- Numbered PNG frame export
- Animations of recorded lattice histories

Nothing here feeds back into the simulation; colours carry no physics.
"""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from matplotlib.colors import LinearSegmentedColormap
from PIL import Image


# Palettes (RGBA, 0-255) indexed by cell state
PALETTES = {
    "mono": np.array([
        [0, 0, 0, 255],
        [255, 255, 255, 255],
    ], dtype=np.uint8),
    "blush": np.array([
        [255, 141, 151, 255],
        [255, 192, 203, 255],
        [255, 255, 255, 255],
    ], dtype=np.uint8),
    "rose": np.array([
        [255, 48, 50, 255],
        [255, 96, 101, 255],
        [255, 141, 151, 255],
        [255, 192, 203, 255],
        [255, 255, 255, 255],
    ], dtype=np.uint8),
}


def create_beta_colormap():
    """
    Colormap for the beta field.

    Red (hot, low beta) -> Pink -> White -> Blue (cold, high beta)
    """
    colors = [
        (0.8, 0.1, 0.1),    # Red (hot)
        (1.0, 0.55, 0.6),   # Pink
        (1.0, 1.0, 1.0),    # White
        (0.3, 0.5, 0.9),    # Light blue
        (0.0, 0.1, 0.5),    # Dark blue (cold)
    ]
    return LinearSegmentedColormap.from_list("beta", colors, N=256)


BETA_CMAP = create_beta_colormap()


@dataclass
class VisualizationConfig:
    """Configuration for visualization."""
    palette: str = "auto"  # "auto" or a key of PALETTES
    show_hotspots: bool = False
    hotspot_color: str = "#ef4444"
    hotspot_size: float = 2.0
    background_color: str = "#000000"
    beta_min: Optional[float] = None
    beta_max: Optional[float] = None
    figsize: Tuple[int, int] = (8, 8)


def make_palette(n_states: int, name: str = "auto") -> np.ndarray:
    """
    RGBA palette with at least n_states entries.

    "auto" picks the sketch palette matching n_states when there is one and
    otherwise samples the viridis colormap.
    """
    if name != "auto":
        palette = PALETTES[name]
        if len(palette) < n_states:
            raise ValueError(f"palette {name!r} has {len(palette)} colours, need {n_states}")
        return palette

    for palette in PALETTES.values():
        if len(palette) == n_states:
            return palette

    samples = plt.get_cmap("viridis")(np.linspace(0.0, 1.0, max(n_states, 1)))
    return (samples * 255).round().astype(np.uint8)


def lattice_to_rgba(lattice: np.ndarray, palette: np.ndarray) -> np.ndarray:
    """
    Convert a lattice to an image array.

    The lattice is indexed [i, j] with i along x and j along y; the image is
    returned as [row, column] = [j, i] so that it displays with origin='lower'.

    Returns:
        (n_y, n_x, 4) uint8 array
    """
    return palette[lattice.T.astype(np.intp)]


def render_lattice_matplotlib(
    lattice: np.ndarray,
    n_states: int,
    extent: Tuple[float, float, float, float],
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None,
    hotspots: Optional[np.ndarray] = None
) -> plt.Figure:
    """
    Render the lattice using Matplotlib.

    Args:
        lattice: (n_x, n_y) array of states
        n_states: Number of states (selects the palette)
        extent: (x0, x1, y0, y1) physical bounds of the lattice
        config: Visualization configuration
        ax: Optional existing axes to draw on
        hotspots: Optional (n, 2) hotspot positions to overlay

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    if ax is None:
        fig = plt.figure(figsize=config.figsize)
        ax = fig.add_axes([0, 0, 1, 1])  # Full figure, no margins
    else:
        fig = ax.figure

    ax.clear()
    ax.set_facecolor(config.background_color)
    fig.patch.set_facecolor(config.background_color)

    image = lattice_to_rgba(lattice, make_palette(n_states, config.palette))
    ax.imshow(image, origin="lower", extent=extent, interpolation="nearest")

    if config.show_hotspots and hotspots is not None and len(hotspots) > 0:
        ax.scatter(
            hotspots[:, 0], hotspots[:, 1],
            s=config.hotspot_size,
            c=config.hotspot_color,
            linewidths=0,
            alpha=0.8
        )

    ax.set_xlim(extent[0], extent[1])
    ax.set_ylim(extent[2], extent[3])
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.axis("off")

    return fig


def render_lattice_png(
    lattice: np.ndarray,
    n_states: int,
    scale: int = 1,
    palette: str = "auto"
) -> bytes:
    """
    Render the lattice directly to PNG bytes (for Streamlit).

    One cell maps to a scale x scale block of pixels; y increases upward.
    """
    pixels = np.ascontiguousarray(np.flipud(lattice_to_rgba(lattice, make_palette(n_states, palette))))
    image = Image.fromarray(pixels)
    if scale > 1:
        image = image.resize((image.width * scale, image.height * scale), Image.Resampling.NEAREST)

    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def save_frame(
    lattice: np.ndarray,
    n_states: int,
    directory: Union[str, Path],
    frame_index: int,
    scale: int = 1,
    palette: str = "auto"
) -> Path:
    """
    Write one numbered PNG frame (000.png, 001.png, ...).

    Returns:
        Path of the written file
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{frame_index:03d}.png"
    path.write_bytes(render_lattice_png(lattice, n_states, scale, palette))
    return path


def render_beta_field(
    beta: Union[float, np.ndarray],
    extent: Tuple[float, float, float, float],
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None,
    colorbar: bool = True
) -> plt.Figure:
    """
    Render the beta field as a heatmap.

    Args:
        beta: Scalar beta or (n_x, n_y) beta field
        extent: (x0, x1, y0, y1) physical bounds
        config: Visualization configuration
        ax: Optional existing axes
        colorbar: Whether to attach a colorbar

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=config.figsize)
    else:
        fig = ax.figure

    ax.clear()

    field = np.atleast_2d(np.asarray(beta, dtype=np.float64))
    im = ax.imshow(
        field.T,  # Transpose for correct orientation
        origin="lower",
        extent=extent,
        cmap=BETA_CMAP,
        vmin=config.beta_min,
        vmax=config.beta_max,
        aspect="equal",
        interpolation="nearest"
    )

    if colorbar:
        plt.colorbar(im, ax=ax, label="β (inverse temperature)")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title("Beta Field")

    return fig


def render_beta_png(
    beta: Union[float, np.ndarray],
    extent: Tuple[float, float, float, float],
    config: Optional[VisualizationConfig] = None
) -> bytes:
    """Render the beta field and return PNG bytes for Streamlit."""
    fig = render_beta_field(beta, extent, config)

    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=100, bbox_inches="tight")
    plt.close(fig)
    buf.seek(0)

    return buf.getvalue()


def render_observable_plot(
    steps: Sequence[int],
    betas: Sequence[float],
    orders: Sequence[float],
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render beta and order parameter against step number.

    Args:
        steps: Step numbers
        betas: Mean beta per step
        orders: Order parameter per step
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 4))
    else:
        fig = ax.figure

    ax.clear()
    ax.plot(steps, orders, "b-", label="Order parameter", linewidth=1.5)
    ax.set_xlabel("Step")
    ax.set_ylabel("Order parameter")
    ax.set_ylim(-0.05, 1.05)
    ax.grid(True, alpha=0.3)

    ax_beta = ax.twinx()
    ax_beta.plot(steps, betas, "r-", label="Mean β", linewidth=1.0, alpha=0.7)
    ax_beta.set_ylabel("Mean β")

    lines = ax.get_lines() + ax_beta.get_lines()
    ax.legend(lines, [line.get_label() for line in lines], loc="best")
    ax.set_title("Order vs Step")

    return fig


def create_animation(
    lattice_history: List[np.ndarray],
    n_states: int,
    extent: Tuple[float, float, float, float],
    config: Optional[VisualizationConfig] = None,
    fps: int = 30
) -> animation.FuncAnimation:
    """
    Create an animation from recorded lattices.

    Args:
        lattice_history: List of (n_x, n_y) lattice snapshots
        n_states: Number of states
        extent: (x0, x1, y0, y1) physical bounds
        config: Visualization configuration
        fps: Frames per second

    Returns:
        Matplotlib animation
    """
    if config is None:
        config = VisualizationConfig()

    fig = plt.figure(figsize=config.figsize)
    ax = fig.add_axes([0, 0, 1, 1])
    palette = make_palette(n_states, config.palette)
    image = ax.imshow(
        lattice_to_rgba(lattice_history[0], palette),
        origin="lower", extent=extent, interpolation="nearest"
    )
    ax.axis("off")

    def update(frame):
        image.set_data(lattice_to_rgba(lattice_history[frame], palette))
        return image,

    ani = animation.FuncAnimation(
        fig, update, frames=len(lattice_history),
        interval=1000 / fps, blit=True
    )

    return ani
