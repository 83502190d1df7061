#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
License:        MIT License
================================================================================
"""

import io

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from PIL import Image
from potts_canvas.lattice import LATTICE_DTYPE
from potts_canvas.visualization import (
    PALETTES,
    lattice_to_rgba,
    make_palette,
    render_lattice_png,
    save_frame
)


class TestPalettes:
    """Tests for state palettes."""

    def test_auto_matches_state_count(self):
        assert make_palette(2) is PALETTES["mono"]
        assert make_palette(5) is PALETTES["rose"]

    def test_auto_fallback(self):
        palette = make_palette(7)
        assert palette.shape == (7, 4)
        assert palette.dtype == np.uint8

    def test_named_palette_too_small(self):
        with pytest.raises(ValueError):
            make_palette(4, "blush")


class TestLatticeImages:
    """Tests for lattice rendering."""

    def test_rgba_orientation(self):
        lattice = np.zeros((3, 2), dtype=LATTICE_DTYPE)
        lattice[2, 1] = 1
        image = lattice_to_rgba(lattice, PALETTES["mono"])
        assert image.shape == (2, 3, 4)
        assert tuple(image[1, 2]) == (255, 255, 255, 255)

    def test_png_scaled(self):
        lattice = np.zeros((4, 3), dtype=LATTICE_DTYPE)
        data = render_lattice_png(lattice, 2, scale=3)
        image = Image.open(io.BytesIO(data))
        assert image.size == (12, 9)

    def test_png_y_up(self):
        """Row j = n_y - 1 is drawn at the top of the image."""
        lattice = np.zeros((2, 2), dtype=LATTICE_DTYPE)
        lattice[0, 1] = 1
        image = np.asarray(Image.open(io.BytesIO(render_lattice_png(lattice, 2))))
        assert tuple(image[0, 0]) == (255, 255, 255, 255)
        assert tuple(image[1, 0]) == (0, 0, 0, 255)

    def test_save_frame_numbering(self, tmp_path):
        lattice = np.zeros((4, 4), dtype=LATTICE_DTYPE)
        path = save_frame(lattice, 2, tmp_path / "frames", 7)
        assert path.name == "007.png"
        assert path.exists()
