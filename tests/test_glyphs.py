#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Glyph Outline Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
License:        MIT License
================================================================================
"""

import numpy as np
import pytest
from potts_canvas.glyphs import GlyphOutlineProvider, glyph_segments
from potts_canvas.hotspots import resample_segments


def segment_points(segments):
    return np.array([p for segment in segments for p in segment])


class TestGlyphSegments:
    """Tests for glyph outlines."""

    def test_letter_has_segments(self):
        segments = glyph_segments("A", size=100.0)
        assert len(segments) > 0
        for start, end in segments:
            assert len(start) == 2
            assert len(end) == 2

    def test_centred_on_point(self):
        points = segment_points(glyph_segments("B", size=100.0, center=(10.0, -20.0)))
        mid = (points.min(axis=0) + points.max(axis=0)) / 2.0
        np.testing.assert_allclose(mid, [10.0, -20.0], atol=1e-6)

    def test_scales_with_size(self):
        small = segment_points(glyph_segments("C", size=50.0))
        large = segment_points(glyph_segments("C", size=200.0))
        small_height = np.ptp(small[:, 1])
        large_height = np.ptp(large[:, 1])
        # Curve flattening depends on absolute size, so only roughly 4x
        assert large_height == pytest.approx(4.0 * small_height, rel=0.05)

    def test_blank_glyph(self):
        assert glyph_segments(" ") == []

    def test_resampled_outline_has_hotspots(self):
        points = resample_segments(glyph_segments("A", size=100.0), 5.0)
        assert points.ndim == 2
        assert points.shape[1] == 2
        assert len(points) >= len(glyph_segments("A", size=100.0))


class TestGlyphOutlineProvider:
    """Tests for the character-cycling provider."""

    def test_cycles_through_characters(self):
        provider = GlyphOutlineProvider("ABC", size=50.0)
        assert [provider.character_for(k) for k in range(5)] == ["A", "B", "C", "A", "B"]

    def test_same_character_same_outline(self):
        provider = GlyphOutlineProvider("AB", size=50.0)
        assert provider(0) is provider(2)
        assert provider(1) != provider(0)

    def test_empty_characters(self):
        with pytest.raises(ValueError):
            GlyphOutlineProvider("")
