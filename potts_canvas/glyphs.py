#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Glyph Outline Segments
================================================================================

Project:        Week 2 Project 1: Potts Hotspot Canvas
Module:         glyphs.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Turns text characters into straight line segments for outline-traced
hotspots. Glyph outlines come from matplotlib's TextPath; Bezier curves are
flattened into polylines by Path.to_polygons().
"""

from typing import Dict, List, Optional, Tuple

import numpy as np
from matplotlib.font_manager import FontProperties
from matplotlib.textpath import TextPath

from .hotspots import Segment


def glyph_segments(
    character: str,
    size: float = 375.0,
    center: Tuple[float, float] = (0.0, 0.0),
    font: Optional[FontProperties] = None
) -> List[Segment]:
    """
    Outline of one glyph as line segments.

    The glyph is scaled to the given font size and its bounding box is
    centred on `center`.

    Args:
        character: Text to outline (usually one character)
        size: Font size in lattice units
        center: (x, y) point the glyph is centred on
        font: Font properties (default: matplotlib's default sans-serif)

    Returns:
        List of ((x0, y0), (x1, y1)) segments; empty for blank glyphs
    """
    path = TextPath((0.0, 0.0), character, size=size, prop=font or FontProperties())
    polygons = [np.asarray(p, dtype=np.float64) for p in path.to_polygons(closed_only=False)]
    polygons = [p for p in polygons if len(p) >= 2]

    if not polygons:
        return []

    vertices = np.concatenate(polygons)
    mid = (vertices.min(axis=0) + vertices.max(axis=0)) / 2.0
    shift = np.asarray(center, dtype=np.float64) - mid

    segments: List[Segment] = []
    for polygon in polygons:
        polygon = polygon + shift
        for a, b in zip(polygon[:-1], polygon[1:]):
            segments.append(((float(a[0]), float(a[1])), (float(b[0]), float(b[1]))))

    return segments


class GlyphOutlineProvider:
    """
    Outline provider cycling through a fixed sequence of characters.

    Frame k shows characters[k % len(characters)]. Outlines are cached per
    character.
    """

    def __init__(
        self,
        characters: str = "ABC",
        size: float = 375.0,
        center: Tuple[float, float] = (0.0, 0.0),
        font: Optional[FontProperties] = None
    ):
        if not characters:
            raise ValueError("GlyphOutlineProvider needs at least one character")
        self.characters = characters
        self.size = size
        self.center = center
        self.font = font
        self._cache: Dict[str, List[Segment]] = {}

    def character_for(self, frame_index: int) -> str:
        return self.characters[frame_index % len(self.characters)]

    def __call__(self, frame_index: int) -> List[Segment]:
        character = self.character_for(frame_index)
        if character not in self._cache:
            self._cache[character] = glyph_segments(
                character, self.size, self.center, self.font
            )
        return self._cache[character]
