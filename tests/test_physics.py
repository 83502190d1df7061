#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Physics Module Tests
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
from potts_canvas.config import BETA_C
from potts_canvas.lattice import LATTICE_DTYPE, states_in_range
from potts_canvas.physics import (
    SweepStats,
    local_energy,
    metropolis_trial,
    sweep,
    calculate_local_energies,
    calculate_total_energy,
    acceptance_probability
)
from potts_canvas.rng import DeterministicRNG


def checkerboard(n: int) -> np.ndarray:
    i, j = np.indices((n, n))
    return ((i + j) % 2).astype(LATTICE_DTYPE)


class TestLocalEnergy:
    """Tests for the 4 - 2k local energy."""

    def test_uniform_lattice(self):
        """All four neighbours match: E = -4."""
        lattice = np.zeros((5, 5), dtype=LATTICE_DTYPE)
        for i in range(5):
            for j in range(5):
                assert local_energy(lattice, i, j) == -4.0

    def test_checkerboard(self):
        """No neighbour matches: E = +4."""
        lattice = checkerboard(4)
        assert local_energy(lattice, 0, 0) == 4.0
        assert local_energy(lattice, 3, 2) == 4.0

    def test_single_defect(self):
        """A lone odd cell costs +4; each of its neighbours sits at -2."""
        lattice = np.zeros((5, 5), dtype=LATTICE_DTYPE)
        lattice[2, 2] = 1
        assert local_energy(lattice, 2, 2) == 4.0
        assert local_energy(lattice, 1, 2) == -2.0
        assert local_energy(lattice, 2, 3) == -2.0
        assert local_energy(lattice, 0, 0) == -4.0

    def test_periodic_wrap(self):
        """Neighbours wrap around both edges."""
        lattice = np.zeros((4, 4), dtype=LATTICE_DTYPE)
        lattice[3, 0] = 1
        # (0, 0) has (3, 0) as its upper neighbour
        assert local_energy(lattice, 0, 0) == -2.0
        # (3, 3) has (3, 0) as its right neighbour
        assert local_energy(lattice, 3, 3) == -2.0

    def test_energy_bounds(self):
        """Local energy stays within [-4, 4] on a random lattice."""
        rng = DeterministicRNG(7)
        lattice = rng.integers(3, size=(8, 8)).astype(LATTICE_DTYPE)
        energies = calculate_local_energies(lattice)
        assert np.all(energies >= -4.0)
        assert np.all(energies <= 4.0)


class TestVectorisedEnergy:
    """Tests for whole-lattice energy helpers."""

    def test_matches_local_energy(self):
        rng = DeterministicRNG(3)
        lattice = rng.integers(4, size=(6, 7)).astype(LATTICE_DTYPE)
        energies = calculate_local_energies(lattice)
        for i in range(6):
            for j in range(7):
                assert energies[i, j] == local_energy(lattice, i, j)

    def test_total_energy_uniform(self):
        """Every bond matched: total = -(number of bonds) = -2N."""
        lattice = np.zeros((6, 6), dtype=LATTICE_DTYPE)
        assert calculate_total_energy(lattice) == -72.0

    def test_total_energy_checkerboard(self):
        lattice = checkerboard(6)
        assert calculate_total_energy(lattice) == 72.0


class TestMetropolisTrial:
    """Tests for a single trial."""

    def test_uphill_move_rejected_at_high_beta(self):
        """Flipping a cell in a uniform patch costs dE = 8."""
        lattice = np.zeros((4, 4), dtype=LATTICE_DTYPE)
        kept = metropolis_trial(lattice, 1, 1, 1, 0.5, 10.0)
        assert not kept
        assert lattice[1, 1] == 0

    def test_downhill_move_always_accepted(self):
        """Healing a defect lowers the energy and is always kept."""
        lattice = np.zeros((4, 4), dtype=LATTICE_DTYPE)
        lattice[2, 2] = 1
        kept = metropolis_trial(lattice, 2, 2, 0, 1e-12, 10.0)
        assert kept
        assert lattice[2, 2] == 0

    def test_zero_beta_accepts_everything(self):
        lattice = np.zeros((4, 4), dtype=LATTICE_DTYPE)
        assert metropolis_trial(lattice, 0, 0, 1, 1e-12, 0.0)
        assert lattice[0, 0] == 1

    def test_same_state_proposal_kept(self):
        """dE = 0 is accepted for any u in (0, 1]."""
        lattice = np.zeros((4, 4), dtype=LATTICE_DTYPE)
        assert metropolis_trial(lattice, 3, 3, 0, 1e-12, 100.0)
        assert lattice[3, 3] == 0

    def test_accepted_trial_changes_one_cell(self):
        rng = DeterministicRNG(21)
        lattice = rng.integers(3, size=(6, 6)).astype(LATTICE_DTYPE)
        for i, j, candidate in [(0, 0, 1), (5, 5, 2), (2, 3, 0), (4, 1, 1)]:
            before = lattice.copy()
            assert metropolis_trial(lattice, i, j, candidate, 0.5, 0.0)
            changed = lattice != before
            assert np.count_nonzero(changed) <= 1
            assert lattice[i, j] == candidate
            changed[i, j] = False
            assert not changed.any()

    def test_rejected_trial_keeps_lattice_and_energy(self):
        rng = DeterministicRNG(22)
        lattice = rng.integers(2, size=(6, 6)).astype(LATTICE_DTYPE)
        rejected = 0
        for i in range(6):
            for j in range(6):
                before = lattice.copy()
                energy_before = calculate_total_energy(lattice)
                if not metropolis_trial(lattice, i, j, 1 - lattice[i, j], 0.5, 50.0):
                    rejected += 1
                    np.testing.assert_array_equal(lattice, before)
                    assert calculate_total_energy(lattice) == energy_before
                else:
                    assert np.count_nonzero(lattice != before) == 1
        assert rejected > 0

    def test_threshold(self):
        """Accept iff ln(u) <= beta * (E_old - E_new)."""
        beta = 0.25
        threshold = np.exp(-beta * 8.0)

        lattice = np.zeros((4, 4), dtype=LATTICE_DTYPE)
        assert metropolis_trial(lattice, 0, 0, 1, threshold * 0.99, beta)

        lattice = np.zeros((4, 4), dtype=LATTICE_DTYPE)
        assert not metropolis_trial(lattice, 0, 0, 1, threshold * 1.01, beta)


class TestSweep:
    """Tests for full sweeps."""

    def test_trial_count(self):
        lattice = np.zeros((4, 5), dtype=LATTICE_DTYPE)
        stats = sweep(lattice, 1.0, DeterministicRNG(1), 2)
        assert stats.trials == 20

    def test_zero_beta_accepts_all_trials(self):
        lattice = np.zeros((4, 4), dtype=LATTICE_DTYPE)
        stats = sweep(lattice, 0.0, DeterministicRNG(2), 2)
        assert stats.accepted == 16
        assert stats.acceptance_rate == 1.0

    def test_cold_uniform_lattice_is_fixed_point(self):
        """At very high beta a uniform lattice never changes."""
        lattice = np.zeros((8, 8), dtype=LATTICE_DTYPE)
        rng = DeterministicRNG(3)
        for _ in range(5):
            stats = sweep(lattice, 50.0, rng, 2)
            assert stats.flipped == 0
        assert np.all(lattice == 0)

    def test_states_stay_in_range(self):
        rng = DeterministicRNG(4)
        lattice = rng.integers(5, size=(10, 10)).astype(LATTICE_DTYPE)
        for _ in range(10):
            sweep(lattice, 0.3, rng, 5)
        assert states_in_range(lattice, 5)
        assert lattice.dtype == LATTICE_DTYPE

    def test_matches_trial_by_trial_loop(self):
        """The compiled sweep consumes draws in (i, j, candidate, u) order."""
        n_x, n_y, n_states = 6, 5, 3
        rng = DeterministicRNG(99)
        lattice = rng.integers(n_states, size=(n_x, n_y)).astype(LATTICE_DTYPE)

        reference = lattice.copy()
        reference_rng = rng.clone()

        stats = sweep(lattice, BETA_C, rng, n_states)

        accepted = 0
        for _ in range(n_x * n_y):
            i = reference_rng.integers(n_x)
            j = reference_rng.integers(n_y)
            candidate = reference_rng.integers(n_states)
            u = reference_rng.open_uniform()
            if metropolis_trial(reference, i, j, candidate, u, BETA_C):
                accepted += 1

        np.testing.assert_array_equal(lattice, reference)
        assert stats.accepted == accepted
        # Both generators end at the same point in the stream
        assert rng.random() == reference_rng.random()

    def test_draw_order_follows_raw_pcg64_stream(self):
        """Rows are (site-i, site-j, candidate, 1 - u) off the plain PCG64 doubles."""
        n_x, n_y, n_states, beta = 4, 5, 3, 0.7
        lattice = np.zeros((n_x, n_y), dtype=LATTICE_DTYPE)
        reference = lattice.copy()

        sweep(lattice, beta, DeterministicRNG(2024), n_states)

        generator = np.random.Generator(np.random.PCG64(2024))
        for _ in range(n_x * n_y):
            i = min(int(generator.random() * n_x), n_x - 1)
            j = min(int(generator.random() * n_y), n_y - 1)
            candidate = min(int(generator.random() * n_states), n_states - 1)
            u = 1.0 - generator.random()
            metropolis_trial(reference, i, j, candidate, u, beta)

        np.testing.assert_array_equal(lattice, reference)

    def test_beta_field(self):
        """A zero-beta stripe melts while a cold background holds."""
        lattice = np.zeros((8, 8), dtype=LATTICE_DTYPE)
        beta = np.full((8, 8), 50.0)
        beta[:, 0] = 0.0
        rng = DeterministicRNG(5)
        for _ in range(20):
            sweep(lattice, beta, rng, 2)
        # Only cells with beta = 0 or next to a flipped cell could ever change
        assert np.all(lattice[:, 3:6] == 0)

    def test_beta_field_shape_mismatch(self):
        lattice = np.zeros((4, 4), dtype=LATTICE_DTYPE)
        with pytest.raises(ValueError):
            sweep(lattice, np.ones((4, 5)), DeterministicRNG(1), 2)

    def test_same_seed_same_result(self):
        a = DeterministicRNG(11).integers(3, size=(6, 6)).astype(LATTICE_DTYPE)
        b = a.copy()
        rng_a, rng_b = DeterministicRNG(12), DeterministicRNG(12)
        for _ in range(3):
            sweep(a, 0.5, rng_a, 3)
            sweep(b, 0.5, rng_b, 3)
        np.testing.assert_array_equal(a, b)


class TestSweepStats:
    """Tests for sweep counters."""

    def test_rates(self):
        stats = SweepStats(trials=10, accepted=4, flipped=2)
        assert stats.acceptance_rate == 0.4
        assert stats.flip_rate == 0.2

    def test_empty(self):
        stats = SweepStats()
        assert stats.acceptance_rate == 0.0
        assert stats.flip_rate == 0.0


class TestAcceptanceProbability:
    """Tests for the Metropolis acceptance probability."""

    def test_downhill(self):
        assert acceptance_probability(-4.0, 1.0) == 1.0

    def test_uphill(self):
        assert acceptance_probability(2.0, 0.5) == pytest.approx(np.exp(-1.0))
