#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Configuration Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
License:        MIT License
================================================================================
"""

import json
import logging
import math

import pytest
from potts_canvas.config import (
    BETA_C,
    BetaConfig,
    ConfigurationError,
    HotspotConfig,
    LatticeConfig,
    MotionMode,
    OrbitConfig,
    OutlineConfig,
    SimulationConfig,
    TemperatureMode,
    critical_beta,
    load_config,
    save_config
)
from potts_canvas.logger_setup import LOGGER_NAME, setup_logging


class TestConstants:
    """Tests for critical temperature constants."""

    def test_beta_c(self):
        assert BETA_C == pytest.approx(0.4406867935)

    def test_critical_beta_two_states(self):
        assert critical_beta(2) == pytest.approx(BETA_C)

    def test_critical_beta_decreases_in_temperature(self):
        """More states order only at lower temperature (higher beta)."""
        assert critical_beta(5) > critical_beta(3) > critical_beta(2)


class TestLatticeConfig:
    """Tests for lattice configuration."""

    def test_default_config(self):
        config = LatticeConfig()
        assert config.n_x == 100
        assert config.n_y == 100
        assert config.n_states == 2
        config.validate()

    def test_centred_origin(self):
        config = LatticeConfig(n_x=10, n_y=4, cell_size=(2.0, 0.5))
        assert config.resolved_origin == (-10.0, -1.0)
        assert config.center == (0.0, 0.0)

    def test_explicit_origin(self):
        config = LatticeConfig(n_x=10, n_y=10, origin=(0.0, 0.0))
        assert config.center == (5.0, 5.0)

    @pytest.mark.parametrize("kwargs", [
        dict(n_x=0),
        dict(n_states=0),
        dict(n_states=40000),
        dict(cell_size=(0.0, 1.0)),
        dict(initial="checkerboard"),
        dict(n_states=2, initial_state=2),
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            LatticeConfig(**kwargs).validate()


class TestBetaConfig:
    """Tests for inverse temperature configuration."""

    def test_constant(self):
        config = BetaConfig.constant(0.7)
        assert config.mode is TemperatureMode.UNIFORM
        assert config.schedule_initial == 0.7
        assert not config.oscillate
        config.validate()

    def test_schedule_initial_defaults_to_start(self):
        assert BetaConfig(beta_start=0.1, beta_end=0.2).schedule_initial == 0.1

    @pytest.mark.parametrize("kwargs", [
        dict(beta_start=-0.1),
        dict(beta_high=math.inf),
        dict(beta_low=math.nan),
        dict(beta_start=1.0, beta_end=0.5),
        dict(n_schedule_steps=0),
        dict(max_r=0.0),
        dict(initial_beta=-1.0),
        dict(mode="spatial"),
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            BetaConfig(**kwargs).validate()

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            BetaConfig(n_schedule_steps=0).validate()


class TestHotspotConfig:
    """Tests for hotspot configuration."""

    def test_only_active_mode_validated(self):
        HotspotConfig(mode=MotionMode.NONE, orbit=OrbitConfig(steps_per_revolution=0)).validate()

    def test_invalid_orbit(self):
        config = HotspotConfig(mode=MotionMode.ORBITAL, orbit=OrbitConfig(steps_per_revolution=0))
        with pytest.raises(ConfigurationError):
            config.validate()

    @pytest.mark.parametrize("kwargs", [
        dict(hold_steps=0),
        dict(dr=0.0),
        dict(equilibration_steps=-1),
    ])
    def test_invalid_outline(self, kwargs):
        config = HotspotConfig(mode=MotionMode.OUTLINE, outline=OutlineConfig(**kwargs))
        with pytest.raises(ConfigurationError):
            config.validate()


class TestSimulationConfigSerialization:
    """Tests for dict and JSON round trips."""

    def make_config(self):
        return SimulationConfig(
            lattice=LatticeConfig(n_x=20, n_y=30, n_states=4, cell_size=(2.5, 2.5), initial="random"),
            beta=BetaConfig(mode=TemperatureMode.SPATIAL, max_r=12.0, drive_high=True),
            hotspots=HotspotConfig(
                mode=MotionMode.ORBITAL,
                orbit=OrbitConfig(n_sources=12, path_radius=20.0, center=(1.0, 2.0))
            ),
            seed=7,
        )

    def test_to_dict_uses_plain_values(self):
        data = self.make_config().to_dict()
        assert data["beta"]["mode"] == "spatial"
        assert data["hotspots"]["mode"] == "orbital"
        json.dumps(data)

    def test_dict_round_trip(self):
        config = self.make_config()
        assert SimulationConfig.from_dict(config.to_dict()) == config

    def test_json_round_trip(self, tmp_path):
        config = self.make_config()
        path = tmp_path / "config.json"
        save_config(config, path)
        assert load_config(path) == config

    def test_missing_keys_use_defaults(self):
        config = SimulationConfig.from_dict({"lattice": {"n_x": 8}})
        assert config.lattice.n_x == 8
        assert config.lattice.n_y == 100
        assert config.hotspots.mode is MotionMode.NONE
        assert config.seed == 12345

    def test_unknown_mode(self):
        with pytest.raises(ConfigurationError):
            SimulationConfig.from_dict({"beta": {"mode": "scorching"}})

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError):
            SimulationConfig.from_dict({"lattice": {"width": 8}})

    def test_load_validates(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"lattice": {"n_states": 0}}))
        with pytest.raises(ConfigurationError):
            load_config(path)


class TestLoggingSetup:
    """Tests for the package logger."""

    def test_handlers_replaced(self, tmp_path):
        logger = logging.getLogger(LOGGER_NAME)
        saved = (logger.level, logger.propagate, list(logger.handlers))
        try:
            setup_logging("DEBUG")
            logger = setup_logging("WARNING", tmp_path / "logs" / "run.log")
            assert logger.name == LOGGER_NAME
            assert logger.level == logging.WARNING
            assert not logger.propagate
            assert len(logger.handlers) == 2

            logging.getLogger(LOGGER_NAME + ".simulation").warning("written to file")
            for handler in logger.handlers:
                handler.flush()
            assert "written to file" in (tmp_path / "logs" / "run.log").read_text()
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers[:] = saved[2]
            logger.setLevel(saved[0])
            logger.propagate = saved[1]
