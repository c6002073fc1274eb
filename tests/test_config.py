"""
Unit tests for the configuration module.

These tests validate defaults, dictionary/YAML/file loading, rejection of
unknown keys and range validation.
"""

import os

import pytest

from netviz_core.config import SimulationConfig, config_from_dict, config_from_yaml, load_config

SCRIPTS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "scripts")


class TestDefaults:
    def test_defaults_match_landing_page(self):
        cfg = SimulationConfig()
        assert cfg.max_distance == 150.0
        assert cfg.return_speed == 0.02
        assert cfg.interaction_step == 0.05
        assert cfg.node_spacing == 30.0
        assert cfg.max_general_nodes == 40
        assert cfg.layer_count == 3
        assert cfg.hub_count == 5
        assert cfg.marker_period == 3.0
        assert cfg.seed is None
        cfg.validate()

    def test_to_dict_round_trip(self):
        cfg = SimulationConfig(seed=3, max_distance=120.0)
        assert config_from_dict(cfg.to_dict()) == cfg


class TestLoading:
    def test_from_dict_overrides(self):
        cfg = config_from_dict({"max_distance": 200, "seed": 9})
        assert cfg.max_distance == 200
        assert cfg.seed == 9
        assert cfg.return_speed == 0.02

    def test_empty_inputs_give_defaults(self):
        assert config_from_dict(None) == SimulationConfig()
        assert config_from_yaml("") == SimulationConfig()

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="max_distanse"):
            config_from_dict({"max_distanse": 100})

    def test_yaml_must_be_mapping(self):
        with pytest.raises(ValueError):
            config_from_yaml("- 1\n- 2\n")

    def test_yaml_text(self):
        cfg = config_from_yaml("hub_count: 7\nramp_every_frame: true\n")
        assert cfg.hub_count == 7
        assert cfg.ramp_every_frame is True

    def test_bundled_files_load(self):
        landing = load_config(os.path.join(SCRIPTS_DIR, "landing.yaml"))
        assert landing.max_distance == 150
        dense = load_config(os.path.join(SCRIPTS_DIR, "dense.yaml"))
        assert dense.max_general_nodes == 80
        assert dense.seed == 2024

    def test_load_from_tmp_file(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("node_spacing: 60\n", encoding="utf-8")
        assert load_config(str(path)).node_spacing == 60


class TestValidation:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"max_distance": 0},
            {"interaction_step": -0.1},
            {"interaction_step": 1.5},
            {"return_speed": 1.2},
            {"layer_count": 0},
            {"hub_count": -1},
            {"min_edges_per_node": 0},
            {"min_edges_per_node": 4, "max_edges_per_node": 3},
            {"node_radius_min": 7.0},
            {"edge_opacity_min": 0.5, "edge_opacity_max": 0.1},
            {"marker_modulus": 0},
            {"frame_interval_ms": 0},
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        with pytest.raises(ValueError):
            config_from_dict(overrides)
