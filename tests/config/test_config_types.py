"""Tests for cube_automata.config.types and presets."""

from __future__ import annotations

import json

import pytest

from cube_automata.config.presets import (
    DEFAULT_COMPETITION_CONFIG,
    INFO_PRESETS,
    LIFE3D_PRESETS,
    energy_presets,
    magnet_presets,
)
from cube_automata.config.types import (
    Algorithm,
    BatchSimulationConfig,
    CompetitionConfig,
    EnergyConfig,
    InfoConfig,
    Life3DConfig,
    MagnetConfig,
    Ruleset,
    SourceMode,
    config_from_dict,
    config_to_dict,
)


class TestConfigFromDict:
    def test_missing_fields_take_defaults(self) -> None:
        assert config_from_dict("competition", {}) == CompetitionConfig(4, 5, 7)
        assert config_from_dict(Algorithm.COMPETITION, None) == DEFAULT_COMPETITION_CONFIG

    def test_camel_case_keys(self) -> None:
        config = config_from_dict(
            "life3d",
            {"birthNeighbors": [4, 5], "survivalNeighbors": [5], "edgeBias": 0.8, "unknown": 1},
        )
        assert config == Life3DConfig(
            birth_neighbors=frozenset({4, 5}), survival_neighbors=frozenset({5}), edge_bias=0.8
        )

    def test_snake_case_keys(self) -> None:
        config = config_from_dict("energy", {"injection_points": [[1, 2, 3]], "diffusion_rate": 0.4})
        assert isinstance(config, EnergyConfig)
        assert config.injection_points == ((1, 2, 3),)
        assert config.diffusion_rate == 0.4

    def test_info_gate_keys_become_ints(self) -> None:
        config = config_from_dict("info", {"gateTypes": {"0": "and", "3": "sink"}, "sourceMode": "oscillating"})
        assert isinstance(config, InfoConfig)
        assert config.gate_types == ((0, "AND"), (3, "SINK"))
        assert config.gate_name(3) == "SINK"
        assert config.gate_name(9) == "WIRE"
        assert config.source_mode is SourceMode.OSCILLATING

    def test_invalid_algorithm(self) -> None:
        with pytest.raises(ValueError, match="algorithm must be one of"):
            config_from_dict("gravity", {})

    @pytest.mark.parametrize(
        "config",
        [
            CompetitionConfig(),
            Life3DConfig(),
            EnergyConfig(injection_points=((0, 0, 0),)),
            MagnetConfig(global_field=(0.0, 1.0, 0.0), vortex_centers=((1.0, 1.0, 1.0),)),
            InfoConfig(),
        ],
        ids=lambda c: c.algorithm.value,
    )
    def test_to_dict_is_json_and_reloads(self, config) -> None:
        payload = json.loads(json.dumps(config_to_dict(config)))
        assert config_from_dict(config.algorithm, payload) == config


class TestValidation:
    def test_rule_parameters_are_not_validated(self) -> None:
        config = Life3DConfig(birth_neighbors=frozenset({40}), survival_neighbors=frozenset({-1}))
        assert 40 in config.birth_neighbors
        assert CompetitionConfig(min_neighbors_to_birth=1, min_neighbors_to_survive=9)

    def test_injection_points_must_be_triples(self) -> None:
        with pytest.raises(ValueError):
            EnergyConfig(injection_points=((1, 2),))

    def test_global_field_must_be_triple(self) -> None:
        with pytest.raises(ValueError):
            MagnetConfig(global_field=(1.0, 0.0))  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"cube_size": 0},
            {"max_generations": -1},
            {"runs_per_ruleset": 0},
            {"workers": 0},
        ],
    )
    def test_batch_config_structural_errors(self, kwargs) -> None:
        with pytest.raises(ValueError):
            BatchSimulationConfig(**kwargs)

    def test_ruleset_algorithm_follows_config(self) -> None:
        ruleset = Ruleset(name="x", cube_size=3, max_generations=5, config=MagnetConfig())
        assert ruleset.algorithm is Algorithm.MAGNET

    @pytest.mark.parametrize(
        "config",
        [CompetitionConfig(), Life3DConfig(), EnergyConfig(), MagnetConfig(), InfoConfig()],
        ids=lambda c: c.algorithm.value,
    )
    def test_rulesets_are_hashable(self, config) -> None:
        ruleset = Ruleset(name="x", cube_size=3, max_generations=5, config=config)
        assert hash(ruleset) == hash(Ruleset(name="x", cube_size=3, max_generations=5, config=config))
        assert len({ruleset, ruleset}) == 1

    def test_gate_palette_is_immutable(self) -> None:
        config = InfoConfig(gate_types={2: "or", 0: "wire"})
        assert config.gate_types == ((0, "WIRE"), (2, "OR"))
        assert config.palette == ("WIRE", "OR")
        assert not hasattr(config.gate_types, "__setitem__")

    def test_ruleset_rejects_empty_cube(self) -> None:
        with pytest.raises(ValueError):
            Ruleset(name="x", cube_size=0, max_generations=5, config=CompetitionConfig())


class TestPresets:
    def test_life3d_presets(self) -> None:
        assert set(LIFE3D_PRESETS) == {"classic", "stable", "growth", "decay"}
        assert LIFE3D_PRESETS["classic"].edge_bias == 0.8

    def test_energy_presets_scale_with_cube(self) -> None:
        presets = energy_presets(6)
        assert presets["central_source"].injection_points == ((3, 3, 3),)
        assert presets["corner_sources"].injection_points[-1] == (5, 5, 5)

    def test_magnet_presets_unit_field(self) -> None:
        field = magnet_presets(4, (0.0, 2.0, 0.0))["uniform_field"].global_field
        assert field == pytest.approx((0.0, 1.0, 0.0))

    def test_info_presets(self) -> None:
        assert INFO_PRESETS["digital_logic"].gate_name(7) == "SOURCE"
