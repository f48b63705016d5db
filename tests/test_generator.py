"""Tests for the solar system generation pipeline."""

import logging

import pytest

from solargen import SolarSystemGenerator, generate_solar_system
from solargen.errors import UnknownSystemClassError
from solargen.models import ConfigOverrides, DiskType, GenerationStage, SolarSystemClass
from solargen.physics import equilibrium_temperature, kepler_period
from solargen.utils.serialization import result_to_json


class TestSolarSystemGenerator:
    """Test full generation calls."""

    def test_generate_single_star_seed_42(self):
        """Test deterministic generation with seed 42."""
        result1 = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.SINGLE_STAR)
        result2 = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.SINGLE_STAR)

        assert result1 == result2
        assert result_to_json(result1) == result_to_json(result2)
        assert result1.config.seed == 42
        assert result1.config.system_class == SolarSystemClass.SINGLE_STAR
        assert result1.config.number_of_stars == 1
        assert 0 <= result1.config.number_of_planets <= 15

    def test_random_class_deterministic(self):
        """Test discoverability-weighted picks are reproducible."""
        for seed in range(10):
            result1 = SolarSystemGenerator(seed).generate_solar_system()
            result2 = SolarSystemGenerator(seed).generate_solar_system()
            assert result1 == result2

    def test_string_class_accepted(self):
        """Test the class can be given by value."""
        result = SolarSystemGenerator(3).generate_solar_system("rocky_dominated")
        assert result.config.system_class == SolarSystemClass.ROCKY_DOMINATED

    def test_stage_done_after_success(self):
        """Test the generator ends in DONE."""
        generator = SolarSystemGenerator(42)
        assert generator.stage == GenerationStage.IDLE
        generator.generate_solar_system(SolarSystemClass.SINGLE_STAR)
        assert generator.stage == GenerationStage.DONE

    def test_unknown_class_resets_stage(self):
        """Test a failed call raises and returns to IDLE."""
        generator = SolarSystemGenerator(42)
        with pytest.raises(UnknownSystemClassError, match="Invalid solar system class"):
            generator.generate_solar_system("dyson_sphere")
        assert generator.stage == GenerationStage.IDLE

    @pytest.mark.parametrize("system_class", list(SolarSystemClass))
    def test_every_class_generates(self, system_class):
        """Test every archetype yields a self-consistent result."""
        result = SolarSystemGenerator(11).generate_solar_system(system_class)
        config = result.config
        low, high = result.system_type.number_of_planets

        assert low <= config.number_of_planets <= high
        assert len(result.planets) == config.number_of_planets
        assert len(result.stars) == config.number_of_stars == result.system_type.number_of_stars
        assert list(config.semi_major_axes) == sorted(config.semi_major_axes)
        assert all(0 <= i < config.number_of_planets for i in config.habitable_planets)
        assert 0 <= result.statistics.habitability_score <= 1

    @pytest.mark.parametrize("system_class", list(SolarSystemClass))
    def test_ranges_hold_across_seeds(self, system_class):
        """Test planet count, eccentricity and habitability ranges over many seeds."""
        for seed in range(51):
            result = SolarSystemGenerator(seed).generate_solar_system(system_class)
            low, high = result.system_type.number_of_planets

            assert low <= result.config.number_of_planets <= high
            for planet in result.planets:
                assert 0 <= planet.eccentricity < 1
                assert 0 <= planet.habitability <= 1

    def test_seed_42_with_planets(self):
        """Test a seed-42 system with planets is reproducible and in range."""
        result1 = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.COMPACT_SYSTEM)
        result2 = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.COMPACT_SYSTEM)

        assert result1.config.number_of_planets >= 3
        assert all(0 <= planet.habitability <= 1 for planet in result1.planets)
        assert result_to_json(result1) == result_to_json(result2)

    def test_repeat_call_passes_through_idle(self, caplog):
        """Test a second call on one generator restarts from IDLE."""
        generator = SolarSystemGenerator(42)
        generator.generate_solar_system(SolarSystemClass.SINGLE_STAR)
        with caplog.at_level(logging.DEBUG, logger="solargen.engine.generator"):
            generator.generate_solar_system(SolarSystemClass.BINARY_STAR)

        transitions = [
            r.getMessage().split(": ", 1)[1] for r in caplog.records if "->" in r.getMessage()
        ]
        assert transitions[0] == "done -> idle"
        assert transitions[1] == "idle -> type_selected"
        assert "done -> type_selected" not in transitions
        assert generator.stage == GenerationStage.DONE

    def test_periods_consistent_with_central_mass(self):
        """Test periods follow Kepler's law around the central mass."""
        result = SolarSystemGenerator(8).generate_solar_system(SolarSystemClass.ROCKY_DOMINATED)
        config = result.config
        assert config.central_mass == config.primary_mass
        for period, a in zip(config.orbital_periods, config.semi_major_axes):
            assert period == pytest.approx(kepler_period(a, config.central_mass))

    def test_circumbinary_orbits_total_mass(self):
        """Test circumbinary planets orbit the combined stellar mass."""
        result = SolarSystemGenerator(5).generate_solar_system(
            SolarSystemClass.CIRCUMBINARY_SYSTEM
        )
        config = result.config
        assert config.central_mass == pytest.approx(sum(config.stellar_masses))
        for period, a in zip(config.orbital_periods, config.semi_major_axes):
            assert period == pytest.approx(kepler_period(a, config.central_mass))

    def test_stars(self):
        """Test star ids, names and companion placement."""
        result = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.TRIPLE_STAR)
        stars = result.stars
        assert [s.id for s in stars] == ["star_0", "star_1", "star_2"]
        assert [s.name for s in stars] == ["Primary", "Secondary_1", "Secondary_2"]
        assert stars[0].position == (0.0, 0.0, 0.0)
        separation = result.config.binary_properties.separation
        for star in stars[1:]:
            x, y, z = star.position
            assert (x**2 + y**2 + z**2) ** 0.5 == pytest.approx(separation)

    def test_binary_properties(self):
        """Test multi-star systems carry a companion orbit and singles do not."""
        binary = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.BINARY_STAR)
        assert binary.config.binary_properties is not None
        assert binary.config.binary_properties.separation == pytest.approx(0.22)

        single = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.SINGLE_STAR)
        assert single.config.binary_properties is None

    def test_planets(self):
        """Test planet ids, names and derived fields."""
        result = SolarSystemGenerator(42).generate_resonant_chain(5)
        planets = result.planets
        assert [p.id for p in planets] == [f"planet_{i}" for i in range(5)]
        assert [p.name for p in planets] == ["Planet b", "Planet c", "Planet d", "Planet e", "Planet f"]
        for planet, planet_type in zip(planets, result.config.planet_types):
            assert planet.type == planet_type
            assert planet.temperature == pytest.approx(
                equilibrium_temperature(planet.semi_major_axis, result.config.total_luminosity)
            )

    def test_habitable_planets_in_zone(self):
        """Test habitable planets sit inside the zone with a habitable mass."""
        for seed in range(20):
            result = SolarSystemGenerator(seed).generate_solar_system(
                SolarSystemClass.ROCKY_DOMINATED
            )
            config = result.config
            for i in config.habitable_planets:
                assert config.habitability_zone.contains(config.semi_major_axes[i])
                assert 0.1 <= config.masses[i] <= 5
            assert config.show_habitable_zone == bool(config.habitable_planets)

    def test_debris_disk(self):
        """Test debris belts are generated from the archetype."""
        result = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.SINGLE_STAR)
        debris = [d for d in result.disks if d.type == DiskType.DEBRIS]
        assert len(debris) == 1
        assert debris[0].id == "debris_disk_0"
        assert debris[0].name == "Debris Disk 1"
        assert debris[0].inner_radius == pytest.approx(2.4)
        assert debris[0].outer_radius == pytest.approx(3.6)
        assert debris[0].temperature == pytest.approx(
            equilibrium_temperature(3.0, result.config.total_luminosity, 0.1)
        )

    def test_transitional_disk(self):
        """Test a transitional archetype names its gas disk accordingly."""
        result = SolarSystemGenerator(42).generate_solar_system(
            SolarSystemClass.DEBRIS_RICH_SYSTEM
        )
        gas = [d for d in result.disks if d.id == "protoplanetary_disk"]
        assert len(gas) == 1
        assert gas[0].type == DiskType.TRANSITIONAL
        assert gas[0].name == "Transitional Disk"

    def test_overrides_applied_before_derivation(self):
        """Test forced masses flow into luminosity and the habitable zone."""
        generator = SolarSystemGenerator(42)
        result = generator.generate_solar_system(
            SolarSystemClass.SINGLE_STAR, ConfigOverrides(primary_mass=1.5, number_of_planets=3)
        )
        config = result.config
        assert config.primary_mass == 1.5
        assert config.number_of_planets == 3
        assert config.stellar_luminosities[0] == pytest.approx(1.5**4)
        assert config.habitability_zone.optimum_zone == pytest.approx(2.25)

    def test_module_level_generate(self):
        """Test the module-level convenience function."""
        result = generate_solar_system(SolarSystemClass.COMPACT_SYSTEM, seed=9)
        assert result == SolarSystemGenerator(9).generate_solar_system(
            SolarSystemClass.COMPACT_SYSTEM
        )


class TestConvenienceGenerators:
    """Test specialised entry points."""

    def test_binary_from_classes(self):
        """Test stellar masses come from the named archetypes, heavier first."""
        result = SolarSystemGenerator(42).generate_binary_system(
            SolarSystemClass.COMPACT_SYSTEM, SolarSystemClass.SINGLE_STAR
        )
        assert result.config.system_class == SolarSystemClass.BINARY_STAR
        assert result.config.stellar_masses == pytest.approx((1.0, 0.089))

    def test_binary_defaults(self):
        """Test default binary masses."""
        result = SolarSystemGenerator(42).generate_binary_system()
        assert result.config.stellar_masses == pytest.approx((0.69, 0.2))

    def test_compact_host(self):
        """Test the host mass follows the spectral type."""
        result = SolarSystemGenerator(42).generate_compact_system("K_dwarf")
        assert result.config.primary_mass == pytest.approx(0.75)
        assert result.stars[0].type == "K"

    def test_compact_unknown_star_type(self):
        """Test an unknown host type raises."""
        with pytest.raises(ValueError, match="Invalid star type"):
            SolarSystemGenerator(42).generate_compact_system("O_supergiant")

    def test_resonant_chain(self):
        """Test the chain has the requested size and a strong inner resonance."""
        result = SolarSystemGenerator(42).generate_resonant_chain(6)
        assert result.config.number_of_planets == 6
        first = result.dynamics.resonances[0]
        assert first.planets == (0, 1)
        assert first.ratio == (3, 2)
        assert first.strength == pytest.approx(1.0)
        assert result.statistics.resonant_pairs >= 3

    def test_resonant_chain_out_of_range(self):
        """Test counts outside the archetype range raise."""
        generator = SolarSystemGenerator(42)
        with pytest.raises(ValueError, match="Invalid number_of_planets"):
            generator.generate_resonant_chain(3)
        with pytest.raises(ValueError, match="Invalid number_of_planets"):
            generator.generate_resonant_chain(9)

    def test_protoplanetary_disk_mass(self):
        """Test the disk mass override in solar and Earth masses."""
        result = SolarSystemGenerator(42).generate_protoplanetary_system(0.2)
        assert result.config.disk_mass == pytest.approx(0.2)
        gas = next(d for d in result.disks if d.id == "protoplanetary_disk")
        assert gas.type == DiskType.PROTOPLANETARY
        assert gas.mass == pytest.approx(0.2 * 333000)

    def test_protoplanetary_rejects_empty_disk(self):
        """Test a non-positive disk mass raises."""
        with pytest.raises(ValueError, match="Invalid disk_mass"):
            SolarSystemGenerator(42).generate_protoplanetary_system(0)

    def test_post_stellar_white_dwarf(self):
        """Test the remnant type sets the host."""
        result = SolarSystemGenerator(42).generate_post_stellar_system("white_dwarf")
        primary = result.stars[0]
        assert primary.evolution_phase == "white_dwarf"
        assert primary.type == "white_dwarf"
        assert primary.mass == pytest.approx(0.6)
        assert result.config.show_stellar_evolution

    def test_post_stellar_unknown_remnant(self):
        """Test an unknown remnant raises."""
        with pytest.raises(ValueError, match="Invalid remnant type"):
            SolarSystemGenerator(42).generate_post_stellar_system("black_hole")

    def test_evolution_sequence(self):
        """Test each later step evolves the base configuration."""
        sequence = SolarSystemGenerator(42).generate_evolution_sequence(
            SolarSystemClass.SINGLE_STAR
        )
        assert len(sequence) == 4
        base_age = sequence[0].config.system_age
        assert sequence[1].config.system_age == pytest.approx(base_age + 1e9)
        assert sequence[3].config.system_age == pytest.approx(base_age + 10e9)
        assert sequence[1].config.primary_phase == "main_sequence"
        assert sequence[3].config.primary_phase == "red_giant"

    def test_evolution_sequence_custom_steps(self):
        """Test custom steps and the base-only case."""
        generator = SolarSystemGenerator(42)
        assert len(generator.generate_evolution_sequence("mature_system", [0])) == 1
        assert len(generator.generate_evolution_sequence("mature_system", [0, 1e6, 2e6])) == 3


class TestIntrospection:
    """Test generator introspection helpers."""

    def test_available_types(self):
        """Test every class is available."""
        assert SolarSystemGenerator().get_available_system_types() == list(SolarSystemClass)

    def test_type_info(self):
        """Test archetype lookup through the generator."""
        info = SolarSystemGenerator().get_system_type_info("compact_system")
        assert info.real_world_example.startswith("TRAPPIST-1")

    def test_habitability_score_matches_statistics(self):
        """Test the score helper agrees with the aggregated statistics."""
        generator = SolarSystemGenerator(42)
        result = generator.generate_solar_system(SolarSystemClass.SUPER_EARTH_SYSTEM)
        assert generator.calculate_habitability_score(result) == result.statistics.habitability_score

    def test_predict_and_stability(self):
        """Test archetype-level evolution and stability helpers."""
        generator = SolarSystemGenerator(42)
        result = generator.generate_solar_system(SolarSystemClass.CHAOTIC_SYSTEM)
        evolved = generator.predict_evolution(result, 1e9)
        assert evolved.stellar_properties.primary_age == pytest.approx(3e9)
        verdict = generator.analyze_stability(result)
        assert not verdict.stable
        assert "Chaotic dynamics" in verdict.factors
