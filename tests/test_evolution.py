"""Tests for time-step evolution of configurations."""

import math

import pytest

from solargen import SolarSystemGenerator, evolve_system
from solargen.errors import EvolutionInputError
from solargen.models import SolarSystemClass
from solargen.physics import kepler_period


@pytest.fixture
def rocky_config():
    """A rocky system around a 0.8 solar-mass star aged 6 Gyr."""
    return SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.ROCKY_DOMINATED).config


class TestEvolveSystem:
    """Test evolve_system."""

    def test_zero_step(self, rocky_config):
        """Test a zero step keeps orbits and ages."""
        evolved = evolve_system(rocky_config, 0)
        assert evolved.system_age == rocky_config.system_age
        assert evolved.stellar_ages == rocky_config.stellar_ages
        assert evolved.semi_major_axes == rocky_config.semi_major_axes
        assert evolved.primary_phase == "main_sequence"

    def test_ages_advance(self, rocky_config):
        """Test system and stellar ages grow by the step."""
        evolved = evolve_system(rocky_config, 1e6)
        assert evolved.system_age == pytest.approx(rocky_config.system_age + 1e6)
        for before, after in zip(rocky_config.stellar_ages, evolved.stellar_ages):
            assert after == pytest.approx(before + 1e6)

    def test_short_step_keeps_orbits(self, rocky_config):
        """Test steps below primary_mass * 1e8 leave orbits alone."""
        evolved = evolve_system(rocky_config, 0.5e8)
        assert evolved.semi_major_axes == rocky_config.semi_major_axes
        assert evolved.orbital_periods == rocky_config.orbital_periods

    def test_long_step_widens_orbits(self, rocky_config):
        """Test long steps widen every orbit by 10% and recompute periods."""
        evolved = evolve_system(rocky_config, 1e9)
        for before, after in zip(rocky_config.semi_major_axes, evolved.semi_major_axes):
            assert after == pytest.approx(before * 1.1)
        for period, a in zip(evolved.orbital_periods, evolved.semi_major_axes):
            assert period == pytest.approx(kepler_period(a, evolved.central_mass))
        assert evolved.primary_phase == "main_sequence"

    def test_red_giant_transition(self, rocky_config):
        """Test the primary leaves the main sequence after its lifetime."""
        evolved = evolve_system(rocky_config, 2e10)
        assert evolved.primary_phase == "red_giant"
        assert evolved.show_stellar_evolution
        assert evolved.stellar_luminosities[0] == pytest.approx(
            10 * rocky_config.stellar_luminosities[0]
        )
        assert evolved.habitability_zone.inner_edge > rocky_config.habitability_zone.inner_edge

    def test_derived_fields_consistent(self, rocky_config):
        """Test habitable planets and types match the evolved orbits."""
        evolved = evolve_system(rocky_config, 2e10)
        zone = evolved.habitability_zone
        for i in evolved.habitable_planets:
            assert zone.contains(evolved.semi_major_axes[i])
        assert len(evolved.planet_types) == evolved.number_of_planets

    def test_input_unchanged(self, rocky_config):
        """Test evolution returns a new config."""
        age = rocky_config.system_age
        evolved = evolve_system(rocky_config, 1e9)
        assert evolved is not rocky_config
        assert rocky_config.system_age == age

    def test_remnant_stays_remnant(self):
        """Test remnants do not re-enter the giant branch."""
        config = SolarSystemGenerator(42).generate_solar_system(
            SolarSystemClass.WHITE_DWARF_SYSTEM
        ).config
        evolved = evolve_system(config, 1e10)
        assert evolved.primary_phase == "white_dwarf"

    @pytest.mark.parametrize("step", [-1.0, math.inf, math.nan])
    def test_invalid_step(self, rocky_config, step):
        """Test negative and non-finite steps raise."""
        with pytest.raises(EvolutionInputError, match="Invalid time_step"):
            evolve_system(rocky_config, step)

    def test_invalid_config(self):
        """Test non-config input raises."""
        with pytest.raises(EvolutionInputError, match="Invalid config"):
            evolve_system({"system_age": 1e9}, 1e6)

    def test_error_is_value_error(self, rocky_config):
        """Test evolution errors are also ValueErrors."""
        with pytest.raises(ValueError):
            evolve_system(rocky_config, -5)
