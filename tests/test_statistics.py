"""Tests for system statistics aggregation."""

import math

import pytest

from solargen import SolarSystemGenerator
from solargen.analysis import calculate_statistics
from solargen.models import ConfigOverrides, SolarSystemClass


class TestStatistics:
    """Test calculate_statistics."""

    def test_recomputation_matches(self):
        """Test statistics are a pure function of the result."""
        result = SolarSystemGenerator(42).generate_resonant_chain(6)
        recomputed = calculate_statistics(
            result.config,
            result.system_type,
            result.planets,
            result.stars,
            result.disks,
            result.dynamics,
        )
        assert recomputed == result.statistics

    def test_orbital_aggregates(self):
        """Test orbital extremes and resonance counts."""
        result = SolarSystemGenerator(42).generate_resonant_chain(6)
        stats = result.statistics
        axes = result.config.semi_major_axes
        assert stats.inner_most_orbit == pytest.approx(min(axes))
        assert stats.outer_most_orbit == pytest.approx(max(axes))
        assert stats.system_radius == pytest.approx(max(axes))
        assert stats.migration_extent == pytest.approx(max(axes) * 0.5)
        assert stats.resonant_pairs == len(result.dynamics.resonances)
        assert stats.strongest_resonance == (3, 2)
        assert stats.resonance_strength == pytest.approx(1.0)
        assert stats.hill_stability_factor == result.dynamics.hill_stability_factor

    def test_mass_totals(self):
        """Test stellar and planetary mass totals."""
        result = SolarSystemGenerator(7).generate_solar_system(SolarSystemClass.BINARY_STAR)
        stats = result.statistics
        stellar = sum(s.mass for s in result.stars)
        planetary = sum(p.mass for p in result.planets)
        assert stats.total_stellar_mass == pytest.approx(stellar)
        assert stats.total_planetary_mass == pytest.approx(planetary)
        assert stats.total_system_mass == pytest.approx(stellar + planetary / 333000)
        assert stats.total_stellar_luminosity == pytest.approx(
            sum(s.luminosity for s in result.stars)
        )

    def test_planet_counts(self):
        """Test rocky, ice and gas giant counts partition the planets."""
        result = SolarSystemGenerator(42).generate_solar_system(
            SolarSystemClass.GAS_GIANT_DOMINATED
        )
        stats = result.statistics
        assert (
            stats.rocky_planet_count + stats.ice_giant_count + stats.gas_giant_count
            == result.config.number_of_planets
        )

    def test_empty_system(self):
        """Test a planetless system gives zero orbital aggregates."""
        result = SolarSystemGenerator(42).generate_solar_system(
            SolarSystemClass.SINGLE_STAR, ConfigOverrides(number_of_planets=0)
        )
        stats = result.statistics
        assert stats.system_radius == 0.0
        assert stats.inner_most_orbit == 0.0
        assert stats.orbital_spacing == 0.0
        assert stats.eccentricity_mean == 0.0
        assert stats.transit_probability == 0.0
        assert stats.rv_amplitude == 0.0
        assert stats.total_angular_momentum == 0
        assert stats.hill_stability_factor == math.inf
        assert stats.strongest_resonance == (1, 1)
        assert stats.resonance_strength == 0.0
        assert stats.habitability_score == 0.0
        assert stats.atmospheric_retention_factor == 0.0

    def test_solar_twin_evolution(self):
        """Test remaining main-sequence time and bombardment for a 4.6 Gyr Sun."""
        result = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.SINGLE_STAR)
        stats = result.statistics
        assert stats.stellar_evolution_phase == "main_sequence"
        assert stats.remaining_main_sequence_time == pytest.approx(1e10 - 4.6e9)
        assert stats.bombardment_intensity == pytest.approx(1e12 / 4.6e9)
        assert stats.physics_accuracy == 1.0
        assert stats.infrared_excess == 1.5

    def test_remnant_has_no_main_sequence_time(self):
        """Test evolved hosts report zero remaining time."""
        result = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.PULSAR_SYSTEM)
        assert result.statistics.remaining_main_sequence_time == 0.0
        assert result.statistics.stellar_evolution_phase == "pulsar"

    def test_observables(self):
        """Test transit uses the innermost planet and RV the heaviest."""
        result = SolarSystemGenerator(42).generate_compact_system()
        stats = result.statistics
        innermost = result.planets[0]
        expected = min(1.0, result.stars[0].radius * 0.00465 / innermost.semi_major_axis)
        assert stats.transit_probability == pytest.approx(expected)
        assert stats.rv_amplitude > 0

    def test_metadata(self):
        """Test complexity and fidelity metadata."""
        result = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.QUADRUPLE_STAR)
        stats = result.statistics
        assert 0 <= stats.complexity_level <= 5
        assert stats.visual_fidelity == pytest.approx(128 / 512)
        assert stats.system_evolution_predictions == result.dynamics.evolution_prediction
