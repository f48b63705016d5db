"""Tests for the archetype registry and its table."""

import pytest

from solargen.errors import SolarSystemGenerationError, UnknownSystemClassError
from solargen.models import ArchitectureKind, SolarSystemClass, StellarMultiplicity
from solargen.registry import SystemTypeRegistry, get_registry
from solargen.registry.archetypes import build_archetypes
from solargen.utils import SystemRNG


class TestArchetypeTable:
    """Test invariants across every archetype."""

    def test_one_definition_per_class(self):
        """Test the table covers every class exactly once."""
        table = build_archetypes()
        assert list(table.keys()) == list(SolarSystemClass)
        for system_class, definition in table.items():
            assert definition.system_class == system_class

    def test_multi_star_archetypes_have_companions(self):
        """Test every multi-star archetype has a companion orbit."""
        for definition in build_archetypes().values():
            stellar = definition.stellar_properties
            if definition.number_of_stars > 1:
                assert stellar.secondary_mass > 0, definition.system_class
                assert stellar.binary_separation > 0, definition.system_class
                assert definition.stellar_multiplicity != StellarMultiplicity.SINGLE

    def test_single_star_archetypes(self):
        """Test single-star archetypes are marked single."""
        for definition in build_archetypes().values():
            if definition.number_of_stars == 1:
                assert definition.stellar_multiplicity == StellarMultiplicity.SINGLE

    def test_ranges_are_ordered(self):
        """Test planet count, mass and period ranges are well formed."""
        for definition in build_archetypes().values():
            low, high = definition.number_of_planets
            assert 0 <= low <= high
            assert definition.planet_mass_range[0] <= definition.planet_mass_range[1]
            assert definition.orbital_period_range[0] <= definition.orbital_period_range[1]

    def test_derived_habitable_zone_matches_stars(self):
        """Test derived archetypes compute their zone from the stellar baseline."""
        halo = build_archetypes()[SolarSystemClass.GALACTIC_HALO_SYSTEM]
        luminosity = halo.stellar_properties.primary_luminosity
        assert halo.habitability_zone.optimum_zone == pytest.approx(luminosity**0.5)
        assert halo.orbital_dynamics.system_age == halo.stellar_properties.primary_age

    def test_hand_tuned_prototypes(self):
        """Test a few real-world prototype values."""
        table = build_archetypes()
        compact = table[SolarSystemClass.COMPACT_SYSTEM]
        assert compact.stellar_properties.primary_mass == pytest.approx(0.089)
        assert compact.architecture == ArchitectureKind.COMPACT
        assert compact.number_of_planets == (3, 8)

        chain = table[SolarSystemClass.RESONANT_CHAIN]
        assert chain.architecture == ArchitectureKind.RESONANT_CHAIN
        assert chain.number_of_planets == (4, 8)

        proto = table[SolarSystemClass.PROTO_SYSTEM]
        assert proto.stellar_properties.current_evolution_phase == "pre_main_sequence"
        assert proto.disk_properties.disk_mass == pytest.approx(0.3)

    def test_circumbinary_flag(self):
        """Test that circumbinary archetypes have more than one star."""
        for definition in build_archetypes().values():
            if definition.circumbinary:
                assert definition.number_of_stars > 1

    def test_remnant_hosts(self):
        """Test remnant archetypes have no main-sequence lifetime."""
        table = build_archetypes()
        for system_class in (SolarSystemClass.PULSAR_SYSTEM, SolarSystemClass.WHITE_DWARF_SYSTEM):
            assert table[system_class].stellar_properties.main_sequence_lifetime == 0


class TestSystemTypeRegistry:
    """Test registry lookups."""

    def test_registry_size(self):
        """Test the shared registry holds every class."""
        registry = get_registry()
        assert len(registry) == len(SolarSystemClass)
        assert registry.classes() == list(SolarSystemClass)

    def test_shared_instance(self):
        """Test get_registry returns one cached instance."""
        assert get_registry() is get_registry()

    def test_get_by_class(self):
        """Test lookup by enum member and by string value."""
        registry = get_registry()
        by_enum = registry.get_by_class(SolarSystemClass.SINGLE_STAR)
        by_value = registry.get_by_class("single_star")
        assert by_enum is by_value
        assert by_enum.name == "Single-Star System"

    def test_unknown_class(self):
        """Test that an unknown class raises a lookup error."""
        registry = get_registry()
        with pytest.raises(UnknownSystemClassError, match="Invalid solar system class"):
            registry.get_by_class("dyson_sphere")
        with pytest.raises(LookupError):
            registry.get_by_class("dyson_sphere")
        with pytest.raises(SolarSystemGenerationError):
            registry.get_by_class("dyson_sphere")

    def test_missing_class_in_partial_registry(self):
        """Test a valid class missing from a custom table raises."""
        single = get_registry().get_by_class(SolarSystemClass.SINGLE_STAR)
        registry = SystemTypeRegistry({SolarSystemClass.SINGLE_STAR: single})
        assert len(registry) == 1
        with pytest.raises(UnknownSystemClassError):
            registry.get_by_class(SolarSystemClass.BINARY_STAR)

    def test_contains(self):
        """Test membership checks accept values and reject garbage."""
        registry = get_registry()
        assert SolarSystemClass.PULSAR_SYSTEM in registry
        assert "pulsar_system" in registry
        assert "dyson_sphere" not in registry

    def test_iteration_yields_definitions(self):
        """Test iterating the registry yields definitions in class order."""
        classes = [definition.system_class for definition in get_registry()]
        assert classes == list(SolarSystemClass)

    def test_registry_is_read_only(self):
        """Test the registry copies its table on construction."""
        table = build_archetypes()
        registry = SystemTypeRegistry(table)
        del table[SolarSystemClass.SINGLE_STAR]
        assert SolarSystemClass.SINGLE_STAR in registry

    def test_get_by_star_count(self):
        """Test filtering by number of stars."""
        registry = get_registry()
        binaries = registry.get_by_star_count(2)
        assert all(t.number_of_stars == 2 for t in binaries)
        assert SolarSystemClass.BINARY_STAR in [t.system_class for t in binaries]
        assert registry.get_by_star_count(99) == []

    def test_get_by_age_range_inclusive(self):
        """Test age filtering includes both bounds."""
        young = get_registry().get_by_age_range(0, 1e7)
        classes = [t.system_class for t in young]
        assert SolarSystemClass.PROTO_SYSTEM in classes
        assert SolarSystemClass.MIGRATION_SYSTEM in classes
        assert SolarSystemClass.SINGLE_STAR not in classes

    def test_get_random_deterministic(self):
        """Test weighted picks repeat for the same seed."""
        registry = get_registry()
        picks1 = [registry.get_random(SystemRNG(seed)).system_class for seed in range(20)]
        picks2 = [registry.get_random(SystemRNG(seed)).system_class for seed in range(20)]
        assert picks1 == picks2

    def test_get_random_prefers_discoverable(self):
        """Test common archetypes are picked more than rare ones."""
        registry = get_registry()
        rng = SystemRNG(2024)
        picks = [registry.get_random(rng).system_class for _ in range(2000)]
        assert picks.count(SolarSystemClass.PROTO_SYSTEM) > picks.count(
            SolarSystemClass.ROGUE_SYSTEM
        )

    def test_all_types(self):
        """Test all_types returns a fresh list."""
        registry = get_registry()
        types = registry.all_types()
        types.clear()
        assert len(registry.all_types()) == len(SolarSystemClass)
