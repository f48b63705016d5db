"""Tests for result serialization."""

import json

from solargen import SolarSystemGenerator
from solargen.models import ConfigOverrides, SolarSystemClass
from solargen.utils.serialization import result_to_dict, result_to_json


def test_result_to_dict_structure():
    """Test the top-level layout of a serialized result."""
    result = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.BINARY_STAR)
    data = result_to_dict(result)

    assert set(data) == {
        "config",
        "system_type",
        "planets",
        "stars",
        "disks",
        "dynamics",
        "statistics",
    }
    assert len(data["stars"]) == 2
    assert len(data["planets"]) == result.config.number_of_planets


def test_enums_become_values():
    """Test enums serialize to their string values."""
    result = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.COMPACT_SYSTEM)
    data = result_to_dict(result)

    assert data["config"]["system_class"] == "compact_system"
    assert data["system_type"]["architecture"] == "compact"
    assert data["config"]["resonance_chain"] in {
        "none",
        "first_order",
        "second_order",
        "laplace_resonance",
        "secular_resonance",
        "mean_motion",
        "kozai_lidov",
    }


def test_tuples_become_lists():
    """Test tuples serialize as lists."""
    result = SolarSystemGenerator(42).generate_resonant_chain(5)
    data = result_to_dict(result)

    assert isinstance(data["config"]["semi_major_axes"], list)
    assert data["stars"][0]["position"] == [0.0, 0.0, 0.0]
    assert data["dynamics"]["resonances"][0]["ratio"] == [3, 2]


def test_infinite_hill_factor():
    """Test an infinite Hill factor is written as a string."""
    result = SolarSystemGenerator(42).generate_solar_system(
        SolarSystemClass.SINGLE_STAR, ConfigOverrides(number_of_planets=1)
    )
    data = result_to_dict(result)

    assert data["dynamics"]["hill_stability_factor"] == "inf"
    assert data["statistics"]["hill_stability_factor"] == "inf"


def test_json_is_valid_and_canonical():
    """Test the JSON string parses and is identical across runs."""
    result1 = SolarSystemGenerator(5).generate_solar_system(SolarSystemClass.TRIPLE_STAR)
    result2 = SolarSystemGenerator(5).generate_solar_system(SolarSystemClass.TRIPLE_STAR)

    text = result_to_json(result1)
    assert text == result_to_json(result2)
    assert json.loads(text)["config"]["number_of_stars"] == 3


def test_compact_json():
    """Test indent=None gives a single line."""
    result = SolarSystemGenerator(42).generate_solar_system(SolarSystemClass.ROGUE_SYSTEM)
    assert "\n" not in result_to_json(result, indent=None)
