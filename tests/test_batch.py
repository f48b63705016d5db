"""Tests for parallel batch generation and request schemas."""

import pytest
from pydantic import ValidationError

from solargen import SolarSystemGenerator, generate_batch
from solargen.errors import UnknownSystemClassError
from solargen.models import SolarSystemClass
from solargen.schemas import BatchGenerationRequest, GenerationRequest, SystemSummaryResponse


class TestGenerationRequest:
    """Test request schemas."""

    def test_defaults(self):
        """Test a bare request uses seed 42 and a random class."""
        request = GenerationRequest()
        assert request.seed == 42
        assert request.system_class is None

    def test_class_coerced_from_value(self):
        """Test string classes are parsed into the enum."""
        request = GenerationRequest(system_class="compact_system", seed=3)
        assert request.system_class == SolarSystemClass.COMPACT_SYSTEM

    def test_invalid_class(self):
        """Test unknown classes are rejected at the boundary."""
        with pytest.raises(ValidationError):
            GenerationRequest(system_class="dyson_sphere")

    def test_negative_seed(self):
        """Test seeds must be non-negative."""
        with pytest.raises(ValidationError):
            GenerationRequest(seed=-1)

    def test_worker_bounds(self):
        """Test the worker count is bounded."""
        with pytest.raises(ValidationError):
            BatchGenerationRequest(requests=[], max_workers=0)
        with pytest.raises(ValidationError):
            BatchGenerationRequest(requests=[], max_workers=65)


class TestGenerateBatch:
    """Test generate_batch."""

    def test_results_in_request_order(self):
        """Test each result matches its request."""
        requests = [
            GenerationRequest(system_class=SolarSystemClass.SINGLE_STAR, seed=1),
            GenerationRequest(system_class=SolarSystemClass.COMPACT_SYSTEM, seed=2),
            GenerationRequest(system_class=SolarSystemClass.BINARY_STAR, seed=3),
        ]
        results = generate_batch(requests, max_workers=3)
        assert [r.config.system_class for r in results] == [
            SolarSystemClass.SINGLE_STAR,
            SolarSystemClass.COMPACT_SYSTEM,
            SolarSystemClass.BINARY_STAR,
        ]
        assert [r.config.seed for r in results] == [1, 2, 3]

    def test_matches_sequential_generation(self):
        """Test parallel results equal sequential ones."""
        requests = [GenerationRequest(seed=seed) for seed in range(8)]
        parallel = generate_batch(requests, max_workers=4)
        sequential = [SolarSystemGenerator(seed).generate_solar_system() for seed in range(8)]
        assert parallel == sequential

    def test_empty_batch(self):
        """Test an empty batch returns no results."""
        assert generate_batch([]) == []

    def test_invalid_worker_count(self):
        """Test a non-positive worker count raises."""
        with pytest.raises(ValueError, match="Invalid max_workers"):
            generate_batch([GenerationRequest()], max_workers=0)

    def test_failure_propagates(self):
        """Test a failing request surfaces its error."""
        request = GenerationRequest.model_construct(system_class="dyson_sphere", seed=1)
        with pytest.raises(UnknownSystemClassError):
            generate_batch([GenerationRequest(seed=1), request], max_workers=2)


class TestSystemSummaryResponse:
    """Test result summaries."""

    def test_from_result(self):
        """Test the summary projects the result."""
        result = SolarSystemGenerator(42).generate_resonant_chain(6)
        summary = SystemSummaryResponse.from_result(result)
        assert summary.system_class == "resonant_chain"
        assert summary.seed == 42
        assert summary.number_of_planets == 6
        assert summary.resonant_pairs == result.statistics.resonant_pairs
        assert summary.primary_type == result.stars[0].type
        assert summary.habitable_planets == list(result.config.habitable_planets)

    def test_summary_line(self):
        """Test the one-line summary."""
        result = SolarSystemGenerator(7).generate_solar_system(SolarSystemClass.SINGLE_STAR)
        line = SystemSummaryResponse.from_result(result).summary_line()
        assert line.startswith("single_star seed=7: 1 star(s) [G]")
        assert line.endswith("stable")
