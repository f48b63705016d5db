"""Pydantic response schemas summarising generated systems."""

from pydantic import BaseModel, Field

from ..models.result import SystemResult


class SystemSummaryResponse(BaseModel):
    """Compact summary of one generated system."""

    system_class: str
    name: str
    seed: int
    number_of_stars: int
    number_of_planets: int
    primary_type: str
    habitable_planets: list[int] = Field(default_factory=list)
    habitability_score: float = Field(ge=0, le=1)
    resonant_pairs: int
    stable: bool
    hill_stability_factor: float
    predictions: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: SystemResult) -> "SystemSummaryResponse":
        """Project a generation result onto its summary."""
        config = result.config
        return cls(
            system_class=config.system_class.value,
            name=result.system_type.name,
            seed=config.seed,
            number_of_stars=config.number_of_stars,
            number_of_planets=config.number_of_planets,
            primary_type=result.stars[0].type,
            habitable_planets=list(config.habitable_planets),
            habitability_score=result.statistics.habitability_score,
            resonant_pairs=result.statistics.resonant_pairs,
            stable=result.dynamics.stability_analysis.stable,
            hill_stability_factor=result.dynamics.hill_stability_factor,
            predictions=list(result.dynamics.evolution_prediction),
        )

    def summary_line(self) -> str:
        """One-line human-readable summary."""
        stability = "stable" if self.stable else "unstable"
        return (
            f"{self.system_class} seed={self.seed}: {self.number_of_stars} star(s) "
            f"[{self.primary_type}], {self.number_of_planets} planet(s), "
            f"{len(self.habitable_planets)} habitable, habitability {self.habitability_score:.2f}, "
            f"{self.resonant_pairs} resonant pair(s), {stability}"
        )
