"""Enumerations shared by the type registry and the generator."""

from enum import Enum


class SolarSystemClass(str, Enum):
    """Archetype identifiers for generated systems."""

    # Star count
    SINGLE_STAR = "single_star"  # Solar System
    BINARY_STAR = "binary_star"  # Kepler-16, Alpha Centauri
    TRIPLE_STAR = "triple_star"  # Alpha Centauri
    QUADRUPLE_STAR = "quadruple_star"
    MULTIPLE_STAR = "multiple_star"  # 5+ stars

    # Planetary architecture
    ROCKY_DOMINATED = "rocky_dominated"
    GAS_GIANT_DOMINATED = "gas_giant_dominated"
    SUPER_EARTH_SYSTEM = "super_earth_system"
    MINI_NEPTUNE_SYSTEM = "mini_neptune_system"
    HOT_JUPITER_SYSTEM = "hot_jupiter_system"

    # Orbital architecture
    COMPACT_SYSTEM = "compact_system"  # TRAPPIST-1
    EXTENDED_SYSTEM = "extended_system"
    RESONANT_CHAIN = "resonant_chain"  # Kepler-223
    HIERARCHICAL_SYSTEM = "hierarchical_system"
    CHAOTIC_SYSTEM = "chaotic_system"

    # Evolutionary state
    PROTO_SYSTEM = "proto_system"  # HL Tauri
    MATURE_SYSTEM = "mature_system"
    EVOLVED_SYSTEM = "evolved_system"
    POST_STELLAR_SYSTEM = "post_stellar_system"

    # Special environments
    DEBRIS_RICH_SYSTEM = "debris_rich_system"  # Beta Pictoris
    MIGRATION_SYSTEM = "migration_system"
    DISRUPTED_SYSTEM = "disrupted_system"
    CAPTURED_SYSTEM = "captured_system"
    STRIPPED_SYSTEM = "stripped_system"

    # Exotic configurations
    CIRCUMBINARY_SYSTEM = "circumbinary_system"
    S_TYPE_BINARY = "s_type_binary"
    P_TYPE_BINARY = "p_type_binary"
    TROJAN_SYSTEM = "trojan_system"
    RETROGRADE_SYSTEM = "retrograde_system"

    # Extreme environments
    PULSAR_SYSTEM = "pulsar_system"
    WHITE_DWARF_SYSTEM = "white_dwarf_system"
    BROWN_DWARF_SYSTEM = "brown_dwarf_system"
    ROGUE_SYSTEM = "rogue_system"
    GALACTIC_HALO_SYSTEM = "galactic_halo_system"


class StellarMultiplicity(str, Enum):
    SINGLE = "single"
    CLOSE_BINARY = "close_binary"  # <1 AU separation
    WIDE_BINARY = "wide_binary"  # >10 AU separation
    CONTACT_BINARY = "contact_binary"
    ECLIPSING_BINARY = "eclipsing_binary"
    HIERARCHICAL_TRIPLE = "hierarchical_triple"  # A+B orbited by C
    LINEAR_TRIPLE = "linear_triple"
    TRAPEZIUM = "trapezium"  # 4+ stars


class ResonanceType(str, Enum):
    NONE = "none"
    FIRST_ORDER = "first_order"  # 2:1, 3:2
    SECOND_ORDER = "second_order"  # 5:3, 7:4
    LAPLACE_RESONANCE = "laplace_resonance"  # 4:2:1 chain
    SECULAR_RESONANCE = "secular_resonance"
    MEAN_MOTION = "mean_motion"
    KOZAI_LIDOV = "kozai_lidov"


class MigrationType(str, Enum):
    NONE = "none"
    TYPE_I = "type_i"  # embedded in disk
    TYPE_II = "type_ii"  # gap-opening giants
    TYPE_III = "type_iii"  # runaway
    STOCHASTIC = "stochastic"
    STELLAR_EVOLUTION = "stellar_evolution"  # stellar mass loss
    TIDAL_MIGRATION = "tidal_migration"


class FormationMechanism(str, Enum):
    CORE_ACCRETION = "core_accretion"
    GRAVITATIONAL_INSTABILITY = "gravitational_instability"
    PEBBLE_ACCRETION = "pebble_accretion"
    STREAMING_INSTABILITY = "streaming_instability"
    STELLAR_CAPTURE = "stellar_capture"
    DISK_FRAGMENTATION = "disk_fragmentation"
    COLLISION_CASCADE = "collision_cascade"


class ObservationalStatus(str, Enum):
    CONFIRMED = "confirmed"
    PROBABLE = "probable"
    THEORETICAL = "theoretical"
    SPECULATIVE = "speculative"


class ArchitectureKind(str, Enum):
    """Planetary layout strategy used for an archetype."""

    STANDARD = "standard"  # Titius-Bode spacing
    COMPACT = "compact"
    RESONANT_CHAIN = "resonant_chain"
    GAS_GIANT = "gas_giant"
    ROCKY = "rocky"


class DiskType(str, Enum):
    PROTOPLANETARY = "protoplanetary"
    TRANSITIONAL = "transitional"
    DEBRIS = "debris"


class GenerationStage(str, Enum):
    """Pipeline position of a generator during one call."""

    IDLE = "idle"
    TYPE_SELECTED = "type_selected"
    STELLAR_GENERATED = "stellar_generated"
    PLANETARY_GENERATED = "planetary_generated"
    DISK_GENERATED = "disk_generated"
    DYNAMICS_COMPUTED = "dynamics_computed"
    STATISTICS_COMPUTED = "statistics_computed"
    DONE = "done"
