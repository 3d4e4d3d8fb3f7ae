"""Gene, combo-morph and species definitions.

These are immutable catalog entries. A genotype is a plain mapping of gene id
to a two-element allele sequence; each allele is either that gene's own id
(the mutant allele) or a wild-type marker.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Mapping, Optional, Sequence, Tuple

# Allele values meaning "wild type". "+" is what the engine writes.
WILD_ALLELE = "+"
WILD_ALLELES = frozenset({"+", "wild"})

AllelePair = Tuple[str, str]
Genotype = Mapping[str, Sequence[str]]


class InheritanceMode(Enum):
    """How a gene's allele pair maps to an expressed trait."""

    RECESSIVE = "recessive"
    INCOMPLETE_DOMINANT = "incompleteDominant"
    DOMINANT = "dominant"
    POLYGENIC = "polygenic"


@dataclass(frozen=True)
class Gene:
    """A catalog entry for a gene or a super form.

    Attributes:
        id: Identifier; doubles as the gene's mutant allele value
        name: Display name
        inheritance: Inheritance mode
        rarity: Ordinal rarity tier (1=common .. 5=legendary)
        species: Species ids the gene occurs in
        super_form: Trait expressed by two mutant copies (incomplete dominant only)
        super_form_of: Set on super-form entries; names the base gene. Super forms
            are phenotype-only and never appear as genotype keys.
        description: Optional flavor text
    """

    id: str
    name: str
    inheritance: InheritanceMode
    rarity: int = 1
    species: FrozenSet[str] = field(default_factory=frozenset)
    super_form: Optional[str] = None
    super_form_of: Optional[str] = None
    description: str = ""

    @property
    def is_super_form(self) -> bool:
        return self.super_form_of is not None

    def applies_to(self, species_id: str) -> bool:
        return species_id in self.species


@dataclass(frozen=True)
class ComboMorph:
    """A named presentation triggered by a set of simultaneously expressed traits.

    Attributes:
        id: Identifier
        name: Display name shown instead of the individual trait names
        requires: Expressed-trait ids that must all be present
        base_price: Price floor applied by the valuation engine
        spawn_chance: Optional chance (scaled by rarity target) that a wild
            encounter is forced to carry this combo
    """

    id: str
    name: str
    requires: Tuple[str, ...]
    base_price: int = 0
    spawn_chance: Optional[float] = None

    def is_satisfied_by(self, phenotype: Sequence[str]) -> bool:
        expressed = set(phenotype)
        return all(req in expressed for req in self.requires)


@dataclass(frozen=True)
class Species:
    """A catalog entry for a species.

    Attributes:
        id: Identifier ("western", "eastern", ...)
        common_name: Display name
        base_price: Starting price before any multiplier
        clutch_min: Smallest clutch (inclusive)
        clutch_max: Largest clutch (inclusive)
        unlock: Unlock precondition (e.g. ``{"discoveredMorphs": 10}``); empty
            when the species is available from the start
    """

    id: str
    common_name: str
    base_price: int
    clutch_min: int
    clutch_max: int
    unlock: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_starter(self) -> bool:
        return not self.unlock


def is_wild(allele: Any) -> bool:
    return allele in WILD_ALLELES


def is_well_formed_pair(alleles: Any) -> bool:
    """Return True for a sequence of exactly two string allele values."""
    if isinstance(alleles, (str, bytes)) or not isinstance(alleles, (list, tuple)):
        return False
    return len(alleles) == 2 and all(isinstance(a, str) and a for a in alleles)


def mutant_count(alleles: Sequence[str]) -> int:
    """Count non-wild alleles. Foreign gene ids count as non-wild."""
    return sum(1 for a in alleles if not is_wild(a))
