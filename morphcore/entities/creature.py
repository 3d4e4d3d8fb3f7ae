"""Snake entity: identity, genotype and a small mutable stats block.

A creature's genotype never changes after construction. Phenotype is derived
lazily from the genotype and the catalog and cached for the creature's
lifetime; breeding produces new creatures instead of mutating old ones.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Tuple

from morphcore.genetics import expression
from morphcore.genetics.catalog import GeneCatalog

if TYPE_CHECKING:
    from morphcore.economy.rules import PricingRules

DEFAULT_HEALTH = 100
DEFAULT_FERTILITY = 1.0

_IMMUTABLE_FIELDS = frozenset({"genotype", "catalog", "_phenotype_cache"})


class Sex(Enum):
    MALE = "male"
    FEMALE = "female"


class Origin(Enum):
    WILD = "wild"
    BRED = "bred"
    PURCHASED = "purchased"


def new_creature_id() -> str:
    return f"snake_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def now_ms() -> int:
    return int(time.time() * 1000)


def freeze_genotype(genotype: Mapping[str, Any]) -> Mapping[str, Any]:
    """Copy a genotype into a read-only mapping of tuples.

    Malformed entries are kept as given (tuple-ified when they are lists) so
    the resolver can skip them and the save layer can round-trip them.
    """
    frozen = {}
    for gene_id, alleles in genotype.items():
        if isinstance(alleles, list):
            alleles = tuple(alleles)
        frozen[str(gene_id)] = alleles
    return MappingProxyType(frozen)


@dataclass
class CreatureStats:
    """Mutable per-creature stats. Not part of the genetic identity."""

    health: float = DEFAULT_HEALTH
    fertility: float = DEFAULT_FERTILITY
    clutches_produced: int = 0


@dataclass
class Creature:
    """A single snake.

    Attributes:
        species: Species id ("western", "eastern", ...)
        sex: Male or female
        genotype: Read-only mapping of gene id to allele pair
        catalog: Catalog the creature's traits are resolved against
        id: Unique identifier
        origin: Wild, bred or purchased
        parent_ids: The two parent ids for bred creatures
        birth_date: Milliseconds since the epoch
        stats: Health, fertility and clutch counter
    """

    species: str
    sex: Sex
    genotype: Mapping[str, Any]
    catalog: GeneCatalog = field(repr=False, compare=False)
    id: str = field(default_factory=new_creature_id)
    origin: Origin = Origin.WILD
    parent_ids: Optional[Tuple[str, str]] = None
    birth_date: int = field(default_factory=now_ms)
    stats: CreatureStats = field(default_factory=CreatureStats)

    _phenotype_cache: Optional[Tuple[str, ...]] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "genotype", freeze_genotype(self.genotype))
        if self.parent_ids is not None:
            self.parent_ids = tuple(self.parent_ids)

    def __setattr__(self, name: str, value: Any) -> None:
        # Genetic identity is fixed once set; the phenotype cache depends on it
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    # =========================================================================
    # Derived genetics (cached)
    # =========================================================================

    @property
    def phenotype(self) -> List[str]:
        """Expressed trait ids in catalog order (cached)."""
        if self._phenotype_cache is None:
            resolved = expression.resolve_phenotype(self.genotype, self.catalog)
            object.__setattr__(self, "_phenotype_cache", tuple(resolved))
        return list(self._phenotype_cache)

    @property
    def het_genes(self) -> List[str]:
        return expression.get_het_genes(self.genotype, self.phenotype, self.catalog)

    @property
    def visual_genes(self) -> List[str]:
        return expression.get_visual_genes(self.phenotype, self.catalog)

    @property
    def het_gene_names(self) -> List[str]:
        return expression.get_het_gene_names(self.genotype, self.phenotype, self.catalog)

    @property
    def display_name(self) -> str:
        return expression.get_display_name(self.phenotype, self.catalog)

    @property
    def species_name(self) -> str:
        return self.catalog.species_name(self.species)

    @property
    def is_proven_breeder(self) -> bool:
        return self.stats.clutches_produced > 0

    # =========================================================================
    # Valuation
    # =========================================================================

    def calculate_price(self, rules: "PricingRules") -> int:
        from morphcore.economy.pricing import calculate_price

        return calculate_price(self, self.catalog, rules)

    def rarity_tier(self, rules: "PricingRules") -> str:
        from morphcore.economy.pricing import get_rarity_tier

        return get_rarity_tier(self.calculate_price(rules), rules).value
