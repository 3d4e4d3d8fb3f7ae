"""Wild-encounter generator: a deterministic genotype from an encounter seed.

The world layout hands out ``(seed, species, rarity_target)`` triples drawn
from the shared world stream. Each encounter then draws from its own
short-lived SeededRandom, so generating a creature never depends on call
order or on the state of any other stream.
"""

import logging
from typing import Callable, Dict, Optional, Tuple

from morphcore.config.wild import (
    MAX_ALLELE_CHANCE,
    RARITY_ALLELE_CHANCE,
    RARITY_TARGET_FLOOR,
    RARITY_TARGET_SCALE,
)
from morphcore.entities.creature import Creature, Origin, Sex, now_ms
from morphcore.genetics.catalog import GeneCatalog
from morphcore.genetics.gene import WILD_ALLELE, ComboMorph, Gene, InheritanceMode, mutant_count
from morphcore.util.rng import SeededRandom, normalize_seed

logger = logging.getLogger(__name__)


def encounter_rng(seed: int) -> SeededRandom:
    """Private stream for one encounter. Seed 0 is remapped to 1."""
    return SeededRandom(normalize_seed(seed))


def allele_chance(gene: Gene, rarity_target: float) -> float:
    """Per-allele probability of drawing the mutant allele for a wild creature."""
    base = RARITY_ALLELE_CHANCE.get(gene.rarity, min(RARITY_ALLELE_CHANCE.values()))
    chance = base * (RARITY_TARGET_FLOOR + rarity_target * RARITY_TARGET_SCALE)
    return max(0.0, min(MAX_ALLELE_CHANCE, chance))


def _combo_applies(combo: ComboMorph, species_id: str, catalog: GeneCatalog) -> bool:
    for trait_id in combo.requires:
        gene = catalog.gene(trait_id)
        if gene is None:
            return False
        if gene.is_super_form:
            gene = catalog.gene(gene.super_form_of)
            if gene is None:
                return False
        if not gene.applies_to(species_id):
            return False
    return True


def _force_trait(genotype: Dict[str, Tuple[str, str]], trait_id: str, catalog: GeneCatalog) -> None:
    gene = catalog.gene(trait_id)
    if gene.is_super_form:
        base = gene.super_form_of
        genotype[base] = (base, base)
    elif gene.inheritance is InheritanceMode.RECESSIVE:
        genotype[gene.id] = (gene.id, gene.id)
    elif gene.inheritance is InheritanceMode.INCOMPLETE_DOMINANT:
        genotype[gene.id] = (gene.id, WILD_ALLELE)
    elif mutant_count(genotype.get(gene.id, ())) == 0:
        genotype[gene.id] = (gene.id, WILD_ALLELE)


def generate_wild_genotype(
    rng: SeededRandom,
    species_id: str,
    rarity_target: float,
    catalog: GeneCatalog,
) -> Dict[str, Tuple[str, str]]:
    """Draw a genotype for every gene applicable to the species.

    Each allele is independently mutant with ``allele_chance``; rarer genes
    are less likely and a higher rarity target raises every chance. Combo
    morphs with a spawn chance may then force their required traits (first
    hit in catalog order wins).
    """
    genotype: Dict[str, Tuple[str, str]] = {}
    for gene in catalog.genes_for_species(species_id):
        chance = allele_chance(gene, rarity_target)
        first = gene.id if rng.bool(chance) else WILD_ALLELE
        second = gene.id if rng.bool(chance) else WILD_ALLELE
        genotype[gene.id] = (first, second)

    for combo in catalog.combos.values():
        if not combo.spawn_chance or not _combo_applies(combo, species_id, catalog):
            continue
        if rng.bool(combo.spawn_chance * rarity_target):
            for trait_id in combo.requires:
                _force_trait(genotype, trait_id, catalog)
            logger.debug("Wild encounter forced combo %s", combo.id)
            break

    return genotype


def generate_wild_creature(
    seed: int,
    species_id: str,
    rarity_target: float,
    catalog: GeneCatalog,
    *,
    creature_id: Optional[str] = None,
    clock: Callable[[], int] = now_ms,
) -> Creature:
    """Generate the creature found at an encounter spot.

    Pure given its seed: the same ``(seed, species_id, rarity_target)`` and
    catalog always yield an identical genotype and sex.

    Raises:
        UnknownSpeciesError: The species is not in the catalog
    """
    species = catalog.require_species(species_id)
    rarity_target = max(0.0, min(1.0, float(rarity_target)))
    rng = encounter_rng(seed)

    genotype = generate_wild_genotype(rng, species.id, rarity_target, catalog)
    sex = Sex.MALE if rng.bool(0.5) else Sex.FEMALE

    kwargs = {"id": creature_id} if creature_id else {}
    return Creature(
        species=species.id,
        sex=sex,
        genotype=genotype,
        catalog=catalog,
        origin=Origin.WILD,
        birth_date=clock(),
        **kwargs,
    )
