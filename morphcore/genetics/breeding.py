"""Breeding engine: Punnett-style offspring odds and clutch generation.

Nothing persists between calls. ``predict_offspring`` is a side-effect-free
query for showing odds before a pairing is committed; ``breed`` is the one
operation that consumes PRNG draws and produces new creatures.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from itertools import product
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from morphcore.entities.creature import Creature, Origin, Sex, now_ms
from morphcore.errors import SpeciesMismatchError
from morphcore.genetics.catalog import GeneCatalog
from morphcore.genetics.expression import get_het_genes, resolve_phenotype
from morphcore.genetics.gene import (
    WILD_ALLELE,
    Genotype,
    Species,
    is_well_formed_pair,
    is_wild,
)
from morphcore.util.rng import SeededRandom, require_rng_param

logger = logging.getLogger(__name__)

OUTCOME_SEPARATOR = "/"

# Per-gene mapping of outcome label ("albino/+") to probability
OffspringPrediction = Dict[str, Dict[str, float]]


def canonical_pair(alleles: Sequence[str]) -> Tuple[str, str]:
    """Order an allele pair mutant-first and normalize wild markers to "+"."""
    normalized = [WILD_ALLELE if is_wild(a) else a for a in alleles]
    first, second = sorted(normalized, key=lambda a: (is_wild(a), a))
    return first, second


def outcome_label(alleles: Sequence[str]) -> str:
    return OUTCOME_SEPARATOR.join(canonical_pair(alleles))


def parse_outcome_label(label: str) -> Tuple[str, str]:
    first, second = label.split(OUTCOME_SEPARATOR)
    return first, second


# =============================================================================
# Prediction
# =============================================================================


def predict_offspring(parent1: Genotype, parent2: Genotype, catalog: GeneCatalog) -> OffspringPrediction:
    """Per-gene probability table of offspring allele pairs.

    For every gene both parents carry a well-formed pair for, each of the four
    allele combinations has probability 0.25; equal outcomes (order-insensitive)
    are merged. Probabilities for one gene always sum to 1.0.

    Args:
        parent1: First parent's genotype
        parent2: Second parent's genotype
        catalog: Gene catalog (determines gene order)

    Returns:
        ``{gene_id: {"albino/+": 0.5, "+/+": 0.5}, ...}`` in catalog order
    """
    prediction: OffspringPrediction = {}
    for gene_id in catalog.ordered(parent1.keys()):
        gene = catalog.gene(gene_id)
        if gene is None or gene.is_super_form or gene_id not in parent2:
            continue
        alleles1 = parent1[gene_id]
        alleles2 = parent2[gene_id]
        if not (is_well_formed_pair(alleles1) and is_well_formed_pair(alleles2)):
            continue

        outcomes: Dict[str, float] = defaultdict(float)
        for a1, a2 in product(alleles1, alleles2):
            outcomes[outcome_label((a1, a2))] += 0.25
        prediction[gene_id] = dict(outcomes)
    return prediction


def summarize_offspring_odds(prediction: OffspringPrediction, catalog: GeneCatalog) -> Dict[str, Dict[str, float]]:
    """Translate a Punnett table into presentation labels.

    Each outcome becomes the visual trait name, "Het <name>" for a hidden
    recessive carrier, or "Normal"; equal labels are merged.
    """
    summary: Dict[str, Dict[str, float]] = {}
    for gene_id, outcomes in prediction.items():
        labels: Dict[str, float] = defaultdict(float)
        for label, probability in outcomes.items():
            genotype = {gene_id: parse_outcome_label(label)}
            phenotype = resolve_phenotype(genotype, catalog)
            if phenotype:
                name = " ".join(catalog.trait_name(t) for t in phenotype)
            elif get_het_genes(genotype, phenotype, catalog):
                name = f"Het {catalog.trait_name(gene_id)}"
            else:
                name = "Normal"
            labels[name] += probability
        summary[gene_id] = dict(labels)
    return summary


# =============================================================================
# Clutch generation
# =============================================================================


def check_breeding_pair(parent1: Creature, parent2: Creature, species: Species) -> None:
    """Raise SpeciesMismatchError unless both parents belong to ``species``."""
    if parent1.species != parent2.species:
        logger.warning(
            "Rejected pairing %s (%s) x %s (%s): species mismatch",
            parent1.id,
            parent1.species,
            parent2.id,
            parent2.species,
        )
        raise SpeciesMismatchError(parent1.species, parent2.species)
    if species.id != parent1.species:
        raise SpeciesMismatchError(parent1.species, species.id)


def breed(
    parent1: Creature,
    parent2: Creature,
    species: Species,
    rng: Optional[SeededRandom] = None,
    *,
    clock: Callable[[], int] = now_ms,
) -> List[Creature]:
    """Produce a clutch of offspring from two same-species parents.

    Clutch size is drawn uniformly from the species' inclusive range. Each
    offspring takes, for every gene in parent1's genotype, one random allele
    from each parent, and an unbiased random sex. Parents are not modified;
    phenotype and price of the offspring are derived lazily.

    Args:
        parent1: First parent (its genotype keys define the offspring's genes)
        parent2: Second parent
        species: Species entry both parents must belong to
        rng: Generator the clutch is drawn from
        clock: Millisecond time source for birth dates

    Returns:
        The full clutch; callers decide how many to keep

    Raises:
        SpeciesMismatchError: Parents differ in species (no draws are made)
        MissingRNGError: No generator was passed
    """
    check_breeding_pair(parent1, parent2, species)
    rng = require_rng_param(rng, "breed")

    clutch_size = rng.int(species.clutch_min, species.clutch_max)
    parent_ids = (parent1.id, parent2.id)
    birth_date = clock()

    clutch: List[Creature] = []
    for _ in range(clutch_size):
        genotype: Dict[str, Tuple[str, str]] = {}
        for gene_id, alleles1 in parent1.genotype.items():
            if not is_well_formed_pair(alleles1):
                continue
            alleles2 = parent2.genotype.get(gene_id)
            if not is_well_formed_pair(alleles2):
                alleles2 = (WILD_ALLELE, WILD_ALLELE)
            genotype[gene_id] = (rng.pick(alleles1), rng.pick(alleles2))

        sex = Sex.MALE if rng.bool(0.5) else Sex.FEMALE
        clutch.append(
            Creature(
                species=species.id,
                sex=sex,
                genotype=genotype,
                catalog=parent1.catalog,
                origin=Origin.BRED,
                parent_ids=parent_ids,
                birth_date=birth_date,
            )
        )

    logger.info(
        "Bred %s x %s (%s): clutch of %d", parent1.id, parent2.id, species.id, clutch_size
    )
    return clutch
