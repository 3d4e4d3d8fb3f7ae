"""Gene expression logic for translating genotype to phenotype.

This module contains the pure functions that derive what a creature looks
like from its allele pairs. Keeping them separate from the creature record
lets presentation code, pricing and breeding odds share one resolver.

None of these functions raise on malformed input: unknown gene ids and
allele pairs that are not exactly two well-formed values are skipped.
"""

import logging
from typing import List

from morphcore.genetics.catalog import GeneCatalog
from morphcore.genetics.gene import Genotype, InheritanceMode, is_well_formed_pair, mutant_count

logger = logging.getLogger(__name__)

NORMAL_DISPLAY_NAME = "Normal"


def resolve_phenotype(genotype: Genotype, catalog: GeneCatalog) -> List[str]:
    """Resolve the ordered list of expressed trait ids.

    Genes are visited in catalog order. Incomplete-dominant genes with two
    mutant copies express their super form instead of the base gene.

    Args:
        genotype: Mapping of gene id to allele pair
        catalog: Gene catalog

    Returns:
        Expressed trait ids (gene ids and/or super-form ids) in catalog order
    """
    expressed: List[str] = []
    for gene_id in catalog.ordered(genotype.keys()):
        gene = catalog.gene(gene_id)
        if gene is None or gene.is_super_form:
            continue
        alleles = genotype[gene_id]
        if not is_well_formed_pair(alleles):
            logger.debug("Skipping malformed allele pair for %s: %r", gene_id, alleles)
            continue

        mode = gene.inheritance
        if mode is InheritanceMode.RECESSIVE:
            if alleles[0] == gene_id and alleles[1] == gene_id:
                expressed.append(gene_id)
        elif mode is InheritanceMode.INCOMPLETE_DOMINANT:
            copies = mutant_count(alleles)
            if copies == 1:
                expressed.append(gene_id)
            elif copies == 2 and gene.super_form:
                expressed.append(gene.super_form)
        elif mode in (InheritanceMode.DOMINANT, InheritanceMode.POLYGENIC):
            # Polygenic shares dominant expression; intensity is not graded yet
            if mutant_count(alleles) > 0:
                expressed.append(gene_id)

    return expressed


def get_het_genes(genotype: Genotype, phenotype: List[str], catalog: GeneCatalog) -> List[str]:
    """Recessive genes carried as a single copy and not visually expressed.

    Returns:
        Gene ids in catalog order
    """
    expressed = set(phenotype)
    hets: List[str] = []
    for gene_id in catalog.ordered(genotype.keys()):
        gene = catalog.gene(gene_id)
        if gene is None or gene.inheritance is not InheritanceMode.RECESSIVE:
            continue
        alleles = genotype[gene_id]
        if not is_well_formed_pair(alleles):
            continue
        copies = sum(1 for a in alleles if a == gene_id)
        if copies == 1 and gene_id not in expressed:
            hets.append(gene_id)
    return hets


def get_visual_genes(phenotype: List[str], catalog: GeneCatalog) -> List[str]:
    """Display names of expressed traits; unknown ids are shown as-is."""
    return [catalog.trait_name(trait_id) for trait_id in phenotype]


def get_het_gene_names(genotype: Genotype, phenotype: List[str], catalog: GeneCatalog) -> List[str]:
    return [catalog.trait_name(gene_id) for gene_id in get_het_genes(genotype, phenotype, catalog)]


def get_display_name(phenotype: List[str], catalog: GeneCatalog) -> str:
    """Name shown for a creature.

    "Normal" for an empty phenotype, else the first satisfied combo morph's
    name, else the space-joined trait names.
    """
    if not phenotype:
        return NORMAL_DISPLAY_NAME

    combo = catalog.first_matching_combo(phenotype)
    if combo is not None:
        return combo.name

    return " ".join(get_visual_genes(phenotype, catalog))
