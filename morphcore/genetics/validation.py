"""Validation helpers for genotypes.

These functions are intended for debugging, tests and the API's evaluate
route, not for the resolver: resolution tolerates malformed data silently.
They help catch partially-migrated save data close to the source.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from morphcore.genetics.catalog import GeneCatalog
from morphcore.genetics.gene import is_well_formed_pair, is_wild


def validate_genotype(
    genotype: Mapping[str, Any],
    catalog: GeneCatalog,
    *,
    species: Optional[str] = None,
    path: str = "genotype",
) -> List[str]:
    """Validate a genotype against the catalog.

    Returns a list of human-readable issues; empty means valid.
    """
    issues: List[str] = []
    if species is not None and catalog.get_species(species) is None:
        issues.append(f"{path}: unknown species {species!r}")
        species = None

    for gene_id, alleles in genotype.items():
        gene = catalog.gene(gene_id)
        if gene is None:
            issues.append(f"{path}.{gene_id}: unknown gene")
            continue
        if gene.is_super_form:
            issues.append(f"{path}.{gene_id}: super form {gene_id!r} cannot be inherited")
            continue
        if not is_well_formed_pair(alleles):
            issues.append(f"{path}.{gene_id}: expected two allele values, got {alleles!r}")
            continue
        for allele in alleles:
            if allele != gene_id and not is_wild(allele):
                issues.append(f"{path}.{gene_id}: foreign allele value {allele!r}")
        if species is not None and not gene.applies_to(species):
            issues.append(f"{path}.{gene_id}: gene does not occur in species {species!r}")

    return issues
