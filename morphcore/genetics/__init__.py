"""Genetics package for the snake morph engine.

This package provides:

- Gene / ComboMorph / Species catalog entries and the read-only GeneCatalog
- Pure genotype -> phenotype resolution, carrier (het) detection and
  display naming
- Genotype validation for debugging and migrated save data

Breeding (``morphcore.genetics.breeding``), wild-encounter generation
(``morphcore.genetics.wild``) and catalog loading
(``morphcore.genetics.catalog_loader``) build creatures and pricing rules
and are imported from their modules directly.
"""

from morphcore.genetics.catalog import GeneCatalog
from morphcore.genetics.expression import (
    NORMAL_DISPLAY_NAME,
    get_display_name,
    get_het_gene_names,
    get_het_genes,
    get_visual_genes,
    resolve_phenotype,
)
from morphcore.genetics.gene import (
    WILD_ALLELE,
    WILD_ALLELES,
    ComboMorph,
    Gene,
    InheritanceMode,
    Species,
)
from morphcore.genetics.validation import validate_genotype

__all__ = [
    # Catalog entries
    "Gene",
    "ComboMorph",
    "Species",
    "InheritanceMode",
    "GeneCatalog",
    "WILD_ALLELE",
    "WILD_ALLELES",
    # Expression
    "resolve_phenotype",
    "get_het_genes",
    "get_het_gene_names",
    "get_visual_genes",
    "get_display_name",
    "NORMAL_DISPLAY_NAME",
    # Validation
    "validate_genotype",
]
