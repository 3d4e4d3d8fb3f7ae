"""Read-only gene, combo-morph and species catalog.

Catalog order is significant: it is the order phenotypes are resolved in,
the order combos are matched in (first match wins) and the display order of
every downstream consumer.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional

from morphcore.errors import UnknownSpeciesError
from morphcore.genetics.gene import ComboMorph, Gene, Species


class GeneCatalog:
    """Immutable lookup tables for genes, combo morphs and species.

    Genes (including super-form entries), combos and species keep the order
    they were given in. Lookups of unknown ids return None rather than
    raising, so data-only catalog changes never break older genotypes.
    """

    def __init__(
        self,
        genes: Iterable[Gene],
        combos: Iterable[ComboMorph] = (),
        species: Iterable[Species] = (),
    ) -> None:
        self._genes: Mapping[str, Gene] = MappingProxyType({g.id: g for g in genes})
        self._combos: Mapping[str, ComboMorph] = MappingProxyType({c.id: c for c in combos})
        self._species: Mapping[str, Species] = MappingProxyType({s.id: s for s in species})
        # Rank of every gene id in catalog order, for canonical sorting
        self._order: Mapping[str, int] = MappingProxyType(
            {gene_id: index for index, gene_id in enumerate(self._genes)}
        )

    def __repr__(self) -> str:
        return (
            f"GeneCatalog(genes={len(self._genes)}, combos={len(self._combos)}, "
            f"species={len(self._species)})"
        )

    # =========================================================================
    # Tables
    # =========================================================================

    @property
    def genes(self) -> Mapping[str, Gene]:
        return self._genes

    @property
    def combos(self) -> Mapping[str, ComboMorph]:
        return self._combos

    @property
    def species(self) -> Mapping[str, Species]:
        return self._species

    # =========================================================================
    # Lookups
    # =========================================================================

    def gene(self, gene_id: str) -> Optional[Gene]:
        return self._genes.get(gene_id)

    def get_species(self, species_id: str) -> Optional[Species]:
        return self._species.get(species_id)

    def require_species(self, species_id: str) -> Species:
        """Return the species or raise UnknownSpeciesError."""
        species = self._species.get(species_id)
        if species is None:
            raise UnknownSpeciesError(species_id)
        return species

    def trait_name(self, trait_id: str) -> str:
        """Display name of a gene or super form; unknown ids are shown raw."""
        gene = self._genes.get(trait_id)
        return gene.name if gene is not None else trait_id

    def species_name(self, species_id: str) -> str:
        species = self._species.get(species_id)
        return species.common_name if species is not None else species_id

    def inheritable_genes(self) -> Iterator[Gene]:
        """Genes that can appear as genotype keys (super forms excluded)."""
        return (g for g in self._genes.values() if not g.is_super_form)

    def genes_for_species(self, species_id: str) -> List[Gene]:
        """Inheritable genes applicable to a species, in catalog order."""
        return [g for g in self.inheritable_genes() if g.applies_to(species_id)]

    def ordered(self, gene_ids: Iterable[str]) -> List[str]:
        """Sort gene ids into catalog order; unknown ids are dropped."""
        return sorted((gid for gid in gene_ids if gid in self._order), key=self._order.__getitem__)

    def first_matching_combo(self, phenotype: Iterable[str]) -> Optional[ComboMorph]:
        """First combo (in catalog order) whose requirements all appear in phenotype."""
        expressed = list(phenotype)
        if not expressed:
            return None
        for combo in self._combos.values():
            if combo.is_satisfied_by(expressed):
                return combo
        return None
