"""Exception types raised by the morph engine.

Query functions (phenotype, het genes, display names, pricing) never raise on
malformed genotypes; only configuration loading, breeding preconditions and
collection/save operations surface errors.
"""


class MorphError(Exception):
    """Base class for all engine errors."""


class CatalogError(MorphError):
    """The gene/species/combo catalog configuration is malformed."""


class UnknownSpeciesError(MorphError):
    """A species id is not present in the catalog."""

    def __init__(self, species_id: str) -> None:
        super().__init__(f"Unknown species: {species_id!r}")
        self.species_id = species_id


class BreedingError(MorphError):
    """A breeding precondition was violated."""


class SpeciesMismatchError(BreedingError):
    """Parents (or parent and target species) belong to different species."""

    def __init__(self, species1: str, species2: str) -> None:
        super().__init__(f"Cannot breed across species: {species1!r} x {species2!r}")
        self.species1 = species1
        self.species2 = species2


class CollectionError(MorphError):
    """A player-collection operation referenced something it cannot act on."""


class SaveError(MorphError):
    """A save payload could not be read or written."""
