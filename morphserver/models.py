"""Request/response models for the morph API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from morphcore.economy.pricing import calculate_price, get_rarity_tier
from morphcore.economy.rules import PricingRules
from morphcore.entities.creature import Creature
from morphcore.entities.creature_codec import stats_to_dict
from morphcore.genetics.gene import ComboMorph, Gene, Species
from morphcore.world.layout import EncounterSpot


class GeneView(BaseModel):
    """A gene or super form as shown in the catalog browser."""

    id: str
    name: str
    inheritance: str
    rarity: int
    species: List[str]
    super_form: Optional[str] = None
    super_form_of: Optional[str] = None
    description: str = ""

    @classmethod
    def from_gene(cls, gene: Gene) -> "GeneView":
        return cls(
            id=gene.id,
            name=gene.name,
            inheritance=gene.inheritance.value,
            rarity=gene.rarity,
            species=sorted(gene.species),
            super_form=gene.super_form,
            super_form_of=gene.super_form_of,
            description=gene.description,
        )


class ComboView(BaseModel):
    id: str
    name: str
    requires: List[str]
    base_price: int
    spawn_chance: Optional[float] = None

    @classmethod
    def from_combo(cls, combo: ComboMorph) -> "ComboView":
        return cls(
            id=combo.id,
            name=combo.name,
            requires=list(combo.requires),
            base_price=combo.base_price,
            spawn_chance=combo.spawn_chance,
        )


class SpeciesView(BaseModel):
    id: str
    common_name: str
    base_price: int
    clutch_min: int
    clutch_max: int
    unlock: Dict[str, Any] = Field(default_factory=dict)
    unlocked: Optional[bool] = None

    @classmethod
    def from_species(cls, species: Species, unlocked: Optional[bool] = None) -> "SpeciesView":
        return cls(
            id=species.id,
            common_name=species.common_name,
            base_price=species.base_price,
            clutch_min=species.clutch_min,
            clutch_max=species.clutch_max,
            unlock=dict(species.unlock),
            unlocked=unlocked,
        )


class CreatureView(BaseModel):
    """A creature with all derived presentation fields resolved."""

    id: str
    species: str
    species_name: str
    sex: str
    origin: str
    parent_ids: Optional[List[str]] = None
    birth_date: int
    stats: Dict[str, Any]
    genotype: Dict[str, Any]
    phenotype: List[str]
    visual_genes: List[str]
    het_genes: List[str]
    display_name: str
    price: int
    rarity_tier: str

    @classmethod
    def from_creature(cls, creature: Creature, rules: PricingRules) -> "CreatureView":
        price = calculate_price(creature, creature.catalog, rules)
        return cls(
            id=creature.id,
            species=creature.species,
            species_name=creature.species_name,
            sex=creature.sex.value,
            origin=creature.origin.value,
            parent_ids=list(creature.parent_ids) if creature.parent_ids else None,
            birth_date=creature.birth_date,
            stats=stats_to_dict(creature.stats),
            genotype={
                gene_id: list(alleles) if isinstance(alleles, tuple) else alleles
                for gene_id, alleles in creature.genotype.items()
            },
            phenotype=creature.phenotype,
            visual_genes=creature.visual_genes,
            het_genes=creature.het_gene_names,
            display_name=creature.display_name,
            price=price,
            rarity_tier=get_rarity_tier(price, rules).value,
        )


class EncounterSpotView(BaseModel):
    id: str
    x: float
    z: float
    species: str
    rarity: float
    is_starter: bool
    collected: bool

    @classmethod
    def from_spot(cls, spot: EncounterSpot, collected: bool) -> "EncounterSpotView":
        return cls(
            id=spot.id,
            x=spot.x,
            z=spot.z,
            species=spot.species,
            rarity=spot.rarity,
            is_starter=spot.is_starter,
            collected=collected,
        )


class PairRequest(BaseModel):
    """Two owned creatures to predict or breed."""

    parent1_id: str
    parent2_id: str


class BreedRequest(PairRequest):
    # How many offspring to keep (all when omitted)
    keep: Optional[int] = Field(default=None, ge=0)


class PredictResponse(BaseModel):
    genes: Dict[str, Dict[str, float]]
    labels: Dict[str, Dict[str, float]]


class BreedResponse(BaseModel):
    offspring: List[CreatureView]


class SellResponse(BaseModel):
    creature_id: str
    price: int
    money: int


class EvaluateRequest(BaseModel):
    """A serialized creature record (see the creature codec)."""

    creature: Dict[str, Any]


class EvaluateResponse(BaseModel):
    creature: CreatureView
    issues: List[str]


class PlayerView(BaseModel):
    money: int
    discovered_morphs: List[str]
    creatures: List[CreatureView]
