"""Catalog configuration loader.

The catalog document (genes, super forms, combo morphs, species and pricing
rules) is validated with pydantic models that accept the camelCase keys of
the game's data files, then frozen into a GeneCatalog and PricingRules.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from morphcore.config.pricing import (
    DEFAULT_HET_GENE_BONUS,
    DEFAULT_PROVEN_BREEDER_BONUS,
    DEFAULT_RARITY_THRESHOLDS,
)
from morphcore.config.settings import DEFAULT_CATALOG_PATH
from morphcore.economy.rules import PricingRules
from morphcore.errors import CatalogError
from morphcore.genetics.catalog import GeneCatalog
from morphcore.genetics.gene import ComboMorph, Gene, InheritanceMode, Species

logger = logging.getLogger(__name__)


class _CatalogModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class GeneModel(_CatalogModel):
    name: str
    inheritance: InheritanceMode
    rarity: int = Field(default=1, ge=1, le=5)
    species: List[str] = Field(default_factory=list)
    super_form: Optional[str] = Field(default=None, alias="superForm")
    description: str = ""

    @model_validator(mode="after")
    def check_super_form_inheritance(self) -> "GeneModel":
        if self.super_form and self.inheritance is not InheritanceMode.INCOMPLETE_DOMINANT:
            raise ValueError("superForm is only valid for incompleteDominant genes")
        return self


class SuperFormModel(_CatalogModel):
    name: str
    rarity: int = Field(default=1, ge=1, le=5)
    description: str = ""


class ComboModel(_CatalogModel):
    name: str
    requires: List[str] = Field(min_length=1)
    base_price: int = Field(default=0, ge=0, alias="basePrice")
    spawn_chance: Optional[float] = Field(default=None, ge=0.0, le=1.0, alias="spawnChance")


class SpeciesModel(_CatalogModel):
    common_name: str = Field(alias="commonName")
    base_price: int = Field(ge=0, alias="basePrice")
    clutch_min: int = Field(ge=1, alias="clutchMin")
    clutch_max: int = Field(ge=1, alias="clutchMax")
    unlock: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_clutch_range(self) -> "SpeciesModel":
        if self.clutch_min > self.clutch_max:
            raise ValueError(f"clutchMin {self.clutch_min} > clutchMax {self.clutch_max}")
        return self


class PricingRulesModel(_CatalogModel):
    gender_multiplier: Dict[str, float] = Field(default_factory=dict, alias="genderMultiplier")
    rarity_multipliers: Dict[int, float] = Field(default_factory=dict, alias="rarityMultipliers")
    het_gene_bonus: float = Field(default=DEFAULT_HET_GENE_BONUS, ge=0.0, alias="hetGeneBonus")
    proven_breeder_bonus: float = Field(
        default=DEFAULT_PROVEN_BREEDER_BONUS, gt=0.0, alias="provenBreederBonus"
    )
    species_multipliers: Dict[str, float] = Field(default_factory=dict, alias="speciesMultipliers")
    rarity_thresholds: List[float] = Field(
        default_factory=lambda: list(DEFAULT_RARITY_THRESHOLDS), alias="rarityThresholds"
    )

    @model_validator(mode="after")
    def check_thresholds(self) -> "PricingRulesModel":
        thresholds = self.rarity_thresholds
        if len(thresholds) != len(DEFAULT_RARITY_THRESHOLDS):
            raise ValueError(
                f"rarityThresholds needs {len(DEFAULT_RARITY_THRESHOLDS)} values, got {len(thresholds)}"
            )
        if any(lo >= hi for lo, hi in zip(thresholds, thresholds[1:])):
            raise ValueError(f"rarityThresholds must be strictly increasing: {thresholds}")
        return self


class CatalogDocument(_CatalogModel):
    """Top-level shape of the catalog configuration file."""

    genes: Dict[str, GeneModel]
    super_forms: Dict[str, SuperFormModel] = Field(default_factory=dict, alias="superForms")
    combo_morphs: Dict[str, ComboModel] = Field(default_factory=dict, alias="comboMorphs")
    species: Dict[str, SpeciesModel]
    pricing_rules: PricingRulesModel = Field(default_factory=PricingRulesModel, alias="pricingRules")

    @model_validator(mode="after")
    def check_references(self) -> "CatalogDocument":
        for gene_id, gene in self.genes.items():
            if gene.super_form and gene.super_form not in self.super_forms:
                raise ValueError(f"gene {gene_id!r} names unknown superForm {gene.super_form!r}")
            unknown_species = [s for s in gene.species if s not in self.species]
            if unknown_species:
                raise ValueError(f"gene {gene_id!r} names unknown species {unknown_species}")
        overlap = set(self.genes) & set(self.super_forms)
        if overlap:
            raise ValueError(f"ids used both as gene and super form: {sorted(overlap)}")
        traits = set(self.genes) | set(self.super_forms)
        for combo_id, combo in self.combo_morphs.items():
            missing = [req for req in combo.requires if req not in traits]
            if missing:
                raise ValueError(f"combo {combo_id!r} requires unknown traits {missing}")
        return self


@dataclass(frozen=True)
class MorphData:
    """Everything the engine needs from configuration."""

    catalog: GeneCatalog
    pricing_rules: PricingRules


def build_catalog(document: CatalogDocument) -> GeneCatalog:
    """Freeze a validated document into a GeneCatalog.

    Super-form entries are placed directly after the gene they belong to,
    so catalog order stays the order genes were declared in.
    """
    super_form_owner = {g.super_form: gid for gid, g in document.genes.items() if g.super_form}
    genes: List[Gene] = []
    for gene_id, model in document.genes.items():
        species = frozenset(model.species)
        genes.append(
            Gene(
                id=gene_id,
                name=model.name,
                inheritance=model.inheritance,
                rarity=model.rarity,
                species=species,
                super_form=model.super_form,
                description=model.description,
            )
        )
        if model.super_form:
            sf = document.super_forms[model.super_form]
            genes.append(
                Gene(
                    id=model.super_form,
                    name=sf.name,
                    inheritance=model.inheritance,
                    rarity=sf.rarity,
                    species=species,
                    super_form_of=gene_id,
                    description=sf.description,
                )
            )

    orphans = [sf_id for sf_id in document.super_forms if sf_id not in super_form_owner]
    if orphans:
        logger.warning("Ignoring super forms not linked from any gene: %s", orphans)

    combos = [
        ComboMorph(
            id=combo_id,
            name=model.name,
            requires=tuple(model.requires),
            base_price=model.base_price,
            spawn_chance=model.spawn_chance,
        )
        for combo_id, model in document.combo_morphs.items()
    ]
    species = [
        Species(
            id=species_id,
            common_name=model.common_name,
            base_price=model.base_price,
            clutch_min=model.clutch_min,
            clutch_max=model.clutch_max,
            unlock=dict(model.unlock),
        )
        for species_id, model in document.species.items()
    ]
    return GeneCatalog(genes, combos, species)


def build_pricing_rules(document: CatalogDocument) -> PricingRules:
    rules = document.pricing_rules
    return PricingRules(
        sex_multipliers=dict(rules.gender_multiplier),
        rarity_multipliers=dict(rules.rarity_multipliers),
        het_gene_bonus=rules.het_gene_bonus,
        proven_breeder_bonus=rules.proven_breeder_bonus,
        species_multipliers=dict(rules.species_multipliers),
        rarity_thresholds=tuple(rules.rarity_thresholds),
    )


def parse_morph_data(raw: Dict[str, Any]) -> MorphData:
    """Validate a decoded catalog document.

    Raises:
        CatalogError: The document does not describe a consistent catalog
    """
    try:
        document = CatalogDocument.model_validate(raw)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog: {exc}") from exc
    return MorphData(catalog=build_catalog(document), pricing_rules=build_pricing_rules(document))


def load_morph_data(path: Union[str, Path, None] = None) -> MorphData:
    """Load and validate the catalog file (defaults to the bundled catalog).

    Raises:
        CatalogError: The file is missing, not JSON, or fails validation
    """
    path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Cannot read catalog {path}: {exc}") from exc

    data = parse_morph_data(raw)
    logger.info(
        "Loaded catalog %s: %d genes, %d combos, %d species",
        path.name,
        len(data.catalog.genes),
        len(data.catalog.combos),
        len(data.catalog.species),
    )
    return data
