"""Creature serialization/deserialization helpers.

This module is the persistence/transfer boundary for
`morphcore.entities.creature.Creature`. Only durable identity is written:
phenotype and price are always recomputed from genotype + current catalog,
so catalog rebalancing re-rates saved creatures consistently.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

from morphcore.entities.creature import (
    DEFAULT_FERTILITY,
    DEFAULT_HEALTH,
    Creature,
    CreatureStats,
    Origin,
    Sex,
    now_ms,
)
from morphcore.genetics.catalog import GeneCatalog

logger = logging.getLogger(__name__)

CREATURE_SCHEMA_VERSION = 1


def creature_to_dict(creature: Creature) -> Dict[str, Any]:
    """Serialize a creature into JSON-compatible primitives."""
    return {
        "schema_version": CREATURE_SCHEMA_VERSION,
        "id": creature.id,
        "species": creature.species,
        "sex": creature.sex.value,
        "genotype": {
            gene_id: list(alleles) if isinstance(alleles, tuple) else alleles
            for gene_id, alleles in creature.genotype.items()
        },
        "origin": creature.origin.value,
        "parentIds": list(creature.parent_ids) if creature.parent_ids else None,
        "birthDate": creature.birth_date,
        "stats": stats_to_dict(creature.stats),
    }


def stats_to_dict(stats: CreatureStats) -> Dict[str, Any]:
    return {
        "health": stats.health,
        "fertility": stats.fertility,
        "clutchesProduced": stats.clutches_produced,
    }


def _finite(value: Any) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"non-finite value {value!r}")
    return number


def stats_from_dict(data: Optional[Dict[str, Any]]) -> CreatureStats:
    """Read a stats block; missing, invalid or non-finite values keep their defaults."""
    stats = CreatureStats()
    if not isinstance(data, dict):
        return stats
    try:
        stats.health = _finite(data.get("health", DEFAULT_HEALTH))
        stats.fertility = _finite(data.get("fertility", DEFAULT_FERTILITY))
        stats.clutches_produced = max(0, int(data.get("clutchesProduced", 0)))
    except (TypeError, ValueError, OverflowError):
        logger.debug("Invalid stats block %r; using defaults", data)
        return CreatureStats()
    return stats


def creature_from_dict(data: Dict[str, Any], catalog: GeneCatalog) -> Creature:
    """Reconstruct a creature from `creature_to_dict` output.

    Unknown fields are ignored. Malformed allele pairs are kept as-is; the
    resolver treats them as absent.

    Raises:
        ValueError: ``species`` or ``sex`` is missing or invalid
    """
    schema_version = data.get("schema_version")
    if schema_version is not None and schema_version != CREATURE_SCHEMA_VERSION:
        logger.debug(
            "Deserializing creature schema_version=%s (expected %s)",
            schema_version,
            CREATURE_SCHEMA_VERSION,
        )

    species = data.get("species")
    if not isinstance(species, str) or not species:
        raise ValueError(f"Creature record has no species: {data.get('id')!r}")
    try:
        sex = Sex(data.get("sex"))
    except ValueError:
        raise ValueError(f"Creature record has invalid sex {data.get('sex')!r}") from None
    try:
        origin = Origin(data.get("origin") or Origin.WILD.value)
    except ValueError:
        logger.debug("Unknown origin %r; treating as wild", data.get("origin"))
        origin = Origin.WILD

    genotype = data.get("genotype")
    if not isinstance(genotype, dict):
        genotype = {}

    parent_ids = data.get("parentIds")
    if not (isinstance(parent_ids, (list, tuple)) and len(parent_ids) == 2):
        parent_ids = None

    kwargs: Dict[str, Any] = {}
    if data.get("id"):
        kwargs["id"] = str(data["id"])

    return Creature(
        species=species,
        sex=sex,
        genotype=genotype,
        catalog=catalog,
        origin=origin,
        parent_ids=tuple(str(p) for p in parent_ids) if parent_ids else None,
        birth_date=_read_birth_date(data.get("birthDate")),
        stats=stats_from_dict(data.get("stats")),
        **kwargs,
    )


def _read_birth_date(value: Any) -> int:
    """Milliseconds since the epoch; anything unusable becomes "now"."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return now_ms()
    if isinstance(value, float) and not math.isfinite(value):
        logger.debug("Non-finite birthDate %r; using now", value)
        return now_ms()
    return int(value)
