"""Pytest configuration and fixtures for morph engine tests."""

import pytest

from morphcore.entities.creature import Creature, CreatureStats, Sex
from morphcore.genetics.catalog_loader import load_morph_data
from morphcore.util.rng import SeededRandom


@pytest.fixture(scope="session")
def morph_data():
    """The bundled catalog and pricing rules."""
    return load_morph_data()


@pytest.fixture
def catalog(morph_data):
    return morph_data.catalog


@pytest.fixture
def pricing_rules(morph_data):
    return morph_data.pricing_rules


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return SeededRandom(42)


@pytest.fixture
def make_creature(catalog):
    """Factory for creatures with an explicit genotype.

    Usage:
        snake = make_creature({"albino": ["albino", "+"]}, sex=Sex.FEMALE)
    """

    def _make(genotype=None, *, species="western", sex=Sex.MALE, clutches=0, creature_id=None):
        kwargs = {"id": creature_id} if creature_id else {}
        return Creature(
            species=species,
            sex=sex,
            genotype=genotype or {},
            catalog=catalog,
            stats=CreatureStats(clutches_produced=clutches),
            birth_date=0,
            **kwargs,
        )

    return _make
