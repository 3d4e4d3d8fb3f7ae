"""Tests for genotype validation and runtime settings."""

from pathlib import Path

import pytest

from morphcore.config.settings import DEFAULT_CATALOG_PATH, GameSettings
from morphcore.genetics.validation import validate_genotype
from morphcore.util.rng import WORLD_SEED


def test_valid_genotype_has_no_issues(catalog):
    genotype = {"albino": ["albino", "+"], "anaconda": ("anaconda", "wild")}
    assert validate_genotype(genotype, catalog, species="western") == []


def test_reports_each_problem(catalog):
    genotype = {
        "mystery": ["mystery", "+"],
        "superconda": ["superconda", "superconda"],
        "albino": ["albino"],
        "axanthic": ["albino", "+"],
        "melanistic": ["melanistic", "+"],
    }
    issues = validate_genotype(genotype, catalog, species="western")

    assert issues == [
        "genotype.mystery: unknown gene",
        "genotype.superconda: super form 'superconda' cannot be inherited",
        "genotype.albino: expected two allele values, got ['albino']",
        "genotype.axanthic: foreign allele value 'albino'",
        "genotype.melanistic: gene does not occur in species 'western'",
    ]


def test_unknown_species_reported_once(catalog):
    issues = validate_genotype({"albino": ["albino", "+"]}, catalog, species="atlantis", path="snake")
    assert issues == ["snake: unknown species 'atlantis'"]


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MORPH_WORLD_SEED", "7")
    monkeypatch.setenv("MORPH_SAVE_PATH", str(tmp_path / "s.json"))
    monkeypatch.setenv("MORPH_LOG_LEVEL", "debug")
    monkeypatch.setenv("MORPH_API_PORT", "9100")

    settings = GameSettings()

    assert settings.world_seed == 7
    assert settings.save_path == tmp_path / "s.json"
    assert settings.log_level == "DEBUG"
    assert settings.api_port == 9100


def test_settings_defaults(monkeypatch):
    for name in ("MORPH_CATALOG_PATH", "MORPH_WORLD_SEED", "MORPH_SAVE_PATH", "MORPH_API_PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = GameSettings()

    assert settings.catalog_path == DEFAULT_CATALOG_PATH
    assert settings.world_seed == WORLD_SEED
    assert settings.save_path == Path("data") / "save.json"
    assert settings.api_port == 8000


@pytest.mark.parametrize("raw", ["0", "2147483647"])
def test_settings_remap_stalling_world_seed(monkeypatch, raw):
    monkeypatch.setenv("MORPH_WORLD_SEED", raw)
    assert GameSettings().world_seed == 1
    assert GameSettings(world_seed=0).world_seed == 1
