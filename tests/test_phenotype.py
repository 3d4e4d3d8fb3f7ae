"""Tests for phenotype resolution, het genes and display names."""

import pytest

from morphcore.genetics.catalog import GeneCatalog
from morphcore.genetics.expression import (
    get_display_name,
    get_het_gene_names,
    get_het_genes,
    get_visual_genes,
    resolve_phenotype,
)
from morphcore.genetics.gene import ComboMorph, Gene, InheritanceMode


# =============================================================================
# Resolver
# =============================================================================


@pytest.mark.parametrize(
    "alleles, expected",
    [
        (["albino", "albino"], ["albino"]),
        (["albino", "+"], []),
        (["+", "albino"], []),
        (["+", "+"], []),
        (["albino", "wild"], []),
    ],
)
def test_recessive_needs_two_copies(catalog, alleles, expected):
    assert resolve_phenotype({"albino": alleles}, catalog) == expected


@pytest.mark.parametrize(
    "alleles, expected",
    [
        (["anaconda", "+"], ["anaconda"]),
        (["+", "anaconda"], ["anaconda"]),
        (["anaconda", "anaconda"], ["superconda"]),
        (["+", "+"], []),
        (["wild", "+"], []),
    ],
)
def test_incomplete_dominant_copy_count(catalog, alleles, expected):
    assert resolve_phenotype({"anaconda": alleles}, catalog) == expected


def test_super_form_replaces_base_gene(catalog):
    phenotype = resolve_phenotype({"arctic": ["arctic", "arctic"]}, catalog)
    assert phenotype == ["superarctic"]
    assert "arctic" not in phenotype


def test_foreign_allele_counts_as_mutant_for_incomplete_dominant(catalog):
    assert resolve_phenotype({"anaconda": ["albino", "+"]}, catalog) == ["anaconda"]
    assert resolve_phenotype({"anaconda": ["albino", "anaconda"]}, catalog) == ["superconda"]


def test_incomplete_dominant_without_super_form_expresses_nothing_for_two_copies():
    catalog = GeneCatalog(
        [Gene(id="pastel", name="Pastel", inheritance=InheritanceMode.INCOMPLETE_DOMINANT)]
    )
    assert resolve_phenotype({"pastel": ["pastel", "+"]}, catalog) == ["pastel"]
    assert resolve_phenotype({"pastel": ["pastel", "pastel"]}, catalog) == []


@pytest.mark.parametrize("gene_id", ["sable", "extreme_red"])
def test_dominant_and_polygenic_need_one_copy(catalog, gene_id):
    assert resolve_phenotype({gene_id: [gene_id, "+"]}, catalog) == [gene_id]
    assert resolve_phenotype({gene_id: [gene_id, gene_id]}, catalog) == [gene_id]
    assert resolve_phenotype({gene_id: ["+", "+"]}, catalog) == []


def test_result_follows_catalog_order(catalog):
    genotype = {
        "sable": ["sable", "+"],
        "anaconda": ["anaconda", "+"],
        "albino": ["albino", "albino"],
        "axanthic": ["axanthic", "axanthic"],
    }
    assert resolve_phenotype(genotype, catalog) == ["albino", "axanthic", "anaconda", "sable"]


def test_ordering_ignores_genotype_insertion_order(catalog):
    forward = {"albino": ["albino", "albino"], "sable": ["sable", "+"]}
    backward = {"sable": ["sable", "+"], "albino": ["albino", "albino"]}
    assert resolve_phenotype(forward, catalog) == resolve_phenotype(backward, catalog)


@pytest.mark.parametrize(
    "alleles",
    [
        ["albino"],
        ["albino", "albino", "albino"],
        [],
        "albino",
        None,
        42,
        ["albino", None],
        ["albino", ""],
    ],
)
def test_malformed_pairs_are_skipped(catalog, alleles):
    genotype = {"albino": alleles, "sable": ["sable", "+"]}
    assert resolve_phenotype(genotype, catalog) == ["sable"]


def test_unknown_genes_are_skipped(catalog):
    genotype = {"mystery": ["mystery", "mystery"], "albino": ["albino", "albino"]}
    assert resolve_phenotype(genotype, catalog) == ["albino"]


def test_super_form_key_is_not_a_gene(catalog):
    assert resolve_phenotype({"superconda": ["superconda", "superconda"]}, catalog) == []


def test_empty_genotype(catalog):
    assert resolve_phenotype({}, catalog) == []


def test_resolution_is_deterministic(catalog):
    genotype = {"albino": ["albino", "albino"], "arctic": ["+", "arctic"]}
    assert resolve_phenotype(genotype, catalog) == resolve_phenotype(genotype, catalog)


def test_creature_caches_phenotype(make_creature):
    snake = make_creature({"albino": ["albino", "albino"]})
    first = snake.phenotype
    first.append("mutated")
    assert snake.phenotype == ["albino"]


# =============================================================================
# Het genes
# =============================================================================


def test_het_genes_are_single_copy_recessives(catalog):
    genotype = {
        "albino": ["albino", "+"],
        "axanthic": ["+", "axanthic"],
        "lavender": ["lavender", "lavender"],
        "anaconda": ["anaconda", "+"],
        "sable": ["sable", "+"],
    }
    phenotype = resolve_phenotype(genotype, catalog)
    assert get_het_genes(genotype, phenotype, catalog) == ["albino", "axanthic"]
    assert get_het_gene_names(genotype, phenotype, catalog) == ["Albino", "Axanthic"]


def test_homozygous_recessive_is_not_het(catalog):
    genotype = {"albino": ["albino", "albino"]}
    assert get_het_genes(genotype, resolve_phenotype(genotype, catalog), catalog) == []


def test_foreign_allele_does_not_make_a_het(catalog):
    genotype = {"albino": ["axanthic", "+"]}
    assert get_het_genes(genotype, [], catalog) == []


def test_het_genes_skip_malformed_and_unknown(catalog):
    genotype = {"albino": ["albino"], "mystery": ["mystery", "+"], "toffee": ["toffee", "+"]}
    assert get_het_genes(genotype, [], catalog) == ["toffee"]


# =============================================================================
# Display names
# =============================================================================


def test_display_name_normal(catalog):
    assert get_display_name([], catalog) == "Normal"


def test_display_name_single_trait(catalog):
    assert get_display_name(["albino"], catalog) == "Albino"


def test_display_name_joins_trait_names(catalog):
    assert get_display_name(["albino", "anaconda", "sable"], catalog) == "Albino Anaconda Sable"


def test_display_name_uses_first_matching_combo(catalog):
    assert get_display_name(["albino", "axanthic"], catalog) == "Snow"
    # Catalog order: super_snow is listed before snow
    assert get_display_name(["albino", "axanthic", "superconda"], catalog) == "Snow Superconda"


def test_combo_match_ignores_extra_traits(catalog):
    assert get_display_name(["albino", "axanthic", "sable"], catalog) == "Snow"


def test_combo_order_is_catalog_order():
    genes = [
        Gene(id="a", name="A", inheritance=InheritanceMode.RECESSIVE),
        Gene(id="b", name="B", inheritance=InheritanceMode.RECESSIVE),
    ]
    combos = [
        ComboMorph(id="first", name="First", requires=("a",)),
        ComboMorph(id="second", name="Second", requires=("a", "b")),
    ]
    catalog = GeneCatalog(genes, combos)
    assert get_display_name(["a", "b"], catalog) == "First"


def test_visual_genes_show_unknown_ids_raw(catalog):
    assert get_visual_genes(["superconda", "mystery"], catalog) == ["Superconda", "mystery"]


def test_creature_presentation(make_creature):
    snake = make_creature(
        {
            "albino": ["albino", "albino"],
            "axanthic": ["axanthic", "axanthic"],
            "toffee": ["toffee", "+"],
        }
    )
    assert snake.display_name == "Snow"
    assert snake.visual_genes == ["Albino", "Axanthic"]
    assert snake.het_genes == ["toffee"]
    assert snake.het_gene_names == ["Toffeebelly"]
    assert snake.species_name == "Western Hognose"
