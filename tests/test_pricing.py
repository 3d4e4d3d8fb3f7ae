"""Tests for the valuation engine."""

import pytest

from morphcore.economy.pricing import calculate_price, get_rarity_tier
from morphcore.economy.rules import PricingRules, RarityTier
from morphcore.entities.creature import Sex


def test_normal_male_is_species_base_price(catalog, pricing_rules, make_creature):
    assert calculate_price(make_creature(), catalog, pricing_rules) == 150


def test_sex_multiplier(catalog, pricing_rules, make_creature):
    assert calculate_price(make_creature(sex=Sex.FEMALE), catalog, pricing_rules) == 225


def test_trait_rarity_multiplier(catalog, pricing_rules, make_creature):
    albino = make_creature({"albino": ["albino", "albino"]})
    assert calculate_price(albino, catalog, pricing_rules) == 225


def test_rounds_half_up(catalog, pricing_rules, make_creature):
    # 150 * 1.5 (female) * 1.5 (albino) = 337.5
    albino = make_creature({"albino": ["albino", "albino"]}, sex=Sex.FEMALE)
    assert calculate_price(albino, catalog, pricing_rules) == 338


def test_super_form_uses_its_own_rarity(catalog, pricing_rules, make_creature):
    # Superconda rarity 4 -> x3.0
    superconda = make_creature({"anaconda": ["anaconda", "anaconda"]})
    assert calculate_price(superconda, catalog, pricing_rules) == 450


def test_combo_sets_a_price_floor(catalog, pricing_rules, make_creature):
    # 150 * 1.5 * 2.0 = 450, raised to the Snow base price
    snow = make_creature({"albino": ["albino", "albino"], "axanthic": ["axanthic", "axanthic"]})
    assert calculate_price(snow, catalog, pricing_rules) == 1200


def test_combo_floor_does_not_lower_price(catalog, pricing_rules, make_creature):
    # Arctic Conda floor is 450; 150 * 1.5 (female) * 2.0 (arctic) * 1.5 (anaconda) = 675
    snake = make_creature(
        {"arctic": ["arctic", "+"], "anaconda": ["anaconda", "+"]}, sex=Sex.FEMALE
    )
    assert snake.display_name == "Arctic Conda"
    assert calculate_price(snake, catalog, pricing_rules) == 675


def test_het_bonus(catalog, pricing_rules, make_creature):
    one_het = make_creature({"albino": ["albino", "+"]})
    two_het = make_creature({"albino": ["albino", "+"], "toffee": ["+", "toffee"]})
    assert calculate_price(one_het, catalog, pricing_rules) == 165
    assert calculate_price(two_het, catalog, pricing_rules) == 180


def test_het_bonus_applies_after_combo_floor(catalog, pricing_rules, make_creature):
    snow_het_toffee = make_creature(
        {
            "albino": ["albino", "albino"],
            "axanthic": ["axanthic", "axanthic"],
            "toffee": ["toffee", "+"],
        }
    )
    assert calculate_price(snow_het_toffee, catalog, pricing_rules) == 1320


def test_proven_breeder_bonus(catalog, pricing_rules, make_creature):
    assert calculate_price(make_creature(clutches=1), catalog, pricing_rules) == 188
    assert make_creature(clutches=3).is_proven_breeder


def test_species_multiplier(catalog, pricing_rules, make_creature):
    assert calculate_price(make_creature(species="eastern"), catalog, pricing_rules) == 132


def test_unknown_species_uses_default_base_price(catalog, pricing_rules, make_creature):
    assert calculate_price(make_creature(species="mystery"), catalog, pricing_rules) == 100


def test_unknown_traits_and_malformed_pairs_do_not_raise(catalog, pricing_rules, make_creature):
    snake = make_creature({"mystery": ["mystery", "mystery"], "albino": ["albino"]})
    assert calculate_price(snake, catalog, pricing_rules) == 150


def test_all_steps_in_order(catalog, pricing_rules, make_creature):
    # female 1.5, albino 1.5, sable 2.0 -> 675; het toffee 1.1 -> 742.5;
    # proven 1.25 -> 928.125; western 1.0
    snake = make_creature(
        {
            "albino": ["albino", "albino"],
            "sable": ["sable", "+"],
            "toffee": ["toffee", "+"],
        },
        sex=Sex.FEMALE,
        clutches=2,
    )
    assert calculate_price(snake, catalog, pricing_rules) == 928


def test_more_visual_genes_never_cheaper(catalog, pricing_rules, make_creature):
    base = make_creature({"albino": ["albino", "+"]})
    more = make_creature({"albino": ["albino", "albino"]})
    most = make_creature({"albino": ["albino", "albino"], "sable": ["sable", "+"]})
    prices = [calculate_price(c, catalog, pricing_rules) for c in (base, more, most)]
    assert prices == sorted(prices)


def test_price_is_pure(catalog, pricing_rules, make_creature):
    snake = make_creature({"arctic": ["arctic", "arctic"]})
    assert calculate_price(snake, catalog, pricing_rules) == calculate_price(
        snake, catalog, pricing_rules
    )


def test_creature_price_helpers(pricing_rules, make_creature):
    snow = make_creature({"albino": ["albino", "albino"], "axanthic": ["axanthic", "axanthic"]})
    assert snow.calculate_price(pricing_rules) == 1200
    assert snow.rarity_tier(pricing_rules) == "very-rare"


# =============================================================================
# Rarity tiers
# =============================================================================


@pytest.mark.parametrize(
    "price, tier",
    [
        (0, RarityTier.COMMON),
        (199, RarityTier.COMMON),
        (200, RarityTier.UNCOMMON),
        (499, RarityTier.UNCOMMON),
        (500, RarityTier.RARE),
        (999.99, RarityTier.RARE),
        (1000, RarityTier.VERY_RARE),
        (2999, RarityTier.VERY_RARE),
        (3000, RarityTier.LEGENDARY),
        (100000, RarityTier.LEGENDARY),
    ],
)
def test_rarity_tier_boundaries(pricing_rules, price, tier):
    assert get_rarity_tier(price, pricing_rules) is tier


def test_rarity_tier_values():
    assert [t.value for t in RarityTier] == ["common", "uncommon", "rare", "very-rare", "legendary"]


@pytest.mark.parametrize("thresholds", [(200, 500, 1000), (200, 200, 1000, 3000), (500, 200, 1000, 3000)])
def test_invalid_thresholds_rejected(thresholds):
    with pytest.raises(ValueError):
        PricingRules(rarity_thresholds=thresholds)
