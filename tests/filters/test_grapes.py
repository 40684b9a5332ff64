"""Tests for grape synonym matching."""
from caveo.filters.grapes import grape_matches, synonyms_for


def test_exact_match_is_case_insensitive():
    assert grape_matches("riesling", ["Riesling"])
    assert grape_matches("RIESLING", ["riesling"])


def test_no_match():
    assert not grape_matches("Syrah", ["Riesling", "Chardonnay"])


def test_pinot_noir_matches_spaetburgunder():
    assert grape_matches("Pinot Noir", ["Spätburgunder"])


def test_spaetburgunder_matches_pinot_noir():
    assert grape_matches("Spätburgunder", ["Pinot Noir"])


def test_grauburgunder_matches_both_names():
    assert grape_matches("Grauburgunder", ["Pinot Grigio"])
    assert grape_matches("Grauburgunder", ["Pinot Gris"])


def test_blaufraenkisch_and_lemberger():
    assert grape_matches("Lemberger", ["Blaufränkisch"])
    assert grape_matches("blaufränkisch", ["Lemberger"])


def test_synonyms_are_not_transitive():
    # pinot gris -> grauburgunder, but grauburgunder's own synonyms are not followed
    assert not grape_matches("Pinot Gris", ["Pinot Grigio"])


def test_unknown_term_has_no_synonyms():
    assert synonyms_for("Nebbiolo") == set()
    assert synonyms_for(" Weißburgunder ") == {"pinot blanc"}
