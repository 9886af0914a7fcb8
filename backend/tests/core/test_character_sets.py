"""Character Sets — tests for alphabets, similarity filtering and pool building."""

from app.core.character_sets import (
    ALPHABETS, DIGITS, LOWERCASE, SIMILAR_CHARS, SYMBOLS, UPPERCASE,
    CharacterClassConfig, build_pool, remove_similar, select_class_sets,
)
from app.core.domain_types import CharacterClass


def test_alphabets_have_distinct_characters():
    for chars in ALPHABETS.values():
        assert len(set(chars)) == len(chars)


def test_alphabet_sizes():
    assert len(LOWERCASE) == 26
    assert len(UPPERCASE) == 26
    assert len(DIGITS) == 10
    assert SYMBOLS == "!@#$%^&*()_+-=[]{}|;:,.<>?"


def test_similar_set_is_fixed():
    assert SIMILAR_CHARS == frozenset({"i", "l", "1", "L", "o", "0", "O"})


def test_remove_similar_keeps_order():
    assert remove_similar(LOWERCASE) == "abcdefghjkmnpqrstuvwxyz"
    assert remove_similar(UPPERCASE) == "ABCDEFGHIJKMNPQRSTUVWXYZ"
    assert remove_similar(DIGITS) == "23456789"
    assert remove_similar(SYMBOLS) == SYMBOLS


def test_default_config_selects_every_class():
    config = CharacterClassConfig()
    assert config.length == 16
    assert config.selected_classes == list(CharacterClass)


def test_selected_classes_follow_fixed_order():
    config = CharacterClassConfig(
        include_lowercase=False, include_uppercase=True,
        include_numbers=False, include_symbols=True,
    )
    assert config.selected_classes == [CharacterClass.UPPERCASE, CharacterClass.SYMBOLS]


def test_no_class_selected_gives_empty_pool():
    config = CharacterClassConfig(
        include_lowercase=False, include_uppercase=False,
        include_numbers=False, include_symbols=False,
    )
    sets = select_class_sets(config)
    assert sets == []
    assert build_pool(sets) == ""


def test_select_class_sets_filters_each_class():
    config = CharacterClassConfig(
        include_symbols=False, exclude_similar=True,
    )
    sets = select_class_sets(config)
    assert [cls for cls, _ in sets] == [
        CharacterClass.LOWERCASE, CharacterClass.UPPERCASE, CharacterClass.DIGITS,
    ]
    assert build_pool(sets) == (
        "abcdefghjkmnpqrstuvwxyz" "ABCDEFGHIJKMNPQRSTUVWXYZ" "23456789"
    )


def test_pool_is_concatenation_without_filtering():
    config = CharacterClassConfig(include_uppercase=False, include_symbols=False)
    assert build_pool(select_class_sets(config)) == LOWERCASE + DIGITS
