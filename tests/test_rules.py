import pytest

from formantsay.rules import (
    Rule,
    RuleSet,
    find_rule,
    guess_word,
    left_match,
    right_match,
    text_to_phonemes,
)

RULES = [
    Rule(" ", "th", "", "DH"),
    Rule("", "th", "", "TH"),
    Rule("", "e", " ", ""),
    Rule("", "e", "", "EH"),
    Rule("#", "s", " ", "z"),
    Rule("", "s", "", "s"),
    Rule("", "a", "", "AE"),
    Rule("", "c", "+", "s"),
    Rule("", "c", "", "k"),
    Rule("", "t", "", "t"),
]


@pytest.fixture
def rs():
    return RuleSet(RULES, "aeiou")


def test_rules_for_groups_by_first_letter(rs):
    assert [r.output for r in rs.rules_for("c")] == ["s", "k"]
    assert list(rs.rules_for("z")) == []


def test_mapping_form_keeps_order():
    rs = RuleSet({"t": [RULES[1], RULES[9]]}, "aeiou")
    assert [r.output for r in rs.rules_for("t")] == ["TH", "t"]


def test_vowel_and_consonant(rs):
    assert rs.is_vowel("a")
    assert not rs.is_vowel("b")
    assert rs.is_consonant("b")
    assert not rs.is_consonant("a")
    assert not rs.is_consonant(" ")
    assert not rs.is_consonant("")


def test_left_literal_and_vowels(rs):
    assert left_match(" ", " as ", 0, rs)
    assert left_match("#", " as ", 1, rs)
    assert not left_match("#", " ts ", 1, rs)


def test_left_special(rs):
    assert left_match("$", " ll", 2, rs)
    assert not left_match("$", " lm", 2, rs)
    assert left_match(".", " b", 1, rs)
    assert left_match("+", " i", 1, rs)
    assert left_match(":", " ", 0, rs)


def test_right_suffix(rs):
    assert right_match("%", "ing ", 0, rs)
    assert right_match("%", "ely ", 0, rs)
    assert right_match("%", "er ", 0, rs)
    assert not right_match("%", "in ", 0, rs)
    assert not right_match("%", "x", 0, rs)


def test_right_plural(rs):
    assert right_match("=", "s ", 0, rs)
    assert right_match("=", " ", 0, rs)
    assert not right_match("=", "x", 0, rs)


def test_right_other(rs):
    assert right_match("$", "ll", 0, rs)
    assert not right_match("$", "lm", 0, rs)
    assert right_match("^#", "ta", 0, rs)
    assert not right_match("^", "a", 0, rs)


def test_bad_pattern_characters(rs):
    with pytest.raises(ValueError):
        right_match("?", "abc", 0, rs)
    with pytest.raises(ValueError):
        left_match("%", " abc", 1, rs)


def test_find_rule_skips_unknown(rs):
    assert find_rule(" zt ", 1, rs) == (None, 2)


def test_find_rule_uses_context(rs):
    assert find_rule(" the ", 1, rs) == ("DH", 3)
    assert find_rule(" athe ", 2, rs) == ("TH", 4)


def test_guess_word(rs):
    assert guess_word(" cat ", rs) == ["k", "AE", "t"]


def test_text_to_phonemes(rs):
    assert text_to_phonemes("the", rs) == "DH"
    assert text_to_phonemes("THE", rs) == "DH"
    assert text_to_phonemes("as", rs) == "AEz"
    assert text_to_phonemes("ce", rs) == "s"
    assert text_to_phonemes("test", rs) == "tEHst"


def test_empty_text(rs):
    assert text_to_phonemes("", rs) == ""