"""Letter-to-sound rules: context-sensitive spelling to phoneme conversion.

A rule has four parts: a left context, the text to match, a right
context and the phonemes to emit. Context patterns may hold literal
letters, apostrophes and spaces, and these special symbols:

    #   one or more vowels
    :   zero or more consonants
    ^   one consonant
    .   one of b, d, v, g, j, l, m, n, r, w, z (voiced consonants)
    %   one of er, e, es, ed, ing, ely (right context only)
    +   one of e, i, y (a front vowel)
    $   a doubled consonant
    =   optional s then a space (right context only)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

__all__ = [
    "Rule",
    "RuleSet",
    "left_match",
    "right_match",
    "find_rule",
    "guess_word",
    "text_to_phonemes",
]

log = logging.getLogger(__name__)

_VOICED = frozenset("bdvgjlmnrwz")
_FRONT = frozenset("eiy")


@dataclass(frozen=True)
class Rule:
    """One letter-to-sound rule."""

    left: str
    match: str
    right: str
    output: str


class RuleSet:
    """Rules indexed by the first letter they match, with a vowel set."""

    def __init__(
        self,
        rules: Mapping[str, Iterable[Rule]] | Iterable[Rule],
        vowels: Iterable[str],
    ) -> None:
        self._rules: dict[str, list[Rule]] = {}
        if isinstance(rules, Mapping):
            for ch, group in rules.items():
                self._rules[ch] = list(group)
        else:
            for rule in rules:
                key = rule.match[:1]
                self._rules.setdefault(key, []).append(rule)
        self.vowels = frozenset(vowels)

    def rules_for(self, ch: str) -> Sequence[Rule]:
        """Return the rules tried for a word position holding ``ch``."""
        return self._rules.get(ch, ())

    def is_vowel(self, ch: str) -> bool:
        return bool(ch) and ch in self.vowels

    def is_consonant(self, ch: str) -> bool:
        return len(ch) == 1 and ch.isalpha() and ch not in self.vowels


def _at(word: str, i: int) -> str:
    return word[i] if 0 <= i < len(word) else ""


def _is_literal(p: str) -> bool:
    return p.isalpha() or p == "'" or p == " "


def left_match(pattern: str, word: str, pos: int, ruleset: RuleSet) -> bool:
    """Match ``pattern`` leftwards, ending at ``word[pos]``."""
    if not pattern:
        return True
    i = pos
    for p in reversed(pattern):
        c = _at(word, i)
        if _is_literal(p):
            if p != c:
                return False
            i -= 1
        elif p == "#":
            if not ruleset.is_vowel(c):
                return False
            i -= 1
            while ruleset.is_vowel(_at(word, i)):
                i -= 1
        elif p == ":":
            while ruleset.is_consonant(_at(word, i)):
                i -= 1
        elif p == "^":
            if not ruleset.is_consonant(c):
                return False
            i -= 1
        elif p == "$":
            if not ruleset.is_consonant(c) or c != _at(word, i - 1):
                return False
            i -= 2
        elif p == ".":
            if c not in _VOICED:
                return False
            i -= 1
        elif p == "+":
            if c not in _FRONT:
                return False
            i -= 1
        else:
            raise ValueError(f"bad character in left rule: {p!r}")
    return True


def right_match(pattern: str, word: str, pos: int, ruleset: RuleSet) -> bool:
    """Match ``pattern`` rightwards, starting at ``word[pos]``."""
    if not pattern:
        return True
    i = pos
    for p in pattern:
        c = _at(word, i)
        if _is_literal(p):
            if p != c:
                return False
            i += 1
        elif p == "#":
            if not ruleset.is_vowel(c):
                return False
            i += 1
            while ruleset.is_vowel(_at(word, i)):
                i += 1
        elif p == "=":
            if c == "s" and _at(word, i + 1) == " ":
                i += 1
            if _at(word, i) != " ":
                return False
            i += 1
        elif p == ":":
            while ruleset.is_consonant(_at(word, i)):
                i += 1
        elif p == "^":
            if not ruleset.is_consonant(c):
                return False
            i += 1
        elif p == "$":
            if not ruleset.is_consonant(c) or c != _at(word, i + 1):
                return False
            i += 2
        elif p == ".":
            if c not in _VOICED:
                return False
            i += 1
        elif p == "+":
            if c not in _FRONT:
                return False
            i += 1
        elif p == "%":
            if c == "e":
                i += 1
                nxt = _at(word, i)
                if nxt == "l":
                    i += 1
                    if _at(word, i) == "y":
                        i += 1
                    else:
                        i -= 1
                elif nxt in ("r", "s", "d"):
                    i += 1
            elif c == "i":
                if _at(word, i + 1) == "n" and _at(word, i + 2) == "g":
                    i += 3
                else:
                    return False
            else:
                return False
        else:
            raise ValueError(f"bad character in right rule: {p!r}")
    return True


def find_rule(word: str, index: int, ruleset: RuleSet) -> tuple[str | None, int]:
    """Apply the first rule that fits at ``word[index]``.

    Returns the rule's output and the index after the matched text, or
    ``None`` and ``index + 1`` when no rule fits.
    """
    for rule in ruleset.rules_for(_at(word, index)):
        end = index + len(rule.match)
        if word[index:end] != rule.match:
            continue
        if not left_match(rule.left, word, index - 1, ruleset):
            continue
        if not right_match(rule.right, word, end, ruleset):
            continue
        log.debug("%s|%s|%s => %s", rule.left, rule.match, rule.right, rule.output)
        return rule.output, end
    log.debug("no rule for %r in %r", _at(word, index), word)
    return None, index + 1


def guess_word(word: str, ruleset: RuleSet) -> list[str]:
    """Return rule outputs for a word padded with a space on each side."""
    outputs: list[str] = []
    index = 1
    while True:
        output, index = find_rule(word, index, ruleset)
        if output is not None:
            outputs.append(output)
        if index >= len(word):
            return outputs


def text_to_phonemes(text: str, ruleset: RuleSet) -> str:
    """Convert a word's spelling to phonemes with the given rules."""
    return "".join(guess_word(f" {text.lower()} ", ruleset))