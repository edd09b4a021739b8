"""
Heuristic sentence predicates and the compiled pattern table they share.

Pattern data comes from a Lexicon so word lists can be swapped without touching
the rule logic. Every predicate is a plain function over a Sentence so it can
be exercised on its own.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Iterable, List, Pattern, Sequence

from .config import Lexicon
from .models import Sentence

CLAUSE_SPLIT_RE = re.compile(r"[,;:]")
FRAGMENT_MIN_WORDS = 5
RUN_ON_MIN_SEGMENTS = 3
RUN_ON_LONG_SENTENCE_WORDS = 35
ACTIVE_MIN_WORD_LENGTH = 3


def _word_alternation(words: Iterable[str]) -> str:
    # Longest first so multi-word phrases win over their prefixes.
    ordered = sorted({w for w in words if w}, key=len, reverse=True)
    return "|".join(re.escape(word) for word in ordered)


def _phrase_pattern(phrase: str) -> str:
    return r"\s+".join(re.escape(part) for part in phrase.split())


def _marker_pattern(markers: Sequence[str]) -> Pattern[str]:
    words = [m for m in markers if not m.startswith("'")]
    contractions = [m[1:] for m in markers if m.startswith("'")]
    branches = []
    if words:
        branches.append(rf"\b(?:{_word_alternation(words)})\b")
    if contractions:
        branches.append(rf"['’](?:{_word_alternation(contractions)})\b")
    if not branches:
        return re.compile(r"(?!x)x")
    return re.compile("|".join(branches), re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class RulePatterns:
    """Compiled regexes and lookup sets derived from a Lexicon."""

    finite_verb: Pattern[str]
    coordinator: Pattern[str]
    passive: Pattern[str]
    collocations: tuple[Pattern[str], ...]
    linking_words: tuple[Pattern[str], ...]
    subject_openers: FrozenSet[str]
    auxiliaries: FrozenSet[str]
    academic_words: FrozenSet[str]

    @classmethod
    def from_lexicon(cls, lexicon: Lexicon) -> "RulePatterns":
        be_forms = _word_alternation(lexicon.be_forms)
        participles = _word_alternation(lexicon.irregular_participles)
        participle_branch = r"[^\W\d_]+(?:ed|en|n)"
        if participles:
            participle_branch = rf"(?:{participles}|{participle_branch})"
        auxiliaries = {
            m.lower() for m in lexicon.finite_verb_markers if not m.startswith("'")
        }
        auxiliaries.update(form.lower() for form in lexicon.be_forms)
        return cls(
            finite_verb=_marker_pattern(lexicon.finite_verb_markers),
            coordinator=re.compile(
                rf"\b(?:{_word_alternation(lexicon.coordinating_conjunctions)})\b",
                re.IGNORECASE,
            ),
            passive=re.compile(
                rf"\b(?:{be_forms})\s+{participle_branch}\b", re.IGNORECASE
            ),
            collocations=tuple(
                re.compile(rf"\b{_phrase_pattern(p)}\b", re.IGNORECASE)
                for p in lexicon.collocations
            ),
            linking_words=tuple(
                re.compile(rf"\b{_phrase_pattern(p)}\b", re.IGNORECASE)
                for p in lexicon.linking_words
            ),
            subject_openers=frozenset(s.lower() for s in lexicon.subject_openers),
            auxiliaries=frozenset(auxiliaries),
            academic_words=frozenset(w.lower() for w in lexicon.academic_words),
        )


def clause_segments(sentence: Sentence) -> List[str]:
    """Split a sentence on commas, semicolons and colons, dropping empty pieces."""
    return [part for part in CLAUSE_SPLIT_RE.split(sentence.text) if part.strip()]


def has_finite_verb(sentence: Sentence, patterns: RulePatterns) -> bool:
    return patterns.finite_verb.search(sentence.text) is not None


def has_coordinator(sentence: Sentence, patterns: RulePatterns) -> bool:
    return patterns.coordinator.search(sentence.text) is not None


def is_fragment(sentence: Sentence, patterns: RulePatterns) -> bool:
    """Too short, or no auxiliary/modal/copula anywhere in the sentence."""
    if sentence.word_count < FRAGMENT_MIN_WORDS:
        return True
    return not has_finite_verb(sentence, patterns)


def is_run_on(sentence: Sentence, patterns: RulePatterns) -> bool:
    """Comma splices, clause pile-ups, and long comma chains without a coordinator."""
    segments = clause_segments(sentence)
    if len(segments) >= RUN_ON_MIN_SEGMENTS:
        return True
    coordinated = has_coordinator(sentence, patterns)
    if len(segments) == 2 and not coordinated:
        return True
    return (
        sentence.word_count > RUN_ON_LONG_SENTENCE_WORDS
        and "," in sentence.text
        and not coordinated
    )


def is_passive(sentence: Sentence, patterns: RulePatterns) -> bool:
    """A be-form directly followed by something that looks like a past participle."""
    return patterns.passive.search(sentence.text) is not None


def is_active(sentence: Sentence, patterns: RulePatterns) -> bool:
    """Opens with a stock subject and later carries a non-auxiliary content word."""
    if not sentence.tokens:
        return False
    if sentence.tokens[0].lower not in patterns.subject_openers:
        return False
    return any(
        token.length >= ACTIVE_MIN_WORD_LENGTH
        and token.lower not in patterns.auxiliaries
        for token in sentence.tokens[1:]
    )


@lru_cache(maxsize=1)
def default_patterns() -> RulePatterns:
    """Patterns for the built-in Lexicon, compiled once per process."""
    return RulePatterns.from_lexicon(Lexicon())
