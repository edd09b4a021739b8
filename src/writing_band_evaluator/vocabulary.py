from __future__ import annotations

from typing import Sequence

from .models import Token, VocabularyMetrics
from .rules import RulePatterns, default_patterns


class VocabularyAnalyzer:
    """Lexical diversity and sophistication metrics for a document."""

    def __init__(self, patterns: RulePatterns | None = None) -> None:
        self._patterns = patterns or default_patterns()

    def analyze(self, tokens: Sequence[Token], text: str) -> VocabularyMetrics:
        """
        Compute the type-token ratio and academic-word count over tokens, and
        count stock collocations in the raw text.
        """
        total = len(tokens)
        distinct = len({token.lower for token in tokens})
        ratio = distinct / total if total else 0.0
        academic = sum(
            1 for token in tokens if token.lower in self._patterns.academic_words
        )
        return VocabularyMetrics(
            type_token_ratio=ratio,
            academic_word_count=academic,
            collocation_count=self.count_collocations(text),
        )

    def count_collocations(self, text: str) -> int:
        return sum(
            len(pattern.findall(text)) for pattern in self._patterns.collocations
        )
