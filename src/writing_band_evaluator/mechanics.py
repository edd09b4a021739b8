from __future__ import annotations

import re

from .models import MechanicsReport
from .rules import RulePatterns, default_patterns

REPEATED_WORD_RE = re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE)
LOWERCASE_START_RE = re.compile(r"[.!?]\s+[a-z]")
MISSING_SPACE_RE = re.compile(r"[,;:][A-Za-z]")


class MechanicsAnalyzer:
    """Surface checks for doubled words, capitalization and punctuation spacing."""

    def __init__(self, patterns: RulePatterns | None = None) -> None:
        self._patterns = patterns or default_patterns()

    def analyze(self, text: str) -> MechanicsReport:
        repeated = len(REPEATED_WORD_RE.findall(text))
        lowercase = len(LOWERCASE_START_RE.findall(text))
        missing = len(MISSING_SPACE_RE.findall(text))

        issues: list[str] = []
        if repeated:
            issues.append(f"Repeated words detected: {repeated} instances")
        if lowercase:
            issues.append(f"Sentences starting with lowercase: {lowercase}")
        if missing:
            issues.append(f"Missing spaces after punctuation: {missing}")

        return MechanicsReport(
            repeated_words=repeated,
            lowercase_starts=lowercase,
            missing_spaces=missing,
            linking_word_count=self.count_linking_words(text),
            issues=tuple(issues),
        )

    def count_linking_words(self, text: str) -> int:
        """Number of distinct linking words or phrases that appear at least once."""
        return sum(
            1 for pattern in self._patterns.linking_words if pattern.search(text)
        )
