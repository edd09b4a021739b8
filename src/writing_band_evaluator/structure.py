from __future__ import annotations

from typing import Sequence

from .models import DefectFlag, DefectKind, Sentence, StructuralReport
from .rules import RulePatterns, default_patterns, is_fragment, is_run_on


class StructuralAnalyzer:
    """Flags fragments and run-ons; a sentence may land in both lists."""

    def __init__(self, patterns: RulePatterns | None = None) -> None:
        self._patterns = patterns or default_patterns()

    def analyze(self, sentences: Sequence[Sentence]) -> StructuralReport:
        fragments: list[DefectFlag] = []
        run_ons: list[DefectFlag] = []
        for sentence in sentences:
            if is_fragment(sentence, self._patterns):
                fragments.append(
                    DefectFlag(sentence.index, sentence.text, DefectKind.FRAGMENT)
                )
            if is_run_on(sentence, self._patterns):
                run_ons.append(
                    DefectFlag(sentence.index, sentence.text, DefectKind.RUN_ON)
                )
        return StructuralReport(fragments=tuple(fragments), run_ons=tuple(run_ons))
