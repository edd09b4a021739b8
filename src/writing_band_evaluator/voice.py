from __future__ import annotations

from typing import Sequence

from .models import Sentence, VoiceFlag, VoiceKind, VoiceReport
from .rules import RulePatterns, default_patterns, is_active, is_passive


class VoiceAnalyzer:
    """
    Flags passive- and active-voice sentences.

    The two heuristics run independently, so one sentence can be reported as
    both passive and active.
    """

    def __init__(self, patterns: RulePatterns | None = None) -> None:
        self._patterns = patterns or default_patterns()

    def analyze(self, sentences: Sequence[Sentence]) -> VoiceReport:
        passive: list[VoiceFlag] = []
        active: list[VoiceFlag] = []
        for sentence in sentences:
            if is_passive(sentence, self._patterns):
                passive.append(
                    VoiceFlag(sentence.index, sentence.text, VoiceKind.PASSIVE)
                )
            if is_active(sentence, self._patterns):
                active.append(
                    VoiceFlag(sentence.index, sentence.text, VoiceKind.ACTIVE)
                )
        return VoiceReport(passive=tuple(passive), active=tuple(active))
