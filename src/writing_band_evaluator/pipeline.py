from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, List

from .config import EvaluatorConfig
from .feedback import generate_feedback, generate_strengths, generate_weaknesses
from .mechanics import MechanicsAnalyzer
from .models import AnalysisResult, Document, TaskCategory
from .rules import RulePatterns
from .scoring import compute_band_scores
from .structure import StructuralAnalyzer
from .textutils import coerce_text
from .tokenization import segment_text
from .vocabulary import VocabularyAnalyzer
from .voice import VoiceAnalyzer

logger = logging.getLogger(__name__)


class Evaluator:
    """Runs the analysis pipeline with analyzers built once from a config."""

    def __init__(self, config: EvaluatorConfig | None = None) -> None:
        self._config = config or EvaluatorConfig()
        patterns = RulePatterns.from_lexicon(self._config.lexicon)
        self._structure = StructuralAnalyzer(patterns)
        self._voice = VoiceAnalyzer(patterns)
        self._vocabulary = VocabularyAnalyzer(patterns)
        self._mechanics = MechanicsAnalyzer(patterns)

    @property
    def config(self) -> EvaluatorConfig:
        return self._config

    def evaluate(
        self, text: object, task_category: TaskCategory | str | None = None
    ) -> AnalysisResult:
        """Analyze text and score it against the declared task category."""
        raw = coerce_text(text)
        category = TaskCategory.parse(
            task_category if task_category is not None else self._config.task_category
        )

        segments = segment_text(raw)
        structure = self._structure.analyze(segments.sentences)
        voice = self._voice.analyze(segments.sentences)
        vocabulary = self._vocabulary.analyze(segments.tokens, raw)
        mechanics = self._mechanics.analyze(raw)
        scores = compute_band_scores(
            segments, structure, voice, vocabulary, category, self._config.scoring
        )
        feedback = generate_feedback(
            segments, structure, voice, vocabulary, category, self._config
        )
        strengths = generate_strengths(segments, mechanics, category)
        weaknesses = generate_weaknesses(segments, mechanics, category)

        logger.debug(
            "Evaluated %s words / %s sentences (%s task): overall band %.2f",
            segments.word_count,
            segments.sentence_count,
            category.value,
            scores.overall,
        )
        return AnalysisResult(
            task_category=category,
            segments=segments,
            structure=structure,
            voice=voice,
            vocabulary=vocabulary,
            mechanics=mechanics,
            band_scores=scores,
            feedback=tuple(feedback),
            strengths=tuple(strengths),
            weaknesses=tuple(weaknesses),
        )


@lru_cache(maxsize=1)
def _default_evaluator() -> Evaluator:
    return Evaluator()


def evaluate(
    text: object,
    task_category: TaskCategory | str | None = None,
    config: EvaluatorConfig | None = None,
) -> AnalysisResult:
    """
    Evaluate a single text; a default Evaluator is reused when no config is given.

    Without an explicit task_category the config's category is used, which
    defaults to extended.
    """
    evaluator = Evaluator(config) if config is not None else _default_evaluator()
    return evaluator.evaluate(text, task_category)


def evaluate_corpus(
    documents: List[Document],
    task_category: TaskCategory | str | None = None,
    config: EvaluatorConfig | None = None,
) -> Dict[str, AnalysisResult]:
    """Evaluate every document and return results keyed by doc_id."""
    evaluator = Evaluator(config)
    results: Dict[str, AnalysisResult] = {}
    for document in documents:
        result = evaluator.evaluate(document.text, task_category)
        logger.info(
            "Scored doc=%s overall=%.2f", document.doc_id, result.band_scores.overall
        )
        results[document.doc_id] = result
    return results
