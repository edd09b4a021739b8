from __future__ import annotations

import math
from statistics import mean

from .config import ScoringSettings
from .models import (
    BandScores,
    SegmentedText,
    StructuralReport,
    TaskCategory,
    VocabularyMetrics,
    VoiceReport,
)


def quarter_round(value: float) -> float:
    """Round to the nearest 0.25, halves going up."""
    return math.floor(value * 4 + 0.5 + 1e-9) / 4


def clamp_band(value: float, settings: ScoringSettings) -> float:
    """Clamp into the band range, then quantize to a quarter band."""
    return quarter_round(min(settings.max_band, max(settings.min_band, value)))


def passive_rate(voice: VoiceReport, sentence_count: int) -> float:
    if sentence_count <= 0:
        return 0.0
    return len(voice.passive) / sentence_count


def complex_word_ratio(segments: SegmentedText) -> float:
    if segments.word_count == 0:
        return 0.0
    return segments.complex_word_count / segments.word_count


def defect_penalty(
    fragments: int,
    run_ons: int,
    fragment_weight: float,
    run_on_weight: float,
    cap: float,
) -> float:
    return min(cap, fragment_weight * fragments + run_on_weight * run_ons)


def score_task_achievement(
    word_count: int,
    paragraph_count: int,
    category: TaskCategory,
    settings: ScoringSettings,
) -> float:
    """
    Word-count tiers are tuned for the extended task; a short task scales every
    tier bound by the ratio of the two minimum word counts.
    """
    score = settings.task_word_fallback
    for bound, inclusive, tier_score in settings.task_word_tiers:
        limit = bound * category.minimum_words / TaskCategory.EXTENDED.minimum_words
        if (word_count <= limit) if inclusive else (word_count < limit):
            score = tier_score
            break
    if paragraph_count >= settings.paragraph_bonus_threshold:
        score += settings.paragraph_bonus
    return score


def score_coherence_cohesion(
    segments: SegmentedText,
    structure: StructuralReport,
    vocabulary: VocabularyMetrics,
    settings: ScoringSettings,
) -> float:
    score = settings.base_score
    lengths = [sentence.word_count for sentence in segments.sentences]
    has_long = any(n > settings.long_sentence_words for n in lengths)
    has_short = any(n < settings.short_sentence_words for n in lengths)
    if has_long and has_short:
        score += settings.variation_bonus
    score -= defect_penalty(
        len(structure.fragments),
        len(structure.run_ons),
        settings.fragment_weight_coherence,
        settings.run_on_weight_coherence,
        settings.defect_penalty_cap,
    )
    if vocabulary.collocation_count >= settings.collocation_bonus_threshold:
        score += settings.collocation_bonus
    return score


def score_lexical_resource(
    segments: SegmentedText,
    vocabulary: VocabularyMetrics,
    settings: ScoringSettings,
) -> float:
    score = settings.base_score
    if vocabulary.type_token_ratio > settings.ttr_high:
        score += settings.ttr_high_bonus
    elif vocabulary.type_token_ratio > settings.ttr_mid:
        score += settings.ttr_mid_bonus
    if complex_word_ratio(segments) > settings.complex_ratio_threshold:
        score += settings.complex_ratio_bonus
    score += min(
        settings.academic_bonus_cap,
        settings.academic_word_weight * vocabulary.academic_word_count,
    )
    return score


def score_grammatical_range(
    segments: SegmentedText,
    structure: StructuralReport,
    voice: VoiceReport,
    settings: ScoringSettings,
) -> float:
    score = settings.base_score
    score -= defect_penalty(
        len(structure.fragments),
        len(structure.run_ons),
        settings.fragment_weight_grammar,
        settings.run_on_weight_grammar,
        settings.defect_penalty_cap,
    )
    rate = passive_rate(voice, segments.sentence_count)
    if rate > settings.passive_heavy_rate:
        score -= settings.passive_heavy_penalty
    if rate < settings.passive_light_rate and voice.active:
        score += settings.active_bonus
    if segments.average_word_length >= settings.word_length_threshold:
        score += settings.word_length_bonus
    return score


def compute_band_scores(
    segments: SegmentedText,
    structure: StructuralReport,
    voice: VoiceReport,
    vocabulary: VocabularyMetrics,
    category: TaskCategory,
    settings: ScoringSettings,
) -> BandScores:
    """Score the four components and combine them into the overall band."""
    task = clamp_band(
        score_task_achievement(
            segments.word_count, segments.paragraph_count, category, settings
        ),
        settings,
    )
    coherence = clamp_band(
        score_coherence_cohesion(segments, structure, vocabulary, settings), settings
    )
    lexical = clamp_band(
        score_lexical_resource(segments, vocabulary, settings), settings
    )
    grammar = clamp_band(
        score_grammatical_range(segments, structure, voice, settings), settings
    )
    overall = clamp_band(mean([task, coherence, lexical, grammar]), settings)
    return BandScores(
        task_achievement=task,
        coherence_cohesion=coherence,
        lexical_resource=lexical,
        grammatical_range=grammar,
        overall=overall,
    )
