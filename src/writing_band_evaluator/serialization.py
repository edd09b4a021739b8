from __future__ import annotations

from typing import List, Sequence, TypedDict

from .models import AnalysisResult, DefectFlag, VoiceFlag


class CountsPayload(TypedDict):
    words: int
    sentences: int
    paragraphs: int


class FlagPayload(TypedDict):
    index: int
    text: str
    kind: str


class VocabularyPayload(TypedDict):
    typeTokenRatio: float
    academicWordCount: int
    collocationCount: int


class MechanicsPayload(TypedDict):
    repeatedWords: int
    lowercaseStarts: int
    missingSpaces: int
    linkingWordCount: int
    issues: List[str]


class FeaturesPayload(TypedDict):
    averageSentenceLength: float
    complexWordCount: int
    fragments: List[FlagPayload]
    runOns: List[FlagPayload]
    passive: List[FlagPayload]
    active: List[FlagPayload]
    vocabulary: VocabularyPayload
    averageWordLength: float
    mechanics: MechanicsPayload


class BandScoresPayload(TypedDict):
    taskAchievement: float
    coherenceCohesion: float
    lexicalResource: float
    grammaticalRange: float
    overall: float


class ResultPayload(TypedDict):
    taskCategory: str
    counts: CountsPayload
    features: FeaturesPayload
    bandScores: BandScoresPayload
    feedback: List[str]
    strengths: List[str]
    weaknesses: List[str]


def _flags(flags: Sequence[DefectFlag | VoiceFlag]) -> List[FlagPayload]:
    return [
        {"index": flag.index, "text": flag.text, "kind": flag.kind.value}
        for flag in flags
    ]


def result_to_dict(result: AnalysisResult) -> ResultPayload:
    """Convert an AnalysisResult into the JSON-ready response shape."""
    segments = result.segments
    scores = result.band_scores
    return {
        "taskCategory": result.task_category.value,
        "counts": {
            "words": segments.word_count,
            "sentences": segments.sentence_count,
            "paragraphs": segments.paragraph_count,
        },
        "features": {
            "averageSentenceLength": segments.average_sentence_length,
            "complexWordCount": segments.complex_word_count,
            "fragments": _flags(result.structure.fragments),
            "runOns": _flags(result.structure.run_ons),
            "passive": _flags(result.voice.passive),
            "active": _flags(result.voice.active),
            "vocabulary": {
                "typeTokenRatio": result.vocabulary.type_token_ratio,
                "academicWordCount": result.vocabulary.academic_word_count,
                "collocationCount": result.vocabulary.collocation_count,
            },
            "averageWordLength": segments.average_word_length,
            "mechanics": {
                "repeatedWords": result.mechanics.repeated_words,
                "lowercaseStarts": result.mechanics.lowercase_starts,
                "missingSpaces": result.mechanics.missing_spaces,
                "linkingWordCount": result.mechanics.linking_word_count,
                "issues": list(result.mechanics.issues),
            },
        },
        "bandScores": {
            "taskAchievement": scores.task_achievement,
            "coherenceCohesion": scores.coherence_cohesion,
            "lexicalResource": scores.lexical_resource,
            "grammaticalRange": scores.grammatical_range,
            "overall": scores.overall,
        },
        "feedback": list(result.feedback),
        "strengths": list(result.strengths),
        "weaknesses": list(result.weaknesses),
    }
