from __future__ import annotations

from typing import List, Sequence, Tuple

from .config import EvaluatorConfig
from .models import (
    DefectFlag,
    FeedbackItem,
    MechanicsReport,
    SegmentedText,
    StructuralReport,
    TaskCategory,
    VocabularyMetrics,
    VoiceReport,
)
from .scoring import passive_rate

ORGANIZED_PARAGRAPHS = 4
GOOD_LINKING_WORDS = 5
GOOD_COMPLEX_WORDS = 20
SENTENCE_LENGTH_RANGE = (15, 25)

RUN_ON_EXAMPLES: Tuple[FeedbackItem, ...] = (
    FeedbackItem(
        "Run-on example",
        before="I love reading, it makes me calm.",
        after="I love reading because it makes me calm.",
    ),
    FeedbackItem(
        "Run-on example",
        before="Technology is improving, many jobs are changing.",
        after="As technology improves, many jobs are changing.",
    ),
)

FRAGMENT_EXAMPLES: Tuple[FeedbackItem, ...] = (
    FeedbackItem(
        "Fragment example",
        before="Because technology is advancing.",
        after="Because technology is advancing, many older jobs are disappearing.",
    ),
    FeedbackItem(
        "Fragment example",
        before="For example, the new city library.",
        after="For example, the new city library offers free courses to residents.",
    ),
)

PASSIVE_EXAMPLES: Tuple[FeedbackItem, ...] = (
    FeedbackItem(
        "Passive to active",
        before="The policy was implemented by the council.",
        after="The council implemented the policy.",
    ),
    FeedbackItem(
        "Passive to active",
        before="Many mistakes were made by the students.",
        after="The students made many mistakes.",
    ),
)

LEXICAL_EXAMPLES: Tuple[FeedbackItem, ...] = (
    FeedbackItem(
        "Vocabulary upgrade",
        before="A lot of people think this is very important.",
        after="A wide range of people consider this crucial.",
    ),
    FeedbackItem(
        "Vocabulary upgrade",
        before="This is a big problem and it has bad effects.",
        after="This is a significant problem; as a result, it has detrimental effects.",
    ),
)


def _cited_indices(flags: Sequence[DefectFlag], limit: int) -> str:
    return ", ".join(str(flag.index + 1) for flag in flags[:limit])


def build_feedback_items(
    segments: SegmentedText,
    structure: StructuralReport,
    voice: VoiceReport,
    vocabulary: VocabularyMetrics,
    category: TaskCategory,
    config: EvaluatorConfig,
) -> List[FeedbackItem]:
    """Evaluate the advisory rules in order; the list is not truncated here."""
    settings = config.scoring
    examples = config.max_examples_per_rule
    cite = config.max_cited_sentences
    items: List[FeedbackItem] = []

    if segments.word_count < category.minimum_words:
        items.append(
            FeedbackItem(
                f"Your response has {segments.word_count} words; the {category.value} "
                f"task needs at least {category.minimum_words} "
                f"(aim for about {category.ideal_words}). "
                "Expand your ideas with explanations and concrete examples."
            )
        )

    if structure.run_ons:
        items.append(
            FeedbackItem(
                "Possible run-on sentences at sentence(s) "
                f"{_cited_indices(structure.run_ons, cite)}. Split them into separate "
                "sentences or join the clauses with subordinators such as because, "
                "although or which."
            )
        )
        items.extend(RUN_ON_EXAMPLES[:examples])

    if structure.fragments:
        items.append(
            FeedbackItem(
                "Possible sentence fragments at sentence(s) "
                f"{_cited_indices(structure.fragments, cite)}. Make sure each sentence "
                "has a subject and a finite verb."
            )
        )
        items.extend(FRAGMENT_EXAMPLES[:examples])

    if passive_rate(voice, segments.sentence_count) > settings.feedback_passive_rate:
        items.append(
            FeedbackItem(
                "More than half of your sentences use the passive voice. Rewrite some "
                "of them so the subject performs the action."
            )
        )
        items.extend(PASSIVE_EXAMPLES[:examples])

    if vocabulary.type_token_ratio < settings.feedback_ttr:
        items.append(
            FeedbackItem(
                "Your vocabulary is repetitive. Use synonyms and paraphrase instead "
                "of repeating the same words."
            )
        )

    if vocabulary.collocation_count < settings.feedback_collocations:
        items.append(
            FeedbackItem(
                "Add cohesive phrases such as 'as a result', 'on the other hand' or "
                "'in addition to' to connect your ideas."
            )
        )
    items.extend(LEXICAL_EXAMPLES[:examples])

    return items


def generate_feedback(
    segments: SegmentedText,
    structure: StructuralReport,
    voice: VoiceReport,
    vocabulary: VocabularyMetrics,
    category: TaskCategory,
    config: EvaluatorConfig,
) -> List[str]:
    """Render the advisory rules to strings, keeping at most max_feedback_items."""
    items = build_feedback_items(
        segments, structure, voice, vocabulary, category, config
    )
    return [item.render() for item in items[: max(0, config.max_feedback_items)]]


def generate_strengths(
    segments: SegmentedText,
    mechanics: MechanicsReport,
    category: TaskCategory,
) -> List[str]:
    """Positive observations reported alongside the advisory feedback."""
    strengths: List[str] = []
    if segments.word_count >= category.minimum_words:
        strengths.append(f"Good word count: {segments.word_count} words")
    if segments.paragraph_count >= ORGANIZED_PARAGRAPHS:
        strengths.append("Well-organized paragraph structure")
    if mechanics.linking_word_count >= GOOD_LINKING_WORDS:
        strengths.append("Good use of cohesive devices and linking words")
    if segments.complex_word_count >= GOOD_COMPLEX_WORDS:
        strengths.append("Good range of vocabulary with complex words")
    if segments.word_count and not mechanics.issues:
        strengths.append("No obvious grammar or punctuation errors detected")
    low, high = SENTENCE_LENGTH_RANGE
    if low <= segments.average_sentence_length <= high:
        strengths.append("Good sentence length variety")
    return strengths


def generate_weaknesses(
    segments: SegmentedText,
    mechanics: MechanicsReport,
    category: TaskCategory,
) -> List[str]:
    """The counterpart of generate_strengths; like it, never touches the scores."""
    weaknesses: List[str] = []
    if segments.word_count < category.minimum_words:
        weaknesses.append(
            f"Insufficient word count: {segments.word_count} words "
            f"(minimum: {category.minimum_words})"
        )
    if segments.paragraph_count < ORGANIZED_PARAGRAPHS:
        weaknesses.append(
            f"Limited paragraph structure: {segments.paragraph_count} paragraphs"
        )
    if mechanics.linking_word_count < GOOD_LINKING_WORDS:
        weaknesses.append("Limited use of linking words")
    if segments.complex_word_count < GOOD_COMPLEX_WORDS:
        weaknesses.append("Limited vocabulary range")
    if mechanics.issues:
        weaknesses.append("Grammar and punctuation issues detected")
    # No sentences means no average to judge.
    if segments.sentence_count:
        low, high = SENTENCE_LENGTH_RANGE
        if segments.average_sentence_length < low:
            weaknesses.append("Sentences are too short on average")
        elif segments.average_sentence_length > high:
            weaknesses.append("Sentences are too long on average")
    return weaknesses
