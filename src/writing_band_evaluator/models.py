from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .errors import InvalidInputError


class TaskCategory(str, Enum):
    """Declared task type; decides the word-count thresholds."""

    SHORT = "short"
    EXTENDED = "extended"

    @property
    def minimum_words(self) -> int:
        return 150 if self is TaskCategory.SHORT else 250

    @property
    def ideal_words(self) -> int:
        return 200 if self is TaskCategory.SHORT else 300

    @classmethod
    def parse(cls, value: "TaskCategory | str") -> "TaskCategory":
        """Accept enum members, canonical names, and the task1/task2 aliases."""
        if isinstance(value, TaskCategory):
            return value
        if not isinstance(value, str):
            raise InvalidInputError(
                f"Task category must be a string, got {type(value).__name__}."
            )
        key = value.lower().replace(" ", "").replace("_", "")
        category = _CATEGORY_ALIASES.get(key)
        if category is None:
            raise InvalidInputError(
                f"Unknown task category '{value}'; expected 'short' or 'extended'."
            )
        return category


_CATEGORY_ALIASES = {
    "short": TaskCategory.SHORT,
    "task1": TaskCategory.SHORT,
    "extended": TaskCategory.EXTENDED,
    "task2": TaskCategory.EXTENDED,
}


class DefectKind(str, Enum):
    FRAGMENT = "fragment"
    RUN_ON = "run_on"


class VoiceKind(str, Enum):
    PASSIVE = "passive"
    ACTIVE = "active"


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class Token:
    """A word extracted from the text."""

    text: str
    lower: str
    length: int


@dataclass(frozen=True, slots=True)
class Sentence:
    """A trimmed sentence, its position in the document, and its words."""

    index: int
    text: str
    tokens: Tuple[Token, ...]

    @property
    def word_count(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True, slots=True)
class SegmentedText:
    """Tokenizer output shared by every downstream analyzer."""

    sentences: Tuple[Sentence, ...]
    tokens: Tuple[Token, ...]
    paragraph_count: int

    @property
    def word_count(self) -> int:
        return len(self.tokens)

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @property
    def average_word_length(self) -> float:
        if not self.tokens:
            return 0.0
        return sum(token.length for token in self.tokens) / len(self.tokens)

    @property
    def complex_word_count(self) -> int:
        return sum(1 for token in self.tokens if token.length >= 7)

    @property
    def average_sentence_length(self) -> float:
        if not self.sentences:
            return 0.0
        return len(self.tokens) / len(self.sentences)


@dataclass(frozen=True, slots=True)
class DefectFlag:
    """A sentence exhibiting a structural defect."""

    index: int
    text: str
    kind: DefectKind


@dataclass(frozen=True, slots=True)
class VoiceFlag:
    """A sentence matched by one of the voice heuristics."""

    index: int
    text: str
    kind: VoiceKind


@dataclass(frozen=True, slots=True)
class StructuralReport:
    fragments: Tuple[DefectFlag, ...] = ()
    run_ons: Tuple[DefectFlag, ...] = ()


@dataclass(frozen=True, slots=True)
class VoiceReport:
    passive: Tuple[VoiceFlag, ...] = ()
    active: Tuple[VoiceFlag, ...] = ()


@dataclass(frozen=True, slots=True)
class VocabularyMetrics:
    type_token_ratio: float = 0.0
    academic_word_count: int = 0
    collocation_count: int = 0


@dataclass(frozen=True, slots=True)
class MechanicsReport:
    """Surface mechanics checks: doubled words, capitalization, spacing."""

    repeated_words: int = 0
    lowercase_starts: int = 0
    missing_spaces: int = 0
    linking_word_count: int = 0
    issues: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BandScores:
    """Quarter-band component scores and their combined overall band."""

    task_achievement: float
    coherence_cohesion: float
    lexical_resource: float
    grammatical_range: float
    overall: float


@dataclass(frozen=True, slots=True)
class FeedbackItem:
    """An advisory message, optionally illustrated with a before/after rewrite."""

    message: str
    before: str | None = None
    after: str | None = None

    def render(self) -> str:
        if self.before is None or self.after is None:
            return self.message
        return f'{self.message}: "{self.before}" -> "{self.after}"'


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Everything the engine reports for one piece of text."""

    task_category: TaskCategory
    segments: SegmentedText
    structure: StructuralReport
    voice: VoiceReport
    vocabulary: VocabularyMetrics
    mechanics: MechanicsReport
    band_scores: BandScores
    feedback: Tuple[str, ...] = ()
    strengths: Tuple[str, ...] = ()
    weaknesses: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        from .serialization import result_to_dict

        return result_to_dict(self)
