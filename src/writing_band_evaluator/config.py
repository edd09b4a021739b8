from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Tuple

import yaml

from .errors import ConfigError, InvalidInputError
from .models import TaskCategory

FINITE_VERB_MARKERS: Tuple[str, ...] = (
    "am", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did",
    "can", "could", "may", "might", "must", "shall", "should", "will", "would",
    "'m", "'re", "'s",
)

BE_FORMS: Tuple[str, ...] = (
    "am", "is", "are", "was", "were", "be", "been", "being",
)

COORDINATING_CONJUNCTIONS: Tuple[str, ...] = (
    "and", "but", "or", "nor", "for", "yet", "so",
)

IRREGULAR_PARTICIPLES: Tuple[str, ...] = (
    "written", "taken", "given", "seen", "known", "made", "done", "built",
    "bought", "thought", "found", "kept", "left", "felt", "heard", "held",
    "led", "lost", "put", "read", "said", "sent", "set", "spent", "told",
    "understood", "won",
)

SUBJECT_OPENERS: Tuple[str, ...] = (
    "I", "We", "You", "They", "He", "She", "People", "Students",
    "Government", "Researchers", "It",
)

ACADEMIC_WORDS: Tuple[str, ...] = (
    "moreover", "furthermore", "nevertheless", "nonetheless", "consequently",
    "subsequently", "therefore", "however", "whereas", "albeit", "thereby",
    "paradigm", "mitigate", "ubiquitous", "substantial", "comprehensive",
    "fundamental", "inevitable", "predominantly", "notwithstanding",
)

COLLOCATIONS: Tuple[str, ...] = (
    "play an important role",
    "as a result",
    "in addition to",
    "on the other hand",
    "in contrast",
    "a wide range of",
)

LINKING_WORDS: Tuple[str, ...] = (
    "however", "therefore", "moreover", "furthermore", "nevertheless",
    "consequently", "additionally", "alternatively", "similarly",
    "in contrast", "on the other hand", "in addition", "for example",
    "for instance", "in conclusion", "to sum up", "firstly", "secondly",
    "finally", "although", "despite", "whereas", "while",
)


@dataclass(slots=True)
class Lexicon:
    """Word and phrase lists consumed by the analyzers."""

    finite_verb_markers: Tuple[str, ...] = FINITE_VERB_MARKERS
    be_forms: Tuple[str, ...] = BE_FORMS
    coordinating_conjunctions: Tuple[str, ...] = COORDINATING_CONJUNCTIONS
    irregular_participles: Tuple[str, ...] = IRREGULAR_PARTICIPLES
    subject_openers: Tuple[str, ...] = SUBJECT_OPENERS
    academic_words: Tuple[str, ...] = ACADEMIC_WORDS
    collocations: Tuple[str, ...] = COLLOCATIONS
    linking_words: Tuple[str, ...] = LINKING_WORDS


@dataclass(slots=True)
class ScoringSettings:
    """Numeric knobs used by the band scorer and the feedback rules."""

    base_score: float = 6.5
    min_band: float = 0.0
    max_band: float = 9.0
    # (upper bound, inclusive, score) for the extended task; short tasks scale bounds.
    task_word_tiers: Tuple[Tuple[float, bool, float], ...] = (
        (180.0, False, 5.0),
        (240.0, False, 6.0),
        (320.0, True, 7.0),
        (420.0, True, 6.75),
    )
    task_word_fallback: float = 6.5
    paragraph_bonus_threshold: int = 4
    paragraph_bonus: float = 0.25
    long_sentence_words: int = 30
    short_sentence_words: int = 6
    variation_bonus: float = 0.5
    run_on_weight_coherence: float = 0.3
    fragment_weight_coherence: float = 0.2
    fragment_weight_grammar: float = 0.2
    run_on_weight_grammar: float = 0.3
    defect_penalty_cap: float = 1.5
    collocation_bonus_threshold: int = 3
    collocation_bonus: float = 0.25
    ttr_high: float = 0.5
    ttr_high_bonus: float = 0.5
    ttr_mid: float = 0.4
    ttr_mid_bonus: float = 0.25
    complex_ratio_threshold: float = 0.18
    complex_ratio_bonus: float = 0.25
    academic_word_weight: float = 0.1
    academic_bonus_cap: float = 0.5
    passive_heavy_rate: float = 0.6
    passive_heavy_penalty: float = 0.5
    passive_light_rate: float = 0.15
    active_bonus: float = 0.25
    word_length_threshold: float = 4.8
    word_length_bonus: float = 0.25
    feedback_passive_rate: float = 0.5
    feedback_ttr: float = 0.42
    feedback_collocations: int = 2


@dataclass(slots=True)
class EvaluatorConfig:
    """Configuration options for the writing band evaluator."""

    task_category: str = "extended"
    max_feedback_items: int = 10
    max_cited_sentences: int = 3
    max_examples_per_rule: int = 2
    lexicon: Lexicon = field(default_factory=Lexicon)
    scoring: ScoringSettings = field(default_factory=ScoringSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary representation of the configuration."""
        return _plain(asdict(self))


def _plain(value: Any) -> Any:
    # yaml.safe_dump cannot represent tuples.
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _coerce_number(name: str, value: Any, kind: type) -> int | float:
    # bool is an int subclass but never a valid threshold.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"'{name}' must be a number, got {value!r}.")
    if kind is int and not float(value).is_integer():
        raise ConfigError(f"'{name}' must be a whole number, got {value!r}.")
    return kind(value)


def _coerce_fields(cls: type, data: Mapping[str, Any], section: str) -> dict[str, Any]:
    """Keep known keys, coercing numeric ones to the type of their default."""
    defaults = {f.name: f.default for f in fields(cls)}
    coerced: dict[str, Any] = {}
    for key in data:
        if key not in defaults:
            continue
        value = data[key]
        default = defaults[key]
        if isinstance(default, (int, float)) and not isinstance(default, bool):
            value = _coerce_number(f"{section}{key}", value, type(default))
        coerced[key] = value
    return coerced


def _check_task_category(value: Any) -> str:
    if isinstance(value, TaskCategory):
        return value.value
    try:
        TaskCategory.parse(value)
    except InvalidInputError as exc:
        raise ConfigError(f"Invalid task_category: {exc}") from exc
    return value


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    top_level = {key: data[key] for key in data if key not in ("lexicon", "scoring")}
    kwargs = _coerce_fields(EvaluatorConfig, top_level, "")
    if "task_category" in kwargs:
        kwargs["task_category"] = _check_task_category(kwargs["task_category"])
    if "lexicon" in data:
        kwargs["lexicon"] = _build_lexicon(data["lexicon"])
    if "scoring" in data:
        kwargs["scoring"] = _build_scoring(data["scoring"])
    return kwargs


def _build_lexicon(value: Any) -> Lexicon:
    if isinstance(value, Lexicon):
        return value
    if not isinstance(value, Mapping):
        raise ConfigError("'lexicon' must be a mapping of word lists.")
    allowed = {f.name for f in fields(Lexicon)}
    filtered: dict[str, Tuple[str, ...]] = {}
    for key in value:
        if key not in allowed:
            continue
        entries = value[key]
        if isinstance(entries, str) or not isinstance(entries, (list, tuple)):
            raise ConfigError(f"Lexicon entry '{key}' must be a list of strings.")
        filtered[key] = tuple(str(entry) for entry in entries)
    return Lexicon(**filtered)


def _build_scoring(value: Any) -> ScoringSettings:
    if isinstance(value, ScoringSettings):
        return value
    if not isinstance(value, Mapping):
        raise ConfigError("'scoring' must be a mapping of numeric settings.")
    filtered = _coerce_fields(ScoringSettings, value, "scoring.")
    if "task_word_tiers" in filtered:
        filtered["task_word_tiers"] = _parse_tiers(filtered["task_word_tiers"])
    return ScoringSettings(**filtered)


def _parse_tiers(raw: Any) -> Tuple[Tuple[float, bool, float], ...]:
    if not isinstance(raw, (list, tuple)):
        raise ConfigError("'task_word_tiers' must be a list of tiers.")
    tiers = []
    for item in raw:
        if not isinstance(item, (list, tuple)) or len(item) != 3:
            raise ConfigError(
                "Each task_word_tiers entry must be [upper_bound, inclusive, score]."
            )
        bound, inclusive, score = item
        tiers.append(
            (
                _coerce_number("task_word_tiers bound", bound, float),
                bool(inclusive),
                _coerce_number("task_word_tiers score", score, float),
            )
        )
    return tuple(tiers)


def config_from_dict(data: Mapping[str, Any] | None) -> EvaluatorConfig:
    """Build an EvaluatorConfig from a dictionary-like input."""
    if data is None:
        return EvaluatorConfig()
    return EvaluatorConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> EvaluatorConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ConfigError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EvaluatorConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return EvaluatorConfig()
    return config_from_yaml(path)
