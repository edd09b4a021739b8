from pathlib import Path

import pytest
import yaml

from writing_band_evaluator.config import (
    EvaluatorConfig,
    Lexicon,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from writing_band_evaluator.errors import ConfigError
from writing_band_evaluator.pipeline import Evaluator


def test_load_config_defaults_without_path():
    """No path gives the default configuration."""
    cfg = load_config(None)

    assert cfg.task_category == "extended"
    assert cfg.max_feedback_items == 10
    assert "moreover" in cfg.lexicon.academic_words
    assert cfg.scoring.base_score == 6.5


def test_config_from_dict_builds_nested_sections_and_ignores_unknown_keys():
    """Nested sections build their dataclasses and unknown keys are dropped."""
    cfg = config_from_dict(
        {
            "task_category": "short",
            "unknown": 1,
            "lexicon": {"academic_words": ["zeitgeist"], "bogus": ["x"]},
            "scoring": {"base_score": 6.0, "task_word_tiers": [[100, False, 4.0]]},
        }
    )

    assert cfg.task_category == "short"
    assert cfg.lexicon.academic_words == ("zeitgeist",)
    assert cfg.lexicon.be_forms == Lexicon().be_forms
    assert cfg.scoring.base_score == 6.0
    assert cfg.scoring.task_word_tiers == ((100.0, False, 4.0),)


def test_config_from_dict_rejects_bad_lexicon():
    """Lexicon sections must be mappings of lists."""
    with pytest.raises(ConfigError):
        config_from_dict({"lexicon": {"academic_words": "moreover"}})
    with pytest.raises(ConfigError):
        config_from_dict({"lexicon": ["moreover"]})


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    """A YAML document that is not a mapping is rejected."""
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        config_from_yaml(path)


def test_printed_defaults_round_trip_through_yaml(tmp_path: Path):
    """The printed defaults load back to an identical config."""
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump(EvaluatorConfig().to_dict(), sort_keys=False), encoding="utf-8"
    )

    assert load_config(path) == EvaluatorConfig()


def test_lexicon_override_changes_analysis():
    """A custom lexicon changes what the analyzers count."""
    config = config_from_dict({"lexicon": {"academic_words": ["zeitgeist"]}})
    text = "The zeitgeist is shifting toward remote work."

    default_result = Evaluator().evaluate(text)
    custom_result = Evaluator(config).evaluate(text)

    assert default_result.vocabulary.academic_word_count == 0
    assert custom_result.vocabulary.academic_word_count == 1


@pytest.mark.parametrize(
    "data",
    [
        {"scoring": {"base_score": "high"}},
        {"scoring": {"base_score": True}},
        {"scoring": {"collocation_bonus_threshold": 2.5}},
        {"scoring": {"task_word_tiers": 5}},
        {"scoring": {"task_word_tiers": [[180, False, "five"]]}},
        {"max_feedback_items": "ten"},
        {"task_category": "essay"},
        {"task_category": 2},
    ],
)
def test_config_from_dict_rejects_invalid_values(data):
    """Malformed settings raise ConfigError instead of failing later."""
    with pytest.raises(ConfigError):
        config_from_dict(data)


def test_numeric_settings_are_coerced_to_their_default_type():
    """YAML integers for float settings become floats, and vice versa."""
    cfg = config_from_dict(
        {
            "max_feedback_items": 4.0,
            "task_category": "Task 1",
            "scoring": {"base_score": 6, "collocation_bonus_threshold": 2.0},
        }
    )

    assert cfg.max_feedback_items == 4
    assert isinstance(cfg.max_feedback_items, int)
    assert cfg.task_category == "Task 1"
    assert cfg.scoring.base_score == 6.0
    assert isinstance(cfg.scoring.base_score, float)
    assert cfg.scoring.collocation_bonus_threshold == 2
    assert isinstance(cfg.scoring.collocation_bonus_threshold, int)
