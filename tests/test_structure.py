from writing_band_evaluator.models import DefectKind
from writing_band_evaluator.rules import (
    clause_segments,
    default_patterns,
    has_finite_verb,
    is_fragment,
    is_run_on,
)
from writing_band_evaluator.structure import StructuralAnalyzer
from writing_band_evaluator.tokenization import segment_text


def _sentence(text: str):
    return segment_text(text).sentences[0]


def test_comma_splice_is_run_on():
    """Two clauses joined by a comma with no coordinator."""
    sentence = _sentence("I love reading, it makes me calm.")

    assert len(clause_segments(sentence)) == 2
    assert is_run_on(sentence, default_patterns())


def test_coordinated_pair_is_not_run_on():
    """A coordinator between two clauses keeps the sentence valid."""
    sentence = _sentence("I love reading, and it makes me calm every single evening.")

    assert not is_run_on(sentence, default_patterns())


def test_three_clauses_are_run_on_even_with_coordinator():
    """Three or more clause segments are always a run-on."""
    sentence = _sentence("We ate early; the guests came late, and nobody was hungry.")

    assert is_run_on(sentence, default_patterns())


def test_long_trailing_comma_sentence_without_coordinator_is_run_on():
    """Over 35 words with a comma and no coordinator is a run-on."""
    words = " ".join(["many"] * 34)
    sentence = _sentence(f"People visit the museum {words},")

    assert sentence.word_count > 35
    assert len(clause_segments(sentence)) == 1
    assert is_run_on(sentence, default_patterns())


def test_short_sentence_with_verb_is_fragment():
    """Fewer than five words is a fragment even with a finite verb."""
    sentence = _sentence("Because technology is advancing.")

    assert has_finite_verb(sentence, default_patterns())
    assert is_fragment(sentence, default_patterns())


def test_sentence_without_finite_marker_is_fragment():
    """A sentence with no finite-verb marker is a fragment."""
    sentence = _sentence("Walking slowly through the quiet park at dawn.")

    assert not has_finite_verb(sentence, default_patterns())
    assert is_fragment(sentence, default_patterns())


def test_contraction_counts_as_finite_verb():
    """Contracted auxiliaries count as finite verbs."""
    sentence = _sentence("They're planning a long trip across the country.")

    assert has_finite_verb(sentence, default_patterns())
    assert not is_fragment(sentence, default_patterns())


def test_finite_marker_matches_whole_words_only():
    """Markers embedded inside longer words do not match."""
    sentence = _sentence("Thistle grows wildly across those hills.")

    assert not has_finite_verb(sentence, default_patterns())


def test_analyzer_reports_indices_into_sentence_sequence():
    """Flags carry the zero-based index and text of their sentence."""
    segments = segment_text(
        "The council has approved the plan. Because technology is advancing. "
        "I love reading, it makes me calm."
    )
    report = StructuralAnalyzer().analyze(segments.sentences)

    assert [flag.index for flag in report.fragments] == [1, 2]
    assert [flag.index for flag in report.run_ons] == [2]
    assert report.run_ons[0].text == "I love reading, it makes me calm."
    assert report.run_ons[0].kind is DefectKind.RUN_ON
    assert all(flag.kind is DefectKind.FRAGMENT for flag in report.fragments)


def test_analyzer_on_no_sentences():
    """No sentences means no flags."""
    report = StructuralAnalyzer().analyze(())

    assert report.fragments == ()
    assert report.run_ons == ()
