from __future__ import annotations

# Ten words, finite verb "are", opens with a stock subject, no commas.
BASE_SENTENCE = "Students are learning new skills in modern schools every day."
# Five words: short enough for the variation bonus, long enough to avoid a fragment.
SHORT_SENTENCE = "Education is very important today."
# Thirty-five words, no commas.
LONG_SENTENCE = (
    "Governments should invest in public libraries because they give people from "
    "every background a quiet place where they can read books and study for exams "
    "and meet others who share their interests in their town."
)
COLLOCATION_SENTENCES = (
    "As a result many people are reading more than before.",
    "On the other hand some readers are choosing digital books.",
    "In addition to books the library is offering free courses.",
)
# Ten words each, opening with a distinct academic transition word.
TRANSITION_SENTENCES = tuple(
    f"{word} students are learning new skills in modern schools today."
    for word in (
        "Moreover",
        "Furthermore",
        "Consequently",
        "Therefore",
        "However",
        "Nevertheless",
    )
)


def build_reference_essay(paragraphs: int = 4, transitions: bool = False) -> str:
    """
    Build a 300-word essay with no fragments, run-ons or passive sentences,
    three collocations, one long and one short sentence.

    With transitions=True the last paragraph opens every sentence with one of
    six academic transition words, keeping the word count at 300.
    """
    blocks = [
        [COLLOCATION_SENTENCES[0]] + [BASE_SENTENCE] * 5,
        [COLLOCATION_SENTENCES[1], SHORT_SENTENCE] + [BASE_SENTENCE] * 6,
        [COLLOCATION_SENTENCES[2], LONG_SENTENCE] + [BASE_SENTENCE] * 6,
        list(TRANSITION_SENTENCES) if transitions else [BASE_SENTENCE] * 6,
    ]
    if paragraphs == 3:
        blocks = [blocks[0], blocks[1], blocks[2] + blocks[3]]
    return "\n\n".join(" ".join(block) for block in blocks)
