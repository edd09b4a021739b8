from __future__ import annotations

import re
from typing import List, Tuple

from .models import SegmentedText, Sentence, Token
from .textutils import normalize_newlines, normalize_whitespace

STRIP_PUNCTUATION_RE = re.compile(r"[()\[\]{}.,!?;:\"'`]")
ALPHA_RE = re.compile(r"[^\W\d_]")
SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9])")
PARAGRAPH_BREAK_RE = re.compile(r"\n{2,}")


def tokenize_words(text: str) -> List[Token]:
    """Split text into word tokens, dropping punctuation and bare numerals."""
    stripped = STRIP_PUNCTUATION_RE.sub("", text)
    tokens: List[Token] = []
    for piece in stripped.split():
        if not ALPHA_RE.search(piece):
            continue
        tokens.append(Token(text=piece, lower=piece.lower(), length=len(piece)))
    return tokens


def split_sentences(text: str) -> List[str]:
    """
    Split text at a terminal . ! or ? followed by whitespace and a capital letter
    or digit. Abbreviations and uncapitalized continuations stay merged.
    """
    normalized = normalize_whitespace(text)
    if not normalized:
        return []
    parts = SENTENCE_BOUNDARY_RE.split(normalized)
    return [part.strip() for part in parts if part.strip()]


def count_paragraphs(text: str) -> int:
    """Count non-empty blocks separated by two or more newlines."""
    blocks = PARAGRAPH_BREAK_RE.split(normalize_newlines(text))
    return sum(1 for block in blocks if block.strip())


def segment_text(text: str) -> SegmentedText:
    """Produce sentences, document-wide tokens, and the paragraph count."""
    sentences: Tuple[Sentence, ...] = tuple(
        Sentence(index=idx, text=sentence, tokens=tuple(tokenize_words(sentence)))
        for idx, sentence in enumerate(split_sentences(text))
    )
    return SegmentedText(
        sentences=sentences,
        tokens=tuple(tokenize_words(text)),
        paragraph_count=count_paragraphs(text),
    )
