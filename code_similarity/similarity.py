"""
Pairwise TF-IDF / cosine similarity between two source texts.

Pipeline: tokenize -> vocabulary -> TF -> IDF -> TF-IDF vectors -> cosine.
Every call builds its own tables; nothing is cached between calls.
"""

import math
import re
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

# ASCII word class: letters, digits, underscore. Other characters separate tokens.
TOKEN_RE = re.compile(r"\w+", re.ASCII)

# Pairwise comparison only; the IDF smoothing below assumes exactly two documents.
DOCUMENT_COUNT = 2


def tokenize(text: str) -> List[str]:
    return TOKEN_RE.findall((text or "").lower())


def build_vocabulary(tokens_a: Sequence[str], tokens_b: Sequence[str]) -> Dict[str, int]:
    """
    token -> index over the distinct tokens of both sequences.
    Sorted, so the order does not depend on which document comes first.
    """
    return {tok: i for i, tok in enumerate(sorted(set(tokens_a) | set(tokens_b)))}


def term_frequency(tokens: Sequence[str]) -> Dict[str, float]:
    if not tokens:
        return {}
    total = len(tokens)
    return {tok: count / total for tok, count in Counter(tokens).items()}


def inverse_document_frequency(
    vocab: Dict[str, int], documents: Sequence[Sequence[str]]
) -> Dict[str, float]:
    """
    idf(t) = ln(N / (1 + df(t))).

    With N = 2: a token in one document gets ln(1) = 0, a token in both gets
    ln(2/3) < 0. Negative weights are kept as they are.
    """
    doc_sets = [set(doc) for doc in documents]
    n = len(doc_sets)
    idf: Dict[str, float] = {}
    for tok in vocab:
        df = sum(1 for doc in doc_sets if tok in doc)
        idf[tok] = math.log(n / (1 + df))
    return idf


def tfidf_vectors(
    vocab: Dict[str, int],
    tf_a: Dict[str, float],
    tf_b: Dict[str, float],
    idf: Dict[str, float],
) -> Tuple[List[float], List[float]]:
    vec_a = [0.0] * len(vocab)
    vec_b = [0.0] * len(vocab)
    for tok, i in vocab.items():
        weight = idf.get(tok, 0.0)
        vec_a[i] = tf_a.get(tok, 0.0) * weight
        vec_b[i] = tf_b.get(tok, 0.0) * weight
    return vec_a, vec_b


def cosine(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of two equal-length vectors; 0.0 if either has zero magnitude."""
    dot = 0.0
    na = 0.0
    nb = 0.0
    for va, vb in zip(a, b):
        dot += va * vb
        na += va * va
        nb += vb * vb
    if na == 0 or nb == 0:
        return 0.0
    return dot / ((na ** 0.5) * (nb ** 0.5))


def calculate_similarity(text_a: str, text_b: str) -> float:
    """
    Lexical similarity of two texts, normally in [0, 1].

    Symmetric in its arguments. Returns 0.0 when either text has no tokens.
    The result is not clamped.
    """
    tokens_a = tokenize(text_a)
    tokens_b = tokenize(text_b)
    vocab = build_vocabulary(tokens_a, tokens_b)
    idf = inverse_document_frequency(vocab, [tokens_a, tokens_b])
    vec_a, vec_b = tfidf_vectors(vocab, term_frequency(tokens_a), term_frequency(tokens_b), idf)
    return cosine(vec_a, vec_b)


@dataclass(frozen=True)
class SimilarityEngine:
    """Stateless wrapper so callers can pass an engine around."""

    def score(self, text_a: str, text_b: str) -> float:
        return calculate_similarity(text_a, text_b)

    def score_many(self, query: str, corpus: Sequence[str]) -> List[float]:
        return [calculate_similarity(query, doc) for doc in corpus]
