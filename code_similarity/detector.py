"""
Comparison workflows built on the pairwise engine.

- rank_candidates: one original against many files, most similar first.
- validate_variants: generated rewrites checked against the original and
  against each other for duplicates.
"""

import logging
from typing import List, Optional, Sequence

from .config import Thresholds, band
from .errors import NoCandidatesError
from .models import CodeFile, PlagiarismMatch, VariantCheck
from .similarity import SimilarityEngine

# Rounding slack for the [0, 1] range check; a text against itself can give 1.0000000000000002.
SCORE_TOLERANCE = 1e-9


def _check_inputs(original: str, others: Sequence[CodeFile], what: str) -> None:
    if not original:
        raise NoCandidatesError("Original code is empty")
    if not others:
        raise NoCandidatesError(f"No {what} to compare against the original")


def _warn_out_of_range(name: str, score: float) -> None:
    if not -SCORE_TOLERANCE <= score <= 1.0 + SCORE_TOLERANCE:
        logging.warning("Score for %s outside [0, 1]: %r", name, score)


def rank_candidates(
    original: str,
    candidates: Sequence[CodeFile],
    thresholds: Optional[Thresholds] = None,
    engine: Optional[SimilarityEngine] = None,
) -> List[PlagiarismMatch]:
    _check_inputs(original, candidates, "candidates")
    thr = thresholds or Thresholds()
    eng = engine or SimilarityEngine()

    scores = eng.score_many(original, [c.content for c in candidates])
    matches: List[PlagiarismMatch] = []
    for c, score in zip(candidates, scores):
        logging.debug("%s: %.4f", c.name, score)
        _warn_out_of_range(c.name, score)
        matches.append(
            PlagiarismMatch(
                name=c.name,
                score=score,
                band=band(score, thr.plagiarism_high, thr.plagiarism_medium),
                near_identical=score > thr.duplicate,
            )
        )
    # sort is stable, ties keep input order
    matches.sort(key=lambda m: m.score, reverse=True)
    return matches


def validate_variants(
    original: str,
    variants: Sequence[CodeFile],
    thresholds: Optional[Thresholds] = None,
    engine: Optional[SimilarityEngine] = None,
) -> List[VariantCheck]:
    _check_inputs(original, variants, "variants")
    thr = thresholds or Thresholds()
    eng = engine or SimilarityEngine()

    checks: List[VariantCheck] = []
    for i, v in enumerate(variants):
        score = eng.score(original, v.content)
        _warn_out_of_range(v.name, score)
        dup_of: Optional[int] = None
        for j in range(i):
            if eng.score(v.content, variants[j].content) > thr.duplicate:
                dup_of = j
                break
        check = VariantCheck(
            index=i,
            name=v.name,
            score=score,
            band=band(score, thr.high, thr.medium),
            duplicate_of_original=score > thr.duplicate,
            duplicate_of_variant=dup_of,
        )
        if check.is_duplicate:
            logging.info("Variant %d (%s) is a duplicate", i, v.name)
        checks.append(check)
    return checks
