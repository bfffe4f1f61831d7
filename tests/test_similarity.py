import math

import pytest

from code_similarity.similarity import (
    SimilarityEngine,
    build_vocabulary,
    calculate_similarity,
    cosine,
    inverse_document_frequency,
    term_frequency,
    tfidf_vectors,
    tokenize,
)

SAMPLES = [
    "",
    "only !!! ... punctuation",
    "def add(a, b):\n    return a + b",
    "def add(x, y):\n    return x + y",
    "alpha beta gamma",
    "delta epsilon zeta",
    "a b c",
    "a b d",
    "a a a b",
    "for i in range(10): print(i)",
    "import os\nimport sys\nprint(os.getcwd(), sys.argv)",
]


def test_tokenize_lowercases_and_splits_on_non_word():
    assert tokenize("def Foo():") == ["def", "foo"]
    assert tokenize("x_1+y*x_1") == ["x_1", "y", "x_1"]
    assert tokenize("  \n\t!!") == []
    assert tokenize("") == []


def test_tokenize_uses_ascii_word_class():
    assert tokenize("café = 1") == ["caf", "1"]


def test_build_vocabulary_is_sorted_union():
    vocab = build_vocabulary(["b", "a", "b"], ["c", "a"])
    assert vocab == {"a": 0, "b": 1, "c": 2}
    assert build_vocabulary([], []) == {}


def test_term_frequency():
    assert term_frequency(["a", "b", "a", "c"]) == {"a": 0.5, "b": 0.25, "c": 0.25}
    assert term_frequency([]) == {}


def test_idf_keeps_negative_weight_for_shared_tokens():
    a, b = ["a", "b"], ["a", "c"]
    idf = inverse_document_frequency(build_vocabulary(a, b), [a, b])
    assert idf["a"] == pytest.approx(math.log(2 / 3))
    assert idf["a"] < 0
    # present in one document only: ln(2 / 2)
    assert idf["b"] == 0.0
    assert idf["c"] == 0.0


def test_tfidf_vectors_share_index_order():
    vocab = {"a": 0, "b": 1}
    vec_a, vec_b = tfidf_vectors(vocab, {"a": 1.0}, {"b": 1.0}, {"a": 2.0, "b": 3.0})
    assert vec_a == [2.0, 0.0]
    assert vec_b == [0.0, 3.0]


def test_cosine():
    assert cosine([1.0, 0.0], [0.0, 1.0]) == 0.0
    assert cosine([1.0, 2.0], [2.0, 4.0]) == pytest.approx(1.0)
    assert cosine([0.0, 0.0], [1.0, 1.0]) == 0.0
    assert cosine([], []) == 0.0
    # not clamped
    assert cosine([1.0, 0.0], [-1.0, 0.0]) == pytest.approx(-1.0)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_symmetric(a, b):
    assert calculate_similarity(a, b) == calculate_similarity(b, a)


@pytest.mark.parametrize("text", [s for s in SAMPLES if tokenize(s)])
def test_self_similarity_is_one(text):
    assert calculate_similarity(text, text) == pytest.approx(1.0, abs=1e-9)


def test_empty_inputs_score_zero():
    assert calculate_similarity("", "") == 0
    assert calculate_similarity("", "anything with words") == 0
    assert calculate_similarity("only !!! ... punctuation", "") == 0
    assert calculate_similarity("!!! ...", "+-*/") == 0


def test_case_and_separators_ignored():
    assert calculate_similarity("def Foo():", "def foo ( ) :") == pytest.approx(1.0)
    assert calculate_similarity("def foo():", "def foo():") == pytest.approx(1.0)


def test_disjoint_documents_score_zero():
    assert calculate_similarity("alpha beta gamma", "delta epsilon zeta") == 0


def test_shared_token_frequencies_drive_the_score():
    # a: 2/3 vs 1/3, b: 1/3 vs 2/3 -> (2/9 + 2/9) / (5/9)
    assert calculate_similarity("a a b", "a b b") == pytest.approx(0.8)


def test_unshared_tokens_carry_no_weight():
    # With two documents, idf of a token found in only one of them is ln(1) = 0,
    # so "c" and "d" drop out and only the identical "a b" part is compared.
    assert calculate_similarity("a b c", "a b d") == pytest.approx(1.0)
    assert calculate_similarity("a b c", "a b c d e f") == pytest.approx(1.0)


def test_identifier_rename_scores_high():
    original = "def add(a, b):\n    return a + b"
    modified = "def add(x, y):\n    return x + y"
    score = calculate_similarity(original, modified)
    assert score > 0.5
    assert score == pytest.approx(1.0)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_scores_stay_in_unit_range(a, b):
    # Every nonzero weight is tf * ln(2/3) in both vectors, so the vectors share
    # an orthant and the cosine cannot leave [0, 1] beyond rounding.
    score = calculate_similarity(a, b)
    assert -1e-12 <= score <= 1.0 + 1e-12


def test_engine_score_many():
    eng = SimilarityEngine()
    scores = eng.score_many("x y", ["x y", "z w", ""])
    assert scores[0] == pytest.approx(1.0)
    assert scores[1:] == [0.0, 0.0]
    assert eng.score("a a b", "a b b") == calculate_similarity("a a b", "a b b")
