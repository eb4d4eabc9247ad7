from math import log

import pytest

from thought_radar.engine.tfidf import (
    SimilarityEngine,
    compute_term_frequency,
    cosine_similarity,
)


def test_term_frequency_normalizes_by_sequence_length() -> None:
    tf = compute_term_frequency(["coffee", "coffee", "rain", "jazz"])

    assert tf == {"coffee": 0.5, "rain": 0.25, "jazz": 0.25}
    assert compute_term_frequency([]) == {}


def test_document_frequency_counts_each_document_once() -> None:
    engine = SimilarityEngine()
    engine.add_document("echo echo echo")
    engine.add_document("echo chamber")

    assert engine.document_count == 2
    assert engine.document_frequency("echo") == 2
    assert engine.document_frequency("chamber") == 1
    assert engine.document_frequency("missing") == 0


def test_idf_is_unsmoothed_and_zero_for_unknown_terms() -> None:
    engine = SimilarityEngine()
    assert engine.inverse_document_frequency("anything") == 0.0

    engine.add_document("apple banana")
    engine.add_document("apple cherry")
    engine.add_document("apple banana durian")

    assert engine.inverse_document_frequency("apple") == 0.0
    assert engine.inverse_document_frequency("banana") == pytest.approx(log(3 / 2))
    assert engine.inverse_document_frequency("cherry") == pytest.approx(log(3))
    assert engine.inverse_document_frequency("never") == 0.0


def test_first_document_vector_is_all_zero() -> None:
    engine = SimilarityEngine()

    vector = engine.add_document("telescope nebula orbit")

    assert vector == {"telescope": 0.0, "nebula": 0.0, "orbit": 0.0}


def test_new_document_counts_toward_its_own_idf() -> None:
    engine = SimilarityEngine()
    engine.add_document("alpha beta")

    vector = engine.add_document("alpha gamma")

    assert vector["alpha"] == 0.0
    assert vector["gamma"] == pytest.approx(0.5 * log(2))


def test_rare_terms_dominate_common_ones() -> None:
    engine = SimilarityEngine()
    for text in ("coffee morning", "coffee evening", "coffee break", "coffee shop"):
        engine.add_document(text)

    vector = engine.add_document("coffee coffee coffee zebra")

    assert vector["coffee"] == 0.0
    assert vector["zebra"] == pytest.approx(0.25 * log(5))
    assert vector["zebra"] > vector["coffee"]


def test_previous_vectors_are_not_recomputed() -> None:
    engine = SimilarityEngine()
    engine.add_document("filler words")
    first = engine.add_document("lighthouse storm")
    snapshot = dict(first)

    engine.add_document("lighthouse keeper")

    assert first == snapshot
    assert first["lighthouse"] == pytest.approx(0.5 * log(2))
    assert engine.inverse_document_frequency("lighthouse") == pytest.approx(log(3 / 2))


def test_stop_word_document_is_still_counted() -> None:
    engine = SimilarityEngine()

    assert engine.add_document("the and of") == {}
    assert engine.document_count == 1
    assert engine.documents == ((),)


def test_reset_clears_corpus_and_table_together() -> None:
    engine = SimilarityEngine()
    engine.add_document("orbit orbit nebula")
    engine.add_document("nebula")

    engine.reset()

    assert engine.document_count == 0
    assert engine.documents == ()
    assert engine.document_frequency("nebula") == 0
    assert engine.inverse_document_frequency("nebula") == 0.0


def test_cosine_similarity_handles_missing_keys_and_zero_vectors() -> None:
    a = {"x": 1.0, "y": 2.0}
    b = {"y": 2.0, "z": 1.0}

    assert cosine_similarity(a, b) == pytest.approx(4.0 / 5.0)
    assert cosine_similarity(a, {}) == 0.0
    assert cosine_similarity({}, {}) == 0.0
    assert cosine_similarity({"x": 0.0}, {"x": 0.0}) == 0.0
    assert cosine_similarity({"x": 1.0}, {"y": 1.0}) == 0.0
