from __future__ import annotations

from jobmatch.core.text_processing import contains_either, contains_term, fold, normalize_text


def test_normalize_text_is_deterministic_and_removes_nbsp() -> None:
    raw = "Node.js\u00a0Developer  \u2014  Lead\n\tTraining"
    norm = normalize_text(raw)
    assert "  " not in norm
    assert "\u00a0" not in norm
    assert "\u2014" not in norm
    assert "Node.js Developer" in norm


def test_fold_lowercases_after_normalizing() -> None:
    assert fold("  React\u00a0Native ") == "react native"
    assert fold("") == ""


def test_contains_either_direction_and_case() -> None:
    assert contains_either("PostgreSQL", "sql")
    assert contains_either("sql", "PostgreSQL")
    assert contains_either("REACT", "react")
    assert not contains_either("python", "java")
    assert not contains_either("GraphQL", "sql")


def test_contains_either_blank_never_matches() -> None:
    assert not contains_either("", "react")
    assert not contains_either("react", "   ")


def test_contains_term_respects_word_edges() -> None:
    assert contains_term("Go, Rust", "go")
    assert not contains_term("google", "go")
    assert contains_term("C++ developer", "c++")
    assert contains_term("worked with ci/cd pipelines", "CI/CD")
    assert not contains_term("anything", "")
