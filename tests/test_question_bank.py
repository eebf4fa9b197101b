import random

import pytest

from question_bank import GENERAL_QUESTIONS, MAX_QUESTIONS, QUESTION_BANK, QuestionBank


def make_bank(seed: int = 0) -> QuestionBank:
    return QuestionBank(rng=random.Random(seed))


@pytest.mark.parametrize("seed", range(10))
def test_single_known_skill_gives_distinct_pair(seed):
    questions = make_bank(seed).select(["javascript"])

    assert len(questions) == 2
    assert len(set(questions)) == 2
    assert set(questions) <= set(QUESTION_BANK["javascript"])


def test_unknown_skill_falls_back_to_general_set():
    assert make_bank().select(["unknownlang"]) == list(GENERAL_QUESTIONS)


def test_empty_stack_falls_back_to_general_set():
    assert make_bank().select([]) == list(GENERAL_QUESTIONS)


def test_five_skills_truncated_in_skill_order():
    skills = ["javascript", "python", "react", "node.js", "java"]
    questions = make_bank(3).select(skills)

    assert len(questions) == MAX_QUESTIONS
    assert set(questions[0:2]) <= set(QUESTION_BANK["javascript"])
    assert set(questions[2:4]) <= set(QUESTION_BANK["python"])
    assert questions[4] in QUESTION_BANK["react"]


def test_lookup_ignores_case_and_padding():
    questions = make_bank().select(["  PyThOn ", "Node.JS"])

    assert len(questions) == 4
    assert set(questions[:2]) <= set(QUESTION_BANK["python"])
    assert set(questions[2:]) <= set(QUESTION_BANK["node.js"])


def test_unknown_skill_mixed_with_known_contributes_nothing():
    questions = make_bank().select(["Rust", "sql", "Go"])

    assert len(questions) == 2
    assert set(questions) <= set(QUESTION_BANK["sql"])


def test_duplicate_skills_are_not_deduplicated():
    questions = make_bank().select(["python", "Python"])

    assert len(questions) == 4
    assert set(questions) <= set(QUESTION_BANK["python"])


def test_short_result_is_not_padded():
    assert len(make_bank().select(["java"])) == 2


def test_same_seed_gives_same_selection():
    skills = ["react", "sql"]
    assert make_bank(42).select(skills) == make_bank(42).select(skills)


def test_default_bank_is_unseeded_and_valid():
    questions = QuestionBank().select(["react"])
    assert set(questions) <= set(QUESTION_BANK["react"])


def test_bank_is_read_only():
    with pytest.raises(TypeError):
        QUESTION_BANK["rust"] = ("What is ownership?",)


def test_every_skill_has_at_least_five_questions():
    assert set(QUESTION_BANK) == {"javascript", "python", "react", "node.js", "java", "sql"}
    for questions in QUESTION_BANK.values():
        assert len(questions) >= 5
