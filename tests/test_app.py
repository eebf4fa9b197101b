from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import prompts
from models import ConversationState

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")

ANSWERS = [
    "Jane Doe",
    "jane@x.com",
    "555-1111",
    "3",
    "Platform Developer",
    "Remote",
    "Python",
    "A decorator wraps a function",
    "Tuples are immutable",
]


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("TALENTSCOUT_TYPING_DELAY", "0")
    monkeypatch.setenv("TALENTSCOUT_QUESTION_DELAY", "0")
    monkeypatch.setenv("TALENTSCOUT_QUESTION_SEED", "3")
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


def send(at: AppTest, text: str) -> AppTest:
    return at.chat_input[0].set_value(text).run()


def reset_button(at: AppTest):
    return next(b for b in at.sidebar.button if b.label == "Reset Conversation")


def test_opens_with_greeting(app):
    assert not app.exception
    assert app.session_state["engine"].state is ConversationState.GREETING
    assert app.chat_message[0].markdown[0].value == prompts.GREETING
    assert not app.chat_input[0].disabled


def test_full_screening_disables_input(app):
    for answer in ANSWERS:
        send(app, answer)
        assert not app.exception

    engine = app.session_state["engine"]
    assert engine.is_finished
    assert not engine.ended_early
    assert engine.candidate.full_name == "Jane Doe"
    assert engine.candidate.tech_stack == ["Python"]
    # greeting, 9 answers, 6 intake prompts, two ack + question pairs, closing message
    assert len(app.session_state["transcript"]) == 21
    assert app.chat_input[0].disabled


def test_keyword_ends_session(app):
    send(app, "Jane Doe")
    send(app, "goodbye")

    engine = app.session_state["engine"]
    assert engine.ended_early
    assert engine.candidate.email is None
    assert app.chat_input[0].disabled


def test_blank_input_adds_nothing(app):
    send(app, "   ")

    assert len(app.session_state["transcript"]) == 1
    assert app.session_state["engine"].state is ConversationState.GREETING


def test_reset_starts_a_new_session(app):
    send(app, "Jane Doe")
    send(app, "jane@x.com")

    reset_button(app).click().run()

    assert not app.exception
    engine = app.session_state["engine"]
    assert engine.state is ConversationState.GREETING
    assert engine.candidate.full_name is None
    assert len(app.session_state["transcript"]) == 1
    assert not app.chat_input[0].disabled
