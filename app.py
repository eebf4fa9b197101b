import random
import time
from typing import List

import streamlit as st

from engine import ConversationEngine
from log_utils import configure_logging, get_logger
from prompts import SENTIMENT_LABEL, SUMMARY_TITLE
from question_bank import QuestionBank
from settings import Settings, load_settings
from transcript import ASSISTANT, CANDIDATE, Transcript
from utils import blob_sentiment, candidate_csv, candidate_frame

logger = get_logger("app")

MOOD_DISPLAY = {
    "positive": "😊",
    "neutral": "😐",
    "negative": "🙁",
}


def _new_engine(settings: Settings) -> ConversationEngine:
    rng = random.Random(settings.question_seed)
    return ConversationEngine(QuestionBank(rng=rng))


def _init_state(settings: Settings):
    if "engine" not in st.session_state:
        st.session_state.engine = _new_engine(settings)
    if "transcript" not in st.session_state:
        st.session_state.transcript = Transcript()
        st.session_state.transcript.add_assistant([st.session_state.engine.start()])


def _reset_conversation():
    for k in ["engine", "transcript"]:
        st.session_state.pop(k, None)


def _render(role: str, text: str):
    with st.chat_message("assistant" if role == ASSISTANT else "user"):
        st.write(text)


def _reply(settings: Settings, replies: List[str]):
    transcript: Transcript = st.session_state.transcript
    for i, reply in enumerate(replies):
        # Question follows its acknowledgement after a short pause
        delay = settings.typing_delay if i == 0 else settings.question_delay
        if delay:
            with st.spinner("TalentScout is typing..."):
                time.sleep(delay)
        _render(ASSISTANT, reply)
        transcript.add_assistant([reply])


def _sidebar(engine: ConversationEngine, transcript: Transcript):
    with st.sidebar:
        st.header("TalentScout")

        if st.button("Reset Conversation", type="secondary"):
            logger.info("Conversation reset by candidate")
            _reset_conversation()
            st.rerun()

        st.divider()
        st.subheader("Collected Info")
        candidate = engine.candidate.as_dict()
        st.dataframe(candidate_frame(candidate), hide_index=True, use_container_width=True)
        if any(candidate.values()):
            st.download_button(
                "Download details (CSV)",
                data=candidate_csv(candidate),
                file_name="candidate.csv",
                mime="text/csv",
            )

        last = transcript.latest(CANDIDATE)
        if last:
            polarity, mood = blob_sentiment(last.text)
            st.caption(f"{SENTIMENT_LABEL}: {mood} {MOOD_DISPLAY.get(mood, '😐')} (polarity={polarity:.2f})")

        if engine.is_finished:
            st.success("✓ Screening finished")


def main():
    settings = load_settings()
    configure_logging(settings)
    st.set_page_config(page_title=settings.app_title, page_icon="🤖", layout="centered")
    _init_state(settings)

    engine: ConversationEngine = st.session_state.engine
    transcript: Transcript = st.session_state.transcript

    _sidebar(engine, transcript)
    st.title(settings.app_title)

    # Chat display
    for msg in transcript:
        _render(msg.role, msg.text)

    if engine.is_finished:
        st.markdown(f"**{SUMMARY_TITLE}:**")
        st.dataframe(
            candidate_frame(engine.candidate.as_dict(), include_missing=False),
            hide_index=True,
            use_container_width=True,
        )

    # Input disabled after session end
    user_input = st.chat_input(placeholder="Type your message...", disabled=engine.is_finished)

    if user_input and user_input.strip():
        _render(CANDIDATE, user_input)
        transcript.add_candidate(user_input)

        replies = engine.submit(user_input)
        _reply(settings, replies)
        st.rerun()


if __name__ == "__main__":
    main()
