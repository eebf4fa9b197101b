"""
Scripted intake conversation for a single candidate.

The engine holds the candidate record, the current state and the quiz cursor.
It keeps no transcript: each submit() returns the replies for that turn and the
caller decides how to show them.
"""

import threading
from typing import List, Optional, Tuple

import prompts
from log_utils import get_logger
from models import STATE_FIELDS, CandidateProfile, CandidateRecord, ConversationState
from question_bank import QuestionBank
from utils import is_goodbye, parse_tech_stack

logger = get_logger("engine")

# Plain-text states, each stores the input verbatim and asks the next prompt
_INTAKE_PROMPTS = {
    ConversationState.COLLECT_EMAIL: prompts.ASK_PHONE,
    ConversationState.COLLECT_PHONE: prompts.ASK_EXPERIENCE,
    ConversationState.COLLECT_EXPERIENCE: prompts.ASK_POSITION,
    ConversationState.COLLECT_POSITION: prompts.ASK_LOCATION,
    ConversationState.COLLECT_LOCATION: prompts.ASK_TECH_STACK,
}


class ConversationEngine:
    def __init__(self, question_bank: Optional[QuestionBank] = None):
        self.question_bank = question_bank or QuestionBank()
        self._lock = threading.Lock()
        self._state = ConversationState.GREETING
        self._candidate = CandidateRecord()
        self._questions: Tuple[str, ...] = ()
        self._cursor = 0
        self._ended_early = False
        self._started = False

    @property
    def state(self) -> ConversationState:
        return self._state

    @property
    def candidate(self) -> CandidateRecord:
        return self._candidate

    @property
    def selected_questions(self) -> Tuple[str, ...]:
        return self._questions

    @property
    def current_question_index(self) -> int:
        return self._cursor

    @property
    def current_question(self) -> Optional[str]:
        if self._state is not ConversationState.ASKING_QUESTIONS:
            return None
        return self._questions[self._cursor]

    @property
    def is_finished(self) -> bool:
        return self._state is ConversationState.COMPLETED

    @property
    def ended_early(self) -> bool:
        """True when a termination keyword closed the session."""
        return self._ended_early

    @property
    def profile(self) -> Optional[CandidateProfile]:
        if not self._candidate.is_complete():
            return None
        return self._candidate.build()

    def start(self) -> str:
        """Return the opening prompt. Later calls leave the session as it is."""
        with self._lock:
            if not self._started:
                self._started = True
                self._state = ConversationState.GREETING
                logger.info("Session started")
        return prompts.GREETING

    def submit(self, text: str) -> List[str]:
        """Feed one candidate message and return the replies, in order.

        Whitespace-only input is ignored. Once completed, every input gets the
        same closing reply. A termination keyword anywhere in the text ends the
        session without recording the text.
        """
        text = (text or "").strip()
        if not text:
            return []

        with self._lock:
            self._started = True
            if self._state is ConversationState.COMPLETED:
                return [prompts.COMPLETED_REPLY]

            if is_goodbye(text):
                logger.info("Termination keyword received in state %s", self._state.value)
                self._ended_early = True
                self._state = ConversationState.COMPLETED
                return [prompts.TERMINATION_MESSAGE]

            return self._dispatch(text)

    def _dispatch(self, text: str) -> List[str]:
        state = self._state
        if state is ConversationState.GREETING:
            replies = [prompts.ASK_EMAIL.format(name=text)]
            self._record(state, text)
        elif state in _INTAKE_PROMPTS:
            replies = [_INTAKE_PROMPTS[state]]
            self._record(state, text)
        elif state is ConversationState.COLLECT_TECH_STACK:
            replies = self._collect_tech_stack(text)
        elif state is ConversationState.ASKING_QUESTIONS:
            return self._answer_question()
        else:
            raise RuntimeError(f"Unhandled conversation state: {state!r}")

        self._advance()
        return replies

    def _record(self, state: ConversationState, value) -> None:
        field_name = STATE_FIELDS[state]
        setattr(self._candidate, field_name, value)
        logger.debug("Recorded %s", field_name)

    def _collect_tech_stack(self, text: str) -> List[str]:
        stack = parse_tech_stack(text)
        self._record(ConversationState.COLLECT_TECH_STACK, stack)
        self._questions = tuple(self.question_bank.select(stack))
        self._cursor = 0
        logger.debug("Selected %d questions for %d skills", len(self._questions), len(stack))
        return [
            prompts.CONFIRM_TECH_STACK.format(tech_stack=", ".join(stack)),
            self._questions[0],
        ]

    def _answer_question(self) -> List[str]:
        # Answers are accepted as given, never stored or graded
        next_index = self._cursor + 1
        if next_index < len(self._questions):
            self._cursor = next_index
            return [prompts.NEXT_QUESTION, self._questions[next_index]]

        self._advance()
        logger.info("Screening completed after %d questions", len(self._questions))
        return [prompts.SCREENING_COMPLETE]

    def _advance(self) -> None:
        previous = self._state
        self._state = previous.next()
        logger.debug("State %s -> %s", previous.value, self._state.value)
