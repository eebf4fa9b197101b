from dataclasses import dataclass
from typing import Iterable, Iterator, List

ASSISTANT = "assistant"
CANDIDATE = "candidate"
ROLES = (ASSISTANT, CANDIDATE)


@dataclass(frozen=True)
class Message:
    role: str
    text: str
    seq: int


class Transcript:
    """Ordered chat history owned by the UI. Messages are never edited."""

    def __init__(self):
        self._messages: List[Message] = []

    def add(self, role: str, text: str) -> Message:
        if role not in ROLES:
            raise ValueError(f"Unknown message role: {role!r}")
        message = Message(role=role, text=text, seq=len(self._messages))
        self._messages.append(message)
        return message

    def add_assistant(self, replies: Iterable[str]) -> List[Message]:
        return [self.add(ASSISTANT, reply) for reply in replies]

    def add_candidate(self, text: str) -> Message:
        return self.add(CANDIDATE, text)

    def latest(self, role: str):
        return next((m for m in reversed(self._messages) if m.role == role), None)

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._messages))

    def __len__(self) -> int:
        return len(self._messages)
