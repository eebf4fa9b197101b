import random
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from log_utils import get_logger

logger = get_logger("question_bank")

QUESTIONS_PER_SKILL = 2
MAX_QUESTIONS = 5

QUESTION_BANK: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "javascript": (
        "Explain the difference between let, const, and var in JavaScript.",
        "What is event delegation and how does it work?",
        "How do closures work in JavaScript? Provide an example.",
        "What are the differences between == and === operators?",
        "Explain the concept of hoisting in JavaScript.",
    ),
    "python": (
        "What are Python decorators and how do you use them?",
        "Explain the difference between lists and tuples in Python.",
        "What is the Global Interpreter Lock (GIL) in Python?",
        "How do you handle exceptions in Python?",
        "What are Python generators and when would you use them?",
    ),
    "react": (
        "What are React hooks and why were they introduced?",
        "Explain the difference between controlled and uncontrolled components.",
        "What is the virtual DOM and how does it improve performance?",
        "How do you optimize React applications for better performance?",
        "What are React context and when should you use it?",
    ),
    "node.js": (
        "What is the event loop in Node.js?",
        "How do you handle asynchronous operations in Node.js?",
        "What are streams in Node.js and when would you use them?",
        "Explain the difference between process.nextTick() and setImmediate().",
        "How do you handle errors in Node.js applications?",
    ),
    "java": (
        "What are the main principles of Object-Oriented Programming?",
        "Explain the difference between abstract classes and interfaces.",
        "What is garbage collection in Java?",
        "How does exception handling work in Java?",
        "What are Java generics and why are they useful?",
    ),
    "sql": (
        "What is the difference between INNER JOIN and LEFT JOIN?",
        "How do you optimize slow SQL queries?",
        "What are database indexes and when should you use them?",
        "Explain ACID properties in databases.",
        "What is normalization and why is it important?",
    ),
})

GENERAL_QUESTIONS: Tuple[str, ...] = (
    "Describe a challenging technical problem you've solved recently.",
    "How do you stay updated with new technologies in your field?",
    "What's your approach to debugging code?",
)


class QuestionBank:
    """Maps a declared tech stack to a short list of screening questions.

    Each recognised skill contributes a random pair from its list, in the order
    the skills were given. When nothing matches, the general set is used as is.
    Pass a seeded ``random.Random`` for repeatable picks.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        bank: Mapping[str, Tuple[str, ...]] = QUESTION_BANK,
    ):
        self.rng = rng or random.Random()
        self.bank = bank

    def select(self, skills: Iterable[str]) -> List[str]:
        questions: List[str] = []
        for skill in skills:
            pool = self.bank.get(skill.strip().lower())
            if not pool:
                continue
            questions.extend(self.rng.sample(pool, min(QUESTIONS_PER_SKILL, len(pool))))

        if not questions:
            logger.debug("No known skills in stack, using general questions")
            return list(GENERAL_QUESTIONS)

        return questions[:MAX_QUESTIONS]
