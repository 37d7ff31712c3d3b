"""Route Dependencies — hand the stores built at startup to the handlers.

Invariants:
    - Stores are read from app.state (set by the lifespan in main.py), never from module globals
"""

from fastapi import Request

from qanda.services.handle_answers import AnswerHandlers
from qanda.services.handle_questions import QuestionHandlers


def get_question_handlers(request: Request) -> QuestionHandlers:
    return QuestionHandlers(request.app.state.questions_store)


def get_answer_handlers(request: Request) -> AnswerHandlers:
    return AnswerHandlers(request.app.state.answers_store)
