"""Question Routes — POST /question, GET /questions, DELETE /question.

Invariants:
    - Routes only deserialize, delegate to QuestionHandlers, and serialize
    - HandlerError propagates to the global handler (api/error_handlers.py)
    - DELETE answers 200 with an empty body, also when nothing was deleted
"""

from fastapi import APIRouter, Depends, Response, status

from qanda.api.dependencies import get_question_handlers
from qanda.schemas.question import QuestionCreate, QuestionRef, QuestionResponse
from qanda.services.handle_questions import QuestionHandlers

router = APIRouter(tags=["questions"])


@router.post("/question", response_model=QuestionResponse)
async def create_question(
    body: QuestionCreate,
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    """Create a question."""
    return await handlers.create_question(body)


@router.get("/questions", response_model=list[QuestionResponse])
async def read_questions(
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    """List every question."""
    return await handlers.read_questions()


@router.delete("/question", response_class=Response)
async def delete_question(
    body: QuestionRef,
    handlers: QuestionHandlers = Depends(get_question_handlers),
):
    """Delete a question and its answers."""
    await handlers.delete_question(body)
    return Response(status_code=status.HTTP_200_OK)
