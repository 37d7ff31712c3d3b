"""Answer Routes — POST /answer, GET /answers, DELETE /answer.

Invariants:
    - GET /answers takes the question reference as a JSON body, like DELETE
    - DELETE answers 200 with an empty body, also when nothing was deleted
"""

from fastapi import APIRouter, Depends, Response, status

from qanda.api.dependencies import get_answer_handlers
from qanda.schemas.answer import AnswerCreate, AnswerRef, AnswerResponse
from qanda.schemas.question import QuestionRef
from qanda.services.handle_answers import AnswerHandlers

router = APIRouter(tags=["answers"])


@router.post("/answer", response_model=AnswerResponse)
async def create_answer(
    body: AnswerCreate,
    handlers: AnswerHandlers = Depends(get_answer_handlers),
):
    """Create an answer to an existing question."""
    return await handlers.create_answer(body)


@router.get("/answers", response_model=list[AnswerResponse])
async def read_answers(
    body: QuestionRef,
    handlers: AnswerHandlers = Depends(get_answer_handlers),
):
    """List the answers of one question."""
    return await handlers.read_answers(body)


@router.delete("/answer", response_class=Response)
async def delete_answer(
    body: AnswerRef,
    handlers: AnswerHandlers = Depends(get_answer_handlers),
):
    await handlers.delete_answer(body)
    return Response(status_code=status.HTTP_200_OK)
