"""Answer endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from ..dependencies import (Caller, ServiceContainer, get_container,
                            get_current_caller)
from ..models import AnswerResponse, CreateAnswerRequest

router = APIRouter(tags=["Answers"])


@router.post(
    "/answers",
    response_model=AnswerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit answer",
)
def create_answer(
    body: CreateAnswerRequest,
    caller: Caller = Depends(get_current_caller),
    container: ServiceContainer = Depends(get_container),
):
    """Record the caller's choice for a question."""
    answer = container.answers.create_answer(
        body.question_id, body.choice_id, caller.user_id, caller.token
    )
    return AnswerResponse.from_entity(answer)


@router.get("/my-answers", response_model=List[AnswerResponse], summary="List own answers")
def list_my_answers(
    caller: Caller = Depends(get_current_caller),
    container: ServiceContainer = Depends(get_container),
):
    return [AnswerResponse.from_entity(a) for a in container.answers.get_answers_by_user(caller.user_id)]
