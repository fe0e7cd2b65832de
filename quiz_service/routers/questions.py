"""
Question endpoints.

Reads are public. Creating requires a bearer credential; updating and
deleting additionally require the caller to own the question.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from ..dependencies import (Caller, ServiceContainer, get_container,
                            get_current_caller)
from ..models import (AnswerResponse, CreateQuestionRequest, MessageResponse,
                      QuestionResponse, UpdateQuestionRequest)

router = APIRouter(tags=["Questions"])


@router.get("/questions", response_model=List[QuestionResponse], summary="List questions")
def list_questions(container: ServiceContainer = Depends(get_container)):
    return [QuestionResponse.from_entity(q) for q in container.questions.get_all_questions()]


@router.post(
    "/questions",
    response_model=QuestionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create question",
)
def create_question(
    body: CreateQuestionRequest,
    caller: Caller = Depends(get_current_caller),
    container: ServiceContainer = Depends(get_container),
):
    question = container.questions.create_question(
        genre_id=body.genre_id,
        owner_id=caller.user_id,
        title=body.title,
        body=body.body,
        explanation=body.explanation,
        credential=caller.token,
    )
    return QuestionResponse.from_entity(question)


@router.get("/questions/{question_id}", response_model=QuestionResponse, summary="Get question")
def get_question(question_id: int, container: ServiceContainer = Depends(get_container)):
    return QuestionResponse.from_entity(container.questions.get_question(question_id))


@router.put(
    "/questions/{question_id}", response_model=MessageResponse, summary="Update question"
)
def update_question(
    question_id: int,
    body: UpdateQuestionRequest,
    caller: Caller = Depends(get_current_caller),
    container: ServiceContainer = Depends(get_container),
):
    """
    Replace title, body and explanation of a question.

    Returns 403 if the caller does not own the question.
    """
    container.questions.update_question(
        question_id=question_id,
        title=body.title,
        body=body.body,
        explanation=body.explanation,
        caller_id=caller.user_id,
        credential=caller.token,
    )
    return MessageResponse(message="Question updated successfully")


@router.delete(
    "/questions/{question_id}", response_model=MessageResponse, summary="Delete question"
)
def delete_question(
    question_id: int,
    caller: Caller = Depends(get_current_caller),
    container: ServiceContainer = Depends(get_container),
):
    container.questions.delete_question(question_id, caller.user_id, caller.token)
    return MessageResponse(message="Question deleted successfully")


@router.get(
    "/my-questions", response_model=List[QuestionResponse], summary="List own questions"
)
def list_my_questions(
    caller: Caller = Depends(get_current_caller),
    container: ServiceContainer = Depends(get_container),
):
    questions = container.questions.get_questions_by_user(caller.user_id, caller.token)
    return [QuestionResponse.from_entity(q) for q in questions]


@router.get(
    "/questions/{question_id}/answers",
    response_model=List[AnswerResponse],
    summary="List answers to a question",
)
def list_question_answers(question_id: int, container: ServiceContainer = Depends(get_container)):
    answers = container.answers.get_answers_by_question(question_id)
    return [AnswerResponse.from_entity(a) for a in answers]
