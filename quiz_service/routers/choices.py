"""
Choice endpoints.

Listing is public. Mutations require a bearer credential, which is
forwarded to the store; no ownership check is made here.
"""

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import (Caller, ServiceContainer, get_container,
                            get_current_caller)
from ..models import (ChoiceResponse, ChoicesResponse, CreateChoiceRequest,
                      UpdateChoiceRequest)

router = APIRouter(prefix="/choices", tags=["Choices"])


@router.get("/{question_id}", response_model=ChoicesResponse, summary="List choices of a question")
def list_choices(question_id: int, container: ServiceContainer = Depends(get_container)):
    choices = container.choices.get_choices(question_id)
    return ChoicesResponse(choices=[ChoiceResponse.from_entity(c) for c in choices])


@router.post(
    "",
    response_model=ChoiceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create choice",
)
def create_choice(
    body: CreateChoiceRequest,
    caller: Caller = Depends(get_current_caller),
    container: ServiceContainer = Depends(get_container),
):
    choice = container.choices.create_choice(
        body.question_id, body.text, body.is_correct, caller.token
    )
    return ChoiceResponse.from_entity(choice)


@router.put("/{choice_id}", response_model=ChoiceResponse, summary="Update choice")
def update_choice(
    choice_id: int,
    body: UpdateChoiceRequest,
    caller: Caller = Depends(get_current_caller),
    container: ServiceContainer = Depends(get_container),
):
    choice = container.choices.update_choice(
        choice_id, body.question_id, body.text, body.is_correct, caller.token
    )
    return ChoiceResponse.from_entity(choice)


@router.delete(
    "/{choice_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete choice"
)
def delete_choice(
    choice_id: int,
    caller: Caller = Depends(get_current_caller),
    container: ServiceContainer = Depends(get_container),
):
    container.choices.delete_choice(choice_id, caller.token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
