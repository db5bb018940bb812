"""
Conversations API Router - conversation list, open, thread and read state.

Flow:
  HTTP Request → Router → Query/Command → Handler → Repository → Database
                                 ↓
  HTTP Response ← Router ← DTO ←

A conversation id is an Application id. Virtual ids ("virtual-...") have no
backend record: their thread is empty and there is nothing to mark read.
"""

from logging import getLogger
from typing import Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from dishka.integrations.fastapi import FromDishka, inject

from jobchat.application.commands.messages import (
    MarkConversationReadCommand,
    MarkConversationReadHandler,
)
from jobchat.application.dto import ConversationDTO, MessageDTO
from jobchat.application.dto.base import CamelModel
from jobchat.application.queries.conversations import (
    ListConversationsHandler,
    ListConversationsQuery,
    OpenConversationHandler,
    OpenConversationQuery,
)
from jobchat.application.queries.messages import GetThreadHandler, GetThreadQuery
from jobchat.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from jobchat.domain.value_objects.actor import Actor
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.job_id import JobId
from jobchat.domain.value_objects.user_id import UserId
from jobchat.domain.value_objects.virtual_conversation_id import (
    VirtualConversationId,
)
from jobchat.presentation.dependencies.auth import get_current_user
from jobchat.presentation.dependencies.params import parse_id

logger = getLogger(__name__)


# ==================== RESPONSE MODELS ====================


class MarkReadResponse(CamelModel):
    marked_read: int


# ==================== ROUTER ====================

router = APIRouter(prefix="/conversations", tags=["conversations"])


# ==================== ENDPOINTS ====================


@router.get("", response_model=list[ConversationDTO])
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: Actor = Depends(get_current_user),
    include: Literal["all", "default"] = "default",
    candidate_id: Optional[str] = Query(None, alias="candidateId"),
    job_id: Optional[str] = Query(None, alias="jobId"),
    application_id: Optional[str] = Query(None, alias="applicationId"),
):
    """
    List the current user's conversations, newest activity first.

    include=all also returns applications without any message yet.
    """
    try:
        query = ListConversationsQuery(
            actor=current_user,
            include_all=include == "all",
            candidate_id=parse_id(UserId, candidate_id, "candidateId"),
            job_id=parse_id(JobId, job_id, "jobId"),
            application_id=parse_id(ApplicationId, application_id, "applicationId"),
        )
        conversations = await handler.execute(query)
        return [ConversationDTO.from_summary(c) for c in conversations]
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/open", response_model=ConversationDTO)
@inject
async def open_conversation(
    handler: FromDishka[OpenConversationHandler],
    current_user: Actor = Depends(get_current_user),
    candidate_id: str = Query(..., alias="candidateId"),
    application_id: Optional[str] = Query(None, alias="applicationId"),
    job_id: Optional[str] = Query(None, alias="jobId"),
    job_title: Optional[str] = Query(None, alias="jobTitle"),
):
    """
    Company opens a chat with a candidate.

    Returns the existing conversation if there is one, otherwise a virtual
    conversation the first POST /messages turns into a real one.
    """
    try:
        query = OpenConversationQuery(
            actor=current_user,
            candidate_id=parse_id(UserId, candidate_id, "candidateId"),
            application_id=parse_id(ApplicationId, application_id, "applicationId"),
            job_id=parse_id(JobId, job_id, "jobId"),
            job_title=job_title,
        )
        summary = await handler.execute(query)
        return ConversationDTO.from_summary(summary)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get("/{conversation_id}/messages", response_model=list[MessageDTO])
@inject
async def get_thread(
    conversation_id: str,
    handler: FromDishka[GetThreadHandler],
    current_user: Actor = Depends(get_current_user),
):
    """All messages of the conversation, oldest first."""
    if VirtualConversationId.is_virtual(conversation_id):
        return []
    try:
        query = GetThreadQuery(
            actor=current_user,
            application_id=parse_id(ApplicationId, conversation_id, "conversationId"),
        )
        result = await handler.execute(query)
        return [MessageDTO.from_entity(m) for m in result.messages]
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e


@router.put("/{conversation_id}/messages", response_model=MarkReadResponse)
@inject
async def mark_conversation_read(
    conversation_id: str,
    handler: FromDishka[MarkConversationReadHandler],
    current_user: Actor = Depends(get_current_user),
):
    """Mark every message addressed to the current user in the conversation as read."""
    if VirtualConversationId.is_virtual(conversation_id):
        return MarkReadResponse(marked_read=0)
    try:
        command = MarkConversationReadCommand(
            actor=current_user,
            application_id=parse_id(ApplicationId, conversation_id, "conversationId"),
        )
        marked = await handler.execute(command)
        return MarkReadResponse(marked_read=marked)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
