"""
Messages API Router - send a message.

POST /messages
    {"receiverId": "...", "applicationId": "...", "jobId": "...", "content": "..."}

At least one of receiverId / applicationId is required. A virtual
applicationId ("virtual-...") is ignored: the conversation is resolved from
the receiver, creating the Application if needed.
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request, status
from dishka.integrations.fastapi import FromDishka, inject

from jobchat.application.commands.messages import (
    SendMessageCommand,
    SendMessageHandler,
)
from jobchat.application.dto import MessageDTO
from jobchat.application.dto.base import CamelModel
from jobchat.config.settings import Config
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
from jobchat.presentation.rate_limit import limiter

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class SendMessageRequest(CamelModel):
    content: str
    receiver_id: Optional[str] = None
    application_id: Optional[str] = None
    job_id: Optional[str] = None


# ==================== ROUTER ====================

router = APIRouter(prefix="/messages", tags=["messages"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=MessageDTO)
@limiter.limit(Config.MESSAGE_RATE_LIMIT)
@inject
async def send_message(
    request: Request,
    body: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: Actor = Depends(get_current_user),
):
    """
    Send a message.

    Rate limited by MESSAGE_RATE_LIMIT.
    """
    application_id = body.application_id
    if application_id and VirtualConversationId.is_virtual(application_id):
        application_id = None

    try:
        command = SendMessageCommand(
            actor=current_user,
            content=body.content,
            receiver_id=parse_id(UserId, body.receiver_id, "receiverId"),
            application_id=parse_id(ApplicationId, application_id, "applicationId"),
            job_id=parse_id(JobId, body.job_id, "jobId"),
        )
        message = await handler.execute(command)
        return MessageDTO.from_entity(message)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
