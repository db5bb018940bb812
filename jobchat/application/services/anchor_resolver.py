"""
Application Anchor Resolver - find or create the Application a message belongs to.

Must run against repositories bound to an open unit of work holding the
anchor lock for the pair, otherwise two first sends can both miss and both
create a shell.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from jobchat.application.services.participants import Participants
from jobchat.domain.entities.application import Application
from jobchat.domain.exceptions import AccessDeniedError, EntityNotFoundError
from jobchat.domain.ports.repositories import ApplicationRepository
from jobchat.domain.services.permission_guard import ContactDecision
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.job_id import JobId

logger = logging.getLogger(__name__)


@dataclass
class AnchorResult:
    application: Application
    created: bool = False


class AnchorResolver:
    async def resolve(
        self,
        applications: ApplicationRepository,
        participants: Participants,
        decision: ContactDecision,
        application_id: Optional[ApplicationId] = None,
        job_id: Optional[JobId] = None,
    ) -> AnchorResult:
        """
        Resolve the anchoring Application.

        Steps:
        1. Explicit application id: load it and check it links the participants
        2. Otherwise reuse the most recent Application for the pair (and job)
        3. Otherwise create a shell Application, if the sender may initiate

        Raises:
            EntityNotFoundError: If the explicit application does not exist
            AccessDeniedError: If the application links other users, or a
                job seeker tries to start a conversation
        """
        company_id = participants.company.id
        job_seeker_id = participants.job_seeker.id

        if application_id:
            application = await applications.get_by_id(application_id)
            if not application:
                raise EntityNotFoundError("Application not found")
            if not application.links(company_id, job_seeker_id):
                raise AccessDeniedError(
                    "Sender and receiver are not the participants of this application."
                )
            return AnchorResult(application=application)

        application = await applications.find_latest(company_id, job_seeker_id, job_id)
        if application:
            logger.debug(
                f"[AnchorResolver] Reusing application {application.id.value} "
                f"for company={company_id.value} job_seeker={job_seeker_id.value}"
            )
            return AnchorResult(application=application)

        if not decision.may_initiate:
            raise AccessDeniedError(
                "A message can only be sent if there is an associated job application."
            )

        application = Application.create_shell(
            company_id=company_id, job_seeker_id=job_seeker_id, job_id=job_id
        )
        await applications.save(application)
        logger.info(
            f"[AnchorResolver] Created shell application {application.id.value} "
            f"(job={job_id.value if job_id else None})"
        )
        return AnchorResult(application=application, created=True)
