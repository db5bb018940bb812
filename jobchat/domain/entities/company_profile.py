"""
CompanyProfile Entity - The company-side profile owned 1:1 by a COMPANY user.
"""

from dataclasses import dataclass
from typing import Optional
from jobchat.domain.value_objects.company_id import CompanyId
from jobchat.domain.value_objects.user_id import UserId


@dataclass
class CompanyProfile:
    id: CompanyId
    user_id: UserId
    name: Optional[str] = None
    logo_url: Optional[str] = None
