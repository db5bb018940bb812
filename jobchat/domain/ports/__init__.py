"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/   → Data persistence interfaces
- unit_of_work.py → Transaction boundary with a per-conversation lock
"""

from jobchat.domain.ports.unit_of_work import TransactionScope, UnitOfWork

__all__ = [
    "TransactionScope",
    "UnitOfWork",
]
