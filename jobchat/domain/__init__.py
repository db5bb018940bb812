"""
DOMAIN LAYER - The Heart of the Messaging Core

This layer contains:
- Entities: Business objects with identity (Application, Message, Notification)
- Value Objects: Immutable types (UserId, ApplicationId, UserRole)
- Ports: Interfaces that infrastructure implements (repositories, unit of work)
- Services: Pure domain logic (permission matrix, dashboard routes)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
