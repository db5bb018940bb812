"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS): send message, mark conversation read
- queries/   → Read operations (CQRS): conversation list, thread, notifications
- services/  → Orchestration shared by handlers (anchor resolver, projector, dispatcher)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities, repositories, unit of work
"""
