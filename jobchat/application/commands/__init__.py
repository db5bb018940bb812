"""
COMMANDS - Write operations (CQRS)

Subfolders:
- messages/ → send_message, mark_read
"""
