"""
Infrastructure Layer - Implementations of domain ports.

persistence/  Prisma (PostgreSQL) repositories and unit of work
memory/       In-process store used for local runs and tests
"""
