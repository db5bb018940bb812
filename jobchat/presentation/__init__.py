"""
Presentation Layer - HTTP surface (FastAPI routers, auth, rate limits).
"""
