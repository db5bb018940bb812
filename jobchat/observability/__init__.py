"""
Observability - Prometheus metrics for the messaging core.
"""
