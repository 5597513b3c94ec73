"""Probe collaborators and the orchestrator used by handlers.

Services are imported lazily by handlers so a cold start only pays for
boto3/SQLAlchemy when the status page is actually requested.
"""

# Do NOT import services here - use lazy loading in handlers instead
