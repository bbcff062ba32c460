"""Collaborators around the scoring engine.

Each module handles a specific concern:

- config: Service defaults
- intake: Turning raw form values into a ProfileInput
- storage: Per-user aggregates, reports and the waitlist
- analysis: Analyze a profile and record it for a user
- cli: Command line entry point
"""

from trustguard_service.config import ServiceConfig, get_config

__all__ = ["ServiceConfig", "get_config"]
