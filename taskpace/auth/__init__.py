"""
TASKPACE API - Identity Module

Current-user resolution from the upstream identity provider.
"""

from taskpace.auth.dependencies import get_current_user_id, CurrentUserId

__all__ = ["get_current_user_id", "CurrentUserId"]
