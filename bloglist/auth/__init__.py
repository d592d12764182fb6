"""Authorization policy for blog mutations."""

from bloglist.auth.policy import AuthorizationPolicy

__all__ = ["AuthorizationPolicy"]
