"""CLI commands."""

from .accounts import accounts
from .blueprints import blueprints, budget, export
from .user import me

__all__ = ["accounts", "blueprints", "budget", "export", "me"]
