"""User profile commands."""

from capstone.application.commands.user.update_profile_command import (
    UpdateProfileCommand,
)

__all__ = ["UpdateProfileCommand"]
