"""Onboarding commands."""

from capstone.application.commands.onboarding.complete_profile_command import (
    DEFAULT_AVATAR_BUCKET,
    CompleteProfileCommand,
)

__all__ = ["DEFAULT_AVATAR_BUCKET", "CompleteProfileCommand"]
