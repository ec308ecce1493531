"""Application commands (write operations)."""

from capstone.application.commands.auth import ResolveLandingCommand
from capstone.application.commands.onboarding import CompleteProfileCommand
from capstone.application.commands.projects import (
    CreateProjectCommand,
    JoinProjectCommand,
)
from capstone.application.commands.user import UpdateProfileCommand

__all__ = [
    "CompleteProfileCommand",
    "CreateProjectCommand",
    "JoinProjectCommand",
    "ResolveLandingCommand",
    "UpdateProfileCommand",
]
