"""Sign-in flow commands."""

from capstone.application.commands.auth.resolve_landing_command import (
    LOGIN_PATH,
    ONBOARDING_PATH,
    ResolveLandingCommand,
)

__all__ = ["LOGIN_PATH", "ONBOARDING_PATH", "ResolveLandingCommand"]
