"""Role value objects.

Two vocabularies exist: the one offered to a user during onboarding
(student / teacher) and the one stored system-wide (student / adviser /
coordinator). The mapping between them is fixed.
"""

from enum import Enum


class SystemRole(str, Enum):
    """System-wide classification of a principal, set once at onboarding."""

    STUDENT = "student"
    ADVISER = "adviser"
    COORDINATOR = "coordinator"

    @property
    def landing_path(self) -> str:
        return f"/{self.value}"


class OnboardingRole(str, Enum):
    """Roles a new user can pick while completing their profile."""

    STUDENT = "student"
    TEACHER = "teacher"

    @property
    def system_role(self) -> SystemRole:
        if self is OnboardingRole.STUDENT:
            return SystemRole.STUDENT
        return SystemRole.ADVISER

    @property
    def redirect_path(self) -> str:
        return self.system_role.landing_path
