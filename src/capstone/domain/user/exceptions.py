"""User domain exceptions."""

from capstone.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class ProfileNotFoundError(EntityNotFoundError):
    """No profile row exists for the principal."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            "Profile not found. Complete onboarding first.",
            code=ErrorCode.PROFILE_NOT_FOUND,
            details={"user_id": user_id},
        )
