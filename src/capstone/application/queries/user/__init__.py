from capstone.application.queries.user.get_profile_query import GetProfileQuery

__all__ = ["GetProfileQuery"]
