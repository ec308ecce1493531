from capstone.domain.projects.entities.project_membership import ProjectMembership

__all__ = ["ProjectMembership"]
