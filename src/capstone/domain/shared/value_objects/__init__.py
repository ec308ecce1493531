"""Shared value objects."""

from capstone.domain.shared.value_objects.uploaded_file import UploadedFile

__all__ = ["UploadedFile"]
