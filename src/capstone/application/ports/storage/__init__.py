from capstone.application.ports.storage.blob_store import BlobStore, BlobUploadError

__all__ = ["BlobStore", "BlobUploadError"]
