from capstone.infrastructure.storage.supabase_storage import SupabaseStorageBlobStore

__all__ = ["SupabaseStorageBlobStore"]
