from capstone.infrastructure.identity.supabase_identity_gateway import (
    SupabaseIdentityGateway,
)

__all__ = ["SupabaseIdentityGateway"]
