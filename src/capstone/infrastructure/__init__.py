"""Infrastructure layer - adapters for the record store, blob store and identity provider."""
