"""SQLAlchemy 2.0 async persistence."""
