"""Shared building blocks: models, errors, storage, session and API access."""
