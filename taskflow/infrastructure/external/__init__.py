"""External providers (transactional email)."""
