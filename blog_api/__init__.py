"""Blog posts API."""
