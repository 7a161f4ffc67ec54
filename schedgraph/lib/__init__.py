"""Library integrations."""
