"""Configuration — settings sources, file discovery, and logging setup."""
