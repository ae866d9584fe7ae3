"""Configuration: constants and environment-driven settings."""
