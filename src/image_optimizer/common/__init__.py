"""Configuration, schemas and the decoded source image."""
