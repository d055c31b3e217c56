"""Application layer: commands and their request/result models."""
