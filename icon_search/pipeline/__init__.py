"""Offline data pipelines (manifest generation)."""
