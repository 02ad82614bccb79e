"""Data models for page telemetry."""
