"""Shared utilities: telemetry (logging, tracing) and helpers."""
