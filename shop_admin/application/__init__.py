"""Application layer: DTOs, ports (interfaces), and services."""
