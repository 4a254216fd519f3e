"""Application layer: DTOs, ports (interfaces), services and use cases."""
