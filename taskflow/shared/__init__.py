"""Shared utilities: request context, telemetry (logging), and cross-cutting helpers. No business logic."""
