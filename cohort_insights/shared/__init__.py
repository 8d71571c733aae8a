"""Shared utilities: enums, telemetry and cross-cutting helpers. No business logic."""
