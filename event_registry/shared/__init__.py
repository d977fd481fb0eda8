"""Shared utilities and telemetry. No business logic."""
