"""Braincast service layer: configuration, data-source clients, services and HTTP API."""
