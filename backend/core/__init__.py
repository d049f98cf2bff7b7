"""Core signal-derivation logic and models.

This package contains pure business logic with no I/O dependencies
(no network access, no persistence). The service layer (app/) acquires
indicator counts and prices and hands them to the engine here.
"""
