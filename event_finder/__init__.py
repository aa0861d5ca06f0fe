"""Event Finder - in-memory event discovery service."""
