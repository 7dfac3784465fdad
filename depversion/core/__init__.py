"""Ambient plumbing: configuration and logging."""
