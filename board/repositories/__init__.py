"""Persistence access for members and roles."""
