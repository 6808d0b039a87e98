"""Manage user records stored as a JSON array in a single file."""
