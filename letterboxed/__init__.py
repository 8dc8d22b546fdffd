"""Letterboxed puzzle solver: shortest word chains that use every letter on the box."""
