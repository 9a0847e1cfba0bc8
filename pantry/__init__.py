"""Pantry tools for tracking groceries and their expiry dates."""
