"""Example DTOs for a small library API."""
