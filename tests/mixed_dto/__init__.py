"""DTOs where one class cannot be described; used by discovery and CLI tests."""
