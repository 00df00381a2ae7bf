"""Output domain types."""
