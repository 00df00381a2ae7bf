"""Feature packages: classification, statistics and output."""
