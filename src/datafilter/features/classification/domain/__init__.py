"""
Summary: Domain types and rules for classifying text lines.
Why: Keep the pure classification logic free of I/O dependencies.
"""
