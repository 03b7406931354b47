"""
Shared utilities for IRL.

Common functionality used across contexts:
- Logging setup with provenance
"""
