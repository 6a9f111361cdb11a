"""Test suite for result-edge.

Test structure:
- unit/: Unit tests for value types, configuration, logging and
  problem details translation (no external services)
"""
