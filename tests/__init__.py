"""
Test suite for numwords

Contains:
- tests/unit/          : Unit tests for the normalizer, strategies, locales and dispatcher
"""
