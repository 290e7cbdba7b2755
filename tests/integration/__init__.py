"""
Integration tests for magicquery.

These tests run whole queries through the public API against
realistic record collections.
"""
