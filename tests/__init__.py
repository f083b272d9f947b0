"""
Tarantool Dissector Test Suite

This package contains tests for the Tarantool binary protocol dissector.

Test Categories:
- unit/: Unit tests built on captured-style packets, no live server required
- fixtures/: Packet builders shared by the unit tests
"""
