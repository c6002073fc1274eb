"""
Tests Package.

This package contains test suites for the network visualization, covering
graph generation, per-frame physics, pointer tracking, scheduling, and the
matplotlib host.
"""

# Tests Package
