"""
Visualization Package.

This package hosts the network engine on matplotlib: a batched drawing
surface over a full-bleed axes, an interactive window driven by canvas timers
and pointer/resize/close events, offline GIF export, and the `netviz` CLI.
"""

# Visualization Package
