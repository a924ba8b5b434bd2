"""
Centralized constants for Neuro-AI Boost.

All status lines printed by the boost sequence are defined here
so the workflow, CLI and tests share one source of truth.
"""

# Banners printed around the sequence
OPENING_BANNER = "Neuro-AI Boost: Cerebrospinal Synchronization Sequence Initiated..."
CLOSING_BANNER = "Neuro-AI Boost: Cerebrospinal Synchronization Sequence Terminated."

# Per-step announcements
CONNECT_ANNOUNCEMENT = "Establishing Neural Lattice Synchronization..."
UPGRADE_ANNOUNCEMENT = "Initiating Human Memory Pulsar Induction..."
PERFORM_ANNOUNCEMENT = "Engaging in Hypercognitive Operations..."
CLEANUP_ANNOUNCEMENT = "Initiating Neural Detox Sequence..."

# Full transcript of a run, in order
TRANSCRIPT = (
    OPENING_BANNER,
    CONNECT_ANNOUNCEMENT,
    UPGRADE_ANNOUNCEMENT,
    PERFORM_ANNOUNCEMENT,
    CLEANUP_ANNOUNCEMENT,
    CLOSING_BANNER,
)
