"""
Neuro-AI Boost (nab) - Cerebrospinal synchronization sequence

Runs the boost sequence:
- Neural lattice synchronization with human memory
- Human memory pulsar induction
- Hypercognitive operations
- Neural detox
"""

__version__ = "0.1.0"
