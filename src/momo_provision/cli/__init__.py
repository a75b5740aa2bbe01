"""CLI layer: argument parsing, operator interaction and the error boundary.

Outermost layer; it may import from `core` and `adapters`, never the
other way round.
"""
