"""Core: domain, ports and workflows (no HTTP or terminal code)."""
