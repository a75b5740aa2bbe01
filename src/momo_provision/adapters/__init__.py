"""Adapters: concrete implementations of the core ports (httpx, `.env`, typer/rich)."""
