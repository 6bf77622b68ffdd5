"""Splinter scabbard backend client for batch submission and status polling."""
