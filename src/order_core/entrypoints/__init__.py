"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- OrderService: payload-level facade called by the host's HTTP routes

Entrypoints translate decoded requests into use case calls
and format responses as persisted-layout records.
"""
