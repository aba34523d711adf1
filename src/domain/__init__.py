"""Pickup-game rating domain."""
