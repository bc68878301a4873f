"""Shared types, constants, digest and manifest codec."""
