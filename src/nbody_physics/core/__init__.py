"""Simulation core namespace."""
