"""Demonstration driver and command-line interface for the publication model."""
