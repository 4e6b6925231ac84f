"""Command line interface for building issue URLs."""
