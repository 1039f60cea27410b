"""Inline font subsets."""
