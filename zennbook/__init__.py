"""Resolve Zenn-style book folders into cached, previewable content."""
