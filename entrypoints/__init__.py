"""Per-platform launch entrypoints"""
