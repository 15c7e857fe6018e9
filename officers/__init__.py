"""Officer catalog app.

Loads the game's static officer JSON into read-only records and exposes
management commands for inspecting level-specific skill text.
"""
