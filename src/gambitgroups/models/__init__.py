"""Data models for Gambit Groups."""
