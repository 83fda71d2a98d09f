"""
Character module for the proficiency engine.

Contains the in-memory character sheet the level resolvers query.
"""

from .sheet import CharacterSheet, SheetSkill

__all__ = [
    # Import from sheet.py
    "CharacterSheet",
    "SheetSkill",
]
