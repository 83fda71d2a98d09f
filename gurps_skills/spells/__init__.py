"""
Spell resolution for the proficiency engine.

Contains the spell models and the Ritual Magic defaulting algorithm.
"""

from .ritual_magic import (
    DefaultStrategy,
    build_default,
    evaluate_strategy,
    pick_strategy,
    resolve_for_specialization,
    resolve_ritual_magic_level,
    ritual_magic_satisfied,
)
from .spell import RitualMagicSpell, Spell

__all__ = [
    # Import from ritual_magic.py
    "DefaultStrategy",
    "build_default",
    "evaluate_strategy",
    "pick_strategy",
    "resolve_for_specialization",
    "resolve_ritual_magic_level",
    "ritual_magic_satisfied",
    # Import from spell.py
    "RitualMagicSpell",
    "Spell",
]
