"""
Actor Use Cases

Resolving the caller context.
"""

from .load_actor_use_case import LoadActorUseCase

__all__ = [
    "LoadActorUseCase",
]
