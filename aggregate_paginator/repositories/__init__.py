"""
Repository Layer

Repositories bind a MongoDB collection to a model class.
"""

from aggregate_paginator.repositories.base import BaseRepository

__all__ = ["BaseRepository"]
