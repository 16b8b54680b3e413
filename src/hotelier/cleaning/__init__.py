"""
Cleaning

This package provides the cleaning task store and the coordinator that
moves rooms through scheduling, cleaning and completion.
"""

from hotelier.cleaning.model import CleaningTask
from hotelier.cleaning.policy import CleaningPolicy
from hotelier.cleaning.repository import CleaningRepository
from hotelier.cleaning.service import CleaningService

__all__ = ["CleaningTask", "CleaningPolicy", "CleaningRepository", "CleaningService"]
