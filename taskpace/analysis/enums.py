"""
TASKPACE API - Analysis Enums
"""

from enum import Enum


class RiskLevel(str, Enum):
    """Cram risk from the average number of items due per day."""
    LOW = "low"          # at most 1 per day
    MEDIUM = "medium"    # at most 3 per day
    HIGH = "high"        # more than 3 per day
