"""
System-related API models.

This module contains response models for system endpoints:
- Status and memory usage
- Debug toggles
"""

from typing import Dict, List

from pydantic import BaseModel


class SystemStatus(BaseModel):
    """System status information"""

    status: str
    uptime: float
    memory_usage: Dict[str, float]
    operations: List[str]
    selectors: List[str]


class DebugSettings(BaseModel):
    """Debug settings"""

    enabled: bool
    verbose_logging: bool
