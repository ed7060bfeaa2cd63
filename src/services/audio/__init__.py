"""
Audio module - Recording preparation utilities.
"""

from .processor import AudioProcessor

__all__ = ["AudioProcessor"]
