"""
orca_path logging module
"""

from .orca_log import OrcaLog, get_orca_logger

__all__ = ['OrcaLog', 'get_orca_logger']
