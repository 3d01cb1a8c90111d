"""
Utility functions
"""
from .id_generator import generate_storage_key, file_extension

__all__ = ['generate_storage_key', 'file_extension']
