"""
Repair engine for quasi-JSON payloads (Python dict/list literals with
embedded HTML) forwarded by booking partners.
"""

from .exceptions import RepairError, UnparseableError
from .normalizer import repair, clean_data, normalize

__all__ = ['RepairError', 'UnparseableError', 'repair', 'clean_data', 'normalize']
