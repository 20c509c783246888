from .filter import m_filter
from .fold import m_plus_all, m_reduce
from .sequence import m_map, m_sequence

__all__ = (
    "m_filter",
    "m_map",
    "m_plus_all",
    "m_reduce",
    "m_sequence",
)
