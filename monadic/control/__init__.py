from .compose import m_chain, m_comp
from .guard import guard, m_unless, m_when

__all__ = (
    "guard",
    "m_chain",
    "m_comp",
    "m_unless",
    "m_when",
)
