"""
Lift call control

Routes hall calls from the landings to the single cabin.
"""

__version__ = "0.1.0"

from .call_router import CallRouter

__all__ = ['CallRouter']
