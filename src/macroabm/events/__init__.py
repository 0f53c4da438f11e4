"""Event classes for macroabm.

Events wrap the system functions in ``macroabm.systems`` and are
auto-registered via the __init_subclass__ hook.
"""

# Import all events to trigger auto-registration
from macroabm.events.bankruptcy import FirmsGoBankrupt

__all__ = ["FirmsGoBankrupt"]
