"""Mini README: Core package initializer for Budget Jump.

Budget Jump is the side-scrolling mini-game bundled with the personal
finance tracker: a wallet jumps over unnecessary expenses while the game
reports each finished run to the finance ledger. The ``game`` package holds
the deterministic simulation, ``finance`` the ledger collaborator, and
``interface`` the HTTP surface that forwards input events and returns state
snapshots.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]

__version__ = "0.1.0"
