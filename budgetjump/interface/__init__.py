"""Mini README: Interactive interfaces for Budget Jump.

Exports the FastAPI application factory and the ``GameView`` that ties a
game's tick source to the lifetime of the view showing it.
"""

from .game_view import GameView, GameViewClosedError
from .web_app import create_application

__all__ = ["GameView", "GameViewClosedError", "create_application"]
