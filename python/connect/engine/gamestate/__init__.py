from connect.engine.gamestate.state import GameState

__all__ = ["GameState"]
