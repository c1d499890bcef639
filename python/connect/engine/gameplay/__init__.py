from connect.engine.gameplay.game import GamePlay, HudSink, Phase

__all__ = ["GamePlay", "HudSink", "Phase"]
