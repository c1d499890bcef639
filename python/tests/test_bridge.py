"""Host bridge — HUD forwarding and restart commands."""

from __future__ import annotations

from connect.bridge import CallbackChannel, HostBridge, Message, QueueChannel
from connect.engine.gameplay import GamePlay
from connect.engine.scheduler import ManualScheduler
from connect.models.puzzle import Puzzle
from connect.models.session import HudSnapshot

PUZZLE = Puzzle.from_groups(
    [
        ("Colors", ["RED", "BLUE", "GREEN", "YELLOW"]),
        ("Animals", ["CAT", "DOG", "BIRD", "FISH"]),
    ]
)


# -- helpers ------------------------------------------------------------------


class _BrokenChannel:
    def __init__(self) -> None:
        self.attempts = 0

    def post(self, message: Message) -> None:
        self.attempts += 1
        raise ConnectionError("shell went away")


def _select(game: GamePlay, words: list[str]) -> None:
    positions = {t.word: t.position for t in game.grid}
    for word in words:
        game.select_tile(positions[word])


# -- tests --------------------------------------------------------------------


def test_forwards_each_notification_in_order() -> None:
    received: list[Message] = []
    scheduler = ManualScheduler()
    bridge = HostBridge.launch(
        CallbackChannel(received.append), PUZZLE, schedule=scheduler, seed=0
    )
    game = bridge.engine
    assert game is not None

    _select(game, ["RED", "BLUE", "CAT", "DOG"])
    scheduler.flush()
    _select(game, ["RED", "BLUE", "GREEN", "YELLOW"])
    bridge.new_game(seed=1)

    assert received == [
        {"score": 0, "best": 0, "moves": 0},
        {"score": 0, "best": 0, "moves": 1},
        {"score": 100, "best": 100, "moves": 2},
        {"score": 0, "best": 100, "moves": 0},
    ]
    assert bridge.last_snapshot == HudSnapshot(score=0, best=100, moves=0)


def test_message_carries_exactly_three_integer_fields() -> None:
    received: list[Message] = []
    HostBridge.launch(CallbackChannel(received.append), PUZZLE, best=40)
    (message,) = received
    assert set(message) == {"score", "best", "moves"}
    assert all(isinstance(v, int) for v in message.values())
    assert message["best"] == 40


def test_missing_channel_drops_silently() -> None:
    bridge = HostBridge.launch(None, PUZZLE, seed=0)
    assert bridge.engine is not None
    _select(bridge.engine, ["CAT", "DOG", "BIRD", "FISH"])
    assert bridge.engine.session.score == 100
    assert bridge.last_snapshot == HudSnapshot(score=100, best=100, moves=1)


def test_failing_channel_never_breaks_the_engine() -> None:
    channel = _BrokenChannel()
    bridge = HostBridge.launch(channel, PUZZLE, seed=0)
    game = bridge.engine
    assert game is not None

    _select(game, ["CAT", "DOG", "BIRD", "FISH"])
    _select(game, ["RED", "BLUE", "GREEN", "YELLOW"])

    assert game.is_complete
    assert game.session.score == 200
    assert channel.attempts == 3


def test_new_game_before_attach_is_ignored() -> None:
    bridge = HostBridge()
    bridge.new_game(3)
    assert bridge.engine is None


def test_new_game_forwards_seed() -> None:
    bridge = HostBridge.launch(None, PUZZLE, seed=0)
    bridge.new_game(seed=9)
    expected = GamePlay(PUZZLE, seed=9)
    assert bridge.engine is not None
    assert [t.word for t in bridge.engine.grid] == [t.word for t in expected.grid]


def test_queue_channel_drains_in_post_order() -> None:
    channel = QueueChannel()
    for moves in range(3):
        channel.post({"score": 0, "best": 0, "moves": moves})
    assert [m["moves"] for m in channel.drain()] == [0, 1, 2]
    assert channel.drain() == []
