"""Best-score persistence and shell-side reconciliation."""

from __future__ import annotations

import json
from pathlib import Path

from connect.bridge import QueueChannel
from connect.engine.gameplay import GamePlay
from connect.frontend.shell import BEST_SCORE_FILE, Shell
from connect.models.bestscore import BEST_SCORE_KEY, BestScoreStore
from connect.models.session import HudSnapshot


def _store_file(data_dir: Path, value: object) -> Path:
    path = data_dir / BEST_SCORE_FILE
    path.write_text(json.dumps({BEST_SCORE_KEY: value}))
    return path


def _match_first_group(game: GamePlay) -> None:
    positions = {t.word: t.position for t in game.grid}
    for word in game.puzzle.categories[0].words:
        game.select_tile(positions[word])


# -- store --------------------------------------------------------------------


def test_store_defaults_to_zero(tmp_path: Path) -> None:
    assert BestScoreStore(tmp_path / "missing.json").best == 0


def test_store_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / BEST_SCORE_FILE
    BestScoreStore(path).save(700)
    assert json.loads(path.read_text()) == {"bestScore": 700}
    assert BestScoreStore(path).best == 700


def test_store_ignores_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / BEST_SCORE_FILE
    path.write_text("{not json")
    assert BestScoreStore(path).best == 0


def test_store_ignores_non_numeric_value(tmp_path: Path) -> None:
    assert BestScoreStore(_store_file(tmp_path, "lots")).best == 0


# -- shell --------------------------------------------------------------------


def test_shell_starts_from_stored_best(tmp_path: Path) -> None:
    _store_file(tmp_path, 300)
    shell = Shell.for_data_dir(tmp_path)
    game = shell.connect(seed=0)
    assert shell.best == 300
    assert game.session.best == 300


def test_shell_persists_only_new_maxima(tmp_path: Path) -> None:
    path = _store_file(tmp_path, 150)
    shell = Shell.for_data_dir(tmp_path)

    shell.on_hud({"score": 100, "best": 100, "moves": 1})
    assert shell.best == 150
    assert json.loads(path.read_text())[BEST_SCORE_KEY] == 150

    shell.on_hud({"score": 200, "best": 200, "moves": 2})
    assert shell.best == 200
    assert json.loads(path.read_text())[BEST_SCORE_KEY] == 200

    shell.on_hud({"score": 0, "best": 0, "moves": 0})
    assert shell.hud == HudSnapshot(score=0, best=200, moves=0)


def test_shell_decodes_loose_messages(tmp_path: Path) -> None:
    shell = Shell.for_data_dir(tmp_path)
    shell.on_hud({"score": 100.0, "moves": "3"})
    assert shell.hud == HudSnapshot(score=100, best=100, moves=0)
    shell.on_hud("garbage")
    assert shell.hud == HudSnapshot(score=0, best=100, moves=0)


def test_shell_end_to_end(tmp_path: Path) -> None:
    shell = Shell.for_data_dir(tmp_path)
    game = shell.connect(seed=4)
    _match_first_group(game)
    assert shell.hud == HudSnapshot(score=100, best=100, moves=1)

    shell.restart(seed=5)
    assert shell.hud == HudSnapshot(score=0, best=100, moves=0)
    assert Shell.for_data_dir(tmp_path).best == 100


def test_shell_with_queue_channel(tmp_path: Path) -> None:
    channel = QueueChannel()
    shell = Shell.for_data_dir(tmp_path)
    game = shell.connect(channel=channel, seed=0)
    _match_first_group(game)

    assert shell.hud.score == 0
    for message in channel.drain():
        shell.on_hud(message)
    assert shell.hud == HudSnapshot(score=100, best=100, moves=1)


def test_restart_without_engine_is_harmless(tmp_path: Path) -> None:
    shell = Shell.for_data_dir(tmp_path)
    shell.restart()
    assert shell.bridge is None


def test_connect_folds_caller_best_with_stored_best(tmp_path: Path) -> None:
    _store_file(tmp_path, 300)
    assert Shell.for_data_dir(tmp_path).connect(best=500, seed=0).session.best == 500
    assert Shell.for_data_dir(tmp_path).connect(best=100, seed=0).session.best == 300


class _ReadOnlyStore(BestScoreStore):
    def save(self, value: int) -> None:
        raise PermissionError("read-only file system")


def test_unsaveable_best_still_updates_hud(tmp_path: Path) -> None:
    shell = Shell(_ReadOnlyStore(tmp_path / BEST_SCORE_FILE))
    shell.on_hud({"score": 100, "best": 100, "moves": 1})

    assert shell.hud == HudSnapshot(score=100, best=100, moves=1)
    assert not (tmp_path / BEST_SCORE_FILE).exists()
