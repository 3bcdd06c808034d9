# tests/test_folders.py

from __future__ import annotations

import uuid

from oracle_focus.tasks.folders import FolderBoard


def test_seeded_board_has_default_folders() -> None:
    board = FolderBoard.seeded()
    names = [f.name for f in board.folders]
    assert names == ["Instagram", "X (Twitter)", "YouTube", "Facebook", "Reddit", "LinkedIn"]
    assert all(f.open_task_count == 0 for f in board.folders)


def test_add_and_toggle_folder_task() -> None:
    board = FolderBoard.seeded()
    task = board.add_task("Post a reel", 0)
    assert task is not None
    assert board.folders[0].open_task_count == 1

    assert board.toggle_task(task.id, 0) is True
    assert task.is_done
    assert board.folders[0].open_task_count == 0

    assert board.toggle_task(task.id, 0) is True
    assert not task.is_done


def test_folder_noops() -> None:
    board = FolderBoard.seeded()
    assert board.add_task("x", 99) is None
    assert board.add_task("x", -1) is None
    assert board.add_task("   ", 0) is None
    assert board.toggle_task(uuid.uuid4(), 0) is False
    assert board.toggle_task(uuid.uuid4(), 42) is False
    assert FolderBoard().folders == []
