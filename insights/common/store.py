"""
Board Store

Item store adapters consumed by the engine. The engine only needs
list_items(board_id); the rest is the generic upsert/fetch surface used by
the CLI and the HTTP service.

The JSON store is persisted to ~/.canvas/boards.json by default:

    {"boards": [{"id": "...", "name": "...", "items": [{...}, ...]}]}
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from pydantic import ValidationError

from .schemas import Board, CanvasItem

logger = logging.getLogger("canvas.common.store")


class ItemStore(Protocol):
    """Query surface the engine consumes"""

    def list_items(self, board_id: str) -> List[CanvasItem]:
        ...


class InMemoryBoardStore:
    """
    Board store held in memory.

    list_items returns a new list of frozen items, so callers get a stable
    snapshot even if the board is replaced while they iterate.
    """

    def __init__(self, boards: Optional[List[Board]] = None):
        self._boards: Dict[str, Board] = {}
        for board in boards or []:
            self._boards[board.id] = board

    def list_boards(self) -> List[Board]:
        """All boards in insertion order"""
        return list(self._boards.values())

    def get_board(self, board_id: str) -> Board:
        """
        Fetch a board by id.

        Raises:
            KeyError: If no board has this id
        """
        board = self._boards.get(board_id)
        if board is None:
            raise KeyError(board_id)
        return board

    def list_items(self, board_id: str) -> List[CanvasItem]:
        return list(self.get_board(board_id).items)

    def upsert_board(self, board: Board) -> None:
        """Insert a board or replace the one with the same id"""
        self._boards[board.id] = board.model_copy(update={"items": list(board.items)})

    def delete_board(self, board_id: str) -> bool:
        """Remove a board; returns False if it did not exist"""
        return self._boards.pop(board_id, None) is not None


def _parse_board(raw: Any) -> Optional[Board]:
    """
    Parse one stored board, skipping items that cannot be parsed.

    Returns None (and logs) only when the board itself has no usable id.
    """
    if not isinstance(raw, dict) or raw.get("id") in (None, ""):
        logger.warning("Skipping stored board without an id: %r", raw)
        return None

    raw_items = raw.get("items") or []
    if not isinstance(raw_items, list):
        logger.warning("Board %s: items is not a list, ignoring", raw["id"])
        raw_items = []

    items: List[CanvasItem] = []
    for index, raw_item in enumerate(raw_items):
        try:
            items.append(CanvasItem.model_validate(raw_item))
        except ValidationError as e:
            logger.warning("Board %s: skipping malformed item #%d: %s", raw["id"], index, e)

    name = raw.get("name")
    return Board(id=str(raw["id"]), name="" if name is None else str(name), items=items)


class JsonBoardStore(InMemoryBoardStore):
    """
    Board store persisted to a single JSON file.

    A missing file is an empty store. An unreadable file is logged and
    treated as empty. Malformed boards or items are logged and skipped one
    by one, so valid boards survive the next save.
    """

    def __init__(self, path: Path):
        super().__init__()
        self._path = Path(path)
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        """Load boards from disk"""
        if not self._path.exists():
            self._boards = {}
            return

        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Failed to load board store %s: %s", self._path, e)
            self._boards = {}
            return

        raw_boards = data.get("boards", []) if isinstance(data, dict) else []
        if not isinstance(raw_boards, list):
            logger.warning("Ignoring malformed boards list in %s", self._path)
            raw_boards = []

        self._boards = {}
        for raw in raw_boards:
            board = _parse_board(raw)
            if board is not None:
                self._boards[board.id] = board

    def _save(self) -> None:
        """Save boards to disk"""
        self._path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "boards": [
                board.model_dump(mode="json", by_alias=True)
                for board in self._boards.values()
            ]
        }

        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def upsert_board(self, board: Board) -> None:
        super().upsert_board(board)
        self._save()
        logger.debug("Saved board %s (%d items)", board.id, len(board.items))

    def delete_board(self, board_id: str) -> bool:
        removed = super().delete_board(board_id)
        if removed:
            self._save()
        return removed
