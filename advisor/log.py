"""Console logging setup shared by the CLIs."""

import sys

from loguru import logger


def turn_filter(debug_from_turn: int = 0):
    """
    Drop DEBUG records tagged with a game turn earlier than `debug_from_turn`.

    GameSession tags everything logged while it works on a turn with
    `extra["turn"]`; untagged records always pass.
    """
    def _filter(record) -> bool:
        if record["level"].name != "DEBUG":
            return True
        turn = record["extra"].get("turn")
        return turn is None or turn >= debug_from_turn

    return _filter


def setup_logger(verbose: bool = False, debug: bool = False, debug_from_turn: int = 0, sink=None) -> int:
    """Route loguru to stderr: WARNING by default, INFO with --verbose, DEBUG with --debug."""
    level = "DEBUG" if debug else ("INFO" if verbose else "WARNING")
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format="<level>{level: <8}</level> | {message}",
        filter=turn_filter(debug_from_turn),
    )
