from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, override

from rich.logging import RichHandler

from fish_river_simulator.core.types import FISH_COLORS, NEUTRAL_FACES

if TYPE_CHECKING:
    from fish_river_simulator.core.state import LogContext

# Precompiled regex patterns for highlighting
FISH_PATTERN = re.compile(rf"\b({'|'.join(map(re.escape, FISH_COLORS))})\b")
NEUTRAL_PATTERN = re.compile(rf"\b({'|'.join(map(re.escape, NEUTRAL_FACES))})\b")


# Simple color theme for Rich
COLOR = {
    "move": "bold green",
    "boat": "bold magenta",
    "warning": "bold red",
    "free": "bold cyan",
    "neutral": "dim",
    "prefix": "dim",
    "level": "bold",
}

# Rich style per fish, shared with the board renderer
FISH_STYLE = {
    "Blue": "bold blue",
    "Orange": "bold dark_orange",
    "Yellow": "bold yellow",
    "Pink": "bold magenta",
}


class ContextFilter(logging.Filter):
    """Inject the emitting engine's runtime context into every log record."""

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        logctx: LogContext | None = getattr(record, "log_context", None)
        if logctx is None:
            return True
        record.total_round = logctx.total_round
        record.round_log_count = logctx.round_log_count
        record.roll_repr = logctx.last_roll_repr
        record.engine_id = logctx.engine_id
        logctx.inc_log_count()
        return True


class RichMarkupFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        total_round = getattr(record, "total_round", 0)
        round_log_count = getattr(record, "round_log_count", 0)
        roll_repr = getattr(record, "roll_repr", "_")

        engine_id = getattr(record, "engine_id", 0)
        prefix = f"{engine_id} {total_round}.{roll_repr}.{round_log_count}"

        message = record.getMessage()
        styled = message

        # Movement
        styled = re.sub(r"\bMove\b", f"[{COLOR['move']}]Move[/{COLOR['move']}]", styled)
        styled = re.sub(r"\bBoat\b", f"[{COLOR['boat']}]Boat[/{COLOR['boat']}]", styled)
        styled = re.sub(r"\bFree\b", f"[{COLOR['free']}]Free[/{COLOR['free']}]", styled)

        # !!! and Caught
        styled = re.sub(
            r"\bCaught\b",
            f"[{COLOR['warning']}]Caught[/{COLOR['warning']}]",
            styled,
        )
        styled = re.sub(r"!!!", f"[{COLOR['warning']}]!!![/{COLOR['warning']}]", styled)

        styled = FISH_PATTERN.sub(lambda m: f"[{FISH_STYLE[m[1]]}]{m[1]}[/]", styled)
        styled = NEUTRAL_PATTERN.sub(
            rf"[{COLOR['neutral']}]\1[/{COLOR['neutral']}]", styled
        )

        if record.levelno >= logging.WARNING:
            styled = f"[{COLOR['warning']}]{styled}[/{COLOR['warning']}]"

        return f"[{COLOR['prefix']}]{prefix}[/{COLOR['prefix']}]  {styled}"


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger()
    logger.setLevel(level)
    handler = RichHandler(markup=True, show_path=False, show_time=False)
    handler.addFilter(ContextFilter())
    handler.setFormatter(RichMarkupFormatter())
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False


def silence_engine_logs() -> None:
    logging.getLogger("fish_river").setLevel(logging.CRITICAL)
