import random

from rich.console import Console

from fish_river_simulator.core.state import LogContext
from fish_river_simulator.engine import ENGINE_ID_COUNTER
from fish_river_simulator.engine.board import LAYOUT_DEFINITIONS, build_state
from fish_river_simulator.engine.game_engine import GameEngine
from fish_river_simulator.engine.logging import configure_logging
from fish_river_simulator.engine.rendering import render_board

if __name__ == "__main__":
    configure_logging()

    engine_id = next(ENGINE_ID_COUNTER)
    eng = GameEngine(
        build_state(LAYOUT_DEFINITIONS["standard"]()),
        random.Random(1),
        log_context=LogContext(
            engine_id=engine_id,
        ),
    )

    result = eng.run_game()
    Console().print(render_board(eng.state))
    Console().print(f"Winner: {result.outcome} after {result.rounds} rounds")
