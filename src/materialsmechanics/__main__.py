"""Development runner: evaluate every module for the default state."""
import logging

from materialsmechanics.analysis.solver import solve_all
from materialsmechanics.logging_config import setup_logging
from materialsmechanics.model.state import SimulationState
from materialsmechanics.narration import describe

logger = logging.getLogger("materialsmechanics")


def main() -> None:
    setup_logging(level=logging.INFO)

    state = SimulationState()
    results = solve_all(state)

    for module, result in results.items():
        logger.info(f"{module}: {result}")

    logger.info("Narration context for the active module:\n" + describe(state, result=results[state.active_module]))


if __name__ == "__main__":
    main()
