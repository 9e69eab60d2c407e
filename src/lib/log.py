"""
Centralized logging using Loguru with context-aware verbosity.

LOG() respects the verbosity of whichever ProgramState the current context
is connected to, so library code can log without having state passed in.
When no state is connected (the renderer or extractor called directly from
another application) LOG() stays silent; warnings about recovered failures
go through the loguru ``logger`` directly and are always emitted.

Usage:
    from poddown.lib.log import LOG, logger, state_connectToLogger

    state_connectToLogger(state)

    LOG("Converted DBI.pod", level=1)
    LOG("Parsed 4 usage examples", level=2)
    LOG("Code block at offset 120 matched ['use', 'arrow']", level=3)
    logger.warning("Failed to render POD: ...")
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{module: <10}</cyan> "
    "<cyan>{function: <24}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: ProgramState instance with a verbosity attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru arguments

    Verbosity levels:
        1 = Normal output (default)
        2 = Verbose (-v)
        3 = Debug (-vv or higher)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
