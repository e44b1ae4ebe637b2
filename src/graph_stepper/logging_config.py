"""
Centralized logging configuration for graph_stepper.

Step narration is the CLI's stdout product, so every handler installed here
writes to stderr. Anything not passed explicitly comes from the
environment-driven ``StepperConfig``.
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from graph_stepper.config import StepperConfig, config as default_config

PLAIN_FORMAT = "[%(asctime)s] %(levelname)-5s %(name)s: %(message)s"


def _build_handler(use_rich: bool) -> logging.Handler:
    if use_rich:
        handler = RichHandler(
            console=Console(file=sys.stderr),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        return handler

    # Plain lines for pipes and CI logs
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt="%H:%M:%S"))
    return handler


def setup_logging(
    level: Optional[str] = None,
    use_rich: Optional[bool] = None,
    settings: Optional[StepperConfig] = None,
) -> logging.Handler:
    """
    Install a single stderr handler on the root logger.

    Args:
        level: Log level name; defaults to ``settings.log_level``
        use_rich: Rich output or plain lines; defaults to ``settings.use_rich_logging``
        settings: Config to fall back on; the module-level config when omitted

    Returns:
        The handler now attached to the root logger
    """
    settings = settings or default_config
    level = (level or settings.log_level).upper()
    use_rich = settings.use_rich_logging if use_rich is None else use_rich
    numeric_level = getattr(logging, level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = _build_handler(use_rich)
    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(f"Logging configured: level={level}, rich={use_rich}")
    return handler
