import argparse
import os
from dataclasses import dataclass, field
from typing import Optional

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVEL_ENV_VAR = "CALCULATOR_LOG_LEVEL"


def _default_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    return level if level in LOG_LEVELS else "WARNING"


@dataclass
class ReplConfig:
    prompt: str = "calc> "
    log_level: str = field(default_factory=_default_log_level)
    show_context: bool = False

    @classmethod
    def from_args(cls, argv: Optional[list[str]] = None) -> "ReplConfig":
        defaults = cls()
        parser = argparse.ArgumentParser(prog="calc", description="Integer arithmetic calculator")
        parser.add_argument("--prompt", default=defaults.prompt, help="Prompt printed before each line.")
        parser.add_argument(
            "--log-level",
            default=defaults.log_level,
            type=str.upper,
            choices=LOG_LEVELS,
            help=f"Logging level (default from ${LOG_LEVEL_ENV_VAR}, else WARNING).",
        )
        parser.add_argument(
            "--show-context",
            action="store_true",
            help="Print the source line with a caret under syntax errors.",
        )
        args = parser.parse_args(argv)
        return cls(prompt=args.prompt, log_level=args.log_level, show_context=args.show_context)
