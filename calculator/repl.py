import logging
import sys
from typing import Iterable, Optional, TextIO

from calculator.config import ReplConfig
from calculator.errors import CalcSyntaxError, highlight
from calculator.runtime import CalcRuntimeError, calculate

logger = logging.getLogger(__name__)


def evaluate_line(code: str, config: ReplConfig) -> str:
    """Result or diagnostic for one line, ready to be printed"""
    try:
        return str(calculate(code))
    except CalcSyntaxError as e:
        if config.show_context:
            return f"{e}\n{highlight(code, e.pos)}"
        return str(e)
    except CalcRuntimeError as e:
        return f"Runtime error: {e}"
    except RecursionError:
        logger.debug("recursion limit hit on %d characters of input", len(code))
        return "Expression is nested too deeply"


def run(lines: Iterable[str], out: TextIO, config: ReplConfig) -> None:
    lines = iter(lines)
    while True:
        out.write(config.prompt)
        out.flush()

        code = next(lines, None)
        if code is None:
            out.write("\n")
            return

        code = code.rstrip("\r\n")
        if not code:
            continue

        out.write(evaluate_line(code, config) + "\n")


def main(argv: Optional[list[str]] = None) -> int:
    config = ReplConfig.from_args(argv)
    logging.basicConfig(level=config.log_level, stream=sys.stderr)
    logger.debug("starting with %s", config)
    run(sys.stdin, sys.stdout, config)
    return 0
