import argparse
import logging
import sys
from typing import Callable, Optional

from config import REPL_CONFIG
from errors import LexerError
from evaluator import Computed, Empty, Outcome, evaluate_line
from grammar import EOF, to_json
import scanner

logger = logging.getLogger(__name__)


def render(outcome: Outcome) -> Optional[str]:
    if isinstance(outcome, Computed):
        return str(outcome.value)
    if isinstance(outcome, Empty):
        return None
    return outcome.reason


def repl(prompt: str, terminator: str, read: Callable[[str], str] = input, write=print):
    while True:
        try:
            text = read(prompt)
        except (EOFError, KeyboardInterrupt):
            logger.debug("input closed")
            break
        line = render(evaluate_line(text + terminator))
        if line is not None:
            write(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Left-to-right integer calculator"
    )
    parser.add_argument("-c", "--command", help="Evaluate one expression and exit")
    parser.add_argument("--prompt", default=REPL_CONFIG["prompt"], help="Prompt shown before each line")
    parser.add_argument("--log-level", default=REPL_CONFIG["log_level"],
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--tokens", help="Print the scanned tokens as JSON", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=REPL_CONFIG["log_format"])
    terminator = EOF.image

    if args.command is None:
        repl(args.prompt, terminator)
        return 0

    text = args.command + terminator
    if args.tokens:
        try:
            print(to_json(scanner.scan(text)))
        except LexerError as e:
            print(e)
            return 1
    outcome = evaluate_line(text)
    line = render(outcome)
    if line is not None:
        print(line)
    return 0 if isinstance(outcome, (Computed, Empty)) else 1


if __name__ == "__main__":
    sys.exit(main())
