"""
Command line for the Letterboxed solver.

Usage:
    letterboxed solve -p <sides> [-w <wordlist>] [-b]
    letterboxed serve [--host <addr>] [--port <n>]

Examples:
    letterboxed solve -p abc,def,ghi,jkl -w /usr/share/dict/words
    python -m letterboxed solve -p wrd,lie,cht,sma --best-words -v
    letterboxed serve --port 8080
"""
import argparse
import logging
import sys

from letterboxed.puzzle import MalformedPuzzle
from letterboxed.report import format_report, solve_puzzle
from letterboxed.settings import settings
from letterboxed.solver import SearchLimitExceeded, load_wordlist

logger = logging.getLogger("letterboxed")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="letterboxed", description="Tool for solving the word game 'letterboxed'")
    subparsers = parser.add_subparsers(dest="command", required=True)

    solve = subparsers.add_parser("solve", help="Find solutions for a puzzle given a wordlist")
    solve.add_argument("-p", "--puzzle", required=True,
                       help="The puzzle: a comma-separated list of edges, e.g. 'abc,def,ghi,jkl'")
    solve.add_argument("-w", "--wordlist", default=str(settings.WORDLIST_PATH),
                       help=f"The wordlist file (default: {settings.WORDLIST_PATH})")
    solve.add_argument("-b", "--best-words", action="store_true", default=settings.SHOW_BEST_WORDS,
                       help="Also list the valid words that use the most distinct letters")
    solve.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                       help=f"Minimum word length (default: {settings.MIN_WORD_LENGTH})")
    solve.add_argument("--max-states", type=int, default=settings.MAX_STATES,
                       help="Abort the search after this many states (default: 0, unlimited)")
    solve.add_argument("-v", "--verbose", action="count", default=0,
                       help="Log solve stages (-v) or every rejected word and search layer (-vv)")

    serve = subparsers.add_parser("serve", help="Run the HTTP solver API")
    serve.add_argument("--host", default=settings.HOST,
                       help=f"Interface to bind (default: {settings.HOST})")
    serve.add_argument("--port", type=int, default=settings.PORT,
                       help=f"Port to listen on (default: {settings.PORT})")
    serve.add_argument("-v", "--verbose", action="count", default=0,
                       help="Log at INFO (-v) or DEBUG (-vv)")
    return parser


def _configure_logging(verbosity: int):
    if verbosity >= 2 or settings.DEBUG:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def run_solve(args: argparse.Namespace) -> int:
    try:
        wordlist = load_wordlist(args.wordlist)
    except FileNotFoundError:
        print(f"Error: wordlist {args.wordlist} does not exist", file=sys.stderr)
        return 1
    logger.info("Loaded %d words from %s", len(wordlist), args.wordlist)

    try:
        report = solve_puzzle(
            args.puzzle,
            wordlist,
            min_length=args.min_length,
            show_best_words=args.best_words,
            max_states=args.max_states,
        )
    except MalformedPuzzle as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except SearchLimitExceeded as e:
        print(f"Error: {e}", file=sys.stderr)
        return 3

    print(format_report(report, settings.PATH_SEPARATOR))
    return 0


def run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    logger.info("Serving on %s:%d", args.host, args.port)
    uvicorn.run("letterboxed.server:app", host=args.host, port=args.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    if args.command == "solve":
        return run_solve(args)
    if args.command == "serve":
        return run_serve(args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
