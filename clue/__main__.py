"""
CLI entry point. Run as: python -m clue --game <name>
"""

import argparse
import logging
import sys

from .core.errors import ClueError
from .games import GAMES, Transcript, replay
from .notepad import print_knowledge, print_notepad
from .reasoner import ClueReasoner


def main(argv=None):
    parser = argparse.ArgumentParser(description="Propositional Clue reasoner")
    parser.add_argument(
        "--game",
        choices=list(GAMES.keys()),
        default="classic",
        help="Which built-in game to replay",
    )
    parser.add_argument("--transcript", type=str, default=None,
                        help="Replay a JSON transcript instead of a built-in game")
    parser.add_argument("--save", type=str, default=None,
                        help="Write the replayed transcript to a JSON file")
    parser.add_argument("--no-accusations", action="store_true",
                        help="Skip accusation events (show what play alone deduces)")
    parser.add_argument("--clauses", action="store_true",
                        help="List every clause in the knowledge base")
    parser.add_argument("--log-level", type=str.upper, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level for the reasoner")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.transcript:
            transcript = Transcript.load(args.transcript)
            print(f"Loaded transcript from {args.transcript} "
                  f"({len(transcript.events)} events)")
        else:
            transcript = GAMES[args.game]["make_transcript"]()
            print(f"Game: {args.game}")

        if transcript.description:
            print(f"  {transcript.description}")

        with ClueReasoner(transcript.config) as reasoner:
            try:
                replay(
                    reasoner, transcript,
                    accusations=not args.no_accusations,
                    verbose=not args.quiet,
                )
            except KeyboardInterrupt:
                print("\nInterrupted.")

            print_notepad(reasoner.snapshot(),
                          title=f"Notepad after {reasoner.events} events")
            if args.clauses:
                print_knowledge(reasoner.clauses, reasoner.registry)

        if args.save:
            transcript.save(args.save)
            print(f"Transcript saved to {args.save}")
    except (ClueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
