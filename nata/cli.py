"""Command-line kinship lookup - works without a UI.

    nata resolve SOURCE_ID TARGET_ID [--data family.json] [--phrase]
    nata labels [--data family.json]
"""

import argparse
import asyncio
import logging
import sys

from nata.agents.phrasing_agent import PhrasingAgent
from nata.config import settings
from nata.graph.relation_store import RelationStore
from nata.kinship.engine import KinshipEngine
from nata.kinship.errors import NoPathFound, PersonNotFound
from nata.kinship.relation_types import label

NOT_FOUND_MESSAGE = "नाता भेटिएन।"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nata", description="Nepali kinship finder")
    parser.add_argument("--data", default=settings.kinship.data_path,
                        help="JSON file with members and relations")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser("resolve", help="What is TARGET to SOURCE?")
    resolve.add_argument("source")
    resolve.add_argument("target")
    resolve.add_argument("--phrase", action="store_true",
                         help="Ask the LLM for a phrased answer (falls back on failure)")
    resolve.add_argument("--timeout", type=float, default=None)

    sub.add_parser("labels", help="Show both labels of every stored relation")
    return parser


def _engine(args, phrasing: bool = False) -> KinshipEngine:
    store = RelationStore.load_json(args.data)
    agent = None
    if phrasing:
        agent = PhrasingAgent()
    return KinshipEngine(store, phrasing_agent=agent)


def cmd_resolve(args) -> int:
    engine = _engine(args, phrasing=args.phrase or settings.phrasing.enabled)
    graph = engine.snapshot()

    try:
        outcome = asyncio.run(engine.resolve_phrased(args.source, args.target, timeout=args.timeout))
    except PersonNotFound as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    if isinstance(outcome, NoPathFound):
        print(NOT_FOUND_MESSAGE)
        return 1

    result = outcome.result
    source = graph.person(args.source)
    target = graph.person(args.target)
    print(f"{source.name} को {outcome.display} {target.name} हुनुहुन्छ।")
    print(f"   Term: {result.term} [{result.confidence.value}]")
    if result.path:
        print(f"   Path: {' -> '.join(label(t) for t in result.path)}")
    if outcome.error:
        print(f"   Phrasing unavailable: {outcome.error}")
    return 0


def cmd_labels(args) -> int:
    engine = _engine(args)
    graph = engine.snapshot()
    for edge in engine.edge_labels():
        src = graph.person(edge.from_id)
        dst = graph.person(edge.to_id)
        print(f"{src.name} -> {dst.name}: {edge.forward}  |  {dst.name} -> {src.name}: {edge.reverse}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    if args.command == "resolve":
        return cmd_resolve(args)
    return cmd_labels(args)


if __name__ == "__main__":
    sys.exit(main())
