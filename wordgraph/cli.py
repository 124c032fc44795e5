"""
Command-line front end for the word graph.

Usage:
    python -m wordgraph corpus.txt bridge quick jumps
    python -m wordgraph corpus.txt generate "quick jumps over lazy dog"
    python -m wordgraph corpus.txt path quick dog
    python -m wordgraph corpus.txt pagerank fox --idf
    python -m wordgraph corpus.txt rank --top 10
    python -m wordgraph corpus.txt walk --delay
    python -m wordgraph corpus.txt dot --path quick dog -o graph.dot
    python -m wordgraph corpus.txt export -o graph.json
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import WordGraphConfig, get_default_config
from .session import Session
from .constants import (
    MSG_GRAPH_BUILT,
    MSG_READ_FAILED,
    MSG_PAGERANK_VALUE,
    MSG_WALK_PATH,
    MSG_WALK_STOPPED,
    MSG_EMPTY_GRAPH_RENDER,
)

logger = logging.getLogger(__name__)

# How often the foreground loop wakes up while a walk runs
_WALK_POLL_SECONDS = 0.1


def read_corpus(filepath: str) -> str:
    """Read a corpus file as UTF-8."""
    with open(filepath, 'r', encoding='utf-8') as f:
        return f.read()


def _configure_logging(verbose: bool) -> None:
    level_name = os.getenv("WORDGRAPH_LOG_LEVEL", "DEBUG" if verbose else "WARNING")
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordgraph',
        description='Analyse the word adjacency graph of a text file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s story.txt bridge new life       # Bridge words from "new" to "life"
  %(prog)s story.txt generate "seek to explore new life"
  %(prog)s story.txt path to              # Shortest paths from "to" to every word
  %(prog)s story.txt pagerank new --idf
  %(prog)s story.txt walk --delay --seed 7
        """
    )
    parser.add_argument('file', help='UTF-8 text file to build the graph from')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for bridge choice and walks')
    default_log = get_default_config().walk_log_path
    parser.add_argument('--walk-log', default=default_log,
                        help=f'Random walk log file (default: {default_log})')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose logging')
    # --seed may also follow generate/walk; SUPPRESS leaves a root-level value in place
    seeded = argparse.ArgumentParser(add_help=False)
    seeded.add_argument('--seed', type=int, default=argparse.SUPPRESS,
                        help='Random seed for bridge choice and walks')

    subparsers = parser.add_subparsers(dest='command', required=True)

    bridge_parser = subparsers.add_parser('bridge', help='Query bridge words')
    bridge_parser.add_argument('word1')
    bridge_parser.add_argument('word2')

    generate_parser = subparsers.add_parser('generate', parents=[seeded],
                                            help='Insert bridge words into text')
    generate_parser.add_argument('text', nargs='+')

    path_parser = subparsers.add_parser('path', help='All shortest paths')
    path_parser.add_argument('word1')
    path_parser.add_argument('word2', nargs='?', default=None)

    pagerank_parser = subparsers.add_parser('pagerank', help='PageRank of a word')
    pagerank_parser.add_argument('word')
    pagerank_parser.add_argument('--idf', action='store_true', help='IDF-seeded PageRank')

    rank_parser = subparsers.add_parser('rank', help='Words with the highest PageRank')
    rank_parser.add_argument('--idf', action='store_true', help='IDF-seeded PageRank')
    rank_parser.add_argument('--top', '-n', type=int, default=10,
                             help='Number of words to show (default: 10)')

    walk_parser = subparsers.add_parser('walk', parents=[seeded],
                                        help='Random walk (Ctrl-C to stop)')
    walk_parser.add_argument('--delay', action='store_true',
                             help='Pause between steps')

    dot_parser = subparsers.add_parser('dot', help='Graphviz DOT source')
    dot_parser.add_argument('--path', nargs=2, metavar=('WORD1', 'WORD2'),
                            help='Highlight the shortest paths between two words')
    dot_parser.add_argument('--output', '-o', help='Write to file instead of stdout')

    export_parser = subparsers.add_parser('export', help='JSON node/edge export')
    export_parser.add_argument('--output', '-o', required=True, help='Output JSON file')
    export_parser.add_argument('--pagerank', action='store_true',
                               help='Include PageRank per word')

    return parser


def run_walk(session: Session, walk_delay: bool) -> str:
    """
    Run a walk in the background and cancel it on Ctrl-C.

    Returns:
        The line to print
    """
    walker = session.start_walk(walk_delay=walk_delay)
    try:
        while walker.join(_WALK_POLL_SECONDS) is None:
            pass
    except KeyboardInterrupt:
        session.cancel_walk()
        result = session.wait_walk()
        message = result.message if result is not None else ""
        return f"{MSG_WALK_STOPPED}\n{MSG_WALK_PATH.format(path=message)}"
    return MSG_WALK_PATH.format(path=walker.result.message)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        text = read_corpus(args.file)
    except OSError as exc:
        print(MSG_READ_FAILED.format(cause=exc), file=sys.stderr)
        return 1

    config = WordGraphConfig(random_seed=args.seed, walk_log_path=args.walk_log)
    session = Session.from_text(text, config=config)
    if args.verbose:
        print(MSG_GRAPH_BUILT, file=sys.stderr)

    if args.command == 'bridge':
        print(session.query_bridge_words(args.word1, args.word2))
    elif args.command == 'generate':
        print(session.generate_new_text(' '.join(args.text)))
    elif args.command == 'path':
        print(session.calc_shortest_path(args.word1, args.word2 or None))
    elif args.command == 'pagerank':
        word = session.tokenizer.normalize(args.word)
        print(MSG_PAGERANK_VALUE.format(word=word, rank=session.cal_page_rank(word, use_idf=args.idf)))
    elif args.command == 'rank':
        table = session.page_rank_table(use_idf=args.idf)
        ranked = sorted(table.items(), key=lambda item: (-item[1], item[0]))
        for word, rank in ranked[:args.top]:
            print(f"{word:<20} {rank:.6f}")
    elif args.command == 'walk':
        print(run_walk(session, args.delay))
    elif args.command == 'dot':
        if session.graph.is_empty():
            print(MSG_EMPTY_GRAPH_RENDER, file=sys.stderr)
            return 1
        highlight = session.shortest_path_report(*args.path) if args.path else None
        source = session.to_dot(highlight=highlight)
        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(source + '\n')
        else:
            print(source)
    elif args.command == 'export':
        session.export_graph(args.output, include_pagerank=args.pagerank)

    return 0


if __name__ == '__main__':
    sys.exit(main())
