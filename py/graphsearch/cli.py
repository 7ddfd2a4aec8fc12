#!/usr/bin/env python3
"""CLI wrapper for the graph search library.

Reads a JSON array ``[start, adjacency, goal]`` from stdin and prints the
JSON result of the requested search.
"""
import argparse
import json
import logging
import os
import sys

import graphsearch


def _weighted(adjacency):
    """JSON has no tuples; turn [node, weight] arrays into pairs."""
    if not isinstance(adjacency, dict):
        return adjacency
    weighted = {}
    for node, edges in adjacency.items():
        if not all(isinstance(edge, list) and len(edge) == 2 for edge in edges):
            raise TypeError(f"edges of {node!r} must be [node, weight] pairs")
        weighted[node] = [graphsearch.VertexDistancePair(*edge) for edge in edges]
    return weighted


COMMANDS = {
    'bfs': lambda args: graphsearch.breadth_first_search(*args),
    'dfs': lambda args: graphsearch.depth_first_search(*args),
    'shortest_distance': lambda args: graphsearch.dijkstra_shortest_path(
        args[0], _weighted(args[1]), args[2]),
}
COMMANDS['breadth_first_search'] = COMMANDS['bfs']
COMMANDS['depth_first_search'] = COMMANDS['dfs']
COMMANDS['dijkstra'] = COMMANDS['shortest_distance']


def _fail(message):
    print(json.dumps({"error": message}))
    sys.exit(1)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Graph search over JSON input')
    parser.add_argument('command', nargs='?', help='Search to run')
    parser.add_argument('--log-level', type=str, help='Logging level for stderr output')
    args = parser.parse_args(argv)

    level = args.log_level or os.environ.get('GRAPHSEARCH_LOG_LEVEL', 'WARNING')
    try:
        logging.basicConfig(level=level.upper(), stream=sys.stderr)
    except ValueError:
        _fail(f"Unknown log level: {level}")

    if not args.command:
        _fail("No command provided")
    if args.command not in COMMANDS:
        _fail(f"Unknown command: {args.command}")

    try:
        call_args = json.loads(sys.stdin.read())
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON input: {e}")
    if not isinstance(call_args, list) or len(call_args) != 3:
        _fail("Expected a JSON array [start, adjacency, goal]")

    try:
        result = COMMANDS[args.command](call_args)
    except graphsearch.GraphSearchError as e:
        _fail(str(e))
    except TypeError as e:
        _fail(f"Malformed input: {e}")
    print(json.dumps(result))


if __name__ == "__main__":
    main()
