#!/usr/bin/env python3
"""
Command-line interface for shapegraph.

Usage:
    python -m shapegraph inspect diagram.json
    python -m shapegraph normalize diagram.json -o normalized.json
    python -m shapegraph xpdl diagram.json -o diagram.xpdl
"""

import argparse
import sys

from .shared import ShapeGraphError, get_logger
from .services.json_io import DiagramBuilder, DiagramSerializer
from .services.xpdl import XPDLExporter
from .services.analysis import summarize

logger = get_logger(__name__)


def _builder(args) -> DiagramBuilder:
    return DiagramBuilder(strict_references=False if args.lenient else None)


def inspect_command(args):
    """Print a summary of a diagram"""
    diagram = _builder(args).parse_file(args.path)
    summary = summarize(diagram)

    print(f"Diagram {summary['resource_id']}")
    print(f"  Shapes:      {summary['shape_count']}")
    print(f"  Flow edges:  {summary['flow_edge_count']}")
    print(f"  Max depth:   {summary['max_depth']}")
    print(f"  Acyclic:     {'yes' if summary['is_acyclic'] else 'no'}")
    print("  Stencils:")
    for stencil_id, count in summary['stencils'].items():
        print(f"    {stencil_id}: {count}")
    if summary['asymmetric_edges']:
        print(f"  Asymmetric edges: {len(summary['asymmetric_edges'])}")
    return 0


def normalize_command(args):
    """Re-serialize a diagram in canonical form"""
    diagram = _builder(args).parse_file(args.path)
    serializer = DiagramSerializer(indent=args.indent)

    if args.output:
        serializer.write_file(diagram, args.output)
        print(f"Wrote {args.output}")
    else:
        print(serializer.to_json(diagram))
    return 0


def xpdl_command(args):
    """Export the XPDL fragment of a diagram"""
    diagram = _builder(args).parse_file(args.path)
    exporter = XPDLExporter()

    if args.output:
        exporter.write_file(diagram, args.output)
        print(f"Wrote {args.output}")
    else:
        sys.stdout.write(exporter.to_xml(diagram).decode(exporter.settings.xml_encoding))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='shapegraph',
        description='Inspect and convert diagrams sent by the browser editor'
    )
    parser.add_argument('--lenient', action='store_true',
                        help='Skip edge references to unknown shapes instead of failing')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    inspect_parser = subparsers.add_parser('inspect', help='Summarize a diagram')
    inspect_parser.add_argument('path', help='Path to diagram JSON')
    inspect_parser.set_defaults(func=inspect_command)

    normalize_parser = subparsers.add_parser('normalize', help='Re-serialize a diagram (property values are written as strings)')
    normalize_parser.add_argument('path', help='Path to diagram JSON')
    normalize_parser.add_argument('-o', '--output', help='Output file (default: stdout)')
    normalize_parser.add_argument('--indent', type=int, default=None, help='JSON indentation')
    normalize_parser.set_defaults(func=normalize_command)

    xpdl_parser = subparsers.add_parser('xpdl', help='Export associations and multi-instance loops as XPDL')
    xpdl_parser.add_argument('path', help='Path to diagram JSON')
    xpdl_parser.add_argument('-o', '--output', help='Output file (default: stdout)')
    xpdl_parser.set_defaults(func=xpdl_command)

    return parser


def main(argv=None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, 'func', None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (ShapeGraphError, OSError) as e:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
