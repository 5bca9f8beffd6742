#!/usr/bin/env python
"""
Command-line interface for Campus Coffee

Usage:
    python cli.py import 5589879349 --output pos.json
    python cli.py import 5589879349 1234567 4567890
    python cli.py convert node.xml --node-id 5589879349
"""

import os
import sys
import json
import argparse
from xml.etree.ElementTree import ParseError

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from loguru import logger
from campuscoffee.config import get_config, validate_config
from campuscoffee.exceptions import CampusCoffeeError
from campuscoffee.osm import OsmApiClient, OsmToPosConverter, OsmXmlParser
from campuscoffee.repository import InMemoryPosRepository
from campuscoffee.service import PosService


def setup_logging(verbose: bool = False):
    """Configure logging"""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )


def write_output(data, output_path=None):
    """Print JSON to stdout or write it to output_path"""
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info(f"✓ Saved: {output_path}")
    else:
        print(text)


def cmd_import(args):
    """Import POS from OpenStreetMap nodes"""
    setup_logging(args.verbose)

    try:
        validate_config(get_config())
    except ValueError as e:
        logger.error(str(e))
        return 1

    imported = []
    failed = 0

    with OsmApiClient() as osm_client:
        service = PosService(InMemoryPosRepository(), osm_client)
        for i, node_id in enumerate(args.node_ids, 1):
            logger.info(f"[{i}/{len(args.node_ids)}] OSM node {node_id}")
            try:
                pos = service.import_from_osm_node(node_id)
                imported.append(pos.model_dump(mode="json"))
                logger.info(f"  ✓ {pos.name} ({pos.type.value})")
            except (CampusCoffeeError, ValueError) as e:
                logger.error(f"  ✗ Failed: {e}")
                failed += 1

    if imported:
        write_output(imported[0] if len(args.node_ids) == 1 else imported, args.output)

    if len(args.node_ids) > 1:
        logger.info(f"Complete: {len(imported)} imported, {failed} failed")
    return 0 if failed == 0 else 1


def cmd_convert(args):
    """Convert a locally stored OSM node XML document to a POS"""
    setup_logging(args.verbose)

    if not os.path.exists(args.input):
        logger.error(f"Input file not found: {args.input}")
        return 1

    with open(args.input, "r", encoding="utf-8") as f:
        xml = f.read()

    try:
        node = OsmXmlParser.parse_node(xml, args.node_id)
        pos = OsmToPosConverter().convert(node)
    except CampusCoffeeError as e:
        logger.error(f"Failed to convert {args.input}: {e}")
        return 1
    except (ParseError, ValueError) as e:
        logger.error(f"Failed to parse {args.input}: {e}")
        return 1

    write_output(pos.model_dump(mode="json"), args.output)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Campus Coffee CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Import a POS from OpenStreetMap:
    python cli.py import 5589879349 --output pos.json

  Convert a saved OSM API response without network access:
    python cli.py convert node.xml --node-id 5589879349
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Import command
    import_parser = subparsers.add_parser("import", help="Import POS from OpenStreetMap node IDs")
    import_parser.add_argument("node_ids", type=int, nargs="+", help="OSM node IDs")
    import_parser.add_argument("--output", "-o", help="Output JSON file")
    import_parser.set_defaults(func=cmd_import)

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert an OSM node XML file to a POS")
    convert_parser.add_argument("input", help="OSM API XML file")
    convert_parser.add_argument("--node-id", type=int, required=True, help="OSM node ID")
    convert_parser.add_argument("--output", "-o", help="Output JSON file")
    convert_parser.set_defaults(func=cmd_convert)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
