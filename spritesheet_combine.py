#!/usr/bin/env python3
"""
SpriteSheet Combine - command line entry point
Combines the images described by a layout file into one PNG sprite sheet.
"""

import argparse
import logging
import sys
from pathlib import Path

from spritesheet_core import CombineError, combine_sync
from spritesheet_core.config import load_config
from spritesheet_core.layout import dump_layout, load_layout
from spritesheet_core.logger import generate_log_filename, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='spritesheet-combine',
        description='Combine positioned images into a single PNG sprite sheet.'
    )
    parser.add_argument('layout', type=Path, help='Layout JSON describing each image')
    parser.add_argument('-o', '--output', type=Path, help='Output PNG path')
    parser.add_argument('--config', type=Path, help='JSON config file')
    parser.add_argument('--base-dir', type=Path, help='Directory for relative image paths')
    parser.add_argument('--log-dir', type=Path, help='Directory for the run summary log')
    parser.add_argument('--resolved-layout', type=Path,
                        help='Write the layout with decoded image sizes to this path')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv=None) -> int:
    """Main entry point for SpriteSheet Combine."""
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
    except CombineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    level = logging.DEBUG if args.verbose else getattr(logging, str(config['logging']['level']).upper(), logging.INFO)
    setup_logging(level)
    logger = logging.getLogger('spritesheet_combine')

    output_path = args.output or Path(config['output']['path'])
    base_dir = args.base_dir
    if base_dir is None and args.config is not None and config['images']['base_dir'] is not None:
        base_dir = args.config.parent / config['images']['base_dir']

    log_dir = args.log_dir or config['output']['log_dir']
    log_path = Path(log_dir) / generate_log_filename(output_path.stem) if log_dir else None

    try:
        descriptors = load_layout(args.layout, base_dir=base_dir)
        records = combine_sync(descriptors, output_path, log_path=log_path)
        if args.resolved_layout:
            dump_layout(records, args.resolved_layout)
            logger.info(f"Resolved layout written: {args.resolved_layout}")
    except CombineError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Sprite sheet written to {output_path} ({len(records)} images)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
