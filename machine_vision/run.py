#!/usr/bin/env python
"""
Command-line runner for the vision demos.

Examples:
    python -m machine_vision.run colors photo.png --min-percent 20
    python -m machine_vision.run barcode labels/*.jpg --save-dir reports
    python -m machine_vision.run objects scene.png --template template.png
"""

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from machine_vision.config import DEFAULT_MIN_PERCENT, DEFAULT_TEMPLATE_PATH
from machine_vision.utils.file_selector import validate_file
from machine_vision.utils.image_io import ImageLoadError
from machine_vision.utils.results import format_stats, format_table, save_results

logger = logging.getLogger(__name__)

DEMOS = ("colors", "barcode", "objects")


def create_analyzer(demo, args):
    """
    Build the analysis callable for a demo.

    Args:
        demo (str): One of DEMOS
        args (argparse.Namespace): Parsed arguments

    Returns:
        callable: Function taking an image path and returning a result
    """
    if demo == "colors":
        from machine_vision.colors_thresholding import analyze_image
        return lambda path: analyze_image(path, min_percent=args.min_percent)
    elif demo == "barcode":
        from machine_vision.barcode_reader import analyze_image
        return analyze_image
    elif demo == "objects":
        if not args.template:
            raise ValueError("The objects demo needs --template or MV_TEMPLATE_PATH")
        from machine_vision.multiple_objects import analyze_image
        return lambda path: analyze_image(path, args.template)
    else:
        raise ValueError(f"Unknown demo: {demo}")


def parse_args(argv=None):
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(description='Run machine vision demos on image files')

    parser.add_argument('demo', choices=DEMOS,
                        help='Demo to run')
    parser.add_argument('images', nargs='+',
                        help='Image files (png, jpg, jpeg)')
    parser.add_argument('-p', '--min-percent', type=float, default=DEFAULT_MIN_PERCENT,
                        help=f'Minimum color coverage for colors demo (default: {DEFAULT_MIN_PERCENT})')
    parser.add_argument('-t', '--template', type=str, default=DEFAULT_TEMPLATE_PATH,
                        help='Template image for objects demo (default: $MV_TEMPLATE_PATH)')
    parser.add_argument('-o', '--save-dir', type=str, default=None,
                        help='Directory for text reports and annotated images')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point.

    Returns:
        int: Exit code, 1 if any image failed
    """
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        analyze = create_analyzer(args.demo, args)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    failures = 0
    images = args.images
    progress = tqdm(images, desc=args.demo, unit="image", disable=len(images) < 2)

    for image in progress:
        path = Path(image)
        if not validate_file(path):
            logger.error("Invalid file type or missing file: %s", path)
            failures += 1
            continue

        try:
            result = analyze(path)
        except ImageLoadError as e:
            logger.error("%s", e)
            failures += 1
            continue
        except Exception:
            logger.exception("Error processing %s", path)
            failures += 1
            continue

        print(f"\n{format_table(result)}")

        if args.save_dir:
            report_path = Path(args.save_dir) / f"{path.stem}_{args.demo}.txt"
            try:
                save_results(report_path, format_stats(result), result.annotated_image)
            except OSError as e:
                logger.error("Could not save results for %s: %s", path, e)
                failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
