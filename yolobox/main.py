#!/usr/bin/env python3
import argparse
import dataclasses
import logging
import sys

import numpy as np
import yaml

from yolobox.box_config import BoxSetConfig, parse_enum
from yolobox.box_error import BoxError
from yolobox.coord_type import CoordType
from yolobox.coordinate_system import CoordinateSystem
from yolobox.geometry import pairwise_iou


def load_config(config_path: str, config_class):
    """Load and parse a YAML config file into the specified dataclass."""
    try:
        with open(config_path, "r") as file:
            config_dict = yaml.safe_load(file)

        if not isinstance(config_dict, dict):
            logging.error("Config file must contain a mapping: %s", config_path)
            sys.exit(1)

        # Check for required fields
        missing_fields = [
            f.name
            for f in dataclasses.fields(config_class)
            if f.default is dataclasses.MISSING
            and f.default_factory is dataclasses.MISSING
            and f.name not in config_dict
        ]
        if missing_fields:
            logging.error(
                "Missing required fields in config: %s", ", ".join(missing_fields)
            )
            sys.exit(1)

        return config_class(**config_dict)
    except FileNotFoundError:
        logging.error("Config file not found: %s", config_path)
        sys.exit(1)
    except yaml.YAMLError:
        logging.error("Invalid YAML in config file: %s", config_path)
        sys.exit(1)
    except (TypeError, ValueError) as e:
        logging.error("Invalid config format: %s", e)
        sys.exit(1)


def load_boxes(config_path: str):
    """Build every box in the config, logging and skipping the ones that fail."""
    config = load_config(config_path, BoxSetConfig)
    boxes = []
    for box_config, result in zip(config.boxes, config.to_boxes()):
        if isinstance(result, BoxError):
            logging.warning("Skipping box %s: %s", box_config.name, result)
            continue
        boxes.append(result)
    logging.info("Loaded %i of %i boxes", len(boxes), len(config.boxes))
    return boxes


def describe(args):
    """Handle the describe subcommand."""
    for box in load_boxes(args.config):
        print(f"{box.name}: {box.description()}")


def convert(args):
    """Handle the convert subcommand."""
    coord_type = parse_enum(CoordType, args.coord_type, "coord_type")
    coord_system = parse_enum(CoordinateSystem, args.coord_system, "coord_system")

    failures = 0
    for box in load_boxes(args.config):
        raw = box.get_raw_bounding_box(coord_type, coord_system)
        if isinstance(raw, BoxError):
            logging.warning("Cannot convert box %s: %s", box.name, raw)
            failures += 1
            continue
        print(f"{box.name} {box.label} " + " ".join(f"{v:.6f}" for v in raw))

    if failures:
        sys.exit(1)


def iou(args):
    """Handle the iou subcommand."""
    boxes = load_boxes(args.config)
    if not boxes:
        logging.error("No valid boxes in %s", args.config)
        sys.exit(1)

    matrix = pairwise_iou(boxes, boxes)
    names = [box.name for box in boxes]
    with np.printoptions(precision=args.precision, suppress=True):
        print("names: " + ", ".join(names))
        print(matrix)


def setup_logging():
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(stream=sys.stdout)],
    )


def main():
    """CLI entrypoint with subcommands for describe, convert, and iou."""
    parser = argparse.ArgumentParser(
        description="yolobox - inspect, convert and compare detection bounding boxes"
    )
    subparsers = parser.add_subparsers(dest="command", help="Sub-command help")

    # Describe subcommand
    describe_parser = subparsers.add_parser(
        "describe", help="Print a description of each box"
    )
    describe_parser.add_argument(
        "--config", "-c", required=True, help="Path to boxes YAML file"
    )
    describe_parser.set_defaults(func=describe)

    # Convert subcommand
    convert_parser = subparsers.add_parser(
        "convert", help="Print raw coordinates in another encoding"
    )
    convert_parser.add_argument(
        "--config", "-c", required=True, help="Path to boxes YAML file"
    )
    convert_parser.add_argument(
        "--coord-type",
        default="center_size",
        help="center_size or corner_corner",
    )
    convert_parser.add_argument(
        "--coord-system",
        default="absolute",
        help="absolute or relative",
    )
    convert_parser.set_defaults(func=convert)

    # IoU subcommand
    iou_parser = subparsers.add_parser(
        "iou", help="Print the pairwise IoU matrix of the boxes"
    )
    iou_parser.add_argument(
        "--config", "-c", required=True, help="Path to boxes YAML file"
    )
    iou_parser.add_argument(
        "--precision", "-p", default=4, type=int, help="Digits to print"
    )
    iou_parser.set_defaults(func=iou)

    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    setup_logging()

    try:
        args.func(args)
    except ValueError as e:
        logging.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
