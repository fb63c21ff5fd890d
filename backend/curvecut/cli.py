"""
Corner detector for curve files.

Usage:
  python detect_corners.py curve.txt                  # one corner per line
  python detect_corners.py curve.txt -w 5 -t 140      # custom window / threshold
  python detect_corners.py curve.txt --segments       # also list the segments
  python detect_corners.py curve.txt --json           # machine-readable output
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from curvecut.engine.config import PipelineConfig
from curvecut.engine.context import CurveContext
from curvecut.engine.errors import InvalidArgument
from curvecut.engine.pipeline import analyze_curve
from curvecut.ingest.parser import load_curve

logger = logging.getLogger(__name__)


def _print_text(ctx: CurveContext, with_segments: bool) -> None:
    print(f"# {ctx.num_points} points, {len(ctx.corners)} corners "
          f"(window={ctx.config.window}, threshold={ctx.config.threshold})")
    for c in ctx.corners:
        angle = ctx.corner_angle(c)
        angle_txt = "-" if angle is None else f"{angle:.3f}"
        x, y, z = c.point
        print(f"{c.index} {x} {y} {z} {angle_txt}")
    if with_segments:
        print("# segments: start end chord arc straightness")
        for s in ctx.segments:
            print(f"{s.start} {s.end} {s.chord_length:.6f} {s.arc_length:.6f} {s.straightness:.4f}")


def _to_json(ctx: CurveContext, with_segments: bool) -> dict:
    doc = {
        "num_points": ctx.num_points,
        "window": ctx.config.window,
        "threshold": ctx.config.threshold,
        "corners": [
            {"index": c.index, "point": list(c.point), "angle": ctx.corner_angle(c)}
            for c in ctx.corners
        ],
    }
    if with_segments:
        doc["segments"] = [
            {
                "start": s.start,
                "end": s.end,
                "chord_length": s.chord_length,
                "arc_length": s.arc_length,
                "straightness": s.straightness,
            }
            for s in ctx.segments
        ]
    return doc


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Detect corners along a sampled 3D curve")
    parser.add_argument("input", help='Curve file, one "<x> <y> <z>" sample per line')
    parser.add_argument("-w", "--window", type=int, default=10,
                        help="Samples between the apex and each triangle arm (default 10)")
    parser.add_argument("-t", "--threshold", type=float, default=125.0,
                        help="Largest apex angle in degrees counted as a corner (default 125)")
    parser.add_argument("--segments", action="store_true", help="Also print the segments")
    parser.add_argument("--json", action="store_true", help="Print a JSON document")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = PipelineConfig(window=args.window, threshold=args.threshold, segment=args.segments)
    try:
        points = load_curve(args.input)
        logger.debug("Loaded %d points from %s", len(points), args.input)
        ctx = analyze_curve(points, config)
    except FileNotFoundError:
        print(f"File not found: {args.input}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Cannot read {args.input}: {e.strerror or e}", file=sys.stderr)
        return 2
    except InvalidArgument as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(_to_json(ctx, args.segments), indent=2))
    else:
        _print_text(ctx, args.segments)
    return 0
