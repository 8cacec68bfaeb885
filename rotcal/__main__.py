import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from rotcal import (
    CaliperConfig,
    Polygon,
    ValidationError,
    brute_force_distance,
    convex_hull,
    iter_caliper_steps,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_polygon(payload: dict, key: str, use_hull: bool) -> Polygon:
    coords: List[Sequence[float]] = payload.get(key) or []
    if not coords:
        raise ValidationError(f'input is missing "{key}"')
    try:
        if use_hull:
            return convex_hull(coords)
        return Polygon.from_coords(coords)
    except ValueError as exc:
        raise ValidationError(f"{key}: {exc}") from exc


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Minimum distance between two convex polygons (rotating calipers)"
    )
    parser.add_argument(
        "path",
        help='JSON file with "poly1" and "poly2" coordinate lists',
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--kernel",
        choices=["robust", "exact", "float"],
        default="robust",
        help="Orientation predicate backend (default: robust)",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Reject non-convex, degenerate or overlapping inputs",
    )
    parser.add_argument(
        "--hull",
        action="store_true",
        help="Use the convex hull of each coordinate list",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Also print the brute-force distance",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print every rotation step",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    with open(args.path) as fin:
        payload = json.load(fin)

    config = CaliperConfig(kernel=args.kernel, validate_inputs=args.validate)
    try:
        poly1 = _load_polygon(payload, "poly1", args.hull)
        poly2 = _load_polygon(payload, "poly2", args.hull)
        logger.info(
            "Loaded polygons with %d and %d vertices from %s",
            len(poly1),
            len(poly2),
            args.path,
        )
        steps = list(iter_caliper_steps(poly1, poly2, config=config))
    except ValidationError as exc:
        logger.error("Invalid input: %s", exc)
        raise SystemExit(1)

    if args.trace:
        for step in steps:
            slope = "vertical" if step.vertical else f"{step.slope:.6g}"
            print(
                f"[{step.index}] {step.alignment.name} p1={tuple(step.p1)} q2={tuple(step.q2)} "
                f"slope={slope} angle={step.angle:.6f} dist={step.dist:.6f}"
            )

    distance = steps[-1].dist
    logger.info("Sweep finished after %d step(s)", len(steps))
    print(f"Distance: {distance:.12g}")
    if args.check:
        print(f"Brute force: {brute_force_distance(poly1, poly2):.12g}")


if __name__ == "__main__":
    main(sys.argv[1:])
