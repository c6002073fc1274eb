"""
netviz CLI

Usage modes:
- Default run: open an interactive window with the animated network
- Export: render a fixed number of frames to an animated GIF
- Headless: build a generation, step it, print a snapshot summary
- Stats / GraphML: inspect or export the generated graph
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List

from netviz_core import __version__
from netviz_core.builder import build_graph
from netviz_core.config import SimulationConfig, config_from_dict, load_config
from netviz_core.engine import Simulation
from netviz_core.metrics import frame_summary


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="netviz",
        description="Animated pointer-reactive network background",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Utilities / meta
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v, -vv)")

    # Configuration
    p.add_argument("--config", type=str, default="", help="YAML configuration file")
    p.add_argument("--width", type=int, default=1200, help="Surface width in pixels")
    p.add_argument("--height", type=int, default=700, help="Surface height in pixels")
    p.add_argument("--seed", type=int, default=None, help="Seed for a reproducible layout")
    p.add_argument("--max-distance", type=float, default=None, help="Repulsion/visibility distance")
    p.add_argument("--ramp-every-frame", action="store_true", help="Ramp interaction strength every frame")

    # Output modes
    p.add_argument("--export", type=str, default="", help="Render frames to this GIF path instead of a window")
    p.add_argument("--frames", type=int, default=90, help="Frames to render with --export")
    p.add_argument("--fps", type=int, default=30, help="Frame rate for --export")
    p.add_argument("--orbit", action="store_true", help="Move a scripted pointer in a circle during --export")
    p.add_argument("--headless", action="store_true", help="Step without rendering and print a snapshot summary")
    p.add_argument("--steps", type=int, default=60, help="Frames to step with --headless")
    p.add_argument("--out", type=str, default="", help="Optional JSON output path for --headless")

    # Analysis / export
    p.add_argument("--stats", action="store_true", help="Print graph statistics")
    p.add_argument("--export-graphml", type=str, default="", help="Export the generated graph to GraphML")
    p.add_argument("--dry-run", action="store_true", help="Build the graph only; do not animate")

    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """
    Load the YAML configuration (if any) and apply CLI overrides.

    Raises:
        ValueError: If the resulting configuration is invalid
    """
    cfg = load_config(args.config) if args.config else SimulationConfig()
    overrides: Dict[str, Any] = cfg.to_dict()
    if args.seed is not None:
        overrides["seed"] = int(args.seed)
    if args.max_distance is not None:
        overrides["max_distance"] = float(args.max_distance)
    if args.ramp_every_frame:
        overrides["ramp_every_frame"] = True
    return config_from_dict(overrides)


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _write_json(data: Dict[str, Any], path: str) -> None:
    if path:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    else:
        print(json.dumps(data, indent=2))


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.version:
        print(__version__)
        return 0

    try:
        cfg = build_config(args)
    except (OSError, ValueError) as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return 2

    if args.stats or args.export_graphml or args.dry_run:
        g = build_graph(args.width, args.height, cfg)
        if args.stats:
            print(json.dumps(g.get_graph_statistics(), indent=2))
        if args.export_graphml:
            logging.info("Exporting GraphML to %s", args.export_graphml)
            g.export_graphml(args.export_graphml)
        if args.dry_run:
            if not args.stats:
                print(json.dumps({"nodes": g.node_count, "edges": g.edge_count}, indent=2))
            return 0

    if args.headless:
        sim = Simulation(cfg)
        sim.resize(args.width, args.height)
        snap = sim.step(n=args.steps)
        summary: Dict[str, Any] = {
            "t": snap["t"],
            "generation": snap["generation"],
            "size": list(snap["size"]),
            "summary": frame_summary(sim.graph, cfg),
        }
        _write_json(summary, args.out)
        return 0

    if args.export:
        from viz.export import orbit_pointer_path, render_animation

        pointer = orbit_pointer_path(args.width, args.height, args.frames) if args.orbit else None
        render_animation(
            args.export,
            width=args.width,
            height=args.height,
            frames=args.frames,
            fps=args.fps,
            config=cfg,
            pointer_path=pointer,
        )
        return 0

    from viz.app import run_window

    run_window(cfg, width=args.width, height=args.height)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
