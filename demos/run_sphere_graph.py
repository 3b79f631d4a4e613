#!/usr/bin/env python3
"""
RUN_SPHERE_GRAPH: Seven Cities on a Globe
=========================================

This demo shows the complete sphere graph workflow:
1. Project the reference cities onto a sphere (R = 5000)
2. Connect every pair of cities (7 cities -> 21 edges)
3. Sample each edge as a 400-point Bezier arc
4. Drive a few render-loop frames through the Plotly adapter
5. Save the result as interactive HTML

Run with:
    python demos/run_sphere_graph.py
    python demos/run_sphere_graph.py --limit 4 --samples 100 --no-show
"""

import argparse
import logging

import numpy as np

from globe_graph import DrawingConfig, RenderLoop, build_drawing
from globe_graph.logging_config import setup_logging
from globe_graph.viz import PlotlySceneAdapter, plot_sphere_graph


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(
        description='Draw the reference cities and their arcs on a globe',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python demos/run_sphere_graph.py
  python demos/run_sphere_graph.py --limit 4 --outpath artifacts/four_cities.html
        """
    )
    parser.add_argument('--samples', type=int, default=400, help='Points per arc (default: 400)')
    parser.add_argument('--limit', type=int, default=None, help='Maximum number of nodes (default: none)')
    parser.add_argument('--frames', type=int, default=36, help='Render-loop frames to run (default: 36)')
    parser.add_argument('--outpath', type=str, default='artifacts/sphere_graph.html',
                        help='HTML output path (default: artifacts/sphere_graph.html)')
    parser.add_argument('--no-show', action='store_true', help='Do not open the figure')
    parser.add_argument('--verbose', action='store_true', help='Log graph rejections and arcs')
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = DrawingConfig(
        arc_samples=args.samples,
        limit=args.limit,
        show_info=True,
        selection=True,
        auto_rotate_deg=10.0,
    )

    print_header("SPHERE GRAPH")
    print(f"\nSphere radius: {config.sphere_radius:.0f}")
    print(f"Arc samples:   {config.arc_samples}")
    print(f"Node limit:    {config.limit if config.limit is not None else 'none'}")

    # =========================================================================
    # STEP 1: BUILD THE DRAWING
    # =========================================================================
    print_header("STEP 1: Project Cities")

    adapter = PlotlySceneAdapter(config)
    context = build_drawing(adapter, config)
    graph = context.graph

    print("\nNodes (lat, lng -> x, y, z):")
    for node in graph.nodes():
        p = node.position
        print(f"  {node.id}: {node.label:<9} ({node.geo.x:4.0f}, {node.geo.y:5.0f}) "
              f"-> ({p.x:8.1f}, {p.y:8.1f}, {p.z:8.1f})")

    # =========================================================================
    # STEP 2: EDGES
    # =========================================================================
    print_header("STEP 2: Arcs")

    for edge in graph.edges():
        arc = context.arcs[edge.id]
        print(f"  Edge {edge.id:2d}: {edge.source.label:<9} -> {edge.target.label:<9} "
              f"arc length = {arc.length:8.1f}  ({len(arc)} points)")

    lengths = np.array([arc.length for arc in context.arcs.values()])
    if len(lengths):
        print(f"\n  -> {len(lengths)} arcs, mean length {lengths.mean():.1f}, max {lengths.max():.1f}")

    # =========================================================================
    # STEP 3: RENDER LOOP
    # =========================================================================
    print_header("STEP 3: Render Loop")

    loop = RenderLoop(context)
    loop.start()
    if graph.node_count:
        adapter.select(graph.nodes()[0].id)
    adapter.run(frames=args.frames)
    loop.stop()

    print(f"\n  Frames rendered: {loop.frames}")
    print(f"  Info overlay:    {context.overlay.text()}")

    # =========================================================================
    # SUMMARY
    # =========================================================================
    print_header("SUMMARY")

    plot_sphere_graph(context, outpath=args.outpath, show=not args.no_show)

    print(f"""
    Nodes: {graph.node_count}
    Edges: {graph.edge_count}
    Output: {args.outpath}
    """)

    return context


if __name__ == "__main__":
    main()
