"""
Main Entry Point for Off-axis Projection Tracking

This script drives the per-frame projection update for a tracked camera:
1. Load configuration from YAML
2. Build the scene (camera + two screen corner markers)
3. Move the viewpoint along the tracking path
4. Recompute the off-axis projection every frame
5. Write per-frame matrices to CSV

Usage:
    python run.py --config configs/offaxis_config.yaml
    python run.py --config my_rig.yaml --frames 240 --far 500
"""

import argparse
import csv
import sys
import time
from pathlib import Path
from typing import Dict, List

import numpy as np
from omegaconf import OmegaConf

# Add project paths
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from offaxis.core import OffaxisConfig, load_config, linear_viewpoint_path
from offaxis.camera import FrustumExtents
from offaxis.utils import OffaxisError


# ============================================================================
# Configuration & Setup
# ============================================================================

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Off-axis projection for a tracked camera and a fixed screen",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py --config configs/offaxis_config.yaml
  python run.py --config my_rig.yaml --frames 240
  python run.py --config my_rig.yaml --viewpoint 0.5 1.2 0 --frames 1
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default="configs/offaxis_config.yaml",
        help="Path to YAML configuration file"
    )

    parser.add_argument(
        "--frames", "-f",
        type=int,
        default=None,
        help="Override number of tracked frames from config"
    )

    parser.add_argument(
        "--far",
        type=float,
        default=None,
        help="Override far clip distance from config"
    )

    parser.add_argument(
        "--viewpoint",
        type=float,
        nargs=3,
        default=None,
        metavar=("X", "Y", "Z"),
        help="Hold the viewpoint fixed at this position (ignores tracking path)"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Override CSV output path from config"
    )

    parser.add_argument(
        "--permissive",
        action="store_true",
        help="Let degenerate geometry produce Inf/NaN matrices instead of failing"
    )

    return parser.parse_args(argv)


def apply_cli_overrides(config, args):
    """
    Apply command-line argument overrides to config

    Args:
        config: Base configuration (OmegaConf)
        args: Parsed command-line arguments

    Returns:
        Modified configuration
    """
    if "camera" not in config:
        config.camera = {}
    if "tracking" not in config:
        config.tracking = {}
    if "output" not in config:
        config.output = {}
    if "projection" not in config:
        config.projection = {}

    if args.far is not None:
        config.camera.far_clip = args.far
        print(f"[Config] Override far clip: {args.far}")

    if args.viewpoint is not None:
        config.camera.position = list(args.viewpoint)
        config.tracking.start = list(args.viewpoint)
        config.tracking.end = list(args.viewpoint)
        print(f"[Config] Override viewpoint: {args.viewpoint}")

    if args.frames is not None:
        config.tracking.frames = args.frames
        print(f"[Config] Override frames: {args.frames}")

    if args.output is not None:
        config.output.csv_path = args.output
        print(f"[Config] Override output: {args.output}")

    if args.permissive:
        config.projection.strict = False
        print("[Config] Permissive mode: degenerate geometry is not rejected")

    return config


# ============================================================================
# Per-frame loop
# ============================================================================

def frame_record(frame: int, viewpoint: np.ndarray, extents: FrustumExtents,
                 proj: np.ndarray) -> Dict[str, float]:
    """Flatten one frame into a CSV row"""
    record = {
        "frame": frame,
        "eye_x": float(viewpoint[0]),
        "eye_y": float(viewpoint[1]),
        "eye_z": float(viewpoint[2]),
        "left": extents.left,
        "right": extents.right,
        "bottom": extents.bottom,
        "top": extents.top,
        "near": extents.near,
        "far": extents.far,
    }
    for r in range(4):
        for c in range(4):
            record[f"m{r}{c}"] = float(proj[r, c])
    return record


def run_tracking(config) -> List[Dict[str, float]]:
    """
    Move the camera along the tracking path and update the projection
    every frame

    Args:
        config: Full configuration (OmegaConf or plain dict)

    Returns:
        List of per-frame records
    """
    if not isinstance(config, dict):
        config = OmegaConf.to_container(config, resolve=True)
    rig_cfg = OffaxisConfig.from_dict(config)
    component = rig_cfg.build_component()
    camera = component.camera

    tracking = config.get("tracking") or {}
    start = tracking.get("start", rig_cfg.viewpoint.tolist())
    end = tracking.get("end", start)
    frames = int(tracking.get("frames", 1))
    log_interval = int((config.get("output") or {}).get("log_interval", 10))

    print(f"\n{'='*60}")
    print(f"Tracking: {frames} frame(s)")
    print(f"  - Screen: {rig_cfg.screen_bottom_left.tolist()} -> {rig_cfg.screen_top_right.tolist()}")
    print(f"  - Far clip: {rig_cfg.far_clip}")
    print(f"{'='*60}")

    records = []
    start_time = time.time()

    for frame, eye in enumerate(linear_viewpoint_path(start, end, frames)):
        camera.transform.position = eye
        extents = component.update()
        if extents is None:
            continue

        records.append(frame_record(frame, eye, extents, camera.projection_matrix))

        # log_interval <= 0 logs the last frame only
        if (log_interval > 0 and frame % log_interval == 0) or frame == frames - 1:
            print(f"Frame {frame:04d}/{frames}: "
                  f"eye=({eye[0]:.3f}, {eye[1]:.3f}, {eye[2]:.3f}), "
                  f"near={extents.near:.4f}, "
                  f"skew=({camera.projection_matrix[0, 2]:.4f}, "
                  f"{camera.projection_matrix[1, 2]:.4f})")

    elapsed = time.time() - start_time
    print(f"{'='*60}")
    print(f"Tracking complete! {len(records)} frame(s) in {elapsed*1000:.1f} ms")

    return records


def save_records(records: List[Dict[str, float]], csv_path: str):
    """Write per-frame records to CSV"""
    if not records:
        print("[Warning] No frames recorded, skipping CSV output")
        return

    path = Path(csv_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=records[0].keys())
        writer.writeheader()
        writer.writerows(records)
    print(f"[Output] Projection log saved: {path}")


# ============================================================================
# Main
# ============================================================================

def main(argv=None):
    args = parse_args(argv)

    config = load_config(args.config)
    config = apply_cli_overrides(config, args)

    print(f"[Config] Loaded configuration from: {args.config}")
    print(OmegaConf.to_yaml(config))

    try:
        records = run_tracking(config)
    except OffaxisError as e:
        print(f"[Error] {e}")
        return 1

    csv_path = (config.get("output") or {}).get("csv_path")
    if csv_path:
        save_records(records, csv_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
