"""
Run the gizmos showcase in a GLFW window.

    python -m gizmos [--frames N] [--log-level LEVEL]
"""

from __future__ import annotations

import argparse
import math

from gizmos import log
from gizmos.api import Gizmos
from gizmos.showcase import draw_showcase


def _on_frame(gizmos: Gizmos, frame: int) -> None:
    draw_showcase(gizmos)
    t = frame / 60.0
    orbit = (12.0 + 4.0 * math.cos(t), 2.0, 6.0 + 4.0 * math.sin(t))
    gizmos.add_to_path("orbit", orbit, max_points=240, group="trails")
    gizmos.log(f"frame {frame}", gizmos.get_last_frame_time())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="gizmos", description="Gizmos showcase viewer")
    parser.add_argument("--frames", type=int, default=None, help="Stop after N frames")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARN or ERROR")
    parser.add_argument("--hotkey", default="F2", help="Key toggling the stats output")
    args = parser.parse_args(argv)

    log.setup_default_logging(args.log_level)

    from gizmos.platform.glfw_viewer import GLFWViewer

    gizmos = Gizmos()
    gizmos.enable()
    gizmos.set_ui_hotkey(args.hotkey)
    gizmos.create_group("trails", color=(1.0, 0.8, 0.2))

    viewer = GLFWViewer(gizmos)
    viewer.run(_on_frame, max_frames=args.frames)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
