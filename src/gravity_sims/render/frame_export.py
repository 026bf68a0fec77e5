from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .renderer import MatplotlibRenderer, RendererConfig
from gravity_sims.core import WrapBoundary

if TYPE_CHECKING:
    from gravity_sims.core import SimulationRecording


def export_frame(
    recording: SimulationRecording,
    *,
    out_path: str | Path,
    frame_index: int | None = None,
    t: float | None = None,
    renderer: MatplotlibRenderer | None = None,
) -> Path:
    """
    Render a single recorded frame to an image file (format from the extension).

    Provide exactly one of:
      - frame_index (index into recording.frames, negatives allowed)
      - t (the frame closest in time)
    """
    if (frame_index is None) == (t is None):
        raise ValueError("Provide exactly one of frame_index or t")

    frames = recording.frames
    if not frames:
        raise ValueError("Recording has no frames")

    if frame_index is not None:
        if not -len(frames) <= frame_index < len(frames):
            raise IndexError(f"frame_index {frame_index} out of range (0..{len(frames)-1})")
        frame = frames[frame_index]
    else:
        frame = min(frames, key=lambda f: abs(f.t - float(t)))

    config = recording.meta.get("config") or {}
    if "width" not in config or "height" not in config:
        raise ValueError("Recording meta has no config width/height")
    boundary = WrapBoundary(config["width"], config["height"])

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if renderer is None:
        renderer = MatplotlibRenderer(RendererConfig())
    renderer.init_figure(boundary)
    try:
        renderer.render_snapshot(frame, recording.body_static)
        renderer.fig.savefig(
            out_path,
            dpi=renderer.config.dpi,
            facecolor=renderer.fig.get_facecolor(),
            bbox_inches=None,
            pad_inches=0,
        )
    finally:
        renderer.close()
    return out_path
