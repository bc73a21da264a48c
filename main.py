from __future__ import annotations

import argparse
from dataclasses import dataclass
import json
import logging
from pathlib import Path

from rangebar_core.core import DisplayMetrics, FrameAnimator
from rangebar_core.render.tensor_canvas import TensorCanvas
from rangebar_ui.controls.thumb import Thumb
from rangebar_ui.style.thumb_style import DEFAULT_THUMB_STYLE, ThumbStyle, load_thumb_style


@dataclass
class _RedrawCounter:
    pending: bool = False
    requests: int = 0

    def __call__(self) -> None:
        self.pending = True
        self.requests += 1


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="rangebar")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render-press", help="Render a thumb press + release sequence to PNG frames.")
    render.add_argument("out_dir", type=Path)
    render.add_argument("--style", type=Path, default=None, help="TOML file with a [thumb] table.")
    render.add_argument("--density", type=float, default=2.0, help="Pixels per dp.")
    render.add_argument("--width", type=int, default=160)
    render.add_argument("--height", type=int, default=120)
    render.add_argument("--fps", type=int, default=60)
    render.add_argument("--hold-ms", type=float, default=100.0, help="Time held pressed before release.")

    hit = sub.add_parser("hit-test", help="Report whether a touch lands in a thumb's target zone.")
    hit.add_argument("thumb_x", type=float)
    hit.add_argument("thumb_y", type=float)
    hit.add_argument("touch_x", type=float)
    hit.add_argument("touch_y", type=float)
    hit.add_argument("--style", type=Path, default=None)
    hit.add_argument("--density", type=float, default=1.0)

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render-press":
        written = render_press_sequence(
            args.out_dir,
            style=_load_style(args.style),
            density=args.density,
            width=args.width,
            height=args.height,
            fps=args.fps,
            hold_ms=args.hold_ms,
        )
        print(f"frames written={len(written)} out_dir={args.out_dir}")
        return

    if args.command == "hit-test":
        animator = FrameAnimator()
        thumb = Thumb(
            y=args.thumb_y,
            units=DisplayMetrics(density=args.density),
            animator=animator,
            request_redraw=lambda: None,
            style=_load_style(args.style),
        )
        thumb.set_x(args.thumb_x)
        result = {
            "inside": thumb.is_in_target_zone(args.touch_x, args.touch_y),
            "target_radius_px": thumb.target_radius,
            "normal_radius_px": thumb.normal_radius,
        }
        print(json.dumps(result, sort_keys=True))
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def render_press_sequence(
    out_dir: Path,
    *,
    style: ThumbStyle = DEFAULT_THUMB_STYLE,
    density: float = 2.0,
    width: int = 160,
    height: int = 120,
    fps: int = 60,
    hold_ms: float = 100.0,
) -> list[Path]:
    """Press, hold, and release a centred thumb, saving one PNG per redraw."""

    if fps <= 0:
        raise ValueError("fps must be > 0")
    if hold_ms < 0:
        raise ValueError("hold_ms must be >= 0")
    out_dir.mkdir(parents=True, exist_ok=True)

    canvas = TensorCanvas(width, height, background=(24, 24, 32, 255))
    animator = FrameAnimator()
    redraw = _RedrawCounter()
    thumb = Thumb(
        y=height / 2.0,
        units=DisplayMetrics(density=density),
        animator=animator,
        request_redraw=redraw,
        style=style,
    )
    thumb.set_x(width / 2.0)

    frame_ms = 1000.0 / float(fps)
    written: list[Path] = []

    def flush() -> None:
        if not redraw.pending:
            return
        redraw.pending = False
        canvas.clear()
        thumb.draw(canvas)
        path = out_dir / f"frame_{len(written):03d}.png"
        canvas.to_image().save(path)
        written.append(path)

    elapsed = 0.0

    def play_until_idle() -> None:
        nonlocal elapsed
        flush()
        while animator.active_count:
            elapsed += frame_ms
            animator.tick(elapsed)
            flush()

    thumb.press()
    play_until_idle()
    elapsed += hold_ms
    animator.tick(elapsed)

    thumb.release()
    play_until_idle()
    return written


def _load_style(path: Path | None) -> ThumbStyle:
    if path is None:
        return DEFAULT_THUMB_STYLE
    return load_thumb_style(path)


if __name__ == "__main__":
    main()
