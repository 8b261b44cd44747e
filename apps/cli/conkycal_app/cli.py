"""Command line entrypoint: print the current month with conky color markup."""

from __future__ import annotations

import argparse
from importlib import metadata

from conkycal_core import config_from_args, configure_logging, get_logger
from conkycal_core.config import PreviewConfig
from conkycal_renderer import DEFAULT_THEME_NAME, PreviewRenderer, list_themes, render_calendar


def _installed_version() -> str:
    try:
        return metadata.version("conky-calendar")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _color(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("color must not be empty")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conky-calendar",
        description="Prints a simple calendar with conky format strings embedded.",
    )
    parser.add_argument(
        "-l",
        "--label-color",
        type=_color,
        default=None,
        metavar="COLOR",
        help="Hex color to use for the month name and weekday labels. Omit the '#' sign.",
    )
    parser.add_argument(
        "-t",
        "--today-color",
        type=_color,
        default=None,
        metavar="COLOR",
        help="Hex color to use for the current day. Omit the '#' sign.",
    )
    parser.add_argument(
        "-w",
        "--weekend-color",
        type=_color,
        default=None,
        metavar="COLOR",
        help="Hex color to use for weekends. Omit the '#' sign.",
    )
    parser.add_argument(
        "-d",
        "--day-color",
        type=_color,
        default=None,
        metavar="COLOR",
        help="Hex color to use for otherwise-uncolored days. Omit the '#' sign.",
    )
    parser.add_argument("-m", "--monday-as-first", action="store_true", help="Use Monday as first day of the week")
    parser.add_argument("--preview", default=None, metavar="PATH", help="Also write a PNG preview of the output")
    parser.add_argument(
        "--preview-theme",
        default=DEFAULT_THEME_NAME,
        choices=list_themes(),
        help="Background used for --preview",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_installed_version()}")
    return parser


def _write_preview(text: str, preview: PreviewConfig) -> int:
    logger = get_logger()
    if PreviewRenderer is None:
        logger.error("preview requested but Pillow is unavailable", extra={"event": "preview_unavailable"})
        return 1
    try:
        path = PreviewRenderer().save(text, preview.path, preview.theme)
    except OSError:
        logger.exception("preview write failed", extra={"event": "preview_failed"})
        return 1
    logger.info(f"preview written to {path}", extra={"event": "preview_written"})
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = config_from_args(args)
    configure_logging(level=cfg.log_level)
    render = cfg.render

    text = render_calendar(render.today, render.week_start, render.colors)
    print(text, end="")
    get_logger().debug(
        "calendar rendered",
        extra={
            "event": "calendar_rendered",
            "month": render.today.strftime("%Y-%m"),
            "week_start": render.week_start.value,
        },
    )

    if cfg.preview.path is not None:
        return _write_preview(text, cfg.preview)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
