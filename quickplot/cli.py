from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Sequence

from quickplot.errors import ParseError
from quickplot.styles import Curve, FigureKind, Marker, MarkerShape, Stroke, Style, format_style, parse_style

LOGGER = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "filled", "dashed"}
_FALSE = {"0", "false", "no", "hollow", "solid"}


def style_to_dict(style: Style) -> dict[str, Any]:
    return {
        "kind": style.kind.value,
        "color": style.color,
        "marker": None
        if style.marker is None
        else {"shape": style.marker.shape.value, "size": style.marker.size, "filled": style.marker.filled},
        "stroke": None
        if style.stroke is None
        else {"curve": style.stroke.curve.value, "width": style.stroke.width, "dashed": style.stroke.dashed},
        "canonical": format_style(style),
    }


def _parse_flag(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean, got {raw!r}")


def _triple(raw: str) -> tuple[str, int, bool]:
    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected NAME,SIZE,FLAG, got {raw!r}")
    try:
        size = int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"size must be an integer, got {parts[1]!r}") from None
    return parts[0], size, _parse_flag(parts[2])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quickplot", description="Parse, check and format quickplot style strings.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for library diagnostics (default: WARNING).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    parse = sub.add_parser("parse", help="Print each style string as JSON with its canonical form.")
    parse.add_argument("styles", nargs="+")

    check = sub.add_parser("check", help="Exit non-zero when any style string is invalid.")
    check.add_argument("styles", nargs="+")

    fmt = sub.add_parser("format", help="Build a style from explicit fields and print its style string.")
    fmt.add_argument("--color", required=True, help="Palette name (red, cyan, ...) or #RGB/#RRGGBB.")
    fmt.add_argument("--kind", choices=[kind.value for kind in FigureKind], default=FigureKind.NORMAL.value)
    fmt.add_argument(
        "--marker",
        type=_triple,
        default=None,
        help=f"SHAPE,SIZE,FILLED with SHAPE in {{{', '.join(s.value for s in MarkerShape)}}}.",
    )
    fmt.add_argument(
        "--stroke",
        type=_triple,
        default=None,
        help=f"CURVE,WIDTH,DASHED with CURVE in {{{', '.join(c.value for c in Curve)}}}.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "parse":
        for text in args.styles:
            try:
                style = parse_style(text)
            except ParseError as exc:
                print(f"error: {exc}")
                return 1
            print(json.dumps(style_to_dict(style), sort_keys=True))
        return 0

    if args.command == "check":
        status = 0
        for text in args.styles:
            try:
                parse_style(text)
            except ParseError as exc:
                LOGGER.debug("style %r rejected", text, exc_info=True)
                print(f"error {text!r}: {exc}")
                status = 1
            else:
                print(f"ok {text!r}")
        return status

    if args.command == "format":
        try:
            style = Style(
                kind=args.kind,
                color=args.color,
                marker=None if args.marker is None else Marker(*args.marker),
                stroke=None if args.stroke is None else Stroke(*args.stroke),
            )
            print(format_style(style))
        except ValueError as exc:
            parser.error(str(exc))
        return 0

    parser.error(f"unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
