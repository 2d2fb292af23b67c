"""CLI entrypoints for generating and inspecting identicons."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, replace
from pathlib import Path

from identiconic_core import load_config, save_config, to_identicon_config
from identiconic_core.config import config_path
from identiconic_core.logging_setup import configure_logging, get_logger
from identiconic_renderer import (
    IdenticonError,
    IdenticonRenderer,
    build_grid,
    color_source,
    digest_hex,
    extract_hsv,
    format_hex_color,
    grid_rows,
    hsv_to_rgb,
)


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _config_file(args: argparse.Namespace) -> Path:
    return Path(args.config).expanduser() if args.config else config_path()


def _settings(args: argparse.Namespace):
    """Persisted render settings with command-line overrides applied."""
    cfg = load_config(_config_file(args))
    render = cfg.render
    overrides = {
        key: getattr(args, key)
        for key in ("size", "cell_size", "color", "algorithm")
        if getattr(args, key, None) is not None
    }
    return cfg, replace(render, **overrides)


def _default_filename(text: str) -> str:
    return f"identicon-{digest_hex(text)[:12]}.png"


def cmd_generate(args: argparse.Namespace) -> int:
    cfg, render = _settings(args)
    config = to_identicon_config(render)
    renderer = IdenticonRenderer(config)

    out = Path(args.out) if args.out else Path(cfg.output.directory) / _default_filename(args.text)
    out = out.expanduser()
    out.parent.mkdir(parents=True, exist_ok=True)
    image = renderer.render_image(args.text)
    image.save(out, format="PNG")

    get_logger().info(f"identicon written to {out}", extra={"event": "identicon_generated"})
    _print_json(
        {
            "success": True,
            "path": str(out.resolve()),
            "width": image.width,
            "height": image.height,
            "color": format_hex_color(color_source(config).resolve(digest_hex(args.text, config.algorithm))),
        }
    )
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    _cfg, render = _settings(args)
    config = to_identicon_config(render)
    digest = digest_hex(args.text, config.algorithm)

    payload: dict[str, object] = {
        "algorithm": config.algorithm,
        "digest": digest,
        "size": config.size,
        "grid": grid_rows(build_grid(digest, config.size)),
    }
    if config.color is None:
        hsv = extract_hsv(digest)
        payload["hsv"] = asdict(hsv)
        payload["color"] = format_hex_color(hsv_to_rgb(hsv.hue, hsv.saturation, hsv.value))
        payload["color_source"] = "derived"
    else:
        payload["color"] = format_hex_color(config.color)
        payload["color_source"] = "fixed"

    _print_json(payload)
    return 0


def cmd_config_show(args: argparse.Namespace) -> int:
    path = _config_file(args)
    payload = asdict(load_config(path))
    payload["path"] = str(path)
    _print_json(payload)
    return 0


def cmd_config_set(args: argparse.Namespace) -> int:
    cfg, render = _settings(args)
    if args.clear_color:
        render = replace(render, color=None)
    # Validate before persisting.
    config = to_identicon_config(render)
    if config.color is not None:
        render = replace(render, color=format_hex_color(config.color))
    cfg.render = render
    if args.output_dir is not None:
        cfg.output.directory = args.output_dir

    path = save_config(cfg, _config_file(args))
    get_logger().info(f"settings saved to {path}", extra={"event": "config_saved"})
    _print_json({"success": True, "path": str(path), **asdict(cfg)})
    return 0


def _add_render_options(cmd: argparse.ArgumentParser, with_cell_size: bool = True) -> None:
    cmd.add_argument("--size", type=int, default=None, help="Grid cells per side (1-10)")
    if with_cell_size:
        cmd.add_argument("--cell-size", type=int, default=None, help="Pixel side length of one cell")
        cmd.add_argument("--color", default=None, help="Fixed foreground color as #RRGGBB")
    cmd.add_argument("--algorithm", default=None, help="hashlib digest algorithm (default sha512)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="identiconic", description="Deterministic identicon generator")
    parser.add_argument("--config", default=None, help="Path to settings file")
    parser.add_argument("--verbose", action="store_true", help="Log derivation details at DEBUG level")
    sub = parser.add_subparsers(dest="command", required=True)

    gen_cmd = sub.add_parser("generate", help="Write an identicon PNG")
    gen_cmd.add_argument("text", help="Input string to derive the identicon from")
    gen_cmd.add_argument("--out", default=None, help="Output PNG path")
    _add_render_options(gen_cmd)
    gen_cmd.set_defaults(func=cmd_generate)

    inspect_cmd = sub.add_parser("inspect", help="Print digest, color and grid for an input")
    inspect_cmd.add_argument("text")
    _add_render_options(inspect_cmd, with_cell_size=False)
    inspect_cmd.set_defaults(func=cmd_inspect)

    config_cmd = sub.add_parser("config", help="Show or update saved defaults")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    show_cmd = config_sub.add_parser("show", help="Print effective settings")
    show_cmd.set_defaults(func=cmd_config_show)
    set_cmd = config_sub.add_parser("set", help="Update and save settings")
    _add_render_options(set_cmd)
    set_cmd.add_argument("--clear-color", action="store_true", help="Derive color from the digest again")
    set_cmd.add_argument("--output-dir", default=None)
    set_cmd.set_defaults(func=cmd_config_set)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    try:
        return int(args.func(args))
    except IdenticonError as exc:
        get_logger().warning(f"{args.command} failed: {exc}", extra={"event": "command_failed"})
        _print_json({"success": False, "error": str(exc), "error_type": type(exc).__name__})
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
