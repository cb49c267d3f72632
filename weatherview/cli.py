"""CLI entry point for the weather screen."""

import argparse
import logging
import sys
from datetime import date

from weatherview.config.loader import load_config
from weatherview.config.schema import AppConfig
from weatherview.controller import build_controller
from weatherview.models.state import FetchState, FetchStatus
from weatherview.reporting.formatters import (
    format_codes_text,
    format_screen_json,
    format_screen_text,
)
from weatherview.reporting.views import build_screen


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherview",
        description="Current weather and 7-day forecast for a fixed location",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # show
    show_p = sub.add_parser("show", help="Fetch once and print the screen")
    show_p.add_argument("--format", choices=["text", "json"], default="text")

    # watch
    sub.add_parser("watch", help="Interactive screen: Enter/r refreshes, q quits")

    # serve
    serve_p = sub.add_parser("serve", help="Run the web dashboard")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # codes
    sub.add_parser("codes", help="Print the weather-code table")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "show":
        return _cmd_show(config, args)
    elif args.command == "watch":
        return _cmd_watch(config)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "codes":
        print(format_codes_text())
        return 0
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _notify(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _render(state: FetchState, config: AppConfig, fmt: str = "text") -> str:
    view = build_screen(state, config.location.to_location(), date.today())
    if fmt == "json":
        return format_screen_json(view)
    return format_screen_text(view)


def _cmd_show(config: AppConfig, args) -> int:
    controller = build_controller(config, notifier=_notify)
    controller.start()
    print(_render(controller.state, config, args.format))
    return 0 if controller.state.status == FetchStatus.LOADED else 1


def _cmd_watch(config: AppConfig) -> int:
    controller = build_controller(config, notifier=_notify)
    controller.subscribe(lambda state: print(_render(state, config)))
    controller.start()
    while True:
        try:
            choice = input("\n[Enter/r] refresh  [q] quit > ").strip().lower()
        except EOFError:
            break
        if choice == "q":
            break
        if choice in ("", "r"):
            controller.refresh()
    return 0 if controller.state.status == FetchStatus.LOADED else 1


def _cmd_serve(config: AppConfig, args) -> int:
    import uvicorn

    from weatherview.dashboard import create_app

    host = args.host or config.dashboard.host
    port = args.port or config.dashboard.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Usage: weatherview config show")
    return 1


if __name__ == "__main__":
    sys.exit(main())
