"""Shell-facing CLI for ttydlg.

Scripts branch on the exit status, which is the dialog's outcome code::

    ttydlg dialog --seconds 10 --message "Create a release?" --choices APRC
    case $? in
        0|1) create_release ;;
        2)   echo "cancelled" ;;
        3)   redo_settings ;;
    esac
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable, Dict, Optional, Sequence

from . import __version__
from .core import (
    CUSTOM_BASE,
    ask_autocontinue,
    custom_key_table,
    decode,
    keymap_legend,
    run_timed_dialog,
    timed_ok_redo_quit,
)
from .exceptions import ChoicesError, TtydlgError
from .ui import available_themes, get_theme
from .utils import Settings, load_settings

EXIT_USAGE = 64
# Custom codes must stay below EXIT_USAGE to be told apart in $?.
MAX_CUSTOM_KEYS = EXIT_USAGE - CUSTOM_BASE

Handler = Callable[[argparse.Namespace, Settings], int]


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ttydlg", description="Timed single-key terminal dialogs")
    parser.add_argument("--version", action="store_true", help="Display version information and exit")
    parser.add_argument("--theme", default=None, help=f"Colour theme ({', '.join(available_themes())})")
    parser.add_argument("--no-color", action="store_true", help="Render the dialog without colour")
    parser.add_argument("--verbose", action="store_true", help="Emit debug diagnostics on stderr")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("--log", dest="log", action="store_true", default=None, help="Record decisions to the logbook")
    log_group.add_argument("--no-log", dest="log", action="store_false", default=None, help="Do not record decisions")
    subparsers = parser.add_subparsers(dest="command")

    # Dialog -------------------------------------------------------------
    dialog = subparsers.add_parser("dialog", help="Run a timed dialog; exit status is the outcome code")
    dialog.add_argument("--seconds", type=int, default=settings.seconds, help="Countdown length")
    dialog.add_argument("--message", default="", help="Message shown above the countdown")
    dialog.add_argument(
        "--choices",
        default=settings.choices,
        help=f"Enabled keys, e.g. AERCPQ or APO (at most {MAX_CUSTOM_KEYS} custom keys)",
    )

    # Autocontinue -------------------------------------------------------
    auto = subparsers.add_parser("autocontinue", help="Countdown that continues unless cancelled")
    auto.add_argument("seconds", nargs="?", type=int, default=settings.seconds)
    auto.add_argument("--message", default="")

    # Confirm ------------------------------------------------------------
    confirm = subparsers.add_parser("confirm", help="Timed OK/Redo/Quit prompt")
    confirm.add_argument("prompt")
    confirm.add_argument("--seconds", type=int, default=10)

    # Keymap -------------------------------------------------------------
    keymap = subparsers.add_parser("keymap", help="Show the legend and custom key codes for CHOICES")
    keymap.add_argument("choices")
    keymap.add_argument("--paused", action="store_true", help="Show the legend as rendered while paused")

    return parser


def _dialog_options(args: argparse.Namespace, settings: Settings) -> Dict[str, Any]:
    log = args.log if args.log is not None else settings.log_decisions
    return {
        "theme": get_theme(args.theme or settings.theme, no_color=args.no_color or settings.no_color),
        "log_decisions": True if log is None else log,
    }


def _check_exit_codes(choices: str) -> None:
    count = len(decode(choices).custom_keys)
    if count > MAX_CUSTOM_KEYS:
        raise ChoicesError(
            f"{count} custom keys in {choices!r}; exit statuses allow at most {MAX_CUSTOM_KEYS}"
        )


def _handle_dialog(args: argparse.Namespace, settings: Settings) -> int:
    _check_exit_codes(args.choices)
    return run_timed_dialog(args.seconds, args.message, args.choices, **_dialog_options(args, settings))


def _handle_autocontinue(args: argparse.Namespace, settings: Settings) -> int:
    proceed = ask_autocontinue(args.seconds, args.message, **_dialog_options(args, settings))
    return 0 if proceed else 1


def _handle_confirm(args: argparse.Namespace, settings: Settings) -> int:
    return int(timed_ok_redo_quit(args.prompt, args.seconds, **_dialog_options(args, settings)))


def _handle_keymap(args: argparse.Namespace, settings: Settings) -> int:
    spec = decode(args.choices)
    legend = keymap_legend(spec, paused=args.paused)
    sys.stdout.write(f"{legend}\n" if legend else "(no reserved keys)\n")
    for key, code in custom_key_table(spec):
        sys.stdout.write(f"{key!r}={code}\n")
    return 0


HANDLERS: Dict[str, Handler] = {
    "dialog": _handle_dialog,
    "autocontinue": _handle_autocontinue,
    "confirm": _handle_confirm,
    "keymap": _handle_keymap,
}


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logger = logging.getLogger("ttydlg")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = load_settings()
    except TtydlgError as exc:
        print(f"ttydlg: {exc}", file=sys.stderr)
        return EXIT_USAGE

    parser = _build_parser(settings)
    args = parser.parse_args(argv)
    if args.version:
        print(f"ttydlg {__version__}")
        return 0
    if args.command is None:
        parser.print_help()
        return EXIT_USAGE

    _configure_logging(args.verbose)
    try:
        return HANDLERS[args.command](args, settings)
    except TtydlgError as exc:
        print(f"ttydlg: {exc}", file=sys.stderr)
        return EXIT_USAGE


__all__ = ["main"]
