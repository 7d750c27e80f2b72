"""
Clipboard masker command‑line interface.

Three sub‑commands are available:

``mask``
    Read text from a file (or standard input), apply the masking rules of the
    persisted settings and write the result to a file (or standard output).
    Built‑in rules can be switched off for a single run with the dedicated
    ``--disable-`` flags.  With ``--api-host`` the text is sent to a running
    clipboard‑masker service instead.

``clean``
    Print the cleaned form of a URL (redirector unwrapping, tracking
    parameters removed).

``settings``
    Inspect and edit the persisted settings: toggles, custom names and
    custom patterns.

---

# Quick ways to run the script

>>> clipboard-masker mask examples/input.txt -o examples/output.txt

>>> echo "call me at 555-123-4567" | clipboard-masker mask

>>> clipboard-masker clean "https://t.co/?u=https%3A%2F%2Fexample.com%2F%3Futm_source%3Dx"

>>> clipboard-masker settings add-pattern "API key" "sk-[a-zA-Z0-9]{32}" "[API_KEY]"
"""

import argparse
import json
import sys
from typing import List, Optional

from clipboard_masker_lib.anonymizer import Anonymizer
from clipboard_masker_lib.client import ClipboardMaskerClient
from clipboard_masker_lib.constants import (
    DEFAULT_HOP_LIMIT,
    LOG_LEVEL,
    SETTINGS_FILE,
)
from clipboard_masker_lib.data_models.settings import (
    TOGGLE_FIELDS,
    Configuration,
    CustomPattern,
)
from clipboard_masker_lib.exceptions import ClipboardMaskerError
from clipboard_masker_lib.link_cleaner import LinkCleaner
from clipboard_masker_lib.settings_store import SettingsStore
from clipboard_masker_lib.utils.logger import prepare_logger

# --disable-<suffix> flag -> configuration field
_DISABLE_FLAGS = {
    "ip": "mask_ip_addresses",
    "email": "mask_emails",
    "phone": "mask_phone_numbers",
    "card": "mask_credit_cards",
    "ssn": "mask_ssn",
    "names": "mask_names",
    "link-cleaning": "clean_copied_links",
}

_TOGGLE_NAMES = {
    **{name: name for name in TOGGLE_FIELDS},
    **{Configuration.model_fields[name].alias: name for name in TOGGLE_FIELDS},
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clipboard-masker",
        description="Mask sensitive data in text and clean copied links.",
    )
    parser.add_argument(
        "--settings",
        default=str(SETTINGS_FILE),
        help=f"Settings file (defaults to {SETTINGS_FILE}).",
    )
    parser.add_argument(
        "--log-level", default=LOG_LEVEL, help="Logging level (default: %(default)s)."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    # ---- mask ----
    mask = commands.add_parser("mask", help="Mask text from a file or STDIN.")
    mask.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (defaults to STDIN).",
    )
    mask.add_argument(
        "-o",
        "--output",
        type=argparse.FileType("w", encoding="utf-8"),
        default=sys.stdout,
        help="Output file (defaults to STDOUT).",
    )
    mask.add_argument(
        "--api-host",
        default=None,
        help="Use a running clipboard-masker service instead of local rules.",
    )
    for suffix, field in _DISABLE_FLAGS.items():
        mask.add_argument(
            f"--disable-{suffix}",
            dest=f"disable_{field}",
            action="store_true",
            help=f"Do not apply the {suffix} rule.",
        )
    mask.add_argument(
        "--mask-urls",
        action="store_true",
        help="Replace URLs inside the text with [URL].",
    )

    # ---- clean ----
    clean = commands.add_parser("clean", help="Clean a single URL.")
    clean.add_argument("url")
    clean.add_argument(
        "--hop-limit",
        type=int,
        default=DEFAULT_HOP_LIMIT,
        help="Maximum nested redirector unwraps (default: %(default)s).",
    )

    # ---- settings ----
    settings = commands.add_parser("settings", help="Show or edit settings.")
    actions = settings.add_subparsers(dest="action", required=True)
    actions.add_parser("show", help="Print the current settings as JSON.")

    add_name = actions.add_parser("add-name", help="Add a custom name.")
    add_name.add_argument("name")
    remove_name = actions.add_parser("remove-name", help="Remove a custom name.")
    remove_name.add_argument("name")

    add_pattern = actions.add_parser("add-pattern", help="Add a custom pattern.")
    add_pattern.add_argument("name")
    add_pattern.add_argument("pattern")
    add_pattern.add_argument("replacement")
    add_pattern.add_argument(
        "--disabled", action="store_true", help="Store the pattern disabled."
    )
    for action in ("remove-pattern", "enable-pattern", "disable-pattern"):
        sub = actions.add_parser(action, help=f"{action.split('-')[0].title()} a pattern.")
        sub.add_argument("pattern_id")

    set_flag = actions.add_parser("set", help="Switch a rule on or off.")
    set_flag.add_argument("flag", choices=sorted(_TOGGLE_NAMES))
    set_flag.add_argument("value", choices=["on", "off"])
    return parser


def _run_mask(args: argparse.Namespace, store: SettingsStore) -> None:
    changes = {
        field: False
        for field in _DISABLE_FLAGS.values()
        if getattr(args, f"disable_{field}")
    }
    if args.mask_urls:
        changes["mask_urls"] = True

    text = args.input.read()
    if args.api_host:
        result = ClipboardMaskerClient(api=args.api_host).transform(text)
    else:
        data = store.snapshot().model_dump()
        data.update(changes)
        result = Anonymizer().transform(text, Configuration.model_validate(data))
    args.output.write(result)

    for stream in (args.input, args.output):
        if stream not in (sys.stdin, sys.stdout):
            stream.close()


def _run_settings(args: argparse.Namespace, store: SettingsStore) -> None:
    action = args.action
    if action == "add-name":
        store.add_custom_name(args.name)
    elif action == "remove-name":
        if not store.remove_custom_name(args.name):
            raise ClipboardMaskerError(f"Custom name {args.name!r} not found")
    elif action == "add-pattern":
        created = store.add_custom_pattern(
            CustomPattern(
                name=args.name,
                pattern=args.pattern,
                replacement=args.replacement,
                is_enabled=not args.disabled,
            )
        )
        print(created.id)
        return
    elif action == "remove-pattern":
        if not store.remove_custom_pattern(args.pattern_id):
            raise ClipboardMaskerError(f"Custom pattern {args.pattern_id} not found")
    elif action in ("enable-pattern", "disable-pattern"):
        existing = store.get_custom_pattern(args.pattern_id)
        if existing is None:
            raise ClipboardMaskerError(f"Custom pattern {args.pattern_id} not found")
        store.update_custom_pattern(
            existing.model_copy(update={"is_enabled": action == "enable-pattern"})
        )
    elif action == "set":
        store.update(**{_TOGGLE_NAMES[args.flag]: args.value == "on"})

    print(json.dumps(store.snapshot().to_storage(), indent=2, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    prepare_logger("clipboard_masker_lib", level=args.log_level)

    if args.command == "mask" and args.api_host and (
        args.mask_urls
        or any(getattr(args, f"disable_{f}") for f in _DISABLE_FLAGS.values())
    ):
        parser.error("rule flags cannot be combined with --api-host")

    try:
        if args.command == "clean":
            print(LinkCleaner().clean(args.url, hop_limit=args.hop_limit))
            return 0

        store = SettingsStore(args.settings)
        if args.command == "mask":
            _run_mask(args, store)
        else:
            _run_settings(args, store)
    except ClipboardMaskerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
