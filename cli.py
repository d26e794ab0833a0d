import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from config.settings import get_settings
from models.lookup_request import LookupRequest
from pipelines.errors import InvalidProfileReference, MissingProfileHandle
from pipelines.lookup_profile import lookup_profile, normalize_saved_payload
from services.handle_resolver import extract_linkedin_username
from services.profile_client import ProfileFetchError
from services.reporting import print_profile
from utils.logging_setup import init_logging


EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


def _emit(ctx, args) -> None:
    if getattr(args, "json", False):
        print(ctx.display.model_dump_json(indent=2))
    else:
        print_profile(ctx.display, raw=ctx.raw, show_raw=getattr(args, "raw", False))


def cmd_resolve(args) -> int:
    handle = extract_linkedin_username(args.text)
    if not handle:
        print(str(InvalidProfileReference(args.text)), file=sys.stderr)
        return EXIT_INVALID_INPUT
    print(handle)
    return 0


def cmd_lookup(args) -> int:
    try:
        request = LookupRequest(url=args.text, username=args.username)
    except ValidationError as e:
        print(e.errors()[0].get("msg", "Invalid request"), file=sys.stderr)
        return EXIT_INVALID_INPUT
    try:
        ctx = lookup_profile(request)
    except InvalidProfileReference as e:
        print(str(e), file=sys.stderr)
        return EXIT_INVALID_INPUT
    except ProfileFetchError as e:
        message = str(e)
        if e.status_code:
            message += f" (status {e.status_code})"
        if e.details:
            message += f": {e.details}"
        print(message, file=sys.stderr)
        return EXIT_FAILURE
    except MissingProfileHandle as e:
        print(str(e), file=sys.stderr)
        return EXIT_FAILURE
    except RuntimeError as e:
        # Missing API credentials
        print(str(e), file=sys.stderr)
        return EXIT_FAILURE
    _emit(ctx, args)
    return 0


def cmd_normalize(args) -> int:
    try:
        payload = json.loads(Path(args.input).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logging.error(f"Could not read payload from {args.input}", extra={"error": type(e).__name__})
        print(f"Could not read JSON payload: {e}", file=sys.stderr)
        return EXIT_FAILURE
    ctx = normalize_saved_payload(payload)
    _emit(ctx, args)
    return 0


def main(argv=None) -> int:
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="LinkedIn profile lookup CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_res = sub.add_parser("resolve", help="Resolve a profile URL or username to the canonical handle")
    p_res.add_argument("text", help="LinkedIn profile URL or username")
    p_res.set_defaults(func=cmd_resolve)

    p_look = sub.add_parser("lookup", help="Fetch and render a LinkedIn profile")
    p_look.add_argument("text", nargs="?", default=None, help="LinkedIn profile URL or username")
    p_look.add_argument("--username", "-u", default=None, help="Explicit username (takes precedence when valid)")
    out = p_look.add_mutually_exclusive_group()
    out.add_argument("--json", action="store_true", help="Print the normalized profile as JSON")
    out.add_argument("--raw", action="store_true", help="Print the raw upstream payload")
    p_look.set_defaults(func=cmd_lookup)

    p_norm = sub.add_parser("normalize", help="Normalize a saved raw profile payload (no network)")
    p_norm.add_argument("--input", "-i", required=True, help="Path to a JSON file with the raw payload")
    norm_out = p_norm.add_mutually_exclusive_group()
    norm_out.add_argument("--json", action="store_true", help="Print the normalized profile as JSON")
    norm_out.add_argument("--raw", action="store_true", help="Print the payload as read")
    p_norm.set_defaults(func=cmd_normalize)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
