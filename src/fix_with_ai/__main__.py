"""Command line entry point for fix-with-ai.

Works on saved test output rather than a live test run:
- locate: print the application location an error stack points at
- frames: print every parsed frame of a stack
- prompt: print the full "Fix with AI" prompt
"""

import argparse
import sys
from pathlib import Path

from fix_with_ai._version import __version__
from fix_with_ai.utils.logging import get_logger

log = get_logger(__name__)

STDIN_MARKER = "-"


def setup_logging(debug: bool = False, log_format: str = "console") -> None:
    """Configure structured logging.

    Args:
        debug: Enable debug logging if True
        log_format: Output format ("json" or "console")
    """
    from fix_with_ai.utils.logging import LogFormat, LogLevel, configure_logging

    level = LogLevel.DEBUG if debug else LogLevel.WARNING
    configure_logging(level=level, log_format=LogFormat(log_format.lower()))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        prog="fix-with-ai",
        description="Build AI fix prompts from failed UI test errors",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: environment only)",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--format",
        choices=["json", "console"],
        default="console",
        help="Log output format (default: console)",
    )

    parser.add_argument(
        "--show-internal-frames",
        action="store_true",
        help="Allow runtime-internal frames as error locations",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    locate = subparsers.add_parser("locate", help="Print the error's application location")
    locate.add_argument("--stack-file", required=True, help="Stack trace file ('-' for stdin)")

    frames = subparsers.add_parser("frames", help="Print every parsed stack frame")
    frames.add_argument("--stack-file", required=True, help="Stack trace file ('-' for stdin)")

    prompt = subparsers.add_parser("prompt", help="Print the Fix with AI prompt")
    prompt.add_argument("--title", required=True, help="Test title")
    prompt.add_argument("--message-file", required=True, help="Error message file")
    prompt.add_argument("--stack-file", required=True, help="Stack trace file ('-' for stdin)")
    prompt.add_argument(
        "--snapshot-file",
        default=None,
        help="ARIA snapshot file (default: empty snapshot)",
    )

    return parser.parse_args(argv)


def read_input(name: str | None) -> str:
    """Read a text input file, '-' meaning stdin and None meaning empty."""
    if name is None:
        return ""
    if name == STDIN_MARKER:
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def run(args: argparse.Namespace) -> int:
    """Run the selected command.

    Args:
        args: Parsed arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    from fix_with_ai.config.loader import load_config
    from fix_with_ai.core.location_resolver import ErrorLocationResolver
    from fix_with_ai.core.prompt_builder import PromptBuilder
    from fix_with_ai.core.stack_parser import StackFrameParser
    from fix_with_ai.errors import ConfigError
    from fix_with_ai.models.error import TestError

    try:
        config = load_config(args.config)
        if args.show_internal_frames:
            config = config.model_copy(update={"show_internal_frames": True})

        stack = read_input(args.stack_file)

        if args.command == "frames":
            for frame in StackFrameParser().parse_stack(stack):
                location = f"{frame.file}:{frame.line_number}:{frame.column_number}"
                if frame.is_native:
                    location = "native"
                print(f"{frame.function_name or '<anonymous>'}\t{location}")
            return 0

        if args.command == "locate":
            resolved = ErrorLocationResolver.from_config(config).resolve(stack)
            if resolved is None:
                log.warning("location_not_found")
                return 1
            print(resolved)
            return 0

        error = TestError(message=read_input(args.message_file), stack=stack)
        text = PromptBuilder.from_config(config).build(
            title=args.title,
            error=error,
            aria_snapshot=read_input(args.snapshot_file),
        )
        if not text:
            log.warning("prompt_not_buildable", title=args.title)
            return 1
        print(text)
        return 0

    except FileNotFoundError as e:
        log.error("input_file_not_found", error=str(e))
        return 1
    except UnicodeDecodeError as e:
        log.error("input_read_failed", error=str(e))
        return 1
    except (ConfigError, ValueError) as e:
        log.error("configuration_invalid", error=str(e))
        return 1
    except OSError as e:
        log.error("input_read_failed", error=str(e))
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_format=args.format)

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
