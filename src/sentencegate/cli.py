"""Command-line interface for SentenceGate configuration and filtering."""

import argparse
import sys
from pathlib import Path

from sentencegate.config.loader import load_config, ConfigLoadError
from sentencegate.config.schema import GateConfig
from sentencegate.core.util import ConsoleLogger, safe_json
from sentencegate.providers.wordlist import StopwordLoadError
from sentencegate.runtime.sentence_gate import SentenceGate


def validate_config_command(args):
    """Validate a SentenceGate configuration file."""
    try:
        config_path = Path(args.config_file)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            return 1

        print(f"Validating config: {config_path}")
        config = load_config(config_path)

        print("✅ Config validation successful!")
        print(f"   Filtering: {'enabled' if config.filter_enabled else 'disabled'}")
        print(f"   Thresholds: comma_word={config.comma_word_threshold}, "
              f"max_stopword_ratio={config.max_stopword_ratio}")
        print(f"   Min sentence length: {config.min_sentence_length}")
        print(f"   Normalization: {config.normalization}")

        if args.verbose:
            gate = SentenceGate.from_config(config, base_dir=config_path.parent)
            print(f"   Stopwords: {len(gate.provider.current())} from {config.stopword_source or 'none'}")

        for issue in config.validate_settings():
            print(f"   ⚠️  {issue}")

        return 0

    except (ConfigLoadError, StopwordLoadError) as e:
        print(f"❌ Config validation failed: {e}")
        return 1


def segment_command(args):
    """Segment and filter a document, printing the emitted sentences."""
    try:
        if args.config:
            config_path = Path(args.config)
            config = load_config(config_path)
            base_dir = config_path.parent
        else:
            config = GateConfig()
            base_dir = None

        if args.filter:
            config = config.model_copy(update={"filter_enabled": True})

        logger = ConsoleLogger(stream=sys.stderr) if args.verbose else None
        gate = SentenceGate.from_config(config, base_dir=base_dir, logger=logger)

        if args.document and args.document != "-":
            text = Path(args.document).read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()

        result = gate.filter_text(text)

        if args.json:
            print(safe_json(result))
            return 0

        skipped = {span.start: span for span in result.skipped_spans} if args.show_skipped else {}
        for token in result.tokens:
            for start in sorted(s for s in skipped if s < token.start_offset):
                span = skipped.pop(start)
                print(f"- {span.start}-{span.end}\t{span.text!r}")
            print(f"+ {token.start_offset}-{token.end_offset}\t{token.text!r}")
        for start in sorted(skipped):
            span = skipped[start]
            print(f"- {span.start}-{span.end}\t{span.text!r}")

        print(f"\n📊 Emitted: {result.emitted}, Skipped: {result.skipped}, End offset: {result.end_offset}")
        return 0

    except (ConfigLoadError, StopwordLoadError, OSError, UnicodeDecodeError) as e:
        print(f"❌ Error: {e}")
        return 1


def info_command(args):
    """Display SentenceGate version and system information."""
    print("SentenceGate CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("sentencegate")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nOptional dependencies:")

    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sentencegate",
        description="SentenceGate sentence segmentation and filtering CLI"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a SentenceGate config file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Also load the configured stopword files"
    )

    # Segment command
    segment_parser = subparsers.add_parser(
        "segment",
        help="Segment and filter a document"
    )
    segment_parser.add_argument(
        "document",
        nargs="?",
        default="-",
        help="Path to a UTF-8 text file (default: read stdin)"
    )
    segment_parser.add_argument(
        "-c", "--config",
        help="Path to the config YAML file (default: built-in defaults)"
    )
    segment_parser.add_argument(
        "--filter",
        action="store_true",
        help="Enable stopword filtering regardless of the config"
    )
    segment_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON"
    )
    segment_parser.add_argument(
        "--show-skipped",
        action="store_true",
        help="Also list the spans that were filtered out"
    )
    segment_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log gate events to stderr"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "validate":
        return validate_config_command(args)
    elif args.command == "segment":
        return segment_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
