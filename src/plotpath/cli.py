"""
Command-line interface for plotpath.

Provides commands for optimizing a PathSet file and writing a default config.
"""

import argparse
import sys

from plotpath.config import load_config, save_default_config
from plotpath.tracer import configure_tracer, get_tracer


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="plotpath: reorder and merge polylines to cut pen-up travel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Optimize a PathSet JSON file")
    run_parser.add_argument(
        "--input", "-i",
        required=True,
        help="Input PathSet JSON file",
    )
    run_parser.add_argument(
        "--out", "-o",
        required=True,
        help="Output directory",
    )
    run_parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    run_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug artifact generation",
    )
    run_parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable runtime tracing",
    )
    run_parser.add_argument(
        "--trace-level",
        default=None,
        choices=["ERROR", "WARN", "INFO", "DEBUG"],
        help="Trace log level (default: tracing.level from the config file)",
    )
    run_parser.add_argument(
        "--trace-file",
        default=None,
        help="Path to write trace logs",
    )
    run_parser.add_argument(
        "--trace-json",
        action="store_true",
        help="Enable JSON trace output",
    )

    init_parser = subparsers.add_parser("init-config", help="Create default config file")
    init_parser.add_argument(
        "--out", "-o",
        default="plotpath_config.yaml",
        help="Output path for config file",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "run":
        return handle_run(args)
    elif args.command == "init-config":
        return handle_init_config(args)

    return 0


def handle_run(args):
    """Handle the run command."""
    config = load_config(args.config)
    apply_tracing(args, config.tracing)

    tracer = get_tracer()

    try:
        from plotpath.pipeline import run_pipeline

        with tracer.span("cli_run", module="cli"):
            optimized, report = run_pipeline(
                input_path=args.input,
                out_dir=args.out,
                config=config,
                debug=args.debug,
            )

        print(f"\nOptimization completed successfully.")
        print(f"  Paths: {report.input_stats.path_count} -> {report.output_stats.path_count}")
        print(f"  Points: {report.input_stats.point_count} -> {report.output_stats.point_count}")
        print(f"  Travel: {report.input_stats.travel_distance:.2f} -> {report.output_stats.travel_distance:.2f}")
        print(f"  Validation warnings: {report.validation.warning_count}")
        print(f"\nOutputs saved to: {args.out}/")
        print(f"  - optimized.json")
        print(f"  - optimized.svg")
        print(f"  - report.json")

        return 0

    except Exception as e:
        tracer.event(f"Pipeline failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1
    finally:
        tracer.config.close()


def apply_tracing(args, tracing):
    """
    Configure the tracer from the config file's tracing section.

    Command-line flags take precedence over the file for each setting.
    """
    configure_tracer(
        enabled=args.trace or tracing.enabled,
        level=args.trace_level or tracing.level,
        file_path=args.trace_file or tracing.file_path,
        json_output=args.trace_json or tracing.json_output,
    )


def handle_init_config(args):
    """Handle the init-config command."""
    save_default_config(args.out)
    print(f"Default configuration saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
