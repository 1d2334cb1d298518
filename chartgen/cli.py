"""Command-line entry point for chartgen.

``chartgen create NAME`` creates a chart, or adds module NAME when run from
inside a chart.  ``chartgen manifest KIND NAME`` adds a single manifest to
the chart in the current directory.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from chartgen.chart import ChartMetadata
from chartgen.config import ScaffoldConfig
from chartgen.errors import ScaffoldError
from chartgen.scaffolder import ChartGenerator, create_manifest, is_inside_chart, manifest_kinds
from chartgen.utils import print_error, print_success, print_summary_table, print_warning


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chartgen",
        description="chartgen -- Helm chart scaffolding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  chartgen create demo\n"
            "  chartgen create ./charts/demo --starter webapp\n"
            "  cd demo && chartgen create cache\n"
            "  cd demo && chartgen manifest ingress public\n"
        ),
    )
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser(
        "create",
        help="Create a new chart, or add a module when run inside a chart",
    )
    create.add_argument("name", help="Chart name (or path), or module name inside a chart")
    create.add_argument(
        "--starter", "-p",
        default=None,
        help="Starter chart to clone: an absolute path or a name under the starters directory",
    )

    manifest = sub.add_parser("manifest", help="Add a single manifest to the current chart")
    manifest.add_argument("kind", help=f"Manifest kind ({', '.join(manifest_kinds())})")
    manifest.add_argument("name", help="Manifest name")
    return parser


def _create(args: argparse.Namespace, config: ScaffoldConfig) -> None:
    cwd = Path.cwd()
    generator = ChartGenerator(config)
    chart_name = os.path.basename(args.name)
    parent_dir = os.path.dirname(args.name) or "."

    inside_chart = is_inside_chart(cwd)
    if args.starter and inside_chart:
        print_warning(f"WARNING: ignoring --starter {args.starter}: {cwd} is already a chart")
    if args.starter and not inside_chart:
        metadata = ChartMetadata(
            api_version=config.api_version,
            name=chart_name,
            description=config.description,
            version=config.chart_version,
            app_version=config.app_version,
        )
        path = generator.create_from(metadata, parent_dir, config.resolve_starter(args.starter))
        print_success(f"Creating {chart_name} from starter {args.starter}")
        print_summary_table({"Chart": str(path)}, title="chartgen")
        return

    result = generator.scaffold(chart_name, parent_dir, inside_chart=inside_chart, cwd=cwd)
    if inside_chart:
        print_success(f"Adding module {chart_name} to {cwd}")
    else:
        print_success(f"Creating {chart_name}")
    print_summary_table(
        {
            "Mode": result.mode.value,
            "Path": str(result.chart_path),
            "Files written": str(len(result.files_written)),
            "Overwritten": str(len(result.overwritten)),
            "Values appended": "n/a" if not inside_chart else str(result.values_appended),
        },
        title="chartgen",
    )


def _manifest(args: argparse.Namespace) -> None:
    result = create_manifest(args.kind, args.name)
    print_success(f"Adding {result.kind.value} {args.name} to {result.chart_name}")
    print_summary_table(
        {
            "Manifest": str(result.path),
            "Values appended": str(result.values_appended),
        },
        title="chartgen",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``chartgen``."""
    args = _build_parser().parse_args(argv)
    config = ScaffoldConfig.from_env()

    try:
        if args.command == "create":
            _create(args, config)
        else:
            _manifest(args)
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
