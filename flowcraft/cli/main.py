"""
CLI entry point. Usage:
  flowcraft validate <file>...          heuristic check, prints warnings
  flowcraft recent [--clear] [--json]   recent files list
  flowcraft templates [--show ID]       built-in templates
  flowcraft export <file> --format svg --output out.svg
"""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from flowcraft.application.controller import create_controller
from flowcraft.application.file_manager import read_diagram
from flowcraft.application.templates import get_template
from flowcraft.config import load_config
from flowcraft.core.config import EXPORT_FORMATS
from flowcraft.core.exceptions import FlowCraftError
from flowcraft.core.logger import level_from_name, setup_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flowcraft", description="FlowCraft Studio: Mermaid diagram tools")
    parser.add_argument("--config", "-c", type=str, default=None, help="Path to YAML config (default: flowcraft/config/default.yaml + FLOWCRAFT_CONFIG)")
    parser.add_argument("--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level (default: FLOWCRAFT_LOG_LEVEL or INFO)")
    parser.add_argument("--log-dir", type=str, default=None, help="Directory for flowcraft.log (default: FLOWCRAFT_LOG_DIR or console only)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("validate", help="Check diagram files for common syntax problems")
    p.add_argument("files", nargs="+", help="Mermaid source files")
    p.add_argument("--json", action="store_true", help="Print reports as JSON")

    p = subparsers.add_parser("recent", help="Show or clear the recent files list")
    p.add_argument("--clear", action="store_true", help="Clear the list")
    p.add_argument("--json", action="store_true", help="Print entries as JSON")

    p = subparsers.add_parser("templates", help="List built-in templates")
    p.add_argument("--show", type=str, default=None, metavar="ID", help="Print one template's source")

    p = subparsers.add_parser("export", help="Export a diagram (placeholder: copies the source text)")
    p.add_argument("file", help="Mermaid source file")
    p.add_argument("--format", "-f", required=True, choices=list(EXPORT_FORMATS))
    p.add_argument("--output", "-o", required=True, help="Destination path")
    return parser


def _cmd_validate(controller, args) -> int:
    status = 0
    reports = {}
    for name in args.files:
        try:
            content = read_diagram(Path(name))
        except FlowCraftError as e:
            print("ERROR: %s: %s" % (name, e), file=sys.stderr)
            status = 1
            continue
        report = controller.validate(content)
        reports[name] = report.to_dict()
        if not args.json:
            print("%s: %s, %d warning(s)" % (name, "valid" if report.is_valid else "invalid", len(report.warnings)))
            for err in report.errors:
                print("  error: %s" % err)
            for warning in report.warnings:
                print("  warning: %s" % warning)
    if args.json:
        print(json.dumps(reports, indent=2))
    return status


def _cmd_recent(controller, args) -> int:
    if args.clear:
        controller.clear_recent()
        print("Recent files cleared.")
        return 0
    entries = controller.list_recent()
    if args.json:
        print(json.dumps([e.to_dict() for e in entries], indent=2))
        return 0
    if not entries:
        print("No recent files.")
    for i, e in enumerate(entries, start=1):
        print("%2d. %s  %s  (%s)" % (i, e.display_name, e.path, e.last_opened.strftime("%Y-%m-%d %H:%M")))
    return 0


def _cmd_templates(controller, args) -> int:
    if args.show:
        template = get_template(args.show)
        if template is None:
            print("ERROR: unknown template: %s" % args.show, file=sys.stderr)
            return 1
        print(template.content)
        return 0
    for t in controller.list_templates():
        print("%-16s %-10s %s" % (t.id, t.category, t.description))
    return 0


def _cmd_export(controller, args) -> int:
    content = read_diagram(Path(args.file))
    out = controller.export(content, args.format, args.output)
    print("Exported: %s" % out)
    return 0


_COMMANDS = {
    "validate": _cmd_validate,
    "recent": _cmd_recent,
    "templates": _cmd_templates,
    "export": _cmd_export,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        cfg = load_config(override_path=args.config)
    except FlowCraftError as e:
        print("ERROR: %s" % e, file=sys.stderr)
        return 2

    level = level_from_name(args.log_level) or level_from_name(cfg.get("log_level"))
    setup_logging(level=level, log_dir=args.log_dir or cfg.get("log_dir"))

    try:
        controller = create_controller(cfg)
        return _COMMANDS[args.command](controller, args)
    except FlowCraftError as e:
        print("ERROR: %s" % e, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
