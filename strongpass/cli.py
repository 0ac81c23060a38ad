"""CLI for StrongPass: generate, score, serve."""

import argparse
import logging
import sys

from rich import print
from rich.panel import Panel
from rich.table import Table

from .charsets import CHARACTER_CLASSES, contains_weak_pattern, has_adjacent_repeat
from .checker import MAX_SCORE, score_password
from .config import load_config
from .errors import GenerationExhausted
from .generator import generate
from .log import setup_logging
from .suggestions import suggest_improvements

logger = logging.getLogger(__name__)


def _analysis_table(pw: str) -> Table:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Check")
    table.add_column("Result")
    table.add_row("Length", str(len(pw)))
    for name, chars in CHARACTER_CLASSES:
        table.add_row(name.capitalize(), str(sum(1 for c in pw if c in chars)))
    table.add_row("Consecutive repeats", "[red]yes[/red]" if has_adjacent_repeat(pw) else "[green]no[/green]")
    table.add_row("Weak patterns", "[red]yes[/red]" if contains_weak_pattern(pw) else "[green]no[/green]")
    return table


def cmd_generate(args):
    copies = args.copies if args.copies is not None else args.cfg["default_copies"]
    for i in range(copies):
        try:
            pw = generate()
        except GenerationExhausted as e:
            print(f"[red]Failed to generate password: {e}[/red]")
            return 1
        print(f"[bold green]Password #{i+1}:[/bold green] {pw}")
        if args.analyze:
            print(_analysis_table(pw))
    return 0


def cmd_score(args):
    result = score_password(args.password)
    header = f"Score: {result.score} / {MAX_SCORE} — {result.label or 'n/a'}"
    print(Panel(f"{result.percentage:.0f}% of criteria met", title=header))

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Criterion")
    table.add_column("Met")
    for name, ok in result.details.items():
        table.add_row(name, "[green]✓[/green]" if ok else "[red]✗[/red]")
    print(table)

    sugg = suggest_improvements(result)
    if sugg:
        print("\n[bold]Suggestions:[/bold]")
        for s in sugg:
            print(f" • {s}")
    return 0


def cmd_serve(args):
    from .web.api import create_app

    host = args.host or args.cfg["api_host"]
    port = args.port or args.cfg["api_port"]
    logger.info("serving StrongPass API on %s:%d", host, port)
    create_app().run(host=host, port=port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="strongpass")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--copies", type=int, default=None, help="How many passwords to generate")
    gen.add_argument("--analyze", action="store_true", help="Show a character analysis for each password")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Score a password and show suggestions")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)

    srv = sub.add_parser("serve", help="Run the HTTP API")
    srv.add_argument("--host", type=str, help="Bind address")
    srv.add_argument("--port", type=int, help="Bind port")
    srv.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    args.cfg = load_config()
    setup_logging(logging.DEBUG if args.verbose else args.cfg["log_level"])
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
