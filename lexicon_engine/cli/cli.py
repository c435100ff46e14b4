"""
cli.py - command line front end for the Lexicon
Features:
- One-shot subcommands: lookup, suggest, correct, merge
- Interactive shell with slash commands and "did you mean" on misses
- Query timing readout (/stats)
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from lexicon_engine import __version__
from lexicon_engine.core.lexicon import Lexicon
from lexicon_engine.data.sources import load_dictionary, merge_letter_files
from lexicon_engine.errors import ConfigError, LoadError
from lexicon_engine.utils.config_manager import Config
from lexicon_engine.utils.logger_utils import DEFAULT_LOG_PATH, Log
from lexicon_engine.utils.metrics_tracker import Metrics
from lexicon_engine.utils.timing import timed

# initialise console for rich output
console = Console()

# exit codes
EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_BAD_CONFIG = 2
EXIT_NOT_FOUND = 3

HELP = (
    "Commands: /lookup <word>  /suggest <prefix> [n]  /correct <word> [dist] [n]\n"
    "          /load <file>  /stats  /config [key val]  /help  /quit\n"
    "Anything else is looked up as a word."
)


# DISPLAY ----------------------------------------------------------------------
def show_lookup(out: Console, lexicon: Lexicon, word: str, cfg: Config) -> bool:
    """Print a definition, or the miss plus close matches. Returns whether the word was found."""
    result = lexicon.lookup(word)
    if result.found:
        body = escape(result.definition) if result.definition else "[dim](no definition recorded)[/dim]"
        out.print(Panel(body, title=f"[bold green]{escape(word.lower())}[/bold green]", border_style="green"))
        return True

    out.print(f'[red]Word not found:[/red] "{escape(word)}"')
    close = lexicon.correct(word, cfg["did_you_mean_distance"], cfg["did_you_mean_limit"])
    if close:
        out.print("[bold]Did you mean:[/bold] " + ", ".join(f"[cyan]{escape(w)}[/cyan]" for w in close))
    return False


def show_words(out: Console, title: str, words: List[str], empty: str) -> None:
    """Numbered table of words, or a dim note when there are none."""
    if not words:
        out.print(f"[dim]{escape(empty)}[/dim]")
        return
    table = Table(title=escape(title), box=box.SIMPLE, show_edge=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Word", style="bold")
    for i, w in enumerate(words, 1):
        table.add_row(str(i), escape(w))
    out.print(table)


# INTERACTIVE SHELL ------------------------------------------------------------
class CLI:
    """Interactive shell over a loaded Lexicon."""

    def __init__(self, lexicon: Lexicon, cfg: Config, log: Log, out: Optional[Console] = None):
        self.lexicon = lexicon
        self.cfg = cfg
        self.log = log
        self.out = out or console
        self.metrics = Metrics()
        self.running = True

    def run(self):
        """Prompt until /quit, EOF or Ctrl-C."""
        self.out.rule("[bold magenta]Lexicon[/bold magenta]")
        self.out.print(f"[cyan]{len(self.lexicon)} words loaded.[/cyan]")
        self.out.print(HELP + "\n")

        while self.running:
            try:
                line = Prompt.ask("[green]word[/green]", default="", console=self.out)
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break
            self.handle(line)
        self.out.rule("[red]bye[/red]")

    def handle(self, line: str) -> None:
        line = line.strip()
        if not line:
            return
        if not line.startswith("/"):
            self._lookup(line)
            return
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.out.print(f"[red]Bad input:[/red] {e}")
            return
        self._command(parts[0].lower(), parts[1:])

    # COMMAND HANDLING -----------------------------------------------------------
    def _command(self, cmd: str, args: List[str]) -> None:
        if cmd in ("/q", "/quit", "/exit"):
            self.running = False
            return

        if cmd == "/help":
            self.out.print(HELP)
            return

        if cmd == "/lookup" and args:
            self._lookup(" ".join(args))
            return

        if cmd == "/suggest" and args:
            limit = self._int_arg(args, 1, self.cfg["suggest_limit"])
            if limit is not None:
                self._suggest(args[0], limit)
            return

        if cmd == "/correct" and args:
            dist = self._int_arg(args, 1, self.cfg["correct_distance"])
            limit = self._int_arg(args, 2, self.cfg["correct_limit"])
            if dist is not None and limit is not None:
                self._correct(args[0], dist, limit)
            return

        if cmd == "/load" and args:
            self._reload(args[0])
            return

        if cmd == "/stats":
            self._show_stats()
            return

        if cmd == "/config":
            self._config(args)
            return

        self.out.print(f"[red]Unknown command:[/red] {cmd} (try /help)")

    def _int_arg(self, args: List[str], idx: int, default: int) -> Optional[int]:
        if len(args) <= idx:
            return default
        try:
            return int(args[idx])
        except ValueError:
            self.out.print(f"[red]Expected a number, got[/red] {args[idx]!r}")
            return None

    # QUERIES --------------------------------------------------------------------
    def _lookup(self, word: str) -> None:
        _, dt = timed(show_lookup)(self.out, self.lexicon, word, self.cfg)
        self.metrics.record("lookup_time", dt)

    def _suggest(self, prefix: str, limit: int) -> None:
        words, dt = timed(self.lexicon.suggest_prefix)(prefix, limit)
        self.metrics.record("suggest_time", dt)
        show_words(self.out, f'Suggestions for "{prefix}"', words, f'No suggestions for "{prefix}"')

    def _correct(self, word: str, dist: int, limit: int) -> None:
        words, dt = timed(self.lexicon.correct)(word, dist, limit)
        self.metrics.record("correct_time", dt)
        show_words(self.out, f'Corrections for "{word}"', words, f'No corrections for "{word}"')

    # STATE ----------------------------------------------------------------------
    def _reload(self, path: str) -> None:
        """Build a fresh Lexicon from `path`; keep the current one if loading fails."""
        fresh = Lexicon(fuzzy_index=self.lexicon.fuzzy_index)
        try:
            report = load_dictionary(fresh, path, self.log)
        except LoadError as e:
            self.out.print(f"[red]Failed to load dictionary:[/red] {escape(e.reason)}")
            return
        self.lexicon = fresh
        self.out.print(f"[green]Loaded {report.total} entries ({len(fresh)} words) in {report.seconds:.2f}s[/green]")

    def _show_stats(self) -> None:
        table = Table(title="Session", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("words", str(len(self.lexicon)))
        table.add_row("fuzzy index", self.lexicon.fuzzy_index)
        for key, v in sorted(self.metrics.snapshot().items()):
            table.add_row(f"{key} (avg ms)", f"{self.metrics.avg(key) * 1000:.3f} x{v['count']}")
        self.out.print(table)

    def _config(self, args: List[str]) -> None:
        if not args:
            table = Table(title="Config", box=box.MINIMAL)
            table.add_column("Key", style="cyan")
            table.add_column("Value")
            for k, v in self.cfg.items():
                table.add_row(k, str(v))
            self.out.print(table)
            return
        if len(args) != 2:
            self.out.print("usage: /config [key val]")
            return
        try:
            self.cfg.set(args[0], args[1])
        except ConfigError as e:
            self.out.print(f"[red]{escape(str(e))}[/red]")
            return
        self.out.print(f"{args[0]} = {self.cfg[args[0]]}")


# ONE-SHOT ENTRY POINT ---------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lexicon", description="Dictionary lookup, completion and spelling suggestions.")
    parser.add_argument("--dict", dest="dict_path", help="dictionary file (.csv or .json)")
    parser.add_argument("--config", default="lexicon_config.json", help="config file (created if missing)")
    parser.add_argument("--log", dest="log_path", help="log file (overrides config)")
    parser.add_argument("-v", "--verbose", action="store_true", help="echo log lines to the console")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("lookup", help="look a word up")
    p.add_argument("word")

    p = sub.add_parser("suggest", help="complete a prefix")
    p.add_argument("prefix")
    p.add_argument("-n", "--limit", type=int, help="max suggestions")

    p = sub.add_parser("correct", help="spelling corrections for a word")
    p.add_argument("word")
    p.add_argument("-d", "--distance", type=int, help="max edit distance")
    p.add_argument("-n", "--limit", type=int, help="max corrections")

    p = sub.add_parser("merge", help="merge A.csv..Z.csv into one dictionary file")
    p.add_argument("folder")
    p.add_argument("-o", "--output", default="dictionary.csv")

    sub.add_parser("shell", help="interactive session")
    return parser


def main(argv: Optional[List[str]] = None, out: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    out = out or console

    # config problems are logged before the configured log path is known
    log = Log(path=args.log_path or DEFAULT_LOG_PATH, echo=args.verbose)
    try:
        cfg = Config(args.config, log=log)
    except ConfigError as e:
        log.error(f"bad config {args.config}: {e}")
        out.print(f"[red]Bad config:[/red] {escape(str(e))}")
        return EXIT_BAD_CONFIG
    if not args.log_path:
        log = Log(path=cfg["log_path"], echo=args.verbose)

    if args.command == "merge":
        try:
            merged = merge_letter_files(args.folder, args.output, log)
        except LoadError as e:
            out.print(f"[red]Merge failed:[/red] {escape(e.reason)}")
            return EXIT_LOAD_FAILED
        out.print(f"[green]Merged {len(merged)} files into {args.output}[/green]")
        return EXIT_OK

    lexicon = Lexicon(fuzzy_index=cfg["fuzzy_index"])
    path = args.dict_path or cfg["dictionary_path"]
    try:
        load_dictionary(lexicon, path, log)
    except LoadError as e:
        out.print(f"[red]Failed to load dictionary:[/red] {escape(e.reason)}")
        return EXIT_LOAD_FAILED

    if args.command == "lookup":
        return EXIT_OK if show_lookup(out, lexicon, args.word, cfg) else EXIT_NOT_FOUND

    if args.command == "suggest":
        limit = args.limit if args.limit is not None else cfg["suggest_limit"]
        words = lexicon.suggest_prefix(args.prefix, limit)
        show_words(out, f'Suggestions for "{args.prefix}"', words, f'No suggestions for "{args.prefix}"')
        return EXIT_OK

    if args.command == "correct":
        dist = args.distance if args.distance is not None else cfg["correct_distance"]
        limit = args.limit if args.limit is not None else cfg["correct_limit"]
        words = lexicon.correct(args.word, dist, limit)
        show_words(out, f'Corrections for "{args.word}"', words, f'No spelling corrections needed for "{args.word}"')
        return EXIT_OK

    CLI(lexicon, cfg, log, out).run()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
