"""
cli.py - command line spell checker
Features:
- One-shot subcommands: check / add / list / serve / compare
- Interactive menu (default) with suggestions for unknown words
- Per-session latency metrics
- Uses Rich for tables and formatting
"""

import argparse
import json
import locale
import sys
import time
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box
from rich.markup import escape

from spell_dictionary.core.dictionary_service import BACKENDS, DictionaryService
from spell_dictionary.core.protocols import AddResult, CheckResult
from spell_dictionary.json_api import serve
from spell_dictionary.utils.config_manager import Config
from spell_dictionary.utils.logger_utils import Log
from spell_dictionary.utils.metrics_tracker import Metrics
from spell_dictionary.utils.profile_compare import compare_methods

# initialise console for rich output
console = Console()

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_BAD_INPUT = 2


class CLI:
    """Interactive menu around a loaded DictionaryService."""
    def __init__(self, service: DictionaryService, method: Optional[str] = None, metrics: Metrics = None,
                 cfg: Optional[Config] = None):
        self.service = service
        self.cfg = cfg
        self.method = method
        self.metrics = metrics or Metrics()
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - prompts for a menu choice
        - dispatches to check/add/list/stats
        - exits on 5, /quit, EOF or Ctrl-C
        """
        console.rule("[bold magenta]Dictionary Spell Checker[/bold magenta]")
        while self.running:
            try:
                console.print(
                    "\n[cyan]1)[/cyan] Check spelling  [cyan]2)[/cyan] Add word  "
                    "[cyan]3)[/cyan] List words  [cyan]4)[/cyan] Stats  [cyan]5)[/cyan] Exit"
                )
                choice = Prompt.ask("[yellow]Enter choice[/yellow]", default="").strip()
                self.dispatch(choice)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break

    # COMMAND HANDLING -----------------------------------------------------------
    def dispatch(self, choice: str):
        if choice in ("5", "/quit", "q"):
            self._exit()
            return
        if choice == "1":
            word = Prompt.ask("[blue]Enter word to check[/blue]", default="")
            self.check(word)
            return
        if choice == "2":
            word = Prompt.ask("[blue]Enter new word to add[/blue]", default="")
            self.add(word)
            return
        if choice == "3":
            self.list_words()
            return
        if choice == "4":
            self.show_stats()
            return
        console.print("[red]Invalid choice. Please enter 1-5.[/red]")

    def check(self, word: str) -> Optional[CheckResult]:
        try:
            res = self.service.check(word, self.method)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            return None
        self.metrics.record("check_time", res["timeMs"])
        show_check(res)
        return res

    def add(self, word: str) -> Optional[AddResult]:
        try:
            res = self.service.add(word, self.method)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            return None
        self.metrics.record("add_time", res["timeMs"])
        show_add(res)
        return res

    def list_words(self):
        try:
            res = self.service.list_words(self.method)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            return
        self.metrics.record("list_time", res["timeMs"])
        show_list(res["words"], res["method"])

    def show_stats(self):
        table = Table(title="Session Stats", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Calls", justify="right")
        table.add_column("Avg ms", justify="right", style="magenta")
        for key, calls, avg in self.metrics.rows():
            table.add_row(key, str(calls), f"{avg:.4f}")
        for method, ws in self.service.word_sets.items():
            table.add_row(f"{method} words", str(len(ws)), "")
        console.print(table)
        if self.cfg is not None:
            opts = Table(title="Config", box=box.MINIMAL)
            opts.add_column("Option", style="cyan")
            opts.add_column("Value")
            for key, val in self.cfg.rows():
                opts.add_row(key, escape(str(val)))
            console.print(opts)

    def _exit(self):
        console.rule("[magenta]Goodbye[/magenta]")
        self.running = False


# DISPLAY -------------------------------------------------------------------------------
def show_check(res: CheckResult):
    word = escape(res["word"])
    if res["found"]:
        console.print(f"[green]✓[/green] '[bold]{word}[/bold]' is spelled correctly.")
        return
    console.print(f"[red]✗[/red] '[bold]{word}[/bold]' is NOT found in the dictionary.")
    suggestions = res.get("suggestions") or []
    if not suggestions:
        console.print("[dim](no suggestions)[/dim]")
        return
    prefixed = any(s.startswith(res["word"]) for s in suggestions)
    title = "Suggestions" if prefixed else "No prefix matches, first words"
    table = Table(title=title, box=box.SIMPLE, show_edge=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Word", style="bold")
    for i, s in enumerate(suggestions, 1):
        table.add_row(str(i), escape(s))
    console.print(table)


def show_add(res: AddResult):
    word = escape(res["word"])
    if not res["success"]:
        console.print(f"[yellow]'{word}' already exists in the dictionary.[/yellow]")
    elif res["persisted"]:
        console.print(f"[green]✓[/green] '[bold]{word}[/bold]' added to dictionary and saved.")
    else:
        console.print(f"[yellow]'{word}': {res['message']}[/yellow]")


def show_list(words: List[str], method: str):
    panel = Panel(
        escape("\n".join(words)) if words else "[dim](empty)[/dim]",
        title=f"Dictionary ({len(words)} words, {method})",
        border_style="cyan",
    )
    console.print(panel)


def show_compare(report):
    table = Table(title="BST vs HashMap", box=box.SIMPLE)
    table.add_column("Method", style="cyan")
    table.add_column("Words", justify="right")
    table.add_column("Build ms", justify="right")
    table.add_column("Contains avg ms", justify="right")
    table.add_column("Suggest avg ms", justify="right")
    table.add_column("Height", justify="right", style="dim")
    for method, row in report.items():
        table.add_row(
            method,
            str(row["size"]),
            f"{row['build_ms']:.3f}",
            f"{row['contains_avg_ms']:.6f}",
            f"{row['suggest_avg_ms']:.6f}",
            str(row.get("height", "-")),
        )
    console.print(table)


# ENTRY POINT ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spell-dictionary", description="BST-backed spell checking dictionary")
    parser.add_argument("--config", default="config.json", help="path to JSON config")
    parser.add_argument("--dictionary", help="word list (overrides config)")
    parser.add_argument("--method", choices=sorted(BACKENDS), help="word set backend")
    parser.add_argument("--json", action="store_true", help="print raw JSON results")
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("check", help="check the spelling of a word")
    p.add_argument("word")
    p = sub.add_parser("add", help="add a word to the dictionary")
    p.add_argument("word")
    p.add_argument("--sorted", action="store_true", help="rewrite the word list in sorted order")
    sub.add_parser("list", help="list all words in dictionary order")
    sub.add_parser("serve", help="answer JSON requests on stdin, one per line")
    sub.add_parser("interactive", help="interactive menu (default)")
    p = sub.add_parser("compare", help="benchmark bst vs hashmap")
    p.add_argument("--repeat", type=int, default=100)
    return parser


def use_system_collation():
    """Adopt the user's LC_COLLATE so "locale" collation orders by it, not by the C locale."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        Log.warning(f"[CLI] could not set LC_COLLATE from the environment, using C ordering: {e}")


def load_config(args) -> Config:
    cfg = Config(args.config)
    Log.configure(path=cfg.get("log_path"), echo=bool(cfg.get("log_echo")))
    if args.dictionary:
        cfg.data["dictionary_path"] = args.dictionary
    if cfg.get("collation") == "locale":
        use_system_collation()
    return cfg


def build_service(args, cfg: Optional[Config] = None) -> DictionaryService:
    """Construct and load the service once, before serving anything."""
    if cfg is None:
        cfg = load_config(args)
    service = DictionaryService.from_config(cfg)
    service.load()
    return service


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    command = args.command or "interactive"
    try:
        cfg = load_config(args)
        service = build_service(args, cfg)
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        return EXIT_BAD_INPUT

    if command == "serve":
        serve(service, sys.stdin, sys.stdout)
        return EXIT_OK

    if command == "interactive":
        CLI(service, args.method, cfg=cfg).run()
        return EXIT_OK

    if command == "compare":
        words = service.store.load() if service.store else []
        t0 = time.perf_counter()
        report = compare_methods(words, repeat=args.repeat, collation=getattr(service.word_set(), "collation", "unicode"))
        Log.metric("compare", round(time.perf_counter() - t0, 3), "s")
        if args.json:
            print(json.dumps(report, indent=2))
        else:
            show_compare(report)
        return EXIT_OK

    try:
        if command == "check":
            res = service.check(args.word, args.method)
        elif command == "add":
            res = service.add(args.word, args.method, sort_file=args.sorted)
        else:
            res = service.list_words(args.method)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        return EXIT_BAD_INPUT

    if args.json:
        print(json.dumps(res, ensure_ascii=False))
    elif command == "check":
        show_check(res)
    elif command == "add":
        show_add(res)
    else:
        show_list(res["words"], res["method"])

    if command == "check" and not res["found"]:
        return EXIT_NOT_FOUND
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
