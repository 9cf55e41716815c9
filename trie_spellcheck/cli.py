"""
cli.py - command line spell checker
Commands:
- check FILE       print the text with misspelled words highlighted
- suggest WORD...  show dictionary suggestions for each word
- fix FILE         interactive correction, then save the corrected text
Uses Rich for tables, prompts and formatting.
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich import box
from rich.markup import escape

from trie_spellcheck.context.pipeline import CheckPipeline
from trie_spellcheck.core.dictionary import Dictionary
from trie_spellcheck.core.suggestion_engine import ORDERINGS, STRATEGIES
from trie_spellcheck.errors import ConfigError, SourceUnavailable
from trie_spellcheck.utils.config_manager import DEFAULT_CONFIG_PATH, Config
from trie_spellcheck.utils.logger_utils import setup_logging

# initialise console for rich output
console = Console()

EXIT_OK = 0
EXIT_MISSPELLED = 1
EXIT_FATAL = 2


class CLI:
    """Command-line interface: owns the loaded Dictionary and the console."""

    def __init__(self, dictionary: Dictionary, out: Console = None):
        self.dictionary = dictionary
        self.console = out or console

    # COMMAND: CHECK -----------------------------------------------------------
    def check(self, path: str) -> int:
        pipeline = CheckPipeline(self.dictionary)
        try:
            words = pipeline.process_file(path)
        except (OSError, UnicodeDecodeError) as e:
            self.console.print(f"[red]Cannot open {escape(path)}:[/red] {escape(str(e))}")
            return EXIT_FATAL

        self.console.print(pipeline.render())
        bad = [w for w in words if not w.correct]
        if not bad:
            self.console.print("[green]No misspelled words.[/green]")
            return EXIT_OK
        self.console.print(
            f"[yellow]{len(bad)} misspelled token(s), {len(pipeline.misspelled())} distinct.[/yellow]"
        )
        return EXIT_MISSPELLED

    # COMMAND: SUGGEST ----------------------------------------------------------
    def suggest(self, words: List[str]) -> int:
        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("Word", style="bold")
        table.add_column("Known", justify="center")
        table.add_column("Suggestions", style="cyan")

        for w in words:
            known = "[green]yes[/green]" if self.dictionary.exists(w) else "[red]no[/red]"
            found = self.dictionary.suggest_with_distance(w)
            text = ", ".join(f"{s} ({d})" for s, d in found) or "[dim](none)[/dim]"
            table.add_row(escape(w), known, text)
        self.console.print(table)
        return EXIT_OK

    # COMMAND: FIX --------------------------------------------------------------
    def fix(self, path: str, output: Optional[str] = None) -> int:
        """
        Loop over distinct misspelled tokens:
        suggestions -> display -> user choice -> remember replacement -> save
        """
        pipeline = CheckPipeline(self.dictionary)
        try:
            pipeline.process_file(path)
        except (OSError, UnicodeDecodeError) as e:
            self.console.print(f"[red]Cannot open {escape(path)}:[/red] {escape(str(e))}")
            return EXIT_FATAL

        self.console.print(pipeline.render())
        if not pipeline.misspelled():
            self.console.print("[green]Nothing to fix.[/green]")
            return EXIT_OK

        try:
            replacements = pipeline.correct(self._choose)
        except (EOFError, KeyboardInterrupt):
            self.console.print("\n[yellow]Aborted, nothing saved.[/yellow]")
            return EXIT_MISSPELLED

        target = output or path
        try:
            pipeline.save(target, replacements)
        except OSError as e:
            self.console.print(f"[red]Could not save to {escape(target)}:[/red] {escape(str(e))}")
            return EXIT_MISSPELLED
        self.console.print(f"[green]Corrected text saved to {escape(target)}[/green]")
        return EXIT_OK

    def _choose(self, token: str, suggestions: List[str]) -> Optional[str]:
        """
        Ask what to do with one misspelled token.
        Returns the replacement, or None to keep the token.
        """
        self.console.print(f"\n[bold red]Incorrect word:[/bold red] {escape(token)}")
        if suggestions:
            self._display_suggestions(suggestions)
            question = "Pick # / 'c' custom / 'i' ignore"
        else:
            self.console.print("[dim]No suggestions found.[/dim]")
            question = "'c' custom / 'i' ignore"

        chosen = Prompt.ask(question, default="i", console=self.console).strip()
        if chosen == "c":
            custom = Prompt.ask("Enter replacement", console=self.console).strip()
            return custom or None
        if chosen.isdigit() and 1 <= int(chosen) <= len(suggestions):
            word = suggestions[int(chosen) - 1]
            self.console.print(f"[green]Accepted:[/green] {word}")
            return word
        return None

    def _display_suggestions(self, suggestions: List[str]):
        table = Table(box=box.SIMPLE, show_edge=False, show_header=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        for i, w in enumerate(suggestions, 1):
            table.add_row(str(i), w)
        self.console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trie-spellcheck",
        description="Check text against a word list and suggest close matches.",
    )
    parser.add_argument("--dictionary", "-d", help="vocabulary file, whitespace separated words")
    parser.add_argument("--config", help=f"JSON config file (default: {DEFAULT_CONFIG_PATH} if present)")
    parser.add_argument("--max-distance", type=int, help="largest edit distance for suggestions")
    parser.add_argument("--limit", type=int, help="max suggestions per word")
    parser.add_argument("--strategy", choices=STRATEGIES, help="suggestion search strategy")
    parser.add_argument("--ordering", choices=ORDERINGS, help="suggestion ordering")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p_check = sub.add_parser("check", help="highlight misspelled words in a file")
    p_check.add_argument("file")

    p_suggest = sub.add_parser("suggest", help="suggest corrections for words")
    p_suggest.add_argument("words", nargs="+")

    p_fix = sub.add_parser("fix", help="interactively correct a file")
    p_fix.add_argument("file")
    p_fix.add_argument("--output", "-o", help="write here instead of overwriting FILE")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        # a config file named on the command line must exist
        cfg = Config(args.config or DEFAULT_CONFIG_PATH, required=args.config is not None)
        cfg.update(
            dictionary=args.dictionary,
            max_distance=args.max_distance,
            max_suggestions=args.limit,
            strategy=args.strategy,
            ordering=args.ordering,
        )
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        return EXIT_FATAL

    try:
        dictionary = Dictionary.load(cfg.get("dictionary"), **cfg.dictionary_settings())
    except SourceUnavailable as e:
        # no checking is possible without a vocabulary
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_FATAL

    cli = CLI(dictionary)
    if args.command == "check":
        return cli.check(args.file)
    if args.command == "suggest":
        return cli.suggest(args.words)
    return cli.fix(args.file, args.output)


if __name__ == "__main__":
    sys.exit(main())
