"""Command-line interface for context-engineer."""
import os
import sys
import logging
from typing import Optional, Tuple

import click
from rich.markup import escape

from .adapters import create_source
from .core.assembly import AssemblyPipeline
from .core.exceptions import ContextEngineerError
from .core.file_reader import FileReader
from .core.models import Config, AssembledDocument
from .core.selection import SelectionEngine
from .core.tokenizer import TokenCounter
from .ui.prompter import TerminalPrompter, token_warning
from .utils.console import ConsoleManager, THEMES, default_theme

logger = logging.getLogger(__name__)


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format='[%(levelname)s] %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def print_banner(console: ConsoleManager) -> None:
    console.print("\n[highlight]CONTEXT ENGINEER[/highlight]")
    console.print(f"[dim]Starting in: {escape(os.getcwd())}[/dim]\n")


def write_output(document: AssembledDocument, output_path: str) -> None:
    """Write the document exactly as assembled, with no newline translation."""
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        f.write(document.text)


def print_summary(console: ConsoleManager, document: AssembledDocument, output_path: str) -> None:
    console.print_separator()
    console.print_success("Context engineering complete!")
    console.print(f"[info]OUTPUT:[/info] [path]{escape(output_path)}[/path]")
    console.print(f"[info]FINAL TOKEN COUNT:[/info] [number]~{document.token_count:,}[/number]")
    console.print(f"[info]SELECTED FILES:[/info] [number]{document.file_count}[/number]")
    console.print("\n[info]Files included:[/info]")
    console.print_file_list(document.files, dict(document.file_tokens))
    console.print_separator()


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.argument('paths', nargs=-1)
@click.option('--files', '-f', multiple=True,
              help='File to include directly (repeatable); skips interactive selection')
@click.option('--config', '-c', 'config_file', type=click.Path(),
              help='Load files from a whitespace-separated list file')
@click.option('--output', '-o', help='Output file (default: context-output.txt)')
@click.option('--request', '-r', help='Request text; prompted for when omitted')
@click.option('--root', type=click.Path(exists=True, file_okay=False),
              help='Directory that file paths are relative to (default: current directory)')
@click.option('--encoding', help='tiktoken encoding name (default: cl100k_base)')
@click.option('--threshold', type=int, help='Token count that triggers a size warning')
@click.option('--theme', '-t', type=click.Choice(list(THEMES)), default=default_theme,
              help='Terminal color theme')
@click.option('--debug', is_flag=True, help='Verbose logging and tracebacks')
@click.version_option(package_name='context-engineer')
def main(paths: Tuple[str, ...], files: Tuple[str, ...], config_file: Optional[str],
         output: Optional[str], request: Optional[str], root: Optional[str],
         encoding: Optional[str], threshold: Optional[int], theme: str, debug: bool) -> None:
    """
    Assemble files and a request into a single LLM-ready context file.

    With no files given, every text file under the current directory is
    offered in an interactive, searchable menu.

    Examples:

        context-engineer

        context-engineer -f src/brain.py -f src/sense.py

        context-engineer -f src/brain.py src/sense.py

        context-engineer -c context -r "Explain the data flow"
    """
    console = ConsoleManager(theme=theme)
    setup_logging(debug)
    print_banner(console)

    try:
        config = Config()
        if output:
            config.output_file = output
        if encoding:
            config.tokenizer_encoding = encoding
        if threshold is not None:
            config.token_warning_threshold = threshold

        root = os.path.abspath(root or os.getcwd())
        explicit = list(files) + list(paths)
        source = create_source(explicit, config_file, root, config)

        tokenizer = TokenCounter(config.tokenizer_encoding)
        reader = FileReader(config, root)
        prompter = TerminalPrompter(console, config)

        if source.interactive:
            console.print_info("Discovering files...")
            candidates = source.get_file_list()
            console.print_success(
                f"Found {len(candidates)} files "
                f"({source.excluded_binary} binary files excluded)."
            )
            engine = SelectionEngine(candidates, reader, tokenizer, config)
            selected = engine.run(prompter)
        else:
            console.print_info(f"Using files from {source.get_name()}...")
            selected = source.get_file_list()
            for error in source.errors:
                console.print_warning(error)
            console.print_success(f"Found {len(selected)} valid files.")

        if not selected:
            console.print_info("No files selected. Exiting.")
            return

        pipeline = AssemblyPipeline(reader, tokenizer, config)
        files_total = pipeline.measure(selected)
        console.print_info(f"Total tokens from selected files: ~{files_total:,}")
        if pipeline.exceeds_threshold(files_total):
            console.print_warning(token_warning(config))

        if request is None:
            request = prompter.ask_request()

        console.print_info("Building context output...")
        document = pipeline.assemble(selected, request)
        write_output(document, config.output_file)
        logger.debug(f"Wrote {len(document.text)} characters to {config.output_file}")

        print_summary(console, document, config.output_file)

    except (KeyboardInterrupt, EOFError):
        console.print("\n[info]Context engineering cancelled. Goodbye![/info]")
        sys.exit(0)

    except ContextEngineerError as e:
        console.print_error(str(e))
        sys.exit(1)

    except Exception as e:
        console.print_error(f"CRITICAL ERROR: {e}")
        if debug:
            console.print_exception()
        sys.exit(1)


if __name__ == '__main__':
    main()
