#!/usr/bin/env python3
"""
poddown - POD to Markdown converter

Converts Perl POD documentation into Markdown and extracts titled Perl usage
examples from it.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

For every input file X.pod (or X.pm, of which only the POD blocks are
read) the converter writes:
    - X.md: the POD rendered as Markdown
    - X.examples.json: module description and usage examples
      (skipped with --noExamples)

Usage:
    poddown inputdir/ outputdir/ [--inputFile PATTERN]

Examples:
    # Convert every .pod/.pm file under inputdir
    poddown docs/ output/

    # Convert a single file into a subdirectory, Markdown only
    poddown . output/ --inputFile lib/DBI.pm --outputSubdir dbi/ --noExamples

    # Verbose output
    poddown docs/ output/ -vv
"""

import json
import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import Any, Dict, List

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import (
    __version__,
    LOG,
    state_connectToLogger,
    pod_renderer,
    example_extractor,
    description_extract,
    pod_isolate,
)
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
                 _     _
  _ __   ___   __| | __| | _____      ___ __
 | '_ \ / _ \ / _` |/ _` |/ _ \ \ /\ / / '_ \
 | |_) | (_) | (_| | (_| | (_) \ V  V /| | | |
 | .__/ \___/ \__,_|\__,_|\___/ \_/\_/ |_| |_|
 |_|
  POD to Markdown converter
"""

# Define CLI arguments
parser = ArgumentParser(
    description="poddown - POD to Markdown converter with usage example extraction",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile",
    default="",
    type=str,
    help="Glob pattern (relative to inputdir) selecting POD files. Defaults to every .pod/.pm file",
)

parser.add_argument(
    "--outputSubdir",
    default=".",
    type=str,
    help="Subdirectory within outputdir for the converted files",
)

parser.add_argument(
    "--noExamples",
    action="store_true",
    default=False,
    help="Only render Markdown; do not write usage example files",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve input files.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFiles: Sorted list of POD files to convert
            - markdownOutputdir: Created output directory path
            - envOK: True if environment is valid

    Exits:
        1 if inputdir does not exist or no input files match
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    if state.inputFile:
        candidates = state.inputdir.glob(state.inputFile)
    else:
        candidates = (
            path for path in state.inputdir.rglob("*") if path.suffix in appsettings.input_suffixes
        )
    state.inputSourceFiles = sorted(path for path in candidates if path.is_file())

    if not state.inputSourceFiles:
        print(f"Error: No POD files found in {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    LOG(f"Found {len(state.inputSourceFiles)} input file(s)", level=2)

    state.markdownOutputdir = state.outputdir / state.outputSubdir
    state.markdownOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.markdownOutputdir}", level=2)

    state.envOK = True
    return state


def sources_read(inputstate: ProgramState) -> ProgramState:
    """
    Read every input file into memory.

    Perl source files (see appsettings.module_suffixes) are reduced to
    their POD blocks so that package code never reaches the converter.

    Returns:
        ProgramState with added field:
            - podSources: Dict mapping input path to its POD text

    Exits:
        1 if any file cannot be read
    """

    state = inputstate.copy()

    LOG("Reading source files...", level=1)

    sources: Dict[Path, str] = {}
    for path in state.inputSourceFiles:
        try:
            sources[path] = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading input file {path}: {e}", file=sys.stderr)
            sys.exit(1)
        if path.suffix in appsettings.module_suffixes:
            sources[path] = pod_isolate(sources[path])
            LOG(f"Kept only the POD blocks of {path.name}", level=3)
        LOG(f"Read {len(sources[path])} characters from {path.name}", level=2)

    state.podSources = sources
    return state


def pod_convert(inputstate: ProgramState) -> ProgramState:
    """
    Render Markdown, extract usage examples and describe each module.

    Conversion never fails: unreadable POD just produces empty results.

    Returns:
        ProgramState with added field:
            - conversions: Dict mapping input path to a dict with
              readme (str), description (str) and usage_examples (list)
    """

    state = inputstate.copy()

    LOG("Converting POD to Markdown...", level=1)

    conversions: Dict[Path, Dict[str, Any]] = {}
    for path, source in (state.podSources or {}).items():
        conversions[path] = {
            "readme": pod_renderer.render(source),
            "description": description_extract(source),
            "usage_examples": [] if state.noExamples else example_extractor.extract(source),
        }
        LOG(
            f"{path.name}: {len(conversions[path]['usage_examples'])} usage example(s)",
            level=2,
        )

    state.conversions = conversions
    return state


def outputStem_resolve(state: ProgramState, path: Path) -> Path:
    """Output path (without suffix) mirroring path's location under inputdir"""
    relative = path.relative_to(state.inputdir) if state.inputdir else Path(path.name)
    return state.markdownOutputdir / relative.parent / relative.stem


def results_write(inputstate: ProgramState) -> ProgramState:
    """
    Write Markdown and usage example files.

    Returns:
        ProgramState with added field:
            - outputFiles: Every path written

    Exits:
        1 if conversions is None or a file cannot be written
    """

    state = inputstate.copy()

    if state.conversions is None:
        print("Error: No conversions available", file=sys.stderr)
        sys.exit(1)

    written: List[Path] = []
    try:
        for path, conversion in state.conversions.items():
            stem = outputStem_resolve(state, path)
            stem.parent.mkdir(parents=True, exist_ok=True)

            markdown_file = stem.parent / f"{stem.name}.md"
            markdown_file.write_text(conversion["readme"] + "\n", encoding="utf-8")
            written.append(markdown_file)
            LOG(f"Wrote {markdown_file}", level=2)

            if state.noExamples:
                continue

            examples_file = stem.parent / f"{stem.name}.examples.json"
            payload = {
                "description": conversion["description"],
                "usage_examples": [example.to_dict() for example in conversion["usage_examples"]],
            }
            examples_file.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
            written.append(examples_file)
            LOG(f"Wrote {examples_file}", level=2)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    state.outputFiles = written
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display conversion results to user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state: ProgramState = inputstate.copy()

    if state.verbosity >= 1:
        example_count = sum(
            len(conversion["usage_examples"]) for conversion in (state.conversions or {}).values()
        )
        LOG("\n✓ Conversion successful!", level=1)
        LOG(f"  Files converted: {len(state.conversions or {})}", level=1)
        LOG(f"  Usage examples:  {example_count}", level=1)
        LOG(f"  Output:          {state.markdownOutputdir}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="poddown - POD to Markdown converter",
    category="Documentation",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - convert POD files in inputdir to Markdown in outputdir.

    Orchestrates the full conversion pipeline:
        1. env_check: Validate paths and find input files
        2. sources_read: Read POD text
        3. pod_convert: Render Markdown, extract examples and descriptions
        4. results_write: Write .md and .examples.json files
        5. results_report: Display results to user

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, sources_read, pod_convert, results_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
