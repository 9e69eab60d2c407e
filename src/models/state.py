"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the conversion pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the conversion progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputSubdir, noExamples
        - env_check: inputSourceFiles, markdownOutputdir, envOK
        - sources_read: podSources
        - pod_convert: conversions
        - results_write: outputFiles
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing .pod/.pm source files
        outputdir: Base output directory for converted files
        verbosity: Logging verbosity level (1-3)
        inputFile: Glob pattern selecting input files (relative to inputdir);
                   empty selects every file with a configured suffix
        outputSubdir: Subdirectory within outputdir for output
        noExamples: Skip usage example extraction
        envOK: Environment validation passed
        inputSourceFiles: Resolved input files, sorted
        markdownOutputdir: Final output directory (outputdir + outputSubdir)
        podSources: Raw POD text keyed by input file
        conversions: Per input file dict with readme, description, usage_examples
        outputFiles: Paths of every file written
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputSubdir: str = field(default=".")
    noExamples: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFiles: List[Path] = field(default_factory=list)
    markdownOutputdir: Path = field(default=Path("/"))
    podSources: Optional[Dict[Path, str]] = field(default=None)
    conversions: Optional[Dict[Path, Dict[str, Any]]] = field(default=None)
    outputFiles: List[Path] = field(default_factory=list)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, outputSubdir, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for conversion output

        Returns:
            ProgramState instance with all recognised CLI options as attributes
        """
        import dataclasses

        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}

        # Explicit directories override anything of the same name in options
        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            sources_read,
            pod_convert,
            results_write,
            results_report,
        )

    This is equivalent to:
        results_report(results_write(pod_convert(sources_read(env_check(initial_state)))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
