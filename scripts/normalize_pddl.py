"""Parse a PDDL domain or problem file and save its canonical rendering to file."""

import argparse
from pathlib import Path

from typed_pddl.io.logging import configure_logging, log_info
from typed_pddl.parsing.parser import load_domain, load_problem
from typed_pddl.printing import to_pddl


def normalize(input_path: Path, output_path: Path, overwrite: bool, problem: bool) -> None:
    """Write the canonical PDDL rendering of the input file to the output path.

    :raises FileExistsError: If the output path already exists but the overwrite flag isn't set
    """
    if not overwrite and output_path.exists():
        raise FileExistsError(f"Cannot overwrite existing output path: {output_path}")

    definition = load_problem(input_path) if problem else load_domain(input_path)
    output_path.write_text(to_pddl(definition) + "\n")
    log_info(f"Saved the canonical rendering of {input_path} to {output_path}.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser("normalize_pddl")
    parser.add_argument("input_path", type=Path)
    parser.add_argument("output_path", type=Path)
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Whether to allow overwriting the output path",
    )
    parser.add_argument(
        "--problem",
        action="store_true",
        help="Whether the input file holds a problem (rather than a domain)",
    )

    args = parser.parse_args()
    input_path: Path = args.input_path
    output_path: Path = args.output_path
    overwrite: bool = args.overwrite
    problem: bool = args.problem

    configure_logging("INFO")
    normalize(input_path, output_path, overwrite, problem)
