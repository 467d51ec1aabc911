import argparse, logging, os, sys
from typing import List, Optional

from .common import logger, available_matrices, get_matrix_path
from .emitter import render_arms, render_function
from .errors import MatrixFormatError
from .parsing import read_matrix

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="blosum-table-gen",
        description="Generate match arms from a BLOSUM-style scoring matrix",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("infile", nargs="?", help="matrix file ('residue' header format)")
    src.add_argument("--builtin", metavar="NAME",
                     help=f"bundled matrix, one of: {', '.join(available_matrices())}")
    p.add_argument("-o", "--out", help="output path (default: stdout)")
    p.add_argument("--wrap", action="store_true",
                   help="emit a complete function instead of bare match arms")
    p.add_argument("--fn-name", default="score", help="function name used with --wrap")
    p.add_argument("--preview", action="store_true",
                   help="log the parsed matrix and whether it is symmetric")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p

def _write(lines: List[str], out: Optional[str]) -> None:
    if out:
        with open(out, "w") as sink:
            for line in lines:
                sink.write(line + "\n")
        logger.info("Saved → %s", out)
        return
    for line in lines:
        sys.stdout.write(line + "\n")
    sys.stdout.flush()

def _main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)
    logger.debug("Options: %s", args)

    try:
        source = args.infile if args.infile else get_matrix_path(args.builtin)
        matrix = read_matrix(source)
    except (MatrixFormatError, OSError, UnicodeDecodeError) as err:
        logger.error("%s", err)
        return 1

    if args.preview:
        logger.info("Matrix:\n%s", matrix.to_frame().to_string())
        logger.info("Symmetric: %s", matrix.is_symmetric())

    lines = render_function(matrix, args.fn_name) if args.wrap else render_arms(matrix)
    try:
        _write(lines, args.out)
    except BrokenPipeError:
        # reader went away (e.g. `| head`), not an error
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    return 0

def main() -> None:
    sys.exit(_main())

if __name__ == "__main__":
    main()
