import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import Thresholds, load_config
from .detector import rank_candidates, validate_variants
from .errors import SimilarityError
from .loader import load_from_file, load_paths
from .similarity import calculate_similarity


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _thresholds(args: argparse.Namespace) -> Thresholds:
    cfg = load_config(args.config) if args.config else {}
    return Thresholds.from_config(cfg)


def cmd_compare(args: argparse.Namespace) -> int:
    a = load_from_file(args.file_a)
    b = load_from_file(args.file_b)
    score = calculate_similarity(a.content, b.content)
    if args.json:
        print(json.dumps({"a": a.name, "b": b.name, "score": score}, indent=2))
    else:
        print(f"{a.name} vs {b.name}: {score:.4f}")
    return 0


def cmd_rank(args: argparse.Namespace) -> int:
    thr = _thresholds(args)
    original = load_from_file(args.original)
    candidates = load_paths(args.candidates)
    matches = rank_candidates(original.content, candidates, thr)

    if args.json:
        print(json.dumps({"original": original.name, "matches": [m.to_dict() for m in matches]}, indent=2))
        return 0

    print(f"Matches for {original.name}:")
    for m in matches:
        flag = " (near identical)" if m.near_identical else ""
        print(f"- {m.name}: {m.score * 100:.2f}% [{m.band}]{flag}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    thr = _thresholds(args)
    original = load_from_file(args.original)
    variants = load_paths(args.variants)
    checks = validate_variants(original.content, variants, thr)

    if args.json:
        print(json.dumps({"original": original.name, "variants": [c.to_dict() for c in checks]}, indent=2))
        return 0

    print(f"Variants of {original.name}:")
    for c in checks:
        notes: List[str] = []
        if c.duplicate_of_original:
            notes.append("duplicate of original")
        if c.duplicate_of_variant is not None:
            notes.append(f"duplicate of variant {c.duplicate_of_variant}")
        suffix = f" ({', '.join(notes)})" if notes else ""
        print(f"- [{c.index}] {c.name}: {c.score * 100:.2f}% [{c.band}]{suffix}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="code-similarity",
        description="Score lexical similarity of source files with TF-IDF and cosine similarity.",
    )
    p.add_argument("-v", "--verbose", action="count", default=0, help="Repeat for more logging")
    p.add_argument("--config", help="JSON file with score thresholds")
    p.add_argument("--json", action="store_true", help="Print results as JSON")
    sub = p.add_subparsers(dest="command", required=True)

    c = sub.add_parser("compare", help="Score two files against each other")
    c.add_argument("file_a")
    c.add_argument("file_b")
    c.set_defaults(func=cmd_compare)

    r = sub.add_parser("rank", help="Rank candidate files by similarity to an original")
    r.add_argument("original")
    r.add_argument("candidates", nargs="+", help="Files or directories of .py files")
    r.set_defaults(func=cmd_rank)

    v = sub.add_parser("validate", help="Check generated variants for duplicates")
    v.add_argument("original")
    v.add_argument("variants", nargs="+", help="Files or directories of .py files")
    v.set_defaults(func=cmd_validate)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)
    try:
        return args.func(args)
    except (SimilarityError, OSError) as e:
        logging.error("%s", e)
        return 1
    except Exception as e:
        logging.exception("Unhandled error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
