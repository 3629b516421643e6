from __future__ import annotations

import argparse
import json
import os
import sys
from collections.abc import Callable
from typing import Any

from xtlib._random import DEFAULT_CHARSET, RandomString
from xtlib._set import Set
from xtlib._term import dim, force_color, truth

_ALGEBRA: dict[str, Callable[[Set[str], list[Set[str]]], Set[str]]] = {
    "union": lambda first, rest: first.union(*rest),
    "intersection": lambda first, rest: first.intersection(*rest),
    "difference": lambda first, rest: first.difference(*rest),
    "symmetric-difference": lambda first, rest: first.symmetric_difference(rest[0]),
}

_PREDICATES: dict[str, Callable[[Set[str], Set[str]], bool]] = {
    "subset": Set.is_subset,
    "superset": Set.is_superset,
    "disjoint": Set.is_disjoint,
}

_BINARY = {"symmetric-difference", *_PREDICATES}


def _split(raw: str) -> list[str]:
    if raw.strip() == "":
        return []
    return [part.strip() for part in raw.split(",")]


def _parse_sets(raws: list[str]) -> list[Set[str]]:
    sets: list[Set[str]] = []
    for n, raw in enumerate(raws, start=1):
        values = _split(raw)
        s = Set(values)
        dropped = len(values) - len(s)
        if dropped:
            print(f"warning: set {n}: dropped {dropped} duplicate value(s)", file=sys.stderr)
        sets.append(s)
    return sets


def _emit(value: Any, *, json_mode: bool) -> None:
    if json_mode:
        print(json.dumps(value))
    elif isinstance(value, list):
        for item in value:
            print(item)
    else:
        print(value)


def _cmd_random(args: argparse.Namespace) -> int:
    gen = RandomString(charset=args.charset)
    if args.count < 0:
        print(f"error: count must be non-negative, got {args.count}", file=sys.stderr)
        return 1
    try:
        out = [gen.generate(args.length) for _ in range(args.count)]
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    _emit(out, json_mode=args.json)
    return 0


def _cmd_set(args: argparse.Namespace, p: argparse.ArgumentParser) -> int:
    if args.op in _BINARY and len(args.sets) != 2:
        p.error(f"'{args.op}' takes exactly two sets, got {len(args.sets)}")

    first, *rest = _parse_sets(args.sets)

    if args.op in _PREDICATES:
        holds = _PREDICATES[args.op](first, rest[0])
        if args.json:
            print(json.dumps(holds))
        else:
            print(truth(holds, stream=sys.stdout))
        return 0 if holds else 1

    result = _ALGEBRA[args.op](first, rest)
    _emit(result.items(), json_mode=args.json)
    if not args.json and not result:
        print(dim("(empty set)", stream=sys.stderr), file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Print results as JSON")
    common.add_argument("--no-color", action="store_true", help="Disable ANSI colors")

    p = argparse.ArgumentParser(prog="xtlib", description="Ordered set algebra and secure random strings.")
    sub = p.add_subparsers(dest="command", required=True)

    rp = sub.add_parser("random", parents=[common], help="Generate cryptographically secure random strings")
    rp.add_argument("-n", "--length", type=int, default=16, help="Length of each string")
    rp.add_argument("-c", "--count", type=int, default=1, help="Number of strings to generate")
    rp.add_argument(
        "--charset",
        default=os.environ.get("XTLIB_CHARSET") or DEFAULT_CHARSET,
        help="Characters to draw from (default: $XTLIB_CHARSET or ASCII letters)",
    )

    sp = sub.add_parser("set", parents=[common], help="Apply a set operation to comma-separated sets")
    sp.add_argument("op", choices=[*_ALGEBRA, *_PREDICATES], help="Operation to apply")
    sp.add_argument("sets", nargs="+", metavar="SET", help="Comma-separated values, e.g. 'a,b,c'")

    args = p.parse_args(argv)

    if args.no_color:
        force_color(False)

    if args.command == "random":
        return _cmd_random(args)
    return _cmd_set(args, sp)
