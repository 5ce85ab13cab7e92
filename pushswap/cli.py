"""Command that sorts a fixed sample stack and reports the result."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pushswap.sorting import sort_stack
from pushswap.stacks import Stacks, format_stack, is_sorted

SAMPLE_VALUES = (
    100, 15, 78, 92, 3, 45, 60, 23, 88, 17,
    55, 32, 70, 8, 41, 66, 29, 50, 84, 5,
)


def _report(stacks: Stacks, out) -> None:
    out.write(f"Pile A ({stacks.size_a}): ")
    out.write(format_stack(stacks.a))
    out.write(f"Pile B ({stacks.size_b}): ")
    out.write(format_stack(stacks.b))


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the sample stack, printing instructions and both stacks before and after."""
    parser = argparse.ArgumentParser(
        prog="pushswap",
        description="Sort a sample stack with push-swap instructions.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    # Values are pushed on top one by one, so the last one ends up first.
    stacks = Stacks.from_values(reversed(SAMPLE_VALUES))
    stacks.stream = out

    out.write("=== AVANT TRI ===\n")
    _report(stacks, out)

    sort_stack(stacks)

    out.write("\n=== APRÈS TRI ===\n")
    _report(stacks, out)

    if is_sorted(stacks.a) and stacks.size_b == 0:
        out.write("\nSUCCÈS : Pile A triée, Pile B vide!\n")
    else:
        out.write("\nÉCHEC : Tri non réussi!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())