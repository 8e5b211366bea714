"""Serialization of the histogram as a value,count table."""

from collections.abc import Iterable, Iterator


def format_rows(pairs: Iterable[tuple[int, int]]) -> Iterator[str]:
    """Render each (value, count) pair as a newline-terminated CSV row."""
    for value, count in pairs:
        yield f"{value},{count}\n"


def write_histogram(output_path: str, pairs: Iterable[tuple[int, int]]) -> None:
    """Write rows to output_path, replacing any existing file."""
    with open(output_path, "w", encoding="ascii", newline="\n") as handle:
        handle.writelines(format_rows(pairs))
