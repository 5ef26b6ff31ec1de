import sys

from .snapshot import EntrySnapshot

SEPARATOR = "-" * 21


def format_entry(entry: EntrySnapshot) -> str:
    priority = "null" if entry.priority is None else str(entry.priority)
    return f"Value: {entry.value}\tPriority: {priority}"


def dump(heap) -> str:
    """Render every entry of heap in array order, one per line."""
    return "\n".join(format_entry(entry) for entry in heap.entries())


def print_all(heap, file=None):
    out = file if file is not None else sys.stdout
    text = dump(heap)
    if text:
        print(text, file=out)
    print(SEPARATOR, file=out)
