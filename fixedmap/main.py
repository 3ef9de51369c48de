import sys

from .debug import dump_table
from .shared import printf, printf_err, show
from .table import DEFAULT_BUFFER_CAPACITY, CapacityError, FixedBucketMap, NotFound


SAMPLE_INSERTS = (
    ("Test", 6),
    ("Test2", 7),
    ("Test", 8),
    ("Test1", 20),
    ("Test2", 15),
    ("Test1", 230),
)

SAMPLE_LOOKUPS = ("Test", "Test1", "Test2", "Te1")


def run_demo(table: FixedBucketMap):
    for key, value in SAMPLE_INSERTS:
        table.insert(key, value)

    dump_table(table, "table")

    for key in SAMPLE_LOOKUPS:
        result = table.get(key)
        if isinstance(result, NotFound):
            printf("\n{0:s} not found\n", show(key))
        else:
            printf("\n{0:s} = {1:s}\n", show(key), show(result))


def parse_capacity(arg: str) -> int:
    try:
        return int(arg)
    except ValueError:
        raise CapacityError(f"capacity must be an integer, got {arg!r}") from None


def main(argv: list[str] | None = None):
    if argv is None:
        argv = sys.argv

    if len(argv) > 2:
        printf_err("Usage: fixedmap [capacity]\n")
        sys.exit(64)

    try:
        if len(argv) == 2:
            table = FixedBucketMap(parse_capacity(argv[1]))
        else:
            table = FixedBucketMap(DEFAULT_BUFFER_CAPACITY)
    except CapacityError as e:
        printf_err("{0:s}\n", str(e))
        sys.exit(64)

    run_demo(table)


if __name__ == "__main__":
    main()
