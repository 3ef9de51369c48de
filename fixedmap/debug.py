from .shared import printf, show
from .table import Entry, FixedBucketMap


def dump_table(table: FixedBucketMap, name: str):
    printf("== {0:s} ==\n", name)
    printf("count {0:d}, capacity {1:d}\n", table.count, table.capacity)

    for index in range(table.capacity):
        dump_bucket(table, index)


def dump_bucket(table: FixedBucketMap, index: int):
    entries = table.chain(index)
    printf("{0:04d} ", index)
    if not entries:
        printf("<empty>\n")
    else:
        printf("{0:s}\n", format_chain(entries))


def format_chain(entries: list[Entry]) -> str:
    return " -> ".join(format_entry(entry) for entry in entries)


def format_entry(entry: Entry) -> str:
    return "{0:s}: {1:s}".format(show(entry.key), show(entry.value))
