from fixedmap.debug import dump_table, format_chain
from fixedmap.table import Entry, FixedBucketMap


def test_format_chain():
    entries = [Entry("a", 1), Entry(2, "b"), Entry((1, 2), None)]
    assert format_chain(entries) == "'a': 1 -> 2: 'b' -> (1, 2): None"
    assert format_chain([]) == ""


def test_dump_empty_table(capsys):
    dump_table(FixedBucketMap(3), "empty")

    out = capsys.readouterr().out
    assert out == (
        "== empty ==\n"
        "count 0, capacity 3\n"
        "0000 <empty>\n"
        "0001 <empty>\n"
        "0002 <empty>\n"
    )


def test_dump_single_bucket(capsys):
    t = FixedBucketMap(1)
    t.insert("Test", 6)
    t.insert("Test2", 7)
    t.insert("Test", 8)

    dump_table(t, "chain")

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "== chain ==",
        "count 2, capacity 1",
        "0000 'Test': 8 -> 'Test2': 7",
    ]


def test_dump_lists_every_bucket(capsys):
    t = FixedBucketMap()
    for k in ("Test", "Test1", "Test2"):
        t.insert(k, len(k))

    dump_table(t, "table")

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2 + t.capacity

    index = t.bucket_index("Test1")
    assert "'Test1': 5" in lines[2 + index]
    assert lines[2 + index].startswith("{0:04d} ".format(index))
