import pytest

from shardwatch.watch_core.utils import human_truncate_list

pytestmark = pytest.mark.unit

PATHS = ["dir/1", "dir/2", "dir/3", "dir/4"]


@pytest.mark.parametrize(
    "max_items, want",
    [
        (1, "1... 3 more"),
        (2, "1, 2... 2 more"),
        (3, "1, 2, 3... 1 more"),
        (4, "1, 2, 3, 4"),
        (5, "1, 2, 3, 4"),
    ],
)
def test_human_truncate_list(max_items, want):
    assert human_truncate_list(PATHS, max_items) == want


def test_sorts_and_keeps_caller_order():
    paths = ["/x/c.zoekt", "/y/a.zoekt", "/x/b.zoekt"]
    assert human_truncate_list(paths, 2) == "a.zoekt, b.zoekt... 1 more"
    assert paths == ["/x/c.zoekt", "/y/a.zoekt", "/x/b.zoekt"]


def test_empty_list():
    assert human_truncate_list([], 5) == ""
