import random

import pytest

from asdlab.minheap import MinHeap, main, run_commands


def _drain(heap):
    keys = []
    while not heap.is_empty():
        keys.append(heap.delete_min())
    return keys


def test_new_heap_is_empty():
    heap = MinHeap(5)
    assert len(heap) == 0
    assert heap.is_empty() is True
    assert heap.is_full() is False


@pytest.mark.parametrize("size", [0, -3])
def test_size_must_be_positive(size):
    with pytest.raises(ValueError):
        MinHeap(size)


def test_min_does_not_remove():
    heap = MinHeap(4)
    heap.insert(2, 5.0)
    heap.insert(0, -1.0)
    heap.insert(3, 7.5)
    assert heap.min() == 0
    assert heap.min() == 0
    assert len(heap) == 3


def test_delete_min_returns_keys_in_priority_order():
    prios = {0: 3.0, 1: -2.0, 2: 10.0, 3: 0.5, 4: 7.0, 5: 1.0}
    heap = MinHeap(6)
    for key, prio in prios.items():
        heap.insert(key, prio)
    keys = _drain(heap)
    assert keys == sorted(prios, key=prios.get)


@pytest.mark.parametrize("seed", range(5))
def test_random_operations_keep_order(seed):
    rng = random.Random(seed)
    size = 40
    heap = MinHeap(size)
    prios = {k: rng.uniform(-100, 100) for k in range(size)}
    for key, prio in prios.items():
        heap.insert(key, prio)
    for key in rng.sample(range(size), 15):
        prios[key] = rng.uniform(-100, 100)
        heap.change_prio(key, prios[key])
    keys = _drain(heap)
    assert sorted(keys) == list(range(size))
    ordered = [prios[k] for k in keys]
    assert ordered == sorted(ordered)


def test_full_heap_rejects_insert():
    heap = MinHeap(2)
    heap.insert(0, 1.0)
    heap.insert(1, 2.0)
    assert heap.is_full() is True
    with pytest.raises(IndexError):
        heap.insert(1, 3.0)


@pytest.mark.parametrize("key", [-1, 3])
def test_insert_key_out_of_range(key):
    heap = MinHeap(3)
    with pytest.raises(ValueError):
        heap.insert(key, 1.0)


def test_insert_duplicate_key():
    heap = MinHeap(3)
    heap.insert(1, 1.0)
    with pytest.raises(ValueError):
        heap.insert(1, 0.0)


def test_empty_heap_operations_raise():
    heap = MinHeap(3)
    with pytest.raises(IndexError):
        heap.min()
    with pytest.raises(IndexError):
        heap.delete_min()


def test_change_prio_decrease_moves_to_top():
    heap = MinHeap(8)
    for key in range(8):
        heap.insert(key, float(key * 10))
    heap.change_prio(7, -2.0)
    assert heap.min() == 7


def test_change_prio_increase_moves_away_from_top():
    heap = MinHeap(8)
    for key in range(8):
        heap.insert(key, float(key * 10))
    heap.change_prio(0, 31.0)
    assert heap.min() == 1
    assert _drain(heap) == [1, 2, 3, 0, 4, 5, 6, 7]


def test_change_prio_missing_key():
    heap = MinHeap(4)
    heap.insert(0, 1.0)
    with pytest.raises(KeyError):
        heap.change_prio(2, 0.0)
    with pytest.raises(ValueError):
        heap.change_prio(9, 0.0)


def test_deleted_key_can_be_reinserted():
    heap = MinHeap(2)
    heap.insert(1, 4.0)
    assert heap.delete_min() == 1
    assert heap.is_empty() is True
    heap.insert(1, 2.0)
    assert heap.min() == 1


def test_clear_empties_heap_and_frees_keys():
    heap = MinHeap(3)
    heap.insert(0, 1.0)
    heap.insert(2, 0.0)
    heap.clear()
    assert len(heap) == 0
    heap.insert(2, 5.0)
    assert heap.min() == 2


def test_format_single_element():
    heap = MinHeap(8)
    heap.insert(3, 1.5)
    expected = (
        "\n** Contenuto dello heap:\n\n"
        "n=1 size=8\n"
        "Contenuto dell'array heap[] (stampato a livelli):\n"
        "h[ 0]=( 3,   1.50) \n"
        "\n\n** Fine contenuto dello heap\n\n"
    )
    assert heap.format() == expected


def test_format_prints_levels():
    heap = MinHeap(8)
    for key in range(5):
        heap.insert(key, float(key))
    level_lines = [line for line in heap.format().splitlines() if "h[" in line]
    assert [line.count("h[") for line in level_lines] == [1, 2, 2]


def test_run_commands_script():
    script = "4\n+ 1 2.5\n+ 2 1.0\n?\ns\n-\n?\nc 1 9\ns\n"
    lines = "".join(run_commands(script)).splitlines()
    assert lines == [
        "minheap_create(4)",
        "minheap_insert(h, 1, 2.500000)",
        "minheap_insert(h, 2, 1.000000)",
        "minheap_min(h) = 2",
        "minheap_get_n(h) = 2",
        "minheap_delete_min(h) = 2",
        "minheap_min(h) = 1",
        "minheap_change_prio(h, 1, 9.000000)",
        "minheap_get_n(h) = 1",
    ]


def test_run_commands_print_matches_format():
    chunks = list(run_commands("3 + 0 -1.5 p"))
    heap = MinHeap(3)
    heap.insert(0, -1.5)
    assert chunks[-1] == heap.format()


def test_run_commands_unknown_command():
    with pytest.raises(ValueError, match="Unknown command x"):
        list(run_commands("3\nx\n"))


def test_run_commands_missing_size():
    with pytest.raises(ValueError, match="Missing size"):
        list(run_commands("+ 1 2.0"))


def test_main_runs_file(tmp_path, capsys):
    path = tmp_path / "heap.in"
    path.write_text("2\n+ 0 3.0\n+ 1 -1.0\n-\ns\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-2:] == ["minheap_delete_min(h) = 1", "minheap_get_n(h) = 1"]


def test_main_usage_and_missing_file(tmp_path, capsys):
    assert main([]) == 1
    assert main([str(tmp_path / "absent.in")]) == 1
    err = capsys.readouterr().err
    assert "Usage" in err
    assert "Can not open" in err


def test_main_reports_heap_error(tmp_path, capsys):
    path = tmp_path / "heap.in"
    path.write_text("2\n-\n")
    assert main([str(path)]) == 1
    assert "empty" in capsys.readouterr().err