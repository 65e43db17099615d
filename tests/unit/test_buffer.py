import pytest
from basicstats.errors import AllocationError, BufferStateError
from basicstats.services.buffer import NumericBuffer

def test_buffer_starts_empty():
    buf = NumericBuffer()
    assert len(buf) == 0
    assert buf.capacity == 20
    assert buf.unused_capacity == 20
    assert not buf.finalized

def test_buffer_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        NumericBuffer(0)
    with pytest.raises(ValueError):
        NumericBuffer(-3)

def test_buffer_doubles_when_full():
    buf = NumericBuffer(4)
    for i in range(5):
        buf.append(i)
    assert buf.capacity == 8
    assert buf.to_list() == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert buf.unused_capacity == 3

def test_buffer_growth_keeps_order():
    buf = NumericBuffer(3)
    values = [9, 1, 7, 3, 5, 2, 8, 4, 6, 0]
    capacities = [buf.capacity]
    for v in values:
        buf.append(v)
        if buf.capacity != capacities[-1]:
            assert buf.capacity >= capacities[-1] * 2
            capacities.append(buf.capacity)
    assert list(buf) == [float(v) for v in values]
    assert capacities == [3, 6, 12]

def test_buffer_sort_finalizes():
    buf = NumericBuffer(2)
    buf.extend([3.5, -1, 2])
    buf.sort()
    assert buf.finalized
    assert buf.to_list() == [-1.0, 2.0, 3.5]
    # Spare slots are not part of the sorted view
    assert buf.capacity == 4

def test_buffer_is_read_only_after_sort():
    buf = NumericBuffer()
    buf.extend([2, 1])
    buf.sort()
    with pytest.raises(BufferStateError):
        buf.append(3)
    with pytest.raises(BufferStateError):
        buf.sort()
    assert buf.to_list() == [1.0, 2.0]

def test_buffer_indexing():
    buf = NumericBuffer()
    buf.extend([10, 20, 30])
    assert buf[0] == 10
    assert buf[-1] == 30
    with pytest.raises(IndexError):
        buf[3]

def test_buffer_growth_failure_raises_allocation_error(monkeypatch):
    buf = NumericBuffer(2)
    buf.extend([1, 2])

    def fail(count):
        raise MemoryError

    monkeypatch.setattr(NumericBuffer, "_allocate", staticmethod(fail))
    with pytest.raises(AllocationError):
        buf.append(3)
    # Previous contents and capacity survive the failed growth
    assert buf.to_list() == [1.0, 2.0]
    assert buf.capacity == 2
