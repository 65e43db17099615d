import io

import pytest
from basicstats.services.ingest import parse_values, read_values

def test_parse_values_stops_at_malformed_token():
    assert parse_values("1 2 abc 3") == [1.0, 2.0]

def test_parse_values_numeric_prefix():
    # The prefix of a token is consumed, then parsing stops
    assert parse_values("1 2 3abc 4") == [1.0, 2.0, 3.0]

def test_parse_values_formats():
    assert parse_values("-1.5e2 +.5 7. 10") == [-150.0, 0.5, 7.0, 10.0]
    assert parse_values("") == []

def test_read_values_from_stream():
    buf = read_values(io.StringIO("1 2\n  2\t3\n\n4\n"))
    assert buf.to_list() == [1.0, 2.0, 2.0, 3.0, 4.0]
    assert buf.capacity == 20
    assert not buf.finalized

def test_read_values_from_path(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1 2 abc 3\n")
    buf = read_values(path)
    assert buf.to_list() == [1.0, 2.0]
    buf = read_values(str(path))
    assert len(buf) == 2

def test_read_values_grows_buffer():
    text = " ".join(str(i) for i in range(50))
    buf = read_values(io.StringIO(text))
    assert len(buf) == 50
    assert buf.capacity == 80
    assert buf.unused_capacity == 30
    assert buf.to_list() == [float(i) for i in range(50)]

def test_read_values_custom_capacity():
    buf = read_values(io.StringIO("1 2 3"), initial_capacity=2)
    assert buf.capacity == 4

def test_read_values_empty_input():
    buf = read_values(io.StringIO(""))
    assert len(buf) == 0
    assert buf.unused_capacity == 20

def test_read_values_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_values(tmp_path / "missing.txt")

def test_parse_values_hex():
    assert parse_values("0x10 -0x1.8p1 0X.8 2") == [16.0, -3.0, 0.5, 2.0]
    # "0x" without digits is the number 0 followed by garbage
    assert parse_values("0x 5") == [0.0]
