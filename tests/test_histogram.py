import pytest

from dronenav.histogram import (
    ALPHA_RES,
    GRID_LENGTH_E,
    GRID_LENGTH_Z,
    Histogram,
)


def test_histogram_resolution_is_valid():
    assert ALPHA_RES > 0
    assert 180 % (2 * ALPHA_RES) == 0
    hist = Histogram(ALPHA_RES)
    assert hist.shape == (GRID_LENGTH_E, GRID_LENGTH_Z)


def test_new_histogram_is_empty():
    hist = Histogram(ALPHA_RES)
    assert hist.is_empty()
    assert hist[0, 0] == 0.0


def test_set_makes_histogram_non_empty_and_set_zero_clears():
    hist = Histogram(ALPHA_RES)
    hist[3, 7] = 2.5
    assert hist[3, 7] == 2.5
    assert not hist.is_empty()
    hist.set_zero()
    assert hist.is_empty()
    assert hist[3, 7] == 0.0


def test_read_wraps_indices():
    hist = Histogram(ALPHA_RES)
    hist[GRID_LENGTH_E - 1, GRID_LENGTH_Z - 1] = 4.0
    hist[0, 0] = 1.0
    assert hist[-1, -1] == 4.0
    assert hist[GRID_LENGTH_E, GRID_LENGTH_Z] == 1.0


def test_write_out_of_range_raises():
    hist = Histogram(ALPHA_RES)
    with pytest.raises(IndexError):
        hist[GRID_LENGTH_E, 0] = 1.0
    with pytest.raises(IndexError):
        hist[0, -1] = 1.0
    assert hist.is_empty()
    assert hist[0, GRID_LENGTH_Z - 1] == 0.0


def test_downsample_averages_blocks():
    hist = Histogram(ALPHA_RES)
    for e in (0, 1):
        for z in (0, 1):
            hist[e, z] = 4.0
    hist[2, 2] = 8.0
    hist.downsample()
    assert hist.resolution == 2 * ALPHA_RES
    assert hist.shape == (GRID_LENGTH_E // 2, GRID_LENGTH_Z // 2)
    assert hist[0, 0] == pytest.approx(4.0)
    assert hist[1, 1] == pytest.approx(2.0)
    assert hist[0, 1] == 0.0


def test_upsample_copies_blocks():
    hist = Histogram(2 * ALPHA_RES)
    hist[1, 2] = 3.0
    hist.upsample()
    assert hist.resolution == ALPHA_RES
    assert hist.shape == (GRID_LENGTH_E, GRID_LENGTH_Z)
    block = [hist[e, z] for e in (2, 3) for z in (4, 5)]
    assert block == [3.0, 3.0, 3.0, 3.0]
    assert hist[1, 4] == 0.0
    assert hist[2, 6] == 0.0


def test_downsample_then_upsample_of_uniform_histogram_round_trips():
    hist = Histogram(ALPHA_RES)
    for e in range(GRID_LENGTH_E):
        for z in range(GRID_LENGTH_Z):
            hist[e, z] = 1.5
    hist.downsample()
    hist.upsample()
    assert hist.shape == (GRID_LENGTH_E, GRID_LENGTH_Z)
    values = [hist[e, z] for e in range(GRID_LENGTH_E) for z in range(GRID_LENGTH_Z)]
    assert values == pytest.approx([1.5] * (GRID_LENGTH_E * GRID_LENGTH_Z))


def test_upsample_on_full_resolution_raises():
    with pytest.raises(RuntimeError):
        Histogram(ALPHA_RES).upsample()


def test_downsample_on_half_resolution_raises():
    with pytest.raises(RuntimeError):
        Histogram(2 * ALPHA_RES).downsample()