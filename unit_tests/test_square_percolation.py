import pytest
from square_percolation import Percolation


@pytest.mark.parametrize("n", [2, 3, 10])
def test_new_grid_is_blocked(n):
    p = Percolation(n)
    assert p.numberOfOpenSites() == 0
    assert not p.percolates()
    for row in range(n):
        for col in range(n):
            assert p.isOpen(row, col) is False
            assert p.isFull(row, col) is False


def test_single_site_grid_percolates_after_open():
    p = Percolation(1)
    assert not p.percolates()
    p.open_site(0, 0)
    assert p.percolates()
    assert p.isFull(0, 0)
    assert p.numberOfOpenSites() == 1
    assert p.open_fraction() == 1.0


def test_reference_scenario():
    p = Percolation(5)
    p.open_site(2, 3)
    p.open_site(0, 3)
    p.open_site(1, 3)
    assert p.isFull(0, 3)
    assert p.isFull(2, 3)
    assert not p.percolates()

    p.open_site(3, 3)
    p.open_site(4, 3)
    assert p.percolates()
    assert p.numberOfOpenSites() == 5
    assert not p.isOpen(4, 4)


def test_open_is_idempotent():
    p = Percolation(4)
    p.open_site(1, 2)
    p.open_site(1, 2)
    assert p.numberOfOpenSites() == 1
    assert p.isOpen(1, 2)


def test_open_then_is_open():
    n = 4
    p = Percolation(n)
    for row in range(n):
        for col in range(n):
            assert not p.isOpen(row, col)
            p.open_site(row, col)
            assert p.isOpen(row, col)
    assert p.numberOfOpenSites() == n * n
    assert p.percolates()


def test_percolation_is_a_latch():
    p = Percolation(3)
    for row in range(3):
        p.open_site(row, 0)
    assert p.percolates()
    for row in range(3):
        for col in range(3):
            p.open_site(row, col)
            assert p.percolates()


def test_diagonal_sites_are_not_connected():
    p = Percolation(2)
    p.open_site(0, 0)
    p.open_site(1, 1)
    assert not p.percolates()
    assert not p.isFull(1, 1)


def test_backwash():
    p = Percolation(3)
    # column 0 runs top to bottom
    p.open_site(0, 0)
    p.open_site(1, 0)
    p.open_site(2, 0)
    # bottom-right site touches only the bottom row
    p.open_site(2, 2)
    assert p.percolates()
    assert p.isFull(2, 0)
    assert not p.isFull(2, 2)


def test_full_follows_open_chain_through_the_middle():
    p = Percolation(4)
    p.open_site(0, 1)
    p.open_site(1, 1)
    p.open_site(1, 2)
    p.open_site(2, 2)
    assert p.isFull(2, 2)
    assert not p.isFull(0, 0)
    assert not p.percolates()


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (5, 0), (0, 5), (5, 5)])
def test_out_of_range_coordinates(row, col):
    p = Percolation(5)
    with pytest.raises(IndexError):
        p.open_site(row, col)
    with pytest.raises(IndexError):
        p.isOpen(row, col)
    with pytest.raises(IndexError):
        p.isFull(row, col)
    assert p.numberOfOpenSites() == 0


@pytest.mark.parametrize("n", [0, -1, 2.5, True, "3"])
def test_invalid_grid_size(n):
    with pytest.raises(ValueError):
        Percolation(n)


def test_backwash_with_bottom_branch_reaching_upward():
    p = Percolation(4)
    for row in range(4):
        p.open_site(row, 0)
    # two-site branch hanging off the bottom row, not touching column 0
    p.open_site(2, 3)
    p.open_site(3, 3)
    assert p.percolates()
    assert p.isFull(3, 0)
    assert not p.isFull(3, 3)
    assert not p.isFull(2, 3)

    # joining the branch to the top makes both sites full
    p.open_site(1, 3)
    p.open_site(0, 3)
    assert p.isFull(2, 3)
    assert p.isFull(3, 3)
