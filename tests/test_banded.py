import numpy as np
import pytest
from numpy.linalg import LinAlgError

from gapfill.linalg import SymmetricBandedMatrix


def random_spd_banded(n, u, seed):
    rng = np.random.default_rng(seed)
    m = SymmetricBandedMatrix(n, u)
    for k in range(1, u + 1):
        m.band(k)[:] = rng.uniform(-1.0, 1.0, size=n - k)
    # diagonally dominant => positive definite
    m.band(0).fill(2.0 * u + 1.0)
    return m


def test_band_views_fill_storage():
    m = SymmetricBandedMatrix(4)
    m.band(0).fill(2.0)
    m.band(1).fill(-1.0)

    assert len(m.band(0)) == 4
    assert len(m.band(1)) == 3
    assert m.get(2, 2) == 2.0
    assert m.get(1, 2) == m.get(2, 1) == -1.0
    assert m.get(0, 3) == 0.0


def test_set_returns_previous_and_mirrors():
    m = SymmetricBandedMatrix(3)
    m.band(1).fill(-1.0)

    assert m.set(2, 1, 0.0) == -1.0
    assert m.get(1, 2) == 0.0
    assert m.set(1, 2, 4.0) == 0.0
    assert m.get(2, 1) == 4.0


def test_out_of_band_writes():
    m = SymmetricBandedMatrix(4)
    assert m.set(0, 3, 0.0) == 0.0
    with pytest.raises(IndexError, match="outside the stored band"):
        m.set(0, 3, 1.0)
    with pytest.raises(IndexError):
        m.get(4, 0)
    with pytest.raises(IndexError):
        m.band(2)


@pytest.mark.parametrize("u", [1, 2])
def test_factor_solve_matches_dense(u):
    m = random_spd_banded(12, u, seed=u)
    dense = m.to_dense()
    b = np.linspace(-3.0, 3.0, 12)

    rhs = b.copy()
    m.factor()
    out = m.solve(rhs)

    assert out is rhs
    np.testing.assert_allclose(rhs, np.linalg.solve(dense, b), rtol=1e-10, atol=1e-12)


def test_factor_rejects_indefinite():
    m = SymmetricBandedMatrix(3)
    m.band(0).fill(1.0)
    m.band(1).fill(-2.0)
    with pytest.raises(LinAlgError):
        m.factor()


def test_solve_requires_factor():
    m = SymmetricBandedMatrix(2)
    m.band(0).fill(1.0)
    with pytest.raises(RuntimeError, match="factor"):
        m.solve(np.zeros(2))


def test_entries_locked_after_factor():
    m = SymmetricBandedMatrix(2)
    m.band(0).fill(1.0)
    m.factor()
    assert m.factored
    with pytest.raises(RuntimeError):
        m.set(0, 0, 3.0)


def test_solve_shape_mismatch():
    m = SymmetricBandedMatrix(3)
    m.band(0).fill(1.0)
    m.factor()
    with pytest.raises(ValueError, match="shape"):
        m.solve(np.zeros(2))


def test_zero_dimension():
    m = SymmetricBandedMatrix(0)
    m.factor()
    rhs = np.zeros(0)
    assert m.solve(rhs) is rhs
