import array
import sys

import pytest

from flecsolve.variable import variable
from flecsolve.vectors.seq import SeqOps, SeqVector, SeqView, SeqWork

N = 32
FTOL = 1e-8
GIDS = range(N)


def rconv(index, gid):
    return (index + 1) * gid


def cconv(index, gid):
    if index == 0:
        return complex(0.3 * gid, 0.7 * gid)
    if index == 1:
        return complex(0.1 * gid, 0.8 * gid)
    return complex(0.5 * gid, 0.4 * gid)


@pytest.fixture
def vecs():
    real = [SeqVector(values=[rconv(i, g) for g in GIDS]) for i in range(3)]
    comp = [SeqVector(values=[cconv(i, g) for g in GIDS]) for i in range(3)]
    tmp = SeqVector(N)
    tmp_c = SeqVector(values=[0j] * N)
    x, y, z = real
    x_c, y_c, z_c = comp
    return x, y, z, tmp, x_c, y_c, z_c, tmp_c


def check(vec, fn):
    assert vec.local_size() == N
    assert all(abs(fn(g) - v) < FTOL for g, v in zip(GIDS, vec.data))


def test_add(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    tmp.add(x, z)
    tmp_c.add(x_c, z_c)
    check(tmp, lambda g: rconv(0, g) + rconv(2, g))
    check(tmp_c, lambda g: cconv(0, g) + cconv(2, g))


def test_subtract(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    tmp.subtract(x, z)
    tmp_c.subtract(x_c, z_c)
    check(tmp, lambda g: rconv(0, g) - rconv(2, g))
    check(tmp_c, lambda g: cconv(0, g) - cconv(2, g))


def test_multiply(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    tmp.multiply(x, z)
    tmp_c.multiply(x_c, z_c)
    check(tmp, lambda g: rconv(0, g) * rconv(2, g))
    check(tmp_c, lambda g: cconv(0, g) * cconv(2, g))


def test_add_scalar(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    x.add_scalar(x, 1)
    x_c.add_scalar(x_c, 1 + 1j)
    check(x, lambda g: rconv(0, g) + 1)
    check(x_c, lambda g: cconv(0, g) + (1 + 1j))


def test_divide(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    x.add_scalar(x, 1)
    x_c.add_scalar(x_c, 1 + 1j)
    tmp.divide(y, x)
    tmp_c.divide(y_c, x_c)
    check(tmp, lambda g: rconv(1, g) / (rconv(0, g) + 1))
    check(tmp_c, lambda g: cconv(1, g) / (cconv(0, g) + (1 + 1j)))


def test_scale(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    tmp.scale(2, x)
    tmp_c.scale(2.4, x_c)
    check(tmp, lambda g: rconv(0, g) * 2)
    check(tmp_c, lambda g: cconv(0, g) * 2.4)


def test_reciprocal(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    y.add_scalar(y, 1)
    y_c.add_scalar(y_c, 1 + 1j)
    tmp.reciprocal(y)
    tmp_c.reciprocal(y_c)
    check(tmp, lambda g: 1.0 / (rconv(1, g) + 1))
    check(tmp_c, lambda g: 1.0 / (cconv(1, g) + (1 + 1j)))


def test_linear_sum(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    tmp.linear_sum(8, y, 9, z)
    tmp_c.linear_sum(8, y_c, 9, z_c)
    check(tmp, lambda g: rconv(1, g) * 8 + rconv(2, g) * 9)
    check(tmp_c, lambda g: cconv(1, g) * 8.0 + cconv(2, g) * 9.0)


def test_axpy(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    tmp.axpy(7, x, y)
    tmp_c.axpy(7 + 3j, x_c, y_c)
    check(tmp, lambda g: rconv(0, g) * 7 + rconv(1, g))
    check(tmp_c, lambda g: cconv(0, g) * (7 + 3j) + cconv(1, g))


def test_axpby(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    tmp.copy(y)
    tmp_c.copy(y_c)
    tmp.axpby(4, 11, z)
    tmp_c.axpby(4.3 + 7j, 11.8 + 3j, z_c)
    check(tmp, lambda g: rconv(2, g) * 4 + rconv(1, g) * 11)
    check(tmp_c, lambda g: cconv(2, g) * (4.3 + 7j) + cconv(1, g) * (11.8 + 3j))


def test_abs(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    tmp.add_scalar(y, -4)
    tmp_c.add_scalar(y_c, -4 - 4j)
    tmp.abs(tmp)
    tmp_c.abs(tmp_c)
    check(tmp, lambda g: abs(rconv(1, g) - 4))
    check(tmp_c, lambda g: abs(cconv(1, g) - (4 + 4j)))


def test_min_and_max(vecs):
    x, y, z, tmp, *_ = vecs
    tmp.add_scalar(y, -7)
    assert tmp.min().get() == -7
    assert z.max().get() == 93


def test_reductions(vecs):
    x, y, z, tmp, x_c, y_c, z_c, tmp_c = vecs
    tmp.add_scalar(z, -43)
    tmp_c.add_scalar(z_c, -37 - 43j)
    assert abs(tmp_c.dot(x_c).get() - (-15956.319999999996 + 4052.3199999999997j)) < FTOL
    assert abs(tmp_c.inf_norm().get() - 56.72741841473134) < FTOL
    assert abs(tmp_c.l1norm().get() - 1504.8788073375342) < FTOL
    assert tmp.l1norm().get() == 772
    assert tmp.inf_norm().get() == 50
    assert tmp.dot(y).get() == 19840
    assert tmp.global_size().get() == 32
    assert tmp.local_size() == 32
    assert abs(x.l2norm().get() - 102.05880657738459) < FTOL
    assert abs(tmp_c.l2norm().get() - 268.0152234482213) < FTOL


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        SeqVector(3).add(SeqVector(3), SeqVector(4))


def test_values_and_size_must_agree():
    with pytest.raises(ValueError):
        SeqVector(3, values=[1.0, 2.0])


def test_complex_scalar_into_real_vector_raises():
    with pytest.raises(TypeError):
        SeqVector(2).set_scalar(1 + 1j)


def test_set_random_reproducible_and_in_range():
    a, b = SeqVector(20), SeqVector(20)
    a.set_random(5)
    b.set_random(5)
    assert a == b
    assert all(0.0 <= v < 1.0 for v in a.data)
    c = SeqVector(values=[0j] * 10)
    c.set_random(5)
    assert all(0.0 <= v.real < 1.0 and 0.0 <= v.imag < 1.0 for v in c.data)


def test_lp_norm_higher_order():
    v = SeqVector(values=[8.0])
    assert abs(v.lp_norm(3).get() - 2.0) < FTOL
    with pytest.raises(ValueError):
        v.lp_norm(0)


def test_empty_reductions_use_limits():
    v = SeqVector(0)
    assert v.min().get() == sys.float_info.max
    assert v.max().get() == -sys.float_info.max
    assert v.inf_norm().get() == sys.float_info.min


def test_view_shares_buffer():
    buf = [1.0, 2.0, 3.0]
    v = SeqView(buf, variable("p"))
    v.set_scalar(5.0)
    assert buf == [5.0, 5.0, 5.0]
    assert v.subset(variable("p")) is v


def test_view_over_array():
    buf = array.array("d", [1.0, 2.0])
    v = SeqView(buf)
    other = SeqVector(values=[3.0, 4.0])
    v.copy(other)
    assert list(buf) == [3.0, 4.0]


def test_resize():
    v = SeqVector(values=[1.0, 2.0, 3.0])
    v.resize(1)
    assert v.data == [1.0]
    v.resize(3)
    assert v.data == [1.0, 0.0, 0.0]


def test_work_vectors():
    base = SeqVector(values=[1.0, 2.0, 3.0], var=variable("t"))
    work = SeqWork(base, 2)
    assert len(work) == 2
    w0 = work.get(0)
    assert w0.local_size() == base.local_size()
    assert w0.var == base.var
    assert work.get(0) is w0
    assert [w.local_size() for w in work] == [3, 3]
    with pytest.raises(IndexError):
        work.get(2)


def test_dump_writes_one_line_per_value(tmp_path):
    v = SeqVector(values=[1.5, 2.0])
    v.dump(str(tmp_path / "out"))
    assert (tmp_path / "out-0").read_text().splitlines() == ["1.5", "2"]


def test_dump_complex_format(tmp_path):
    ops = SeqOps(complex)
    ops.dump(str(tmp_path / "c"), [complex(1.5, -2.0)])
    assert (tmp_path / "c-0").read_text() == "(1.5,-2)\n"