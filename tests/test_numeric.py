import pytest

from flecsolve.numeric import conj, is_complex, real_part


@pytest.mark.parametrize(
    "value, expected",
    [(1 + 2j, True), (complex(3, 0), True), (1.5, False), (4, False)],
)
def test_is_complex(value, expected):
    assert is_complex(value) is expected


def test_real_part_complex():
    assert real_part(3 + 4j) == 3.0


def test_real_part_real_unchanged():
    assert real_part(2.5) == 2.5
    assert real_part(7) == 7


def test_conj_complex():
    z = 0.3 + 0.7j
    assert conj(z).real == z.real
    assert conj(z).imag == -z.imag


def test_conj_involution():
    z = 0.1 - 0.8j
    assert conj(conj(z)) == z


def test_conj_real_unchanged():
    assert conj(5.0) == 5.0


def test_product_with_conjugate_is_real():
    z = 0.5 + 0.4j
    assert (z * conj(z)).imag == 0.0