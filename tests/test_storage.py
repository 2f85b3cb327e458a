from flecsolve.operators.core import Base, make
from flecsolve.operators.handle import make_shared, ref
from flecsolve.operators.storage import Storage
from flecsolve.vectors.seq import SeqVector


class Copier(Base):
    def apply(self, x, y):
        y.copy(x)


def test_direct_storage():
    op = make(Copier())
    assert Storage(op).get() is op


def test_handle_storage_unwraps():
    h = make_shared(Copier())
    assert Storage(h).get() is h.get()
    assert Storage(ref(h.get())).get() is h.get()


def test_storage_from_storage():
    op = make(Copier())
    s = Storage(Storage(op))
    assert s.get() is op


def test_ref_is_non_owning_handle():
    op = make(Copier())
    r = Storage(make_shared(op)).ref()
    assert r.get() is op
    assert not r.owned
    x = SeqVector(values=[3.0, 1.0])
    y = SeqVector(2)
    r(x, y)
    assert y == x