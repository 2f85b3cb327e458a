# flecsolve

Building blocks for writing solvers: vectors that carry a variable tag,
multivectors that group several component vectors, operators that act
on them, and factories that build operators from settings read out of
a configuration file.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Vectors

`flecsolve.vectors.core.Vector` is the common interface: a data store
paired with an object holding the kernels that act on it, plus a
variable tag. `flecsolve.vectors.core.is_vector` tells whether an object
is a vector.

`flecsolve.vectors.seq.SeqVector` is a sequential vector backed by a
Python list. Its scalar type is `complex` when any of the initial values
is complex and `float` otherwise. Each operation writes its result into
the vector it is called on:

```python
from flecsolve.vectors.seq import SeqVector

x = SeqVector(values=[1.0, 2.0, 3.0])
y = SeqVector(values=[4.0, 5.0, 6.0])
z = SeqVector(3)

z.add(x, y)                     # z = x + y
z.axpy(2.0, x, y)               # z = 2 x + y
z.linear_sum(3.0, x, -1.0, y)   # z = 3 x - y
z.axpby(2.0, 0.5, x)            # z = 2 x + 0.5 z

print(z.l2norm().get())         # reductions return objects with get()
print(x.dot(y).get())
```

The writing operations are `copy`, `zero`, `set_scalar`, `scale`,
`add`, `subtract`, `multiply`, `divide`, `reciprocal`, `linear_sum`,
`axpy`, `axpby`, `abs`, `add_scalar` and `set_random` (uniform values
in [0, 1), from a given seed or a system-chosen one). Vectors of
different lengths raise `ValueError`.

Reductions (`min`, `max`, `l1norm`, `l2norm`, `lp_norm`, `inf_norm`,
`dot`, `global_size`) return future-like objects from
`flecsolve.future` (`Ready`, `FutureVector`, `FutureTransform`); call
`get()` to obtain the value. `min` and `max` compare real parts; `dot`
conjugates its argument for complex data. `local_size()` returns the
number of stored components directly, and `dump(prefix)` writes one
component per line to the file `<prefix>-0`.

`SeqView` wraps an existing mutable buffer without copying it, and
`SeqWork(vec, n)` hands out `n` scratch vectors, each resized to the
length of `vec` when fetched with `get(i)`.

`flecsolve.numeric` has small helpers (`is_complex`, `real_part`,
`conj`) that treat real and complex scalars alike.

## Variables and multivectors

A vector may be tagged with a variable (`flecsolve.variable.variable`)
so that operators can pick out the components they act on. Untagged
vectors carry `AnonVar.ANONYMOUS`.

```python
import enum
from flecsolve.variable import variable, multivariable
from flecsolve.vectors.seq import SeqVector
from flecsolve.vectors.multi import make

class Vars(enum.Enum):
    PRESSURE = 0
    TEMPERATURE = 1

p = SeqVector(4, var=variable(Vars.PRESSURE))
t = SeqVector(4, var=variable(Vars.TEMPERATURE))
mv = make(p, t)

mv.set_scalar(1.0)
assert mv.subset(variable(Vars.TEMPERATURE)) is t
pair = mv.subset(multivariable(Vars.TEMPERATURE, Vars.PRESSURE))
first, second = pair            # t, p
```

`MultiVector` components must all use variables of the same type.
Operations act component by component; reductions combine the component
results: sums for `l1norm`, `dot`, `local_size` and `global_size`, the
p-th root of the summed p-th powers for `l2norm` and `lp_norm`, and the
extreme value for `min`, `max` and `inf_norm`. `get(i)` returns a
component by position and `getvar(var)` by variable.

## Operators

`flecsolve.operators.core.Operator` wraps a policy object that provides
`apply(x, y)`. The wrapper selects the policy's input and output
variables from the vectors it is given, and provides
`residual(b, x, r)`, which sets `r = b - A x`. `Base` is a convenient
parent for policies, holding parameters and variable tags.

```python
from flecsolve.operators.shell import make_shell, make_identity

double = make_shell(lambda x, y: y.scale(2.0, x))
double(x, z)                    # z = 2 x
double.residual(y, x, z)        # z = y - 2 x

identity = make_identity()      # an owning handle to a copy operator
identity(x, z)                  # z = x
```

`flecsolve.operators.handle` provides `Handle`, with `ref(op)` for a
borrowed handle and `make_shared(policy_or_operator)` for an owning
one. `flecsolve.operators.storage.Storage` holds either an operator or a
handle and always gives back the operator from `get()`.

## Factories and configuration files

`flecsolve.operators.factory.Factory` builds an operator of a kind
chosen by name. Each kind has a `Registration` giving the function that
builds it and, optionally, its settings type and options.
`flecsolve.config.read_config` fills the settings from a configuration
file of `name = value` lines, where `[section]` headers prefix the names
that follow and `#` starts a comment:

```
# solver.cfg
[op]
type = double
```

```python
import enum
from flecsolve.config import read_config
from flecsolve.operators.factory import Factory, Registration
from flecsolve.operators.shell import Shell

class Kind(enum.Enum):
    IDENTITY = "identity"
    DOUBLE = "double"

factory = Factory(Kind, {
    Kind.IDENTITY: Registration(make=lambda s: Shell(lambda x, y: y.copy(x))),
    Kind.DOUBLE: Registration(make=lambda s: Shell(lambda x, y: y.scale(2.0, x))),
})

settings = read_config("solver.cfg", factory.options("op"))
A = factory.make(settings)      # or factory.make_shared(settings)
A(x, z)
```

Kind names match enum values or member names, ignoring case. A kind's
own options are read under `<prefix>.options.`. Unknown or repeated
options, a missing `type`, or a value that cannot be parsed raise
`flecsolve.config.ConfigError`. `FactoryUnion` combines several
factories so that a single `type` option can name a kind from any of
them.

## Norm selection

`flecsolve.norms.parse_norm_type` reads a norm name (`inf`, `l1`,
`l2`, case-insensitive) into a `NormType`, raising `ValueError` for
anything else. `flecsolve.norms.apply` calls a function on vectors, or
once per component index for multivectors.

## What the package does not do

All vectors here live in one process. There are no distributed or
mesh-backed vectors and no parallel execution: `global_size` equals
`local_size`, and `dump` always writes to the file for process 0. The
package provides no solvers of its own and no command-line program; it
is a library of the pieces solvers are built from.