# dualdiff

Forward-mode automatic differentiation in pure Python, built on nested dual
numbers. A dual number of order *n* carries a value together with its
derivatives up to the *n*-th order. First derivatives, Hessians and
higher-order cross derivatives all come from evaluating the function as
usual.

## Installation

```
pip install .
```

The test suite needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Dual numbers (`dualdiff.dual`)

```python
from dualdiff.dual import dual, val, sin, exp, log

x = dual(0.5, order=1)
y = sin(x) * exp(x) + log(x)
print(val(y))
```

- `dual(value, order)` builds a number of the given order with all derivatives
  zero. Order 0 gives a plain float.
- `Dual(val, grad)` is the number type itself. Its value and derivative parts
  may themselves be `Dual`s. `Dual.order()` reports how deep the nesting goes.
- `val(x)` returns the innermost float. `order_of(x)` returns the order, and
  0 for plain numbers.
- `component(x, k)` reads the derivative of order `k`.
  `seed_component(x, k, value)` sets it in place. Both raise `ValueError`
  when `k` is outside `0..order`.

`Dual` supports `+ - * / **`, unary `+`/`-` and `abs()`, mixed with plain
numbers on either side. Comparisons (`== != < <= > >=`) act on the innermost
values.

The module provides these elementary functions, which accept duals or plain
numbers: `sin`, `cos`, `tan`, `asin`, `acos`, `atan`, `sinh`, `cosh`, `tanh`,
`exp`, `log`, `log10`, `sqrt`, `power`, `absolute`, `erf`, `atan2` and
`hypot`, where `hypot` takes any number of arguments. `minimum` and `maximum`
return the argument with the smaller or the larger value, and the first
argument on ties. `Dual` also has the methods `sin`, `cos`, `tan`, `exp`,
`log` and `sqrt`.

## Derivatives of a function (`dualdiff.derivative`)

Name the variables to differentiate with `wrt(...)` and the point at which to
evaluate with `at(...)`:

```python
from dualdiff.dual import dual
from dualdiff.derivative import derivative, derivatives, wrt, at

def f(x, y):
    return x * y + x * x

x = dual(1.0, order=1)
y = dual(2.0, order=1)

u, ux = derivatives(f, wrt(x), at(x, y))
uy = derivative(f, wrt(y), at(x, y), order=1)
```

`derivatives` returns every derivative from order 0 up to the order of the
numbers. `derivative` returns a single one. Both also accept a dual number,
or a sequence of duals, in place of a function. For a sequence they return
NumPy arrays, one entry per item.

With higher-order duals, listing several variables in `wrt` gives cross
derivatives. On second-order duals, `wrt(x, y)` yields `[u, ux, uxy]`. When
the list is shorter than the order, the last variable takes the remaining
orders. Listing more variables than the order raises `ValueError`.

`along(...)` gives directional derivatives in place of `wrt(...)`:
`derivatives(f, along(v), at(x))`.

The seeding steps are also available on their own:

- `seed` and `unseed` work on a `wrt` list.
- `seed_along` and `unseed_at` work on `at` and `along`.
- `evaluate(f, at, spec)` calls the function with the seeds in place and
  removes them afterwards, even if the call raises.

## Gradients, Jacobians and Hessians (`dualdiff.gradient`)

```python
from dualdiff.dual import dual, exp
from dualdiff.derivative import wrt, at
from dualdiff.gradient import gradient, jacobian, hessian

x = [dual(v, order=1) for v in (2.0, 3.0, 5.0)]
g = gradient(lambda xs: sum(exp(xi) for xi in xs), wrt(x), at(x))
J = jacobian(lambda xs: [xi * xi for xi in xs], wrt(x), at(x))

x2 = [dual(v, order=2) for v in (2.0, 3.0, 5.0)]
H = hessian(lambda xs: xs[0] * xs[1] * xs[2], wrt(x2), at(x2))
```

The results are NumPy arrays. A `wrt` list may mix single duals and
sequences of them. Its entries are flattened in order, and repeats are
allowed. `wrt_total_length(wrt)` counts the flattened variables, and
`iter_wrt_vars(wrt)` yields `(index, variable)` pairs. `hessian` needs
numbers of order two or more and fills the matrix symmetrically.

## Taylor series along a direction (`dualdiff.taylorseries`)

```python
from dualdiff.dual import dual
from dualdiff.derivative import along, at
from dualdiff.taylorseries import taylorseries

x = [dual(v, order=3) for v in (1.0, 2.0, 3.0)]
series = taylorseries(lambda xs: sum(xi * xi for xi in xs), along([3.0, 5.0, 7.0]), at(x))
series(0.5)
series.derivatives()
```

`TaylorSeries(derivatives)` can also be built directly from a list of
directional derivatives. Each derivative is a float for a scalar function, or
an array for a vector function.

## Vectors and arrays of duals (`dualdiff.vectors`)

`DualVector` is a fixed-length container of duals or floats. It is built from
an iterable or from an integer size, which fills it with zeros. It provides:

- indexing with bounds checking (`IndexError`);
- negation, and addition and subtraction of vectors of the same length;
- in-place scaling by a scalar with `*=` and `/=`;
- whole-vector equality;
- `asarray()`, which returns the values as a NumPy array.

`DualArray` adds element-wise multiplication and division, and arithmetic
with scalars on either side. Its `==` and `!=` also accept lists, tuples and
NumPy arrays of numbers.

```python
from dualdiff.dual import dual
from dualdiff.vectors import DualArray

a = DualArray([dual(1.0, order=1), dual(2.0, order=1)])
b = 2.0 * a + a
b.asarray()
```

## What this package does not do

- It covers forward mode only. There is no reverse-mode (tape or expression
  graph) differentiation.
- It has no command-line tool.
- `DualVector` and `DualArray` are plain Python containers. They are not
  NumPy arrays of duals, and they have no matrix type or linear-algebra
  operations.