# numlab

A handful of small numerical experiments. Each one works as a library module
and as a command.

## Installation

    pip install .

To run the test suite with `pytest`, install the `test` extra:
`pip install .[test]`.

## Modules

### `numlab.euler`

This module uses the explicit Euler method to integrate ordinary differential equations.

- `euler_first_order(t0, t_end, h, y0, f)` integrates `y' = f(t, y)` and
  keeps stepping while `t < t_end`. It returns the final `y`.
- `euler(t0, t_end, h, ys, f)` integrates an N-th order equation. `ys` holds
  `y, y', ..., y^(N-1)`, and `f(t, state)` returns the highest derivative.
  It keeps stepping while `t + h <= t_end` and returns the final state as a
  NumPy array.
- `euler_history(t0, t_end, h, ys, f)` does the same work as `euler` and
  returns a list of `(t, state)` pairs that starts with the initial state.
- `format_history(history, last_n=None)` returns the history as text lines
  of the form `t ( y0 y1 ... )`. It can limit the output to the last `last_n` entries.
- `history_to_json(history)` returns a list of `{"t": ..., "y": [...]}`
  dictionaries, and `write_history(history, path)` writes that list to a file
  as compact JSON.

A step size that is not positive raises `ValueError`.

```python
from numlab.euler import euler_history, write_history

k, m = 0.1, 1.0
history = euler_history(0.0, 100.0, 0.1, [0.5, 0.5], lambda t, ys: -k * ys[0] / m)
write_history(history, "history.json")
```

`numlab-euler` integrates this spring from t = 0 to 100 with step 0.1 and
writes the trajectory to `history.json`. `-o/--output PATH` picks another
file. `--show N` also prints the last N states.

### `numlab.gaussian`

This module solves linear systems in `float32` arithmetic. It runs Gaussian
elimination without pivoting and then back substitution.

- `gaussian_elimination(mat)` takes an `n x (n+1)` augmented matrix and
  returns a new upper-triangular copy. After each row operation it sets
  entries smaller than `1e-5` in magnitude to zero. It raises
  `ZeroPivotError` (an `ArithmeticError` subclass that carries the failing
  `row`) when a diagonal pivot is zero.
- `back_substitution(mat)` solves an upper-triangular augmented matrix and
  returns the unknowns.
- `solve(a, b)` builds the augmented matrix from `a` and `b`, reduces it and
  solves it.

A matrix with the wrong shape raises `ValueError`.

`numlab-gaussian` solves a fixed 4×4 example and prints the augmented matrix,
the reduced matrix and the solution.

### `numlab.diffusion`

This module diffuses a grey noise field with a box blur.

- `clamp(val, lo, hi)` limits a value to a closed range.
- `random_field(width, height, rng=None)` returns a `(width, height)`
  float32 field of uniform noise in [0, 255].
- `diffuse_step(field)` replaces every interior cell with the clamped mean of
  its 3×3 neighbourhood. Border cells of the result are zero.
- `to_brightness(field)` clamps the field and converts it to `uint8` grey levels.

`numlab-diffusion` opens a pygame window and shows the field diffusing until
you close the window. It accepts `--width`, `--height` (both 640 by default),
`--fps` (60 by default) and `--seed`.

### `numlab.neuralnet`

This module holds a small fully connected network. It supports one
activation, `ActivationFunction.SIGMOID`, and one cost, `CostFunction.MSE`.

- `NeuralNet(sizes, learning_rate=0.01, activation=..., cost=..., debug=False, rng=None)`
  starts every bias at zero. It draws the weights from a normal distribution
  whose scale is `1 / size` of the receiving layer.
- `feed_forward(x)` returns the activated output layer.
- `compute_derivatives(x, y)` returns the weight and bias gradients.
- `back_propagation(x, y)` takes one gradient-descent step.
- `cost(output, y)` returns the mean squared error.

With `debug=True` the network prints its setup and a trace of every feed-forward pass.

```python
import numpy as np
from numlab.neuralnet import NeuralNet, ActivationFunction, CostFunction

net = NeuralNet([1, 2, 3], 0.01, ActivationFunction.SIGMOID, CostFunction.MSE,
                debug=True, rng=np.random.default_rng(0))
net.back_propagation(np.array([1.0]), np.array([1.0, 2.0, 3.0]))
```

`numlab-neuralnet` runs this training step and prints the trace. Use `--seed`
to make the weights repeatable.

### `numlab.graphs`

This module lays out a directed graph on a circle and computes its arrows.

- `Node` is a labelled box with `x`, `y`, `w`, `h` and a `center`.
  `Connection` is a weighted edge from `source` to `target`.
- `circular_layout(count, center, radius, node_size)` places nodes named
  A, B, ... evenly around a circle.
- `build_graph(count=7)` returns the nodes, a connection for every ordered
  pair of nodes, and the adjacency matrix with entries `i*j + 1`.
- `edge_segments(n1, n2)` returns the line and the two arrow-head strokes
  that run from one node to another. For a node and itself it returns an
  empty list.

`numlab-graphs` opens a 1280×720 pygame window that shows the graph until you
close the window. `--nodes` sets the node count, which is 7 by default.

## Limitations

- `numlab.gaussian` does not pivot, so a zero on the diagonal stops it even
  when the system has a solution.
- `numlab.neuralnet` trains on one sample per call. It has no batching, no
  training loop, and no way to save or load a network.
- `numlab.graphs` does not draw self-loops.