"""A small fully connected neural network trained by backpropagation."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum

import numpy as np


class ActivationFunction(Enum):
    """Activation applied to every neuron after the affine step."""

    SIGMOID = "sigmoid"


class CostFunction(Enum):
    """Cost comparing the network output with the expected output."""

    MSE = "mse"


def _sigmoid(z: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-z))


def _fmt(v: np.ndarray) -> str:
    return " ".join(f"{x:g}" for x in v)


class NeuralNet:
    """Feed-forward network with one weight matrix and bias vector per layer gap."""

    def __init__(
        self,
        sizes: Sequence[int],
        learning_rate: float = 0.01,
        activation: ActivationFunction = ActivationFunction.SIGMOID,
        cost: CostFunction = CostFunction.MSE,
        debug: bool = False,
        rng: np.random.Generator | None = None,
    ) -> None:
        sizes = [int(s) for s in sizes]
        if len(sizes) < 2:
            raise ValueError("a network needs at least an input and an output layer")
        if any(s < 1 for s in sizes):
            raise ValueError("every layer must hold at least one neuron")
        self.activation = ActivationFunction(activation)
        self.cost_function = CostFunction(cost)
        self.sizes = sizes
        self.learning_rate = float(learning_rate)
        self.debug = debug
        rng = rng if rng is not None else np.random.default_rng()

        self.layers = [np.zeros(s) for s in sizes]
        self.layers_activated = [np.zeros(s) for s in sizes]
        if debug:
            print("1. Layers initialized")
        self.biases = [np.zeros(s) for s in sizes[1:]]
        if debug:
            print("2. Biases initialized")
        self.weights = [
            rng.normal(0.0, 1.0 / n_out, size=(n_out, n_in))
            for n_in, n_out in zip(sizes, sizes[1:])
        ]
        if debug:
            print("3. Weights initialized")
            print(
                f"Weights: {len(self.weights)}, biases: {len(self.biases)}, "
                f"layers: {len(self.layers)}"
            )
            print()

    def _activate(self, z: np.ndarray) -> np.ndarray:
        if self.activation is ActivationFunction.SIGMOID:
            return _sigmoid(z)
        raise ValueError(f"unknown activation function: {self.activation}")

    def _activation_deriv(self, z: np.ndarray) -> np.ndarray:
        if self.activation is ActivationFunction.SIGMOID:
            s = _sigmoid(z)
            return s * (1.0 - s)
        raise ValueError(f"unknown activation function: {self.activation}")

    def _cost_deriv(self, output: np.ndarray, y: np.ndarray) -> np.ndarray:
        if self.cost_function is CostFunction.MSE:
            return output - y
        raise ValueError(f"unknown cost function: {self.cost_function}")

    def _vector(self, values, size: int, what: str) -> np.ndarray:
        v = np.asarray(values, dtype=float).reshape(-1)
        if v.size != size:
            raise ValueError(f"{what} must have {size} values, got {v.size}")
        return v

    def cost(self, output, y) -> float:
        """Return the cost of ``output`` against the expected ``y``."""
        output = np.asarray(output, dtype=float).reshape(-1)
        y = np.asarray(y, dtype=float).reshape(-1)
        if output.shape != y.shape:
            raise ValueError("output and expected values differ in size")
        if self.cost_function is CostFunction.MSE:
            return float(np.mean((output - y) ** 2))
        raise ValueError(f"unknown cost function: {self.cost_function}")

    def feed_forward(self, x) -> np.ndarray:
        """Propagate ``x`` through the network and return the output layer."""
        x = self._vector(x, self.sizes[0], "input")
        if self.debug:
            print("Feed forward process: ")
            print(f"input: {_fmt(x)}")
        self.layers[0] = x.copy()
        self.layers_activated[0] = x.copy()
        for i, (w, b) in enumerate(zip(self.weights, self.biases)):
            self.layers[i + 1] = w @ self.layers_activated[i] + b
            self.layers_activated[i + 1] = self._activate(self.layers[i + 1])
            if self.debug:
                print(f"layer {i + 1} = {_fmt(self.layers_activated[i + 1])}")
        return self.layers_activated[-1].copy()

    def compute_derivatives(self, x, y) -> tuple[list[np.ndarray], list[np.ndarray]]:
        """Return the cost gradients for every weight matrix and bias vector."""
        self.feed_forward(x)
        y = self._vector(y, self.sizes[-1], "expected output")
        n = len(self.sizes)
        deltas: list[np.ndarray] = [np.zeros(0)] * n
        deltas[-1] = self._cost_deriv(self.layers_activated[-1], y) * self._activation_deriv(
            self.layers[-1]
        )
        for l in range(n - 2, 0, -1):
            deltas[l] = (self.weights[l].T @ deltas[l + 1]) * self._activation_deriv(
                self.layers[l]
            )
        weight_grads = [
            np.outer(deltas[l + 1], self.layers_activated[l]) for l in range(n - 1)
        ]
        bias_grads = [d.copy() for d in deltas[1:]]
        return weight_grads, bias_grads

    def back_propagation(self, x, y) -> None:
        """Take one gradient-descent step on the pair (``x``, ``y``)."""
        weight_grads, bias_grads = self.compute_derivatives(x, y)
        for w, b, gw, gb in zip(self.weights, self.biases, weight_grads, bias_grads):
            w -= self.learning_rate * gw
            b -= self.learning_rate * gb


def main(argv: Sequence[str] | None = None) -> int:
    """Build a 1-2-3 network and train it for one step on a fixed sample."""
    parser = argparse.ArgumentParser(description="Run one backpropagation step.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    nn = NeuralNet(
        [1, 2, 3],
        learning_rate=0.01,
        activation=ActivationFunction.SIGMOID,
        cost=CostFunction.MSE,
        debug=True,
        rng=np.random.default_rng(args.seed),
    )
    nn.back_propagation([1.0], [1.0, 2.0, 3.0])
    return 0