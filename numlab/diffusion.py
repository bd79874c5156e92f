"""Box-blur diffusion of a random greyscale field, with a live view."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import numpy as np

_NINTH = np.float32(1.0 / 9.0)


def clamp(val: float, lo: float, hi: float) -> float:
    """Limit ``val`` to the closed range [lo, hi]."""
    if val < lo:
        return lo
    if val > hi:
        return hi
    return val


def random_field(
    width: int, height: int, rng: np.random.Generator | None = None
) -> np.ndarray:
    """Return a (width, height) float32 field of uniform noise in [0, 255]."""
    if width < 1 or height < 1:
        raise ValueError("field dimensions must be positive")
    rng = rng if rng is not None else np.random.default_rng()
    return (rng.random((width, height)) * 255.0).astype(np.float32)


def diffuse_step(field) -> np.ndarray:
    """Replace every interior cell by the clamped mean of its 3x3 neighbourhood.

    Border cells of the result are zero. The input is not modified.
    """
    f = np.asarray(field, dtype=np.float32)
    if f.ndim != 2:
        raise ValueError("field must be two-dimensional")
    out = np.zeros_like(f)
    width, height = f.shape
    if width < 3 or height < 3:
        return out
    total = sum(
        f[di:di + width - 2, dj:dj + height - 2]
        for di in range(3)
        for dj in range(3)
    )
    out[1:-1, 1:-1] = np.clip(total * _NINTH, 0.0, 255.0)
    return out


def to_brightness(field) -> np.ndarray:
    """Clamp a field to [0, 255] and truncate it to 8-bit grey levels."""
    return np.clip(np.asarray(field, dtype=np.float32), 0.0, 255.0).astype(np.uint8)


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and show the field diffusing until it is closed."""
    parser = argparse.ArgumentParser(description="Watch random noise diffuse.")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=640)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Diffusion")
        clock = pygame.time.Clock()
        field = random_field(args.width, args.height, np.random.default_rng(args.seed))

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            field = diffuse_step(field)
            shade = to_brightness(field)
            pygame.surfarray.blit_array(screen, np.repeat(shade[:, :, None], 3, axis=2))
            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0