"""Lay out a small directed graph on a circle and draw it with arrows."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

WINDOW_SIZE = (1280, 720)
NODE_SIZE = 48
RADIUS = 256.0
ARROW_LENGTH = 15.0

Point = tuple[int, int]
Segment = tuple[Point, Point]


@dataclass
class Node:
    """A labelled square box on the canvas."""

    name: str
    x: int = 0
    y: int = 0
    w: int = NODE_SIZE
    h: int = NODE_SIZE

    @property
    def center(self) -> tuple[int, int]:
        return self.x + self.w // 2, self.y + self.h // 2


@dataclass
class Connection:
    """A weighted directed edge between two nodes."""

    source: Node
    target: Node
    value: float


def circular_layout(
    count: int,
    center: tuple[float, float] = (WINDOW_SIZE[0] / 2, WINDOW_SIZE[1] / 2),
    radius: float = RADIUS,
    node_size: int = NODE_SIZE,
) -> list[Node]:
    """Place ``count`` nodes named A, B, ... evenly on a circle."""
    if count < 1:
        raise ValueError("a graph needs at least one node")
    cx, cy = center
    return [
        Node(
            name=chr(ord("A") + i),
            x=int(cx + radius * math.cos(2 * math.pi / count * i) - node_size / 2),
            y=int(cy + radius * math.sin(2 * math.pi / count * i) - node_size / 2),
            w=node_size,
            h=node_size,
        )
        for i in range(count)
    ]


def build_graph(count: int = 7) -> tuple[list[Node], list[Connection], np.ndarray]:
    """Return the nodes, every edge and the adjacency matrix with entries i*j+1."""
    nodes = circular_layout(count)
    matrix = np.fromfunction(lambda i, j: i * j + 1, (count, count), dtype=float)
    connections = [
        Connection(nodes[i], nodes[j], float(matrix[i, j]))
        for i in range(count)
        for j in range(count)
    ]
    return nodes, connections, matrix


def edge_segments(n1: Node, n2: Node) -> list[Segment]:
    """Return the line and the two arrow-head strokes from ``n1`` to ``n2``.

    A node has no drawn edge to itself, so that gives an empty list.
    """
    if n1 is n2:
        return []
    src_x, src_y = (float(v) for v in n1.center)
    dst_x, dst_y = (float(v) for v in n2.center)
    dx, dy = src_x - dst_x, src_y - dst_y
    if dx == 0 and dy == 0:
        return []
    angle = math.atan(dy / dx) if dx != 0 else math.copysign(math.pi / 2, dy)
    additor = math.pi if dst_x > src_x else 0.0

    nsrc_x = src_x - (n1.w // 2) * math.cos(angle - additor + math.pi / 4)
    nsrc_y = src_y - (n1.h // 2) * math.sin(angle - additor + math.pi / 4)
    ndst_x = dst_x - (n2.w // 2) * math.cos(angle - additor - math.pi)
    ndst_y = dst_y - (n2.h // 2) * math.sin(angle - additor - math.pi)

    tip = (int(ndst_x), int(ndst_y))
    r = ARROW_LENGTH
    return [
        ((int(nsrc_x), int(nsrc_y)), tip),
        (
            tip,
            (
                int(ndst_x + r * math.cos(-math.pi / 4 + angle + additor)),
                int(ndst_y + r * math.sin(-math.pi / 4 + angle + additor)),
            ),
        ),
        (
            tip,
            (
                int(ndst_x + r * math.cos(math.pi / 4 + angle + additor)),
                int(ndst_y + r * math.sin(math.pi / 4 + angle + additor)),
            ),
        ),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window showing the graph until it is closed."""
    parser = argparse.ArgumentParser(description="Draw a small directed graph.")
    parser.add_argument("--nodes", type=int, default=7)
    args = parser.parse_args(argv)

    import pygame

    nodes, connections, _ = build_graph(args.nodes)
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Graph")
        font = pygame.font.SysFont("arialblack", 27)
        labels = {n.name: font.render(n.name, False, (255, 0, 0)) for n in nodes}
        cx, cy = WINDOW_SIZE[0] // 2, WINDOW_SIZE[1] // 2
        white = (255, 255, 255)

        running = True
        while running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                running = False
            screen.fill((0, 0, 0))
            screen.set_at((cx, cy), white)
            for node in nodes:
                rect = pygame.Rect(node.x, node.y, node.w, node.h)
                pygame.draw.rect(screen, white, rect, 1)
                screen.blit(pygame.transform.scale(labels[node.name], rect.size), rect)
            for conn in connections:
                if conn.value != 0:
                    for start, end in edge_segments(conn.source, conn.target):
                        pygame.draw.line(screen, white, start, end)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0