#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Debug output for cubes of any size: a text net and a matplotlib diagram.

Both use the unfolded cross layout
          U
        L F R B
          D
"""

import os

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from cube_colors import Color, FaceName

CUBE_COLORS = {
    Color.WHITE: 'white',
    Color.YELLOW: 'yellow',
    Color.RED: 'red',
    Color.ORANGE: 'orange',
    Color.BLUE: 'blue',
    Color.GREEN: 'green',
}

# Face position in the net, in face-size units (column, row from bottom)
NET_POSITIONS = {
    FaceName.U: (1, 2),
    FaceName.L: (0, 1),
    FaceName.F: (1, 1),
    FaceName.R: (2, 1),
    FaceName.B: (3, 1),
    FaceName.D: (1, 0),
}


def format_face(face):
    return [" ".join(c.letter for c in row) for row in face.stickers()]


def format_net(cube):
    """
    Text net of the cube, one letter per sticker:

            W W W
            W W W
            W W W
      O O O G G G R R R B B B
      ...
    """
    n = cube.size
    width = 2 * n
    pad = " " * width
    lines = []

    for line in format_face(cube.up):
        lines.append(pad + line)
    middle = [format_face(cube.face(name)) for name in (FaceName.L, FaceName.F, FaceName.R, FaceName.B)]
    for row in range(n):
        lines.append(" ".join(face[row] for face in middle))
    for line in format_face(cube.down):
        lines.append(pad + line)

    return "\n".join(lines)


def draw_cube(cube, save_path=None, title=None):
    """
    Draw the cube as an unfolded net

    Args:
        cube: Cube of any size
        save_path: PNG path to write; nothing is saved when None
        title: figure title, defaults to size and solved state

    Returns:
        the matplotlib Figure (already closed)
    """
    n = cube.size
    fig, ax = plt.subplots(figsize=(10, 8))
    ax.set_axis_off()
    ax.set_xlim(0, 4 * n)
    ax.set_ylim(0, 3 * n + 1)
    ax.set_aspect('equal')

    for name, (x_unit, y_unit) in NET_POSITIONS.items():
        x_pos, y_pos = x_unit * n, y_unit * n
        face = cube.face(name)

        ax.text(x_pos + n / 2, y_pos + n + 0.2, f"{name.full_name} ({name.value})",
                ha='center', fontsize=10)

        for row in range(n):
            for col in range(n):
                color = CUBE_COLORS[face.get(row, col)]
                rect = Rectangle((x_pos + col, y_pos + (n - 1 - row)), 1, 1,
                                 facecolor=color, edgecolor='black', linewidth=1)
                ax.add_patch(rect)

    if title is None:
        title = f"{n}x{n} cube - Solved: {cube.is_solved()}"
    ax.set_title(title, fontsize=14)
    fig.tight_layout()

    if save_path:
        directory = os.path.dirname(save_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(save_path)

    plt.close(fig)
    return fig
