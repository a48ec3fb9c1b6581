"""
This script follows a point under repeated application of a square matrix, printing every point visited until the
orbit returns to where it started (or gives up after --max-steps). For example the hexagonal rotation

    python orbit.py '[[0, -1], [1, 1]]' '[4, -1]'

returns to (4, -1) after 6 steps.
"""

import argparse
import ast
import time

import matrice

parser = argparse.ArgumentParser('Follow the orbit of a point under a matrix')
parser.add_argument('matrix', type=str, help='Square matrix as a list of rows, eg "[[0, -1], [1, 1]]"')
parser.add_argument('point', type=str, help='Starting point as a list of coordinates, eg "[4, -1]"')
parser.add_argument('--max-steps', type=int, default=1000, help='Give up after this many points')
parser.add_argument('--latex', action='store_true', help='Also print the matrix in LaTeX')

args = parser.parse_args()
assert 0 < args.max_steps


# Utility to time blocks of code.
class elapsed:
    def __enter__(self):
        self.time = time.perf_counter()
        return self

    def __exit__(self, type, value, traceback):
        self.time = time.perf_counter() - self.time


def main():
    mat = matrice.Matrix.from_rows(ast.literal_eval(args.matrix))
    start = matrice.Matrix.column_vector(ast.literal_eval(args.point))

    if not mat.is_square() or mat.columns != start.rows:
        raise SystemExit(f"Cannot apply a {mat.rows} x {mat.columns} matrix to a point with {start.rows} coordinates.")

    print(f"Matrix: {mat}")
    if args.latex:
        print(mat._repr_latex_())
    print(f"Starting point: {start}")

    with elapsed() as t:
        frame = matrice.orbit_frame(mat, start, max_steps=args.max_steps)
    print(f"Computed {len(frame)} points in {t.time:.4f} seconds")
    print(frame.to_string(index=False))
    print()

    # The last row, as a column vector.
    last = matrice.from_frame(frame.iloc[-1:, 1:]).transpose()
    if mat @ last == start:
        print(f"Returned to the starting point after {len(frame)} steps.")
    else:
        print(f"No return to the starting point within {args.max_steps} steps.")


main()
