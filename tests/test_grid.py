import unittest

import numpy as np

from gridmaze import (
    CellType,
    ConcurrentRunError,
    Grid,
    GridSettings,
    InvalidDimensions,
    InvalidInput,
    build_grid,
    lattice_neighbors,
    neighboring,
    unit_neighbors,
)
from gridmaze.neighbors import cell_between


def positions(cells):
    return [cell.position for cell in cells]


class GridModelTests(unittest.TestCase):
    def test_build_grid_allocates_every_cell_empty(self) -> None:
        for width, height in ((1, 1), (3, 7), (8, 5)):
            grid = build_grid(width, height)
            self.assertEqual(len(list(grid)), width * height)
            self.assertEqual(grid.shape, (width, height))
            for x in range(width):
                for y in range(height):
                    cell = grid[x][y]
                    self.assertEqual(cell.position, (x, y))
                    self.assertIs(cell.type, CellType.EMPTY)
                    self.assertFalse(cell.visited)
                    self.assertEqual(cell.helper_number, 0)
                    self.assertIsNone(cell.parent)

    def test_invalid_dimensions_are_rejected(self) -> None:
        for width, height in ((0, 5), (5, 0), (-1, 3), (2.5, 3)):
            with self.assertRaises(InvalidDimensions):
                build_grid(width, height)
        with self.assertRaises(ValueError):
            Grid.from_settings(GridSettings(width=4, height=-4))

    def test_reset_for_run_clears_state_and_can_force_a_type(self) -> None:
        grid = build_grid(3, 3)
        cell = grid[1][1]
        cell.type = CellType.WALL
        cell.visited = True
        cell.helper_number = 4
        cell.parent = (0, 1)

        grid.reset_for_run()
        self.assertFalse(cell.visited)
        self.assertEqual(cell.helper_number, 0)
        self.assertIsNone(cell.parent)
        self.assertIs(cell.type, CellType.WALL)
        self.assertIs(grid[0][0].type, CellType.EMPTY)

        grid.reset_for_run(CellType.WALL)
        self.assertTrue(all(c.type is CellType.WALL for c in grid))

    def test_rows_round_trip(self) -> None:
        rows = ["S.#", "..#", "#.T"]
        grid = Grid.from_rows(rows)
        self.assertEqual((grid.width, grid.height), (3, 3))
        self.assertIs(grid[0][0].type, CellType.START)
        self.assertIs(grid[2][0].type, CellType.WALL)
        self.assertIs(grid[2][2].type, CellType.TARGET)
        self.assertEqual(grid.to_rows(), rows)
        self.assertEqual(grid.to_rows([grid[1][0], grid[1][1]]), ["S*#", ".*#", "#.T"])

    def test_rows_must_be_rectangular_and_known(self) -> None:
        with self.assertRaises(InvalidDimensions):
            Grid.from_rows(["...", ".."])
        with self.assertRaises(ValueError):
            Grid.from_rows([".x."])

    def test_resolve_accepts_own_cells_and_coordinates(self) -> None:
        grid = build_grid(4, 3)
        self.assertIs(grid.resolve(grid[2][1]), grid[2][1])
        self.assertIs(grid.resolve((3, 2)), grid[3][2])
        other = build_grid(4, 3)
        for bad in (other[0][0], (4, 0), (0, -1), None, ("a", "b"), (1,)):
            with self.assertRaises(InvalidInput):
                grid.resolve(bad)

    def test_parent_handle_points_back_into_the_grid(self) -> None:
        grid = build_grid(3, 3)
        grid[1][1].parent = (1, 0)
        self.assertIs(grid.parent_of(grid[1][1]), grid[1][0])
        self.assertIsNone(grid.parent_of(grid[1][0]))

    def test_numpy_snapshots_follow_x_y_indexing(self) -> None:
        grid = Grid.from_rows(["..#", "...", "..."])
        grid[1][2].visited = True
        grid[1][2].helper_number = 7

        types = grid.type_array()
        self.assertEqual(types.shape, (3, 3))
        self.assertEqual(types[2, 0], int(CellType.WALL))
        self.assertEqual(int(np.count_nonzero(types)), 1)
        self.assertTrue(grid.visited_array()[1, 2])
        self.assertEqual(grid.distance_array()[1, 2], 7)

    def test_exclusive_blocks_a_second_run(self) -> None:
        grid = build_grid(2, 2)
        with grid.exclusive("first"):
            self.assertTrue(grid.is_running)
            self.assertEqual(grid.active_run, "first")
            with self.assertRaises(ConcurrentRunError):
                grid.begin_run("second")
        self.assertFalse(grid.is_running)
        grid.begin_run("second")
        grid.end_run()
        self.assertIsNone(grid.active_run)


class NeighbourQueryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = build_grid(5, 5)

    def test_lattice_neighbours_are_two_steps_away(self) -> None:
        self.assertEqual(positions(lattice_neighbors(self.grid[0][0], self.grid)), [(2, 0), (0, 2)])
        self.assertEqual(
            positions(lattice_neighbors(self.grid[2][2], self.grid)),
            [(0, 2), (4, 2), (2, 0), (2, 4)],
        )
        small = build_grid(4, 4)
        self.assertEqual(positions(lattice_neighbors(small[1][1], small)), [(3, 1), (1, 3)])

    def test_lattice_neighbours_filter_on_visited(self) -> None:
        self.grid[4][2].visited = True
        centre = self.grid[2][2]
        self.assertEqual(positions(lattice_neighbors(centre, self.grid, visited=True)), [(4, 2)])
        self.assertEqual(
            positions(lattice_neighbors(centre, self.grid, visited=False)),
            [(0, 2), (2, 0), (2, 4)],
        )

    def test_unit_neighbours_keep_a_stable_order(self) -> None:
        grid = build_grid(3, 3)
        grid[0][1].visited = True
        centre = grid[1][1]
        self.assertEqual(positions(unit_neighbors(centre, grid, False)), [(2, 1), (1, 0), (1, 2)])
        self.assertEqual(positions(unit_neighbors(centre, grid, True)), [(0, 1)])
        self.assertEqual(positions(unit_neighbors(grid[0][0], grid, False)), [(1, 0)])

    def test_neighboring_means_sharing_an_edge(self) -> None:
        grid = self.grid
        self.assertTrue(neighboring(grid[1][1], grid[1][2]))
        self.assertTrue(neighboring(grid[1][1], grid[0][1]))
        self.assertFalse(neighboring(grid[1][1], grid[2][2]))
        self.assertFalse(neighboring(grid[1][1], grid[1][1]))
        self.assertFalse(neighboring(grid[1][1], grid[1][3]))

    def test_cell_between_lattice_neighbours(self) -> None:
        self.assertIs(cell_between(self.grid, self.grid[0][2], self.grid[2][2]), self.grid[1][2])
        self.assertIs(cell_between(self.grid, self.grid[2][4], self.grid[2][2]), self.grid[2][3])


if __name__ == "__main__":
    unittest.main()
