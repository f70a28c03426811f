"""
Tests for the conversions between linear indexes and coordinates.
"""

from unittest import TestCase, main

from game2048.core.converters import Coords, coords_to_index, index_to_coords


class TestConverters(TestCase):
    def test_index_to_coords(self):
        """Index is split into column (x) and row (y)."""
        self.assertEqual(index_to_coords(4, 0), Coords(0, 0))
        self.assertEqual(index_to_coords(4, 6), Coords(x=2, y=1))
        self.assertEqual(index_to_coords(3, 8), Coords(x=2, y=2))

    def test_coords_to_index(self):
        """Coordinates map to x + y * size."""
        self.assertEqual(coords_to_index(4, Coords(x=2, y=1)), 6)
        self.assertEqual(coords_to_index(5, Coords(x=0, y=4)), 20)

    def test_round_trip(self):
        """Index -> coords -> index is the identity, and conversely."""
        for size in range(1, 8):
            for index in range(size * size):
                coords = index_to_coords(size, index)
                self.assertEqual(coords_to_index(size, coords), index)
                self.assertEqual(index_to_coords(size, coords_to_index(size, coords)), coords)


if __name__ == '__main__':
    main()
