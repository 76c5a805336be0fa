import unittest

import numpy as np

import cachematrix


class TestCacheMatrixConstruction(unittest.TestCase):
    def test_accepts_square_inputs(self):
        for data in ([[1, 2], [3, 4]], np.eye(3), np.array([[1 + 1j]]), np.zeros((0, 0))):
            x = cachematrix.CacheMatrix(data)
            self.assertEqual(x.shape[0], x.shape[1])
            self.assertIsNone(x.get_inverse())
            self.assertFalse(x.has_inverse())

    def test_rejects_non_square(self):
        with self.assertRaises(cachematrix.InvalidArgumentError) as ctx:
            cachematrix.CacheMatrix(np.ones((2, 3)))
        self.assertIn("square", str(ctx.exception))

    def test_rejects_non_matrix_values(self):
        bad_inputs = (
            1.2,
            "abc",
            None,
            [1, 2, 3],
            [[[1]]],
            [[1, 2], [3]],
            [["a", "b"], ["c", "d"]],
            np.array([[True, False], [False, True]]),
        )
        for bad in bad_inputs:
            with self.subTest(bad=bad):
                with self.assertRaises(cachematrix.InvalidArgumentError):
                    cachematrix.CacheMatrix(bad)

    def test_invalid_argument_is_a_value_and_type_error(self):
        with self.assertRaises(ValueError):
            cachematrix.CacheMatrix(np.ones((2, 3)))
        with self.assertRaises(TypeError):
            cachematrix.CacheMatrix("abc")


class TestCacheMatrixAccessors(unittest.TestCase):
    def test_get_matrix_returns_private_read_only_copy(self):
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        x = cachematrix.CacheMatrix(source)

        source[0, 0] = 100.0
        m = x.get_matrix()
        self.assertEqual(m[0, 0], 1.0)
        self.assertFalse(m.flags.writeable)
        with self.assertRaises(ValueError):
            m[0, 0] = 5.0

    def test_get_matrix_has_no_side_effects(self):
        x = cachematrix.CacheMatrix([[1, 2], [3, 4]])
        self.assertIs(x.get_matrix(), x.get_matrix())
        self.assertIsNone(x.get_inverse())

    def test_set_inverse_is_trusted_and_get_inverse_returns_it(self):
        x = cachematrix.CacheMatrix([[1, 2], [3, 4]])
        x.set_inverse([[0, 0], [0, 0]])
        np.testing.assert_array_equal(x.get_inverse(), np.zeros((2, 2)))
        self.assertTrue(x.has_inverse())

        x.set_inverse(None)
        self.assertIsNone(x.get_inverse())

    def test_set_matrix_clears_cached_inverse(self):
        x = cachematrix.CacheMatrix([[2.0, 0.0], [0.0, 2.0]])
        x.set_inverse(np.eye(2) * 0.5)

        x.set_matrix([[4.0, 0.0], [0.0, 4.0]])

        self.assertIsNone(x.get_inverse())
        np.testing.assert_array_equal(x.get_matrix(), np.eye(2) * 4.0)

    def test_set_matrix_clears_even_when_empty(self):
        x = cachematrix.CacheMatrix([[1.0]])
        x.set_matrix([[3.0]])
        self.assertIsNone(x.get_inverse())
        self.assertEqual(x.shape, (1, 1))

    def test_set_matrix_validates_and_keeps_state_on_failure(self):
        x = cachematrix.CacheMatrix([[2.0, 0.0], [0.0, 2.0]])
        x.set_inverse(np.eye(2) * 0.5)

        with self.assertRaises(cachematrix.InvalidArgumentError):
            x.set_matrix(np.ones((2, 3)))

        self.assertEqual(x.shape, (2, 2))
        self.assertIsNotNone(x.get_inverse())

    def test_set_matrix_may_change_size(self):
        x = cachematrix.CacheMatrix([[1.0]])
        x.set_matrix(np.eye(3))
        self.assertEqual(x.shape, (3, 3))


class TestCacheMatrixFormatting(unittest.TestCase):
    def test_str_shows_shape_cache_state_and_values(self):
        x = cachematrix.CacheMatrix([[1, 3], [2, 4]])
        text = str(x)
        self.assertTrue(text.startswith("CacheMatrix(shape=(2, 2)"))
        self.assertIn("cached=False", text)
        self.assertIn(" [1 3]", text)
        self.assertIn(" [2 4]", text)

        cachematrix.cache_solve(x)
        self.assertIn("cached=True", str(x))

    def test_str_truncates_large_matrices(self):
        x = cachematrix.CacheMatrix(np.eye(20))
        lines = str(x).splitlines()
        self.assertIn(" ...", lines)
        self.assertIn("...", lines[2])

    def test_repr(self):
        x = cachematrix.CacheMatrix(np.eye(2))
        self.assertEqual(repr(x), "<CacheMatrix shape=(2, 2) cached=False>")


if __name__ == "__main__":
    unittest.main()
