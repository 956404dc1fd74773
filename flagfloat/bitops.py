"""Single-bit helpers.

Work on Python ints, numpy integer scalars and unsigned numpy arrays alike.
"""

from __future__ import annotations


def set_bit(word, n: int):
	return word | (1 << n)


def clear_bit(word, n: int):
	# set-then-toggle keeps the mask non-negative for unsigned numpy dtypes
	bit = 1 << n
	return (word | bit) ^ bit


def check_bit(word, n: int):
	"""Return 0 or 1."""
	return (word >> n) & 1
