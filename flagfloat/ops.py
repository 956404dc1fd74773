"""Element-wise float32 arithmetic on packed arrays.

Operands are decoded, combined in float32 and re-packed. The result carries
the flags of the left operand; a NaN result raises :class:`InvalidValue`.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .array import decode_flags, decode_values, encode


def _binary_op(a_packed: np.ndarray, b_packed: np.ndarray, op: Callable[[np.ndarray, np.ndarray], np.ndarray]) -> np.ndarray:
	a = decode_values(a_packed)
	b = decode_values(b_packed)
	# NaN results are reported by encode()
	with np.errstate(all="ignore"):
		res = op(a, b)
	return encode(res, decode_flags(a_packed))


def add(a_packed: np.ndarray, b_packed: np.ndarray) -> np.ndarray:
	return _binary_op(a_packed, b_packed, np.add)


def subtract(a_packed: np.ndarray, b_packed: np.ndarray) -> np.ndarray:
	return _binary_op(a_packed, b_packed, np.subtract)


def multiply(a_packed: np.ndarray, b_packed: np.ndarray) -> np.ndarray:
	return _binary_op(a_packed, b_packed, np.multiply)


def divide(a_packed: np.ndarray, b_packed: np.ndarray) -> np.ndarray:
	return _binary_op(a_packed, b_packed, np.divide)
