from __future__ import annotations

import numpy as np

# Canonical layout, independent of the host byte order.
BYTE_ORDER = "little"
FLOAT_DTYPE = np.dtype("<f4")
WORD_DTYPE = np.dtype("<u4")

SIGN_BITS = 1
EXPONENT_BITS = 8
MANTISSA_BITS = 23

SIGN_SHIFT = EXPONENT_BITS + MANTISSA_BITS
EXPONENT_SHIFT = MANTISSA_BITS
MANTISSA_MASK = (1 << MANTISSA_BITS) - 1
EXPONENT_MASK = ((1 << EXPONENT_BITS) - 1) << EXPONENT_SHIFT


def as_float32(values: np.ndarray | float) -> np.ndarray:
	"""Narrow to canonical float32; out-of-range magnitudes become +/-inf.

	NaN passes through unchanged, callers decide how to reject it.
	"""
	arr = np.asarray(values)
	if arr.dtype.kind not in "biuf":
		raise TypeError(f"expected a real number, got dtype {arr.dtype}")
	with np.errstate(over="ignore", invalid="ignore"):
		return arr.astype(FLOAT_DTYPE)


def to_word(value: float) -> np.uint32:
	"""Reinterpret a float32 as its unsigned 32-bit pattern."""
	return np.uint32(as_float32(value).view(WORD_DTYPE)[()])


def from_word(word: int) -> np.float32:
	return np.float32(np.asarray(word, dtype=WORD_DTYPE).view(FLOAT_DTYPE)[()])


def to_bits(value: float) -> bytes:
	"""Return the 4 little-endian bytes of ``value`` as float32."""
	return as_float32(value).tobytes()


def from_bits(data: bytes) -> np.float32:
	if len(data) != FLOAT_DTYPE.itemsize:
		raise ValueError(f"expected {FLOAT_DTYPE.itemsize} bytes, got {len(data)}")
	return np.float32(np.frombuffer(bytes(data), dtype=FLOAT_DTYPE)[0])


def is_nan_word(word):
	"""True where the exponent is all ones and the mantissa is non-zero."""
	return ((word & EXPONENT_MASK) == EXPONENT_MASK) & ((word & MANTISSA_MASK) != 0)
