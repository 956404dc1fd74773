"""Vectorized flagged-float32 packing over numpy arrays.

Each element is stored as a little-endian ``uint32`` holding the float32
pattern with bit 0 replaced by the element's flag, so a packed array takes
exactly as much memory as the plain float32 array it came from.
"""

from __future__ import annotations

import logging
from typing import Dict

import numpy as np

from . import bitops, floatbits
from .exceptions import InvalidValue
from .packed import FLAG_BIT

logger = logging.getLogger(__name__)

DTYPE = floatbits.WORD_DTYPE


def _apply_flags(words: np.ndarray, flags: np.ndarray | bool) -> np.ndarray:
	flags = np.asarray(flags, dtype=bool)
	return np.where(
		flags,
		bitops.set_bit(words, FLAG_BIT),
		bitops.clear_bit(words, FLAG_BIT),
	).astype(DTYPE)


def encode(values: np.ndarray | float, flags: np.ndarray | bool = False) -> np.ndarray:
	"""Pack float values and flags (broadcast against each other) into uint32."""
	words = floatbits.as_float32(values).view(DTYPE)
	nan_mask = floatbits.is_nan_word(words)
	if np.any(nan_mask):
		count = int(np.count_nonzero(nan_mask))
		logger.debug("rejected %d NaN element(s) out of %d", count, words.size)
		raise InvalidValue(f"cannot pack {count} NaN value(s)")
	return _apply_flags(words, flags)


def decode_values(packed: np.ndarray | int) -> np.ndarray:
	"""Return the float32 values with the flag bit masked out."""
	p = np.asarray(packed, dtype=DTYPE)
	cleared = bitops.clear_bit(p, FLAG_BIT).astype(DTYPE)
	return cleared.view(floatbits.FLOAT_DTYPE).astype(np.float32)


def decode_flags(packed: np.ndarray | int) -> np.ndarray:
	p = np.asarray(packed, dtype=DTYPE)
	return bitops.check_bit(p, FLAG_BIT).astype(bool)


def with_values(packed: np.ndarray | int, values: np.ndarray | float) -> np.ndarray:
	"""Return a copy of ``packed`` holding ``values``; flags are kept."""
	return encode(values, decode_flags(packed))


def with_flags(packed: np.ndarray | int, flags: np.ndarray | bool) -> np.ndarray:
	"""Return a copy of ``packed`` holding ``flags``; values are kept."""
	return _apply_flags(np.asarray(packed, dtype=DTYPE), flags)


def view_fields(packed: np.ndarray | int) -> np.ndarray:
	"""Return a structured view exposing sign/exponent/mantissa/flag fields.

	``mantissa`` holds the 22 payload bits left once the flag bit is removed.
	"""
	p = np.asarray(packed, dtype=DTYPE)
	dtype = np.dtype([
		("sign", np.uint32),
		("exponent", np.uint32),
		("mantissa", np.uint32),
		("flag", np.bool_),
	])
	out = np.empty(p.shape, dtype=dtype)
	out["sign"] = (p >> floatbits.SIGN_SHIFT) & 0x1
	out["exponent"] = (p >> floatbits.EXPONENT_SHIFT) & ((1 << floatbits.EXPONENT_BITS) - 1)
	out["mantissa"] = (p & floatbits.MANTISSA_MASK) >> 1
	out["flag"] = decode_flags(p)
	return out


def storage_info() -> Dict[str, int | str | np.dtype]:
	return {
		"total_bits": DTYPE.itemsize * 8,
		"dtype": DTYPE,
		"sign_bits": floatbits.SIGN_BITS,
		"exponent_bits": floatbits.EXPONENT_BITS,
		"mantissa_bits": floatbits.MANTISSA_BITS - 1,
		"flag_bit": FLAG_BIT,
		"byte_order": floatbits.BYTE_ORDER,
	}
