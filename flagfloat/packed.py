from __future__ import annotations

import logging

import numpy as np

from . import bitops, floatbits
from .exceptions import InvalidValue

logger = logging.getLogger(__name__)

# Lowest mantissa bit of the float32 pattern carries the flag.
FLAG_BIT = 0


def _checked_word(value: float) -> np.uint32:
	word = floatbits.to_word(value)
	if floatbits.is_nan_word(word):
		logger.debug("rejected NaN input %r (pattern 0x%08x)", value, int(word))
		raise InvalidValue(f"NaN cannot be stored in a PackedFloatFlag: {value!r}")
	return word


def _with_flag(word, flag: bool) -> np.uint32:
	if flag:
		return np.uint32(bitops.set_bit(word, FLAG_BIT))
	return np.uint32(bitops.clear_bit(word, FLAG_BIT))


class PackedFloatFlag:
	"""A float32 and a boolean flag sharing the same 4 bytes.

	The flag replaces the least-significant mantissa bit, so values whose
	float32 mantissa ends in a 1 are read back one ULP closer to zero.
	Integers, +/-0.0 and +/-inf round-trip exactly. NaN is rejected with
	:class:`InvalidValue`.

	Instances are mutable and therefore unhashable; equality compares the
	stored bit pattern, flag included.
	"""

	__slots__ = ("_word",)

	def __init__(self, value: float, flag: bool = False):
		self._word = _with_flag(_checked_word(value), flag)

	@classmethod
	def from_word(cls, word: int) -> "PackedFloatFlag":
		"""Rebuild an instance from a stored 32-bit pattern, flag bit included."""
		if not isinstance(word, (int, np.integer)) or not 0 <= int(word) <= 0xFFFFFFFF:
			raise ValueError(f"expected an unsigned 32-bit integer, got {word!r}")
		word = np.uint32(word)
		if floatbits.is_nan_word(bitops.clear_bit(word, FLAG_BIT)):
			logger.debug("rejected NaN pattern 0x%08x", int(word))
			raise InvalidValue(f"pattern 0x{int(word):08x} encodes NaN")
		obj = cls.__new__(cls)
		obj._word = word
		return obj

	@classmethod
	def from_bytes(cls, data: bytes) -> "PackedFloatFlag":
		"""Inverse of :meth:`tobytes`."""
		if len(data) != floatbits.WORD_DTYPE.itemsize:
			raise ValueError(f"expected {floatbits.WORD_DTYPE.itemsize} bytes, got {len(data)}")
		return cls.from_word(np.frombuffer(bytes(data), dtype=floatbits.WORD_DTYPE)[0])

	def read_value(self) -> np.float32:
		return floatbits.from_word(bitops.clear_bit(self._word, FLAG_BIT))

	def write_value(self, value: float) -> None:
		"""Replace the value, keeping the flag. State is untouched on NaN."""
		word = _checked_word(value)
		self._word = _with_flag(word, self.read_flag())

	def read_flag(self) -> bool:
		return bool(bitops.check_bit(self._word, FLAG_BIT))

	def write_flag(self, flag: bool) -> None:
		self._word = _with_flag(self._word, flag)

	value = property(read_value, write_value)
	flag = property(read_flag, write_flag)

	@property
	def word(self) -> np.uint32:
		return self._word

	@property
	def nbytes(self) -> int:
		return int(self._word.nbytes)

	def tobytes(self) -> bytes:
		return np.asarray(self._word, dtype=floatbits.WORD_DTYPE).tobytes()

	def __copy__(self) -> "PackedFloatFlag":
		return type(self).from_word(self._word)

	def __eq__(self, other):
		if not isinstance(other, PackedFloatFlag):
			return NotImplemented
		return bool(self._word == other._word)

	__hash__ = None

	def __repr__(self) -> str:
		return f"PackedFloatFlag({float(self.read_value())!r}, {self.read_flag()!r})"
