import numpy as np

from flagfloat.bitops import check_bit, clear_bit, set_bit


def test_set_bit():
	assert set_bit(0x00, 0) == 0x01
	assert set_bit(0x00, 1) == 0x02
	assert set_bit(0x00, 2) == 0x04
	assert set_bit(0xF0, 0) == 0xF1
	assert set_bit(0xF0, 1) == 0xF2
	assert set_bit(0xF0, 2) == 0xF4
	assert set_bit(0x01, 0) == 0x01


def test_clear_bit():
	assert clear_bit(0x00, 0) == 0x00
	assert clear_bit(0x01, 0) == 0x00
	assert clear_bit(0x02, 1) == 0x00
	assert clear_bit(0x04, 2) == 0x00
	assert clear_bit(0xF0, 0) == 0xF0
	assert clear_bit(0xF0, 1) == 0xF0
	assert clear_bit(0xFF, 0) == 0xFE


def test_check_bit():
	assert check_bit(0x00, 0) == 0
	assert check_bit(0x00, 1) == 0
	assert check_bit(0x01, 0) == 1
	assert check_bit(0x02, 1) == 1
	assert check_bit(0x04, 2) == 1
	assert check_bit(0xFE, 0) == 0


def test_full_byte_range():
	for byte in range(256):
		for n in range(8):
			assert check_bit(set_bit(byte, n), n) == 1
			assert check_bit(clear_bit(byte, n), n) == 0
			# other bits untouched
			assert set_bit(byte, n) & ~(1 << n) == byte & ~(1 << n)
			assert clear_bit(byte, n) & ~(1 << n) == byte & ~(1 << n)


def test_uint32_arrays_keep_dtype():
	words = np.array([0x3F800000, 0x3F800001, 0xFFFFFFFF], dtype=np.uint32)
	cleared = clear_bit(words, 0)
	assert cleared.dtype == np.uint32
	np.testing.assert_array_equal(cleared, [0x3F800000, 0x3F800000, 0xFFFFFFFE])
	np.testing.assert_array_equal(set_bit(words, 0), [0x3F800001, 0x3F800001, 0xFFFFFFFF])
	np.testing.assert_array_equal(check_bit(words, 0), [0, 1, 1])
	assert clear_bit(np.uint32(0xFFFFFFFF), 31) == 0x7FFFFFFF
