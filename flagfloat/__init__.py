from .exceptions import InvalidValue
from .packed import PackedFloatFlag, FLAG_BIT
from . import array, ops

__all__ = [
	"InvalidValue",
	"PackedFloatFlag",
	"FLAG_BIT",
	"array",
	"ops",
]
