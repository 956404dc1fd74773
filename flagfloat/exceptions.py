class InvalidValue(ValueError):
	"""A NaN was passed where a float32 payload has to be encoded."""
