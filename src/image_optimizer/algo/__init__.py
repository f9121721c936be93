"""Pure image algorithms: dimensions, resampling, encoding, naming."""
