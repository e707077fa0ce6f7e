"""Control the RGB lighting of Kingston Fury Renegade memory over the Linux I2C bus."""

__version__ = "0.2.0"
__all__ = ["colour", "i2c", "controller", "cli"]