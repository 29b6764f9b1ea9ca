# ride_share/errors.py


class RideShareError(Exception):
    """Root of the errors raised by ride_share itself."""


class InvalidRideError(RideShareError, ValueError):
    pass


class InvalidDriverError(RideShareError, ValueError):
    pass
