"""Error page bounded context: resolving which document answers a request."""
