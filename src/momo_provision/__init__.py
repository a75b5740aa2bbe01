"""momo-provision: register MTN MoMo sandbox API users from the command line."""

__version__ = "0.1.0"
