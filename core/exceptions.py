"""Exceptions raised by the clustering engine and the data loaders."""


class InvalidParameterError(ValueError):
    """A clustering parameter or coordinate is outside the accepted domain."""


class DataParseError(ValueError):
    """Uploaded restaurant data could not be turned into restaurants."""
