class PlacesBriefError(Exception):
    """Base class for errors raised by places-brief."""


class ConfigurationError(PlacesBriefError):
    """A required setting (usually an API key) is missing."""


class PlacesAPIError(PlacesBriefError):
    """The places search request failed at the transport or HTTP level."""
