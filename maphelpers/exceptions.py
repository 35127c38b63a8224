"""Custom exception hierarchy for mapping helpers."""


class MapHelpersError(Exception):
    ...


class InvalidArgument(MapHelpersError, ValueError):
    ...


class FormatError(MapHelpersError, ValueError):
    ...
