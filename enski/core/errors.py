"""Exceptions raised by the dictionary search core."""


class DataUnavailable(Exception):
    """The dictionary dataset could not be loaded or queried."""


class EngineNotReady(DataUnavailable):
    """A query reached the engine before a dataset was loaded."""
