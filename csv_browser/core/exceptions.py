class CsvBrowserError(Exception):
    """Base exception for all csv_browser errors"""
    pass

class ConfigError(CsvBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class ContentReadError(CsvBrowserError):
    """Raw content could not be read (missing file, permissions, bad upload payload)"""
    pass

class ParseError(CsvBrowserError):
    """
    Delimited text could not be parsed:
    malformed quoting, encoding mismatch, etc
    """
    pass

class ProcessingError(CsvBrowserError):
    """Parser output doesn't have the expected shape (missing schema, non-mapping rows)"""
    pass

class IngestError(CsvBrowserError):
    """Schema rejected at ingest time (duplicate field names)"""
    pass

class PersistenceError(CsvBrowserError):
    """Preference store unavailable or holding corrupt JSON. Never shown to the user."""
    pass

class UnknownFieldError(CsvBrowserError):
    """A column operation named a field that isn't part of the dataset schema"""
    pass

class ReorderIndexError(CsvBrowserError, IndexError):
    """Reorder indices outside [0, len(order))"""
    pass

class NoDatasetError(CsvBrowserError):
    """An action that needs a dataset was issued before anything was loaded"""
    pass
