class StoredDataError(ValueError):
    """The persisted task list could not be decoded."""
