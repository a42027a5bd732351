class ScimwireUserWarning(UserWarning):
    """Warns about library usage that silently loses or ignores data."""
