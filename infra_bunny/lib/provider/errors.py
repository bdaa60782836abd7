class ImmutableFieldError(ValueError):
    """A field was changed in a way that requires deleting and recreating the resource"""


class EnumDecodeError(ValueError):
    """The API returned an enumeration value that has no known name"""

    def __init__(self, enum_name: str, value):
        super().__init__(f"{enum_name}: unknown wire value {value!r}")
        self.enum_name = enum_name
        self.value = value


class ProviderError(Exception):
    """Raised at the dynamic provider boundary when an operation produced error diagnostics"""

    def __init__(self, diagnostics):
        self.diagnostics = diagnostics

        super().__init__("; ".join(str(diag) for diag in diagnostics.errors()))
