# ==============================================
# Errors
# ==============================================
#
# Both engines degrade instead of failing on odd data shapes
# (fallback labels, "table", "modified"). The single exception
# is a document nested deeper than the configured limit: walking
# it would blow the interpreter stack, so the input is rejected.
#
# ==============================================


class DocumentTooDeepError(ValueError):
    """Raised when a document nests deeper than the allowed depth."""

    def __init__(self, max_depth: int, path: str = ""):
        self.max_depth = max_depth
        self.path = path
        where = f" at '{path}'" if path else ""
        super().__init__(
            f"Document exceeds maximum nesting depth of {max_depth}{where}"
        )
