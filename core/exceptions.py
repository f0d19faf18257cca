class ContractViolation(AssertionError):
    """Raised when a caller drives the questionnaire in a way it never allows,
    e.g. submitting infrastructure flags outside step 3."""

class IncompleteAnswersError(ValueError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Cannot calculate tier, unanswered: {', '.join(self.missing)}")

class SessionNotFoundError(KeyError):
    pass
