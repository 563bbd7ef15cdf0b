class FormNotFoundError(LookupError):
    """Raised when a form id does not exist in the store"""

    def __init__(self, form_id: str):
        super().__init__(f"Form not found: {form_id}")
        self.form_id = form_id


class NoResponsesError(ValueError):
    """Raised when exporting a form that has no responses yet"""

    def __init__(self, form_id: str):
        super().__init__("No responses to export")
        self.form_id = form_id


class FormValidationError(ValueError):
    """Raised when a form definition or submission is missing required fields"""
