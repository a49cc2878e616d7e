"""SkinLogic domain errors. Routers translate these to HTTP status codes."""


class SkinLogicError(Exception):
    """Base class for all domain errors."""


class ProfileNotFoundError(SkinLogicError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"No profile for user '{user_id}'")


class QuestionnaireMissingError(SkinLogicError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User '{user_id}' has not completed onboarding")


class MindsetNotStartedError(SkinLogicError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User '{user_id}' has not taken the mindset quiz")


class QuizValidationError(SkinLogicError):
    def __init__(self, errors: dict):
        self.errors = errors
        super().__init__(f"Invalid quiz answers: {sorted(errors)}")


class UnknownModuleError(SkinLogicError):
    def __init__(self, module_id: str):
        self.module_id = module_id
        super().__init__(f"Unknown mindset module '{module_id}'")
