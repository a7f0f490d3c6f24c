from .advance_contents import AdvanceContentsUseCase, RunSummary

__all__ = ["AdvanceContentsUseCase", "RunSummary"]
