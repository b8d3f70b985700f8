from .pipeline import NotifyLatestActivityUseCase, PipelineResult, PipelineStage

__all__ = [
    "NotifyLatestActivityUseCase",
    "PipelineResult",
    "PipelineStage",
]
