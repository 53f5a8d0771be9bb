"""
Worker pipelines.

Background processing that runs after a response has been sent.
"""

from src.worker.pipelines.note_pipeline import NotePipeline, PipelineResult, process_note

__all__ = [
    "NotePipeline",
    "PipelineResult",
    "process_note",
]
