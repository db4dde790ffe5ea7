from .progress import (
    PASS_ORDER,
    PassProgress,
    ReadingPass,
    completed_count,
    completion_percentage,
    description,
    display_name,
    emoji,
    initial_progress,
    is_complete,
    next_pass,
    toggle_pass,
)

__all__ = [
    # Types
    "PassProgress",
    "ReadingPass",
    "PASS_ORDER",
    # State
    "initial_progress",
    "toggle_pass",
    "next_pass",
    "completed_count",
    "completion_percentage",
    "is_complete",
    # Display
    "display_name",
    "description",
    "emoji",
]
