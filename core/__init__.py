"""GoalPad core library — in-memory goal state and derived progress.

Public API re-exports for convenient imports:
    from core import GoalSession, GoalStore, compute_progress, ...
"""

# Models
from core.models import (
    MAX_GOAL_LENGTH,
    Goal,
    Progress,
)

# Goal state
from core.goals import (
    GoalStore,
    normalize_goal_text,
)

# Progress
from core.progress import compute_progress

# Input
from core.input_buffer import InputBuffer

# Listeners
from core.listeners import ListenerRegistry

# Session surface
from core.session import GoalSession

# Settings
from core.settings import (
    Settings,
    load_settings,
)
