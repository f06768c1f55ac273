"""
Presentation Package - Dashboard Session and Rendering.

Components:
    - DashboardSession: Owns the view controls, recomputes on change
    - DashboardSnapshot: Everything needed to draw one frame
    - TextDashboardRenderer: Plain-text stat cards, table and footer

No business logic lives here beyond display formatting.
"""

from progress_tracker.presentation.session import DashboardSession, DashboardSnapshot
from progress_tracker.presentation.text_renderer import TextDashboardRenderer

__all__ = ["DashboardSession", "DashboardSnapshot", "TextDashboardRenderer"]
