"""Application layer - use cases built on the transit repository port."""

from idfm_transit.application.services import LineBrowserService, TripPlan, TripPlanningService

__all__ = ["LineBrowserService", "TripPlan", "TripPlanningService"]
