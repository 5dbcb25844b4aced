"""
Seeding commands for the labeling-ops dashboard.

Populates a Supabase database with labeler profiles, review samples and
simulated labels, and recomputes the dashboard metrics from what is stored.
"""

from .client import SupabaseClient
from .pipeline import SeedingPipeline

__all__ = ["SeedingPipeline", "SupabaseClient"]
