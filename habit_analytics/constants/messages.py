"""User-facing messages for insights, recommendations and the CLI."""

from __future__ import annotations

# =============================================================================
# Insight Messages
# =============================================================================

INSIGHT_MESSAGES = {
    'high_consistency': "Excellent consistency! You're maintaining a high completion rate.",
    'moderate_progress': "Good progress, but there's room for improvement in consistency.",
    'needs_attention': "Your completion rate suggests this habit needs more attention and focus.",
    'momentum': "Great momentum! You're on a {streak}-day streak.",
    'building_streak': "You have a {streak}-day streak - keep building on it!",
    'fresh_start': "No current streak, but every day is a fresh start!",
    'past_capability': (
        "Your longest streak was {longest} days - you've done it before, you can do it again!"
    ),
    'weekend_struggle': (
        "You tend to struggle with this habit on weekends - consider adjusting your weekend routine."
    ),
    'weekday_struggle': (
        "Weekdays seem more challenging for this habit - perhaps your schedule is too packed?"
    ),
}

# =============================================================================
# Recommendation Messages
# =============================================================================

RECOMMENDATION_MESSAGES = {
    'make_smaller': "Consider making the habit smaller or easier to build consistency first.",
    'environmental_cues': "Set up environmental cues to remind yourself of this habit.",
    'habit_stacking': "Try habit stacking - attach this habit to an existing routine.",
    'visual_tracking': "Track your progress visually to stay motivated.",
    'rebuild_momentum': (
        "Focus on just completing the habit for the next 3 days to rebuild momentum."
    ),
    'reach_milestone': (
        "Aim to reach a 7-day streak - this is often when habits start to feel automatic."
    ),
    'identify_changes': (
        "Identify what changed recently that might be affecting your habit performance."
    ),
    'adjust_difficulty': (
        "Consider adjusting the habit difficulty or timing to match your current situation."
    ),
    'increase_difficulty': (
        "Great trend! Consider gradually increasing the difficulty or adding related habits."
    ),
    'maintain_consistency': (
        "Your habit performance is stable - focus on maintaining consistency."
    ),
    'review_regularly': (
        "Review your habit regularly and adjust based on what works best for you."
    ),
}

# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES = {
    'config_invalid': 'Configuration error',
    'entries_invalid': 'Invalid habit entries',
    'entries_unreadable': 'Could not read habit entries',
    'date_invalid': 'Invalid date. Use YYYY-MM-DD format (e.g., 2024-03-01)',
}

# =============================================================================
# Success Messages
# =============================================================================

SUCCESS_MESSAGES = {
    'config_saved': 'Configuration saved successfully',
    'analysis_complete': 'Analysis complete',
}

# =============================================================================
# Info Messages
# =============================================================================

INFO_MESSAGES = {
    'no_reasons': 'None yet',
    'no_entries': 'No entries logged in this window',
}
