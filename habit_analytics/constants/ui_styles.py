"""UI styles and display configuration constants."""

from __future__ import annotations

# =============================================================================
# Console Theme
# =============================================================================

# Theme style names used in console markup. Trend values double as style
# names so a Trend can be rendered as ``[{trend.value}]...[/]``.
THEME_STYLES = {
    'heading': 'bold rgb(120,200,255)',
    'habit': 'bold italic rgb(191,160,255)',
    'label': 'bold rgb(160,160,160)',
    'value': 'rgb(240,240,240)',
    'note': 'dim italic',
    'streak': 'bold rgb(255,149,0)',
    'border': 'rgb(112,141,242)',
    'success': 'bold rgb(104,255,203)',
    'warning': 'bold rgb(255,213,128)',
    'danger': 'bold rgb(255,128,128)',
    'improving': 'bold green',
    'declining': 'bold red',
    'stable': 'bold rgb(255,213,128)',
}

# =============================================================================
# Table Configuration
# =============================================================================

TABLE_CONFIG = {
    'box_style': 'ROUNDED',
    'header_style': 'bold cyan',
    'index_style': 'dim',
    'index_width': 3,
}

# Completion rate colour bands (percent lower bound -> style)
RATE_STYLES = (
    (80, 'success'),
    (60, 'warning'),
    (0, 'danger'),
)
