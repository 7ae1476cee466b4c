# Design tokens for Speech Timer UI

COLORS = {
    'surface': '#F7F9FC',
    'text': '#3C4450',
    'text_strong': '#133A62',
    'start_bg': '#3B82F6',
    'stop_bg': '#EF4444',
    'reset_bg': '#6B7280',
    'toggle_bg': '#F97316',
    'history_bg': '#8B5CF6',
    'download_bg': '#16A34A',
    'clear_bg': '#DC2626',
}

# window background per display state
STATE_COLORS = {
    'default': '#FFFFFF',
    'on_pace': '#4CAF50',
    'warning': '#FFEB3B',
    'over_time': '#F44336',
}

# history rows / chart bars per outcome bucket
BUCKET_COLORS = {
    'tooShort': '#DBEAFE',
    'onTime': '#DCFCE7',
    'overTime': '#FEE2E2',
}

BUCKET_BAR_COLORS = {
    'tooShort': '#60A5FA',
    'onTime': '#4ADE80',
    'overTime': '#F87171',
}

FONTS = {
    'timer_size': 72,
    'title_size': 30,
    'button_size': 16,
}
